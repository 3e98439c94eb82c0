# -*- coding: utf-8 -*-
"""
Defines a class that wraps a pure callable and caches its results for every
distinct set of positional arguments. If the arguments are the same as in an
earlier call, the result is taken from the cache and the callable is not
invoked again.

The cache keeps a private :class:`dict` from argument tuples to results, it
grows by one entry per distinct key and is only emptied by
:meth:`Memoize.clear`. There is no eviction, no locking and no invalidation:
the wrapped callable must be referentially transparent, the cache has no way
of checking that.
"""
import copy
import functools
import logging
from memocache.core.signature import bind_callable
from memocache.core.signature import callable_name
from memocache.core.signature import check_hashable
from memocache.core.signature import make_key

LOG = logging.getLogger(__name__)

_NOT_FOUND = object()


class Memoize(object):
    """
    Cache results of ``function`` keyed by the exact argument tuple.

    The declared argument types fix which overload of a
    :func:`functools.singledispatch` function is bound, and they are checked
    against the callable's annotations before anything is cached.

    .. code-block:: python

        def add(a: int, b: float) -> float:
            return a + b

        cached_add = Memoize(add, (int, float), float)
        cached_add(1, 4.9)  # computed
        cached_add(1, 4.9)  # from cache
        cached_add.clear()
        cached_add(1, 4.9)  # computed again

    Exceptions raised by ``function`` reach the caller unchanged and nothing
    is stored for the arguments that caused them.

    The store is private to the cache: ``len()`` and ``in`` can inspect it,
    only :meth:`invoke` adds to it and only :meth:`clear` empties it.
    """

    def __init__(self, function, arg_types=(), result_type=None):
        """
        Bind the callable and start with an empty store.

        The callable is not invoked here.

        :param callable function: A function, overloaded function, adapted
            method (see :func:`memocache.core.adapters.mem_fn`) or functor.
        :param tuple arg_types: Declared positional argument types, a single
            type is taken as a one-element declaration.
        :param type|NoneType result_type: Declared result type.
        :raises SignatureMismatchError: If ``function`` doesn't fit the
            declaration.
        :raises UnhashableArgumentError: If a declared type isn't hashable.
        """
        if isinstance(arg_types, type):
            arg_types = (arg_types,)
        self.arg_types = tuple(arg_types)
        check_hashable(self.arg_types)
        self.result_type = result_type
        self.function = bind_callable(function, self.arg_types, result_type)
        self._store = {}
        self.__doc__ = getattr(self.function, '__doc__', None)

    def __call__(self, *args):
        return self.invoke(*args)

    def invoke(self, *args):
        """
        Return the result for ``args``, computing it only on a cache miss.

        Arguments promoted to a declared numeric type are converted first, so
        the callable and the key both see the declared type.

        :param tuple *args: Positional arguments matching ``arg_types``.
        :raises SignatureMismatchError: If ``args`` don't match the declared
            types, the callable is not invoked in that case.
        :raises UnhashableArgumentError: If an argument value can't be
            hashed.
        :return: The stored or freshly computed result.
        """
        key = make_key(args, self.arg_types)
        result = self._store.get(key, _NOT_FOUND)
        if result is not _NOT_FOUND:
            LOG.debug("Cache hit for %s%r", self.name, key)
            return result

        LOG.debug("Cache miss for %s%r, computing.", self.name, key)
        result = self.function(*key)
        self._store[key] = result
        return result

    def clear(self):
        """Empty the store, the bound callable is kept."""
        self._store.clear()

    def __len__(self):
        return len(self._store)

    def __contains__(self, key):
        return key in self._store

    def __bool__(self):
        # Truthy even while the store is empty
        return True

    def items(self):
        """Return a snapshot of the stored ``(key, result)`` pairs."""
        return list(self._store.items())

    @property
    def name(self):
        """Name of the bound callable, used in logs and ``repr``."""
        return callable_name(self.function)

    def copy(self):
        """
        Return a new cache bound to the same callable with a copy of the
        store. Both caches can be filled independently afterwards.
        """
        duplicate = self.__class__.__new__(self.__class__)
        duplicate.__dict__.update(self.__dict__)
        duplicate._store = dict(self._store)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo):
        duplicate = self.__class__.__new__(self.__class__)
        memo[id(self)] = duplicate
        for attr, value in self.__dict__.items():
            duplicate.__dict__[attr] = copy.deepcopy(value, memo)
        return duplicate

    def __repr__(self):
        return "<{} {}({}) with {} entries>".format(
            self.__class__.__name__,
            self.name,
            ", ".join(arg_type.__name__ for arg_type in self.arg_types),
            len(self)
        )


def memoize(*arg_types, returns=None):
    """
    Decorator form of :class:`Memoize`.

    .. code-block:: python

        @memoize(int, returns=int)
        def fib(n):
            return n if n < 2 else fib(n - 1) + fib(n - 2)

    :param tuple *arg_types: Declared positional argument types.
    :param type|NoneType returns: Declared result type.
    :return callable: A decorator that returns a :class:`Memoize`.
    """
    def decorate(function):
        cache = Memoize(function, arg_types, returns)
        # Don't merge the function's __dict__, a singledispatch registry
        # would end up on the cache.
        functools.update_wrapper(cache, function, updated=())
        return cache
    return decorate
