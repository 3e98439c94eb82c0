# -*- coding: utf-8 -*-
"""
Adapt methods so they can be cached like free functions.

A method's result depends on its receiver as much as on its arguments, so the
receiver has to be part of the cache key. :func:`mem_fn` turns a method into a
plain callable that takes the receiver as its leading positional argument:

.. code-block:: python

    class MaxClass(object):
        def member_func(self, a, b):
            return a if a > b else b

    cached = Memoize(mem_fn(MaxClass.member_func), (MaxClass, float, float))
    cached(obj, 10.0, 20.0)

The receiver is hashed like any other argument, for most classes that means
by identity. The method must not depend on receiver state that changes while
results are cached.
"""
import functools
import inspect
from memocache.core.exceptions import SignatureMismatchError


def mem_fn(method):
    """
    Return a callable invoking ``method`` with an explicit receiver.

    :param callable method: A function looked up on a class, e.g.
        ``MaxClass.member_func``, or a bound method, of which only the
        underlying function is used.
    :raises SignatureMismatchError: If ``method`` is a class, is bound to a
        receiver that can't be detached, or takes no receiver parameter.
    :return callable: ``call(receiver, *args)``.
    """
    if isinstance(method, type) or not callable(method):
        raise SignatureMismatchError(
            "{!r} is not a method.".format(method), function=method
        )

    if hasattr(method, '__func__'):
        function = method.__func__
    else:
        receiver = getattr(method, '__self__', None)
        if receiver is not None and not inspect.ismodule(receiver):
            # Builtin methods bound to an instance, e.g. "abc".upper
            raise SignatureMismatchError(
                "{!r} is bound to {!r} and can't take another "
                "receiver.".format(method, receiver),
                function=method
            )
        function = method

    try:
        parameters = inspect.signature(function).parameters.values()
    except (TypeError, ValueError):
        parameters = None
    if parameters is not None and not any(
            param.kind in (param.POSITIONAL_ONLY,
                           param.POSITIONAL_OR_KEYWORD,
                           param.VAR_POSITIONAL)
            for param in parameters):
        raise SignatureMismatchError(
            "{!r} has no parameter to take a receiver.".format(function),
            function=function
        )

    @functools.wraps(function)
    def call(receiver, *args):
        return function(receiver, *args)

    return call
