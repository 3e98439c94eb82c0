# -*- coding: utf-8 -*-
"""
Binding a callable to a declared signature and building cache keys.

A :class:`memocache.core.memoize.Memoize` is told up front which positional
argument types and which result type it wraps. This module turns that
declaration into checks:

- At construction, :func:`check_hashable` rejects argument types whose
  instances can't be used in a key, and :func:`bind_callable` picks the
  overload of a :func:`functools.singledispatch` function that matches the
  declaration and verifies arity and annotations of whatever gets bound.
- At call time, :func:`make_key` validates the actual arguments against the
  declaration and returns the key tuple.

Callables without an introspectable signature (some builtins) are accepted as
they are, there is nothing to check them against.
"""
import inspect
import logging
from memocache.core.exceptions import SignatureMismatchError
from memocache.core.exceptions import UnhashableArgumentError

LOG = logging.getLogger(__name__)

#: Declared types that also accept instances of other types, mirroring the
#: implicit numeric conversions a caller expects, e.g. ``1`` for a ``float``.
NUMERIC_PROMOTIONS = {
    float: (int,),
    complex: (int, float),
}


def check_hashable(arg_types):
    """
    Make sure every declared argument type can be part of a dict key.

    :param tuple arg_types: Declared positional argument types.
    :raises SignatureMismatchError: If an entry is not a type at all.
    :raises UnhashableArgumentError: If instances of a type aren't hashable.
    """
    for index, arg_type in enumerate(arg_types):
        if not isinstance(arg_type, type):
            raise SignatureMismatchError(
                "Argument {} is declared as {!r}, which is not a type.".format(
                    index, arg_type
                )
            )
        if getattr(arg_type, '__hash__', None) is None:
            raise UnhashableArgumentError(
                "Argument {} is declared as {}, instances of which are not "
                "hashable and can't be used in a cache key.".format(
                    index, arg_type.__name__
                )
            )


def is_overloaded(function):
    """
    Is ``function`` a :func:`functools.singledispatch` generic function?

    :param callable function: Any callable.
    :return bool: True if it carries a dispatch registry.
    """
    return hasattr(function, 'dispatch') and hasattr(function, 'registry')


def accepts(declared, value):
    """
    Check whether ``value`` may be passed where ``declared`` is expected.

    :param type declared: The declared type.
    :param object value: The actual value.
    :return bool: True if the value matches, including numeric promotion.
    """
    if isinstance(value, declared):
        return True
    return isinstance(value, NUMERIC_PROMOTIONS.get(declared, ()))


def _is_compatible(declared, annotated):
    """
    Does a declared type fit a parameter annotated with ``annotated``?

    Only plain classes are compared, anything else (strings, ``typing``
    constructs) can't be decided here and is accepted.
    """
    if not isinstance(annotated, type) or annotated is inspect.Parameter.empty:
        return True
    if issubclass(declared, annotated):
        return True
    return declared in NUMERIC_PROMOTIONS.get(annotated, ())


def callable_name(function):
    """Return a readable name for error messages and logs."""
    return getattr(
        function, '__qualname__',
        getattr(function, '__name__', type(function).__name__)
    )


def resolve_overload(function, arg_types):
    """
    Pick the implementation of an overloaded function for ``arg_types``.

    Dispatch happens once, on the first declared argument type, the way
    :func:`functools.singledispatch` would dispatch a call. Falling back on the
    generic base implementation is refused unless the declaration asks for
    ``object`` explicitly, so a typo in the declared types can't quietly bind
    the wrong function.

    :param callable function: A singledispatch generic function.
    :param tuple arg_types: Declared positional argument types.
    :raises SignatureMismatchError: If no registered overload matches.
    :return callable: The matching implementation.
    """
    if not arg_types:
        raise SignatureMismatchError(
            "Can't pick an overload of {} without argument types.".format(
                callable_name(function)
            ),
            function=function
        )
    implementation = function.dispatch(arg_types[0])
    if implementation is function.registry[object] \
            and arg_types[0] is not object:
        raise SignatureMismatchError(
            "No overload of {} is registered for {}.".format(
                callable_name(function), arg_types[0].__name__
            ),
            function=function
        )
    LOG.debug(
        "Resolved overload of %s for %s to %s",
        callable_name(function),
        arg_types[0].__name__,
        callable_name(implementation)
    )
    return implementation


def bind_callable(function, arg_types, result_type=None):
    """
    Bind ``function`` to the declared signature.

    :param callable function: The callable to wrap.
    :param tuple arg_types: Declared positional argument types.
    :param type|NoneType result_type: Declared result type, if any.
    :raises SignatureMismatchError: If the callable can't take the declared
        arguments or its annotations contradict the declaration.
    :return callable: The callable that will be invoked on a cache miss.
    """
    if not callable(function):
        raise SignatureMismatchError(
            "{!r} is not callable.".format(function), function=function
        )
    if is_overloaded(function):
        function = resolve_overload(function, arg_types)

    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        LOG.debug(
            "No signature available for %s, skipping checks.",
            callable_name(function)
        )
        return function

    try:
        bound = signature.bind(*arg_types)
    except TypeError as exc:
        raise SignatureMismatchError(
            "{} can't be called with {} positional arguments: {}".format(
                callable_name(function), len(arg_types), exc
            ),
            function=function
        )

    for name, declared in bound.arguments.items():
        parameter = signature.parameters[name]
        if parameter.kind == parameter.VAR_POSITIONAL:
            # Collected into a tuple, compare each against the one annotation
            declared_types = declared
        else:
            declared_types = (declared,)
        for declared_type in declared_types:
            if not _is_compatible(declared_type, parameter.annotation):
                raise SignatureMismatchError(
                    "Parameter {!r} of {} is annotated as {}, but {} was "
                    "declared.".format(
                        name,
                        callable_name(function),
                        parameter.annotation.__name__,
                        declared_type.__name__
                    ),
                    function=function
                )

    returns = signature.return_annotation
    if result_type is not None and isinstance(returns, type) \
            and returns is not signature.empty \
            and not _is_compatible(returns, result_type):
        raise SignatureMismatchError(
            "{} returns {}, but {} was declared.".format(
                callable_name(function),
                returns.__name__,
                result_type.__name__
            ),
            function=function
        )
    return function


def make_key(args, arg_types):
    """
    Validate call arguments against the declaration and build the key.

    Values accepted through numeric promotion are converted to the declared
    type, so ``1`` and ``1.0`` for a ``float`` make the same key and the
    wrapped callable always receives a ``float``.

    :param tuple args: Positional arguments of the call.
    :param tuple arg_types: Declared positional argument types.
    :raises SignatureMismatchError: On a wrong number or type of arguments.
    :raises UnhashableArgumentError: If an argument value can't be hashed,
        e.g. a tuple holding a list.
    :return tuple: A new tuple holding the (converted) argument values.
    """
    if len(args) != len(arg_types):
        raise SignatureMismatchError(
            "Expected {} positional arguments, got {}.".format(
                len(arg_types), len(args)
            )
        )
    key = []
    for index, (value, declared) in enumerate(zip(args, arg_types)):
        if not accepts(declared, value):
            raise SignatureMismatchError(
                "Argument {} should be {}, got {}.".format(
                    index, declared.__name__, type(value).__name__
                )
            )
        if not isinstance(value, declared):
            value = declared(value)
        try:
            hash(value)
        except TypeError as exc:
            raise UnhashableArgumentError(
                "Argument {} can't be used in a cache key: {}".format(
                    index, exc
                )
            )
        key.append(value)
    return tuple(key)
