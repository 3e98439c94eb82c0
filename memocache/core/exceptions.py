# -*- coding: utf-8 -*-
"""
This module holds the application specific exceptions.

Failures raised by a wrapped callable are never wrapped in one of these, they
reach the caller of :meth:`memocache.core.memoize.Memoize.invoke` unchanged.
"""


class SignatureMismatchError(TypeError):
    """
    Raised when a callable can't be bound to, or called with, the declared
    argument and result types.
    """

    def __init__(self, msg, *args, **kwargs):
        """
        Remember which callable was rejected.

        :param str msg: Exception message.
        :kwarg callable function: The callable that didn't match, default:
            None
        """
        self.function = kwargs.pop('function', None)
        super(SignatureMismatchError, self).__init__(msg, *args, **kwargs)


class UnhashableArgumentError(TypeError):
    """
    Raised when a declared argument type can't be used in a cache key because
    its instances are not hashable.
    """

    pass


class ArgumentError(Exception):
    """
    Raised when a command line argument has an invalid value.
    """

    pass
