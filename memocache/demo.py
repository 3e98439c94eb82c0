# -*- coding: utf-8 -*-
"""
Example functions and scenarios for the ``memocache`` command.

Each scenario wraps one kind of callable in a fresh
:class:`memocache.core.memoize.Memoize` and replays a list of calls against
it, noting for every call whether the result was computed (``new``) or came
out of the cache (``from cache``):

- ``functor``: a closure adding an ``int`` and a ``float``, including a
  :meth:`~memocache.core.memoize.Memoize.clear` halfway.
- ``overloaded``: one overloaded function, bound twice, once to its ``int``
  subtraction and once to its ``str`` concatenation.
- ``member``: a method adapted with :func:`memocache.core.adapters.mem_fn`
  so its receiver becomes the first argument.
"""
import functools
import logging
from memocache.core.adapters import mem_fn
from memocache.core.exceptions import ArgumentError
from memocache.core.memoize import Memoize

LOG = logging.getLogger(__name__)

#: Marker in a call list that clears the cache instead of calling it.
CLEAR = object()


@functools.singledispatch
def concat_or_subtract(a, b):
    """Overloaded on the type of its first argument."""
    raise NotImplementedError(
        "No overload for {}".format(type(a).__name__)
    )


@concat_or_subtract.register
def _concat(a: str, b: str) -> str:
    return a + b


@concat_or_subtract.register
def _subtract(a: int, b: int) -> int:
    return a - b


class MaxClass(object):
    """Holds a pure method."""

    def __repr__(self):
        return "MaxClass()"

    def member_func(self, a: float, b: float) -> float:
        return a if a > b else b


def _run(name, cache, calls):
    """
    Replay ``calls`` on ``cache`` and describe each one.

    A miss adds exactly one entry to the store, so a growing store tells a
    computed result from a cached one.

    :param str name: Scenario name, prefixed to every line.
    :param Memoize cache: The cache to call.
    :param list calls: Argument tuples, or :data:`CLEAR`.
    :return list: One line per call.
    """
    lines = []
    computed = 0
    for args in calls:
        if args is CLEAR:
            cache.clear()
            lines.append("{} cleared".format(name))
            continue
        before = len(cache)
        result = cache(*args)
        if len(cache) > before:
            computed += 1
            origin = "new"
        else:
            origin = "from cache"
        lines.append("{} {!r} -> {!r} ({})".format(name, args, result, origin))
    LOG.info(
        "Scenario %s: %d calls, %d computed.",
        name, len(calls) - calls.count(CLEAR), computed
    )
    return lines


def functor():
    """Cache a closure, clearing the cache halfway."""
    cache = Memoize(lambda a, b: a + b, (int, float), float)
    return _run('functor', cache, [
        (1, 4.9), (1, 4.9), (1, 4.9), (2, 4.9), (2, 4.9), CLEAR, (2, 4.9),
    ])


def overloaded():
    """Bind both overloads of :func:`concat_or_subtract` separately."""
    subtract = Memoize(concat_or_subtract, (int, int), int)
    concat = Memoize(concat_or_subtract, (str, str), str)
    return _run('overloaded[int]', subtract, [
        (4, 3), (4, 3), (4, 3), (1, 3), (1, 3),
    ]) + _run('overloaded[str]', concat, [
        ("z ", "y"), ("z ", "y"), ("z ", "y"), ("c ", "s"), ("c ", "s"),
    ])


def member():
    """Cache a method with its receiver as leading argument."""
    obj = MaxClass()
    cache = Memoize(mem_fn(MaxClass.member_func), (MaxClass, float, float))
    return _run('member', cache, [
        (obj, 10.0, 20.0), (obj, 10.0, 20.0), (obj, 10.0, 20.0),
        (obj, 20.0, 21.0), (obj, 20.0, 21.0),
    ])


SCENARIOS = {
    'functor': functor,
    'overloaded': overloaded,
    'member': member,
}


def run_scenarios(names):
    """
    Run the named scenarios in order.

    :param list names: Scenario names, see :data:`SCENARIOS`.
    :raises ArgumentError: For an unknown scenario name.
    :return list: Output lines of all scenarios.
    """
    unknown = [name for name in names if name not in SCENARIOS]
    if unknown:
        raise ArgumentError(
            "Unknown scenario(s): {}, choose from: {}".format(
                ", ".join(unknown), ", ".join(sorted(SCENARIOS))
            )
        )
    lines = []
    for name in names:
        LOG.debug("Running scenario %s", name)
        lines.extend(SCENARIOS[name]())
    return lines
