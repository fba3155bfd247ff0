# model/example_traces.py

"""
Reference traces over the state/log domain, used by the command-line
explorer and the integration tests.
"""

from typing import Callable, Dict

from .program import Program, from_generator
from .state_writer import Get, Listen, Put, Tell


def _put_and_show(value):
    yield Put(value)
    current = yield Get()
    yield Tell(str(current))


def _trace1():
    yield from _put_and_show(1)
    yield from _put_and_show(2)


def _trace2():
    return (yield Listen(from_generator(_put_and_show, 1)))


def _trace3():
    yield from _put_and_show(1)
    return (yield Listen(from_generator(_put_and_show, 2)))


def _trace4():
    return (yield Listen(from_generator(_trace1)))


def trace1() -> Program:
    """put 1; show; put 2; show"""
    return from_generator(_trace1)


def trace2() -> Program:
    """listen (put 1; show)"""
    return from_generator(_trace2)


def trace3() -> Program:
    """put 1; show; listen (put 2; show)"""
    return from_generator(_trace3)


def trace4() -> Program:
    """listen (put 1; show; put 2; show)"""
    return from_generator(_trace4)


EXAMPLE_TRACES: Dict[str, Callable[[], Program]] = {
    "trace1": trace1,
    "trace2": trace2,
    "trace3": trace3,
    "trace4": trace4,
}
