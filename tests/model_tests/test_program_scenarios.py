# tests/model_tests/test_program_scenarios.py

import pytest
from model.program import Bind, Program, Pure, from_generator, perform, sequence


def drive(program: Program, answer):
    """Run ``program`` to completion, answering each operation with ``answer(op)``.

    Returns the final value and the operations performed, in order.
    """
    performed = []
    while isinstance(program, Bind):
        performed.append(program.operation)
        program = program.continuation(answer(program.operation))
    return program.value, performed


def echo(operation):
    return operation


class TestProgramScenarios:
    """
    Test suite for Program construction: perform, bind, then, map, sequence,
    and generator-built programs that can be resumed on several branches.
    """

    def test_01_pure_has_value_and_no_operations(self):
        """
        A finished program performs nothing and carries its value.
        """
        assert drive(Pure(5), echo) == (5, [])
        assert Pure().value is None

    def test_02_perform_returns_operation_result(self):
        """
        `perform(op)` performs exactly `op` and returns what the interpreter answered.
        """
        program = perform("op")
        assert isinstance(program, Bind)
        assert drive(program, lambda op: op.upper()) == ("OP", ["op"])

    def test_03_bind_feeds_result_forward(self):
        """
        The continuation passed to `bind` receives the earlier result.
        """
        program = perform("a").bind(lambda result: perform(result + "b"))
        assert drive(program, echo) == ("ab", ["a", "ab"])

    def test_04_bind_is_associative(self):
        """
        Re-associating binds performs the same operations with the same value.
        """
        f = lambda x: perform(x + "1")
        g = lambda x: perform(x + "2")
        left = perform("a").bind(f).bind(g)
        right = perform("a").bind(lambda x: f(x).bind(g))
        assert drive(left, echo) == drive(right, echo) == ("a12", ["a", "a1", "a12"])

    def test_05_then_and_map(self):
        """
        `then` discards the first value; `map` only transforms the final value.
        """
        program = perform("x").then(perform("y")).map(len)
        assert drive(program, echo) == (1, ["x", "y"])
        assert drive(Pure(2).map(lambda v: v * 10), echo) == (20, [])

    def test_06_sequence(self):
        """
        `sequence` runs programs in order and keeps the last value.
        """
        assert drive(sequence(), echo) == (None, [])
        assert drive(sequence(perform(1), perform(2), perform(3)), echo) == (3, [1, 2, 3])

    def test_07_continuation_can_be_resumed_twice(self):
        """
        The same continuation resumed with different results gives independent programs.
        """
        program = perform("q").bind(lambda answer: perform(f"got {answer}"))
        yes = program.continuation("yes")
        no = program.continuation("no")
        assert yes.operation == "got yes"
        assert no.operation == "got no"


def counter(start):
    first = yield ("read", start)
    second = yield ("read", first + 1)
    return first + second


def with_subprogram():
    value = yield perform("inner").map(str.upper)
    yield ("after", value)
    return value


class TestGeneratorPrograms:
    """
    Programs written as generator functions.
    """

    def test_01_generator_operations_and_return_value(self):
        """
        Yielded operations are performed in order and the return value is the
        program's value.
        """
        program = from_generator(counter, 10)
        assert drive(program, lambda op: op[1]) == (21, [("read", 10), ("read", 11)])

    def test_02_generator_resumed_on_two_branches(self):
        """
        Resuming a generator-built program at the same point with different
        results replays the history and follows each branch independently.
        """
        program = from_generator(counter, 0)
        left = program.continuation(1)
        right = program.continuation(100)
        assert left.operation == ("read", 2)
        assert right.operation == ("read", 101)
        assert left.continuation(5).value == 6
        assert right.continuation(5).value == 105
        assert left.continuation(7).value == 8

    def test_03_yielded_program_is_spliced_in(self):
        """
        A generator may yield a whole program; its operations are performed in
        place and its value is sent back into the generator.
        """
        program = from_generator(with_subprogram)
        assert drive(program, echo) == ("INNER", ["inner", ("after", "INNER")])

    def test_04_generator_without_operations(self):
        """
        A generator that returns immediately is a finished program.
        """
        def nothing():
            return "done"
            yield

        assert from_generator(nothing) == Pure("done")

    def test_05_generator_errors_propagate(self):
        """
        An exception raised by the generator surfaces when the failing point
        is resumed.
        """
        def failing():
            yield "op"
            raise ValueError("bad trace")

        program = from_generator(failing)
        with pytest.raises(ValueError, match="bad trace"):
            program.continuation(None)


class TestGeneratorReplay:
    """
    Cost of resuming generator-built programs.
    """

    def setup_method(self):
        self.starts = 0

    def _labels(self, count):
        self.starts += 1
        for i in range(count):
            yield ("op", i)
        return count

    def test_01_single_run_starts_generator_once(self):
        """
        Driving one path through a long generator program never replays it.
        """
        value, performed = drive(from_generator(self._labels, 5000), echo)
        assert value == 5000
        assert len(performed) == 5000
        assert self.starts == 1

    def test_02_second_branch_replays(self):
        """
        Resuming an already resumed point starts a fresh generator and
        replays the results seen so far; the first branch is unaffected.
        """
        program = from_generator(counter_with_start_log, self)
        first = program.continuation(1)
        assert self.starts == 1
        second = program.continuation(2)
        assert self.starts == 2
        assert first.operation == ("read", 2)
        assert second.operation == ("read", 3)
        assert first.continuation(10).value == 11
        assert second.continuation(10).value == 12
        assert self.starts == 2


def counter_with_start_log(owner):
    owner.starts += 1
    first = yield ("read", 0)
    second = yield ("read", first + 1)
    return first + second
