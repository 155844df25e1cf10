from pfx.commands import *
from pfx.errors import *
from pfx.program import Program
from pfx.reader import read_string
import pytest


def program(arity, source):
	return Program(arity, translate_all(read_string(source)))


def test_arguments_seed_the_stack_first_on_top():
	# sub pops the first argument (top) as v1, the second as v2: 1 - 2.
	assert program(2, "sub").apply([2, 1]) == -1
	assert program(2, "swap sub").apply([2, 1]) == 1
	assert program(3, "pop pop").apply([1, 2, 3]) == 3


def test_unused_arguments():
	assert program(2, "4 7 sub").apply([5, 3]) == -3
	assert program(0, "42").apply([]) == 42


def test_residual_values_are_discarded():
	assert program(1, "1 2 3").apply([9]) == 3


@pytest.mark.parametrize("arguments", [[], [1], [1, 2, 3]])
def test_arity_enforcement(arguments):
	with pytest.raises(WrongNumberOfArgs) as e:
		# The body would fail if it ran.
		program(2, "exec").apply(arguments)
	assert e.value.expected == 2
	assert e.value.actual == len(arguments)
	assert str(e.value) == f"WrongNumberOfArgs{{expected: 2, actual: {len(arguments)}}}"


def test_empty_result():
	with pytest.raises(NotEnoughValues):
		program(1, "pop").apply([1])
	with pytest.raises(NotEnoughValues):
		program(0, "").apply([])


def test_final_value_must_be_an_integer():
	with pytest.raises(FinalValueNotAnInteger):
		program(0, "(1 2 add)").apply([])
	assert program(0, "(1 2 add) exec").apply([]) == 3


def test_errors_propagate():
	with pytest.raises(NotAnExecutableSequence):
		program(1, "exec").apply([1])
	with pytest.raises(DivisionByZero):
		program(2, "div").apply([0, 1])


def test_nget_reaches_arguments():
	# Computes the square of the first argument.
	square = program(1, "1 nget mul")
	assert square.apply([7]) == 49
	# Absolute value through sel on quoted blocks.
	absolute = program(1, "1 nget 0 lt (0 swap sub) () sel exec")
	assert absolute.apply([-5]) == 5
	assert absolute.apply([5]) == 5


def test_equality():
	assert program(2, "add") == program(2, "add")
	assert program(2, "add") != program(1, "add")
	assert program(2, "add") != program(2, "sub")
