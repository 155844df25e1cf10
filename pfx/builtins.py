import operator as ops

import pfx.errors as errors
from pfx.commands import Opcode
from pfx.debug import debug


builtin_operations = dict()

def builtin_operation(*opcodes):
	def register(fn):
		for opcode in opcodes:
			builtin_operations[opcode] = fn
		return fn
	return register


def apply_builtin(stack, opcode):
	"""Applies one opcode to the stack in place and returns the stack."""
	builtin_operations[opcode](stack, opcode)
	return stack


def _truncating_div(a, b):
	if b == 0:
		raise errors.DivisionByZero()
	q = abs(a) // abs(b)
	return q if (a < 0) == (b < 0) else -q

def _truncating_rem(a, b):
	# Sign follows the dividend.
	return a - b * _truncating_div(a, b)


_arithmetic = {
	Opcode.ADD: ops.add,
	Opcode.SUB: ops.sub,
	Opcode.MUL: ops.mul,
	Opcode.DIV: _truncating_div,
	Opcode.REM: _truncating_rem,
}

_comparison = {
	Opcode.EQ: ops.eq,
	Opcode.GT: ops.gt,
	Opcode.LT: ops.lt,
}


@builtin_operation(*_arithmetic)
def arithmetic(stack, opcode):
	v1 = stack.pop_integer()
	v2 = stack.pop_integer()
	stack.push(_arithmetic[opcode](v2, v1))


@builtin_operation(*_comparison)
def comparison(stack, opcode):
	v1 = stack.pop_integer()
	v2 = stack.pop_integer()
	stack.push(1 if _comparison[opcode](v2, v1) else 0)


@builtin_operation(Opcode.POP)
def pop(stack, opcode):
	stack.pop()


@builtin_operation(Opcode.SWAP)
def swap(stack, opcode):
	stack.swap()


@builtin_operation(Opcode.SEL)
def select(stack, opcode):
	# v3 is the condition, deepest of the three.
	v1 = stack.pop()
	v2 = stack.pop()
	v3 = stack.pop_integer()
	stack.push(v1 if v3 == 0 else v2)


@builtin_operation(Opcode.NGET)
def nget(stack, opcode):
	stack.nget()


@builtin_operation(Opcode.EXEC)
def execute(stack, opcode):
	# The evaluator runs exec inline on its own frames;
	# this entry serves direct applications of the opcode.
	from pfx.evaluator import evaluate
	sequence = stack.pop_executable_sequence()
	debug("EXEC:", sequence)
	evaluate(stack, sequence.commands)


assert set(builtin_operations) == set(Opcode)
