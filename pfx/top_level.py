from typing import Any, Optional
from pydantic.dataclasses import dataclass

import pfx.errors as errors
import pfx.sexp as sexp
from pfx.commands import BuiltIn, Opcode, translate_all
from pfx.debug import debug, trace_entry
from pfx.program import Program


DEFINITION_SYMBOL = "def"


@dataclass(config=dict(arbitrary_types_allowed=True))
class Definition:
	name: str
	arity: int
	commands: tuple[Any, ...]


@dataclass(config=dict(arbitrary_types_allowed=True))
class Call:
	name: str
	args: tuple[int, ...]


@trace_entry
def parse_request(forms):
	"""Classifies the children of a top-level list as a Definition or Call."""
	if len(forms) == 0:
		raise errors.NotEnoughArgs("()")
	match forms[0]:
		case sexp.Symbol(value=name):
			pass
		case _:
			raise errors.NotASymbol()

	if name == DEFINITION_SYMBOL:
		return parse_definition(forms[1:])
	return parse_call(name, forms[1:])


def parse_definition(forms):
	# (def name arity command...)
	if len(forms) < 2:
		raise errors.NotEnoughArgs(DEFINITION_SYMBOL)
	name, arity, *body = forms

	if not isinstance(name, sexp.Symbol):
		raise errors.NotASymbol()
	if not isinstance(arity, sexp.Integer) or arity.value < 0:
		raise errors.NotAnInteger()
	return Definition(name.value, arity.value, translate_all(body))


def parse_call(name, forms):
	args = []
	for form in forms:
		if not isinstance(form, sexp.Integer):
			raise errors.IllegalArgumentType(form)
		args.append(form.value)
	return Call(name, tuple(args))


_PRELUDE_OPCODES = [
	Opcode.ADD, Opcode.SUB, Opcode.MUL, Opcode.DIV, Opcode.REM,
	Opcode.EQ, Opcode.GT, Opcode.LT]

def prelude_programs():
	"""
	Arity 2 programs named after the binary opcodes.
	The first argument is the left operand: (sub 7 2) gives 5.
	"""
	return {
		op.value: Program(2, [BuiltIn(Opcode.SWAP), BuiltIn(op)])
		for op in _PRELUDE_OPCODES}


class TopLevel:
	"""Owns the program registry and serves one request at a time."""

	def __init__(self, prelude=False):
		self.programs = dict()
		if prelude:
			self.programs.update(prelude_programs())

	def interpret(self, form) -> Optional[str]:
		"""
		Runs one top-level request, rendering the outcome.
		Definitions produce None, calls their decimal result,
		and failures the formatted error.
		"""
		assert isinstance(form, sexp.List)
		try:
			return self.apply(parse_request(form))
		except errors.PostfixError as e:
			debug(f"FAIL: {form} -> {e!r}")
			return errors.format_error(e)

	def apply(self, request) -> Optional[str]:
		match request:
			case Definition(name=name, arity=arity, commands=commands):
				debug(f" DEF: {name}/{arity}")
				self.programs[name] = Program(arity, commands)
				return None
			case Call(name=name, args=args):
				debug(f"CALL: {name} {list(args)}")
				return str(self.call(name, args))
			case _:
				assert False

	def call(self, name, args) -> int:
		try:
			program = self.programs[name]
		except KeyError:
			raise errors.ProgramNotFound(name) from None
		return program.apply(args)

	def define(self, name, arity, commands):
		self.apply(Definition(name, arity, tuple(commands)))
