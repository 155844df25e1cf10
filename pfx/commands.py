"""
Compiled representation of program bodies.

A body is a tuple of commands: integer literals, built-in opcodes,
and quoted executable sequences, which nest.
Commands are immutable once built,
so an executable sequence can be pushed onto a stack as-is.
"""

from enum import Enum

import pfx.errors as errors
import pfx.sexp as sexp


class _ValueMixin:
	def __init__(self, value, *args, **kws):
		self.value = value
		super().__init__(*args, **kws)

	def __hash__(self):
		return hash((type(self), self.value))

	def __eq__(self, other):
		return type(self) is type(other) and self.value == other.value

	def __repr__(self):
		return f"{type(self).__name__}({self.value!r})"

	def __str__(self):
		return str(self.value)


class _CompoundMixin:
	def __init__(self, children, *args, **kws):
		self.children = tuple(children)
		super().__init__(*args, **kws)

	def __len__(self):
		return len(self.children)

	def __iter__(self):
		return iter(self.children)

	def __getitem__(self, key):
		return self.children[key]

	def __repr__(self):
		return type(self).__name__  \
				+ "([" + ", ".join(map(repr, self.children)) + "])"

	def __hash__(self):
		return hash((type(self), self.children))

	def __eq__(self, other):
		return type(self) is type(other) and self.children == other.children


class Opcode(Enum):
	ADD = "add"
	DIV = "div"
	EQ = "eq"
	EXEC = "exec"
	GT = "gt"
	LT = "lt"
	MUL = "mul"
	NGET = "nget"
	POP = "pop"
	REM = "rem"
	SEL = "sel"
	SUB = "sub"
	SWAP = "swap"

	@classmethod
	def lookup(cls, name):
		try:
			return cls(name)
		except ValueError:
			raise errors.UnknownBuiltin(name) from None

	def __str__(self):
		return self.value


class Command:
	pass


class Integer(_ValueMixin, Command):
	def __init__(self, value):
		super().__init__(value=value)


class BuiltIn(_ValueMixin, Command):
	def __init__(self, opcode):
		super().__init__(value=opcode)


class ExecutableSequence(_CompoundMixin, Command):
	def __init__(self, commands):
		super().__init__(children=commands)

	@property
	def commands(self):
		return self.children

	def __str__(self):
		return "(" + " ".join(map(str, self.children)) + ")"


def translate(form):
	"""Compiles one parsed form into a command."""
	match form:
		case sexp.Integer(value=value):
			return Integer(value)
		case sexp.Symbol(value=name):
			return BuiltIn(Opcode.lookup(name))
		case sexp.List():
			return ExecutableSequence(translate_all(form))
		case sexp.Float():
			raise errors.UsingFloat()
		case sexp.String():
			raise errors.UsingString()
		case _:
			assert False  # The reader produces nothing else.


def translate_all(forms):
	return tuple(map(translate, forms))


__all__ = [cls.__name__ for cls in [
	Opcode,
	Command,
	Integer, BuiltIn, ExecutableSequence
]] + ["translate", "translate_all"]
