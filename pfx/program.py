import pfx.errors as errors
from pfx.commands import ExecutableSequence
from pfx.debug import trace_exit
from pfx.evaluator import evaluate
from pfx.stack import Stack, into_integer


class Program:
	"""A named procedure's arity and body. The name lives in the registry."""

	def __init__(self, arity, commands):
		self.arity = arity
		self.commands = tuple(commands)

	@trace_exit
	def apply(self, arguments) -> int:
		arguments = list(arguments)
		if len(arguments) != self.arity:
			raise errors.WrongNumberOfArgs(self.arity, len(arguments))

		# The first argument ends up on top.
		stack = Stack(reversed(arguments))
		evaluate(stack, self.commands)

		result = stack.pop()
		if isinstance(result, ExecutableSequence):
			raise errors.FinalValueNotAnInteger()
		return into_integer(result)

	def __eq__(self, other):
		return (type(self) is type(other)
				and self.arity == other.arity
				and self.commands == other.commands)

	def __hash__(self):
		return hash((self.arity, self.commands))

	def __repr__(self):
		return f"Program({self.arity}, {list(self.commands)!r})"
