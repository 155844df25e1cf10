import pfx.errors as errors
from pfx.commands import Integer, ExecutableSequence


# Runtime values share the immutable command classes;
# nothing else may be pushed.
STACK_VALUE_TYPES = (Integer, ExecutableSequence)


def into_integer(value) -> int:
	if not isinstance(value, Integer):
		raise errors.NotANumber()
	return value.value


def into_executable_sequence(value) -> ExecutableSequence:
	if not isinstance(value, ExecutableSequence):
		raise errors.NotAnExecutableSequence()
	return value


class Stack:
	"""The operand stack, listed bottom to top."""

	def __init__(self, values=()):
		self.values = []
		for v in values:
			self.push(v)

	def push(self, value):
		if isinstance(value, int):
			value = Integer(value)
		assert isinstance(value, STACK_VALUE_TYPES)
		self.values.append(value)

	def pop(self):
		if len(self.values) == 0:
			raise errors.NotEnoughValues()
		return self.values.pop()

	def pop_integer(self) -> int:
		return into_integer(self.pop())

	def pop_executable_sequence(self) -> ExecutableSequence:
		return into_executable_sequence(self.pop())

	def swap(self):
		v1 = self.pop()
		v2 = self.pop()
		self.push(v1)
		self.push(v2)

	def nget(self):
		i = self.pop_integer()
		p = len(self.values) - i
		if not 0 <= p < len(self.values):
			raise errors.NotEnoughValues()
		value = self.values[p]
		into_integer(value)
		self.push(value)

	def __len__(self):
		return len(self.values)

	def __iter__(self):
		return iter(self.values)

	def __eq__(self, other):
		if isinstance(other, Stack):
			return self.values == other.values
		return NotImplemented

	def __repr__(self):
		return "Stack([" + ", ".join(map(repr, self.values)) + "])"

	def __str__(self):
		return "[" + " ".join(map(str, self.values)) + "]"
