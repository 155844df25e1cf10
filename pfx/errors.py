class PostfixError(Exception):
	"""
	Base of every failure a request can produce.

	Errors render as their tag followed by any embedded data,
	e.g. WrongNumberOfArgs{expected: 2, actual: 1} or ProgramNotFound("foo").
	Subclasses list their data in _fields, in rendering order.
	"""

	_fields = ()

	def __init__(self, *args):
		super().__init__(*args)
		if len(args) != len(self._fields):
			raise TypeError(
					f"{type(self).__name__} takes {len(self._fields)} argument(s).")
		for name, value in zip(self._fields, args):
			setattr(self, name, value)

	@property
	def tag(self):
		return type(self).__name__

	def __eq__(self, other):
		return type(self) is type(other) and self.args == other.args

	def __hash__(self):
		return hash((type(self), self.args))

	def __str__(self):
		return self.tag


class _PositionalData:
	"""Renders as Tag(data), for errors carrying a single value."""
	def __str__(self):
		value = self.args[0]
		if isinstance(value, str):
			return f'{self.tag}("{value}")'
		return f"{self.tag}({value})"


class _NamedData:
	"""Renders as Tag{name: data, ...}."""
	def __str__(self):
		data = ", ".join(
				f"{name}: {value}" for name, value in zip(self._fields, self.args))
		return f"{self.tag}{{{data}}}"


class TranslationError(PostfixError): pass

class UnknownBuiltin(_PositionalData, TranslationError):
	_fields = ("name",)

class UsingFloat(TranslationError): pass
class UsingString(TranslationError): pass


class TopLevelError(PostfixError): pass

class NotASymbol(TopLevelError): pass
class NotAnInteger(TopLevelError): pass

class NotEnoughArgs(_PositionalData, TopLevelError):
	_fields = ("context",)

class IllegalArgumentType(_PositionalData, TopLevelError):
	_fields = ("form",)

class ProgramNotFound(_PositionalData, TopLevelError):
	_fields = ("name",)

class WrongNumberOfArgs(_NamedData, TopLevelError):
	_fields = ("expected", "actual")


class EvaluationError(PostfixError): pass

class NotEnoughValues(EvaluationError): pass
class NotANumber(EvaluationError): pass
class NotAnExecutableSequence(EvaluationError): pass
class FinalValueNotAnInteger(EvaluationError): pass
class DivisionByZero(EvaluationError): pass


def format_error(e):
	return f"error: {e}"
