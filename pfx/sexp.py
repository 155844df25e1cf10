import sys


# Integer literals and results are arbitrary precision,
# so converting them to and from decimal text must not be capped.
if hasattr(sys, "set_int_max_str_digits"):
	sys.set_int_max_str_digits(0)


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


class Form:
	"""Comments are produced by the reader but are not forms."""
	pass


class Atom(_ValueMixin, Form):
	def __init__(self, value):
		super().__init__(value=value)


class Integer(Atom):
	pass


class Float(Atom):
	pass


class Symbol(Atom):
	pass


class String(Atom):
	_str_escape = str.maketrans({
		'"': '\\"',
		"\\": "\\\\"})
	def __str__(self):
		return '"' + self.value.translate(self._str_escape) + '"'


class List(list, Form):
	def __init__(self, elements=None):
		list.__init__(self, [] if elements is None else elements)
		Form.__init__(self)
		self.elements = self  # to make this work with match statements
	def __repr__(self):
		return "List(" + ", ".join(map(repr, self)) + ")"
	def __str__(self):
		return "(" + " ".join(map(str, self)) + ")"
	def __eq__(self, other):
		return isinstance(other, List) and list.__eq__(self, other)
	def __hash__(self):
		return hash(tuple(self))


class Comment(_ValueMixin):
	def __init__(self, content):
		super().__init__(value=content)
	def __str__(self):
		return ";" + self.value + "\n"


__all__ = [cls.__name__ for cls in [
	Form,
	Atom, Integer, Float, Symbol, String,
	List,
	Comment
]]
