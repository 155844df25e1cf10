from pfx.commands import *
from pfx.errors import *
from pfx.program import Program
from pfx.reader import read_string
from pfx.sexp import Float, String
from pfx.top_level import *
import pytest


def request(source):
	form, = read_string(source)
	return parse_request(form)


def interpret(top_level, source):
	form, = read_string(source)
	return top_level.interpret(form)


def test_parse_definition():
	assert request("(def foo 2 4 7 sub)") == Definition(
		"foo", 2, (Integer(4), Integer(7), BuiltIn(Opcode.SUB)))
	assert request("(def nothing 0)") == Definition("nothing", 0, ())


def test_parse_call():
	assert request("(bar 1 2)") == Call("bar", (1, 2))
	assert request("(bar)") == Call("bar", ())


def test_parse_request_errors():
	with pytest.raises(NotEnoughArgs) as e:
		request("()")
	assert e.value.context == "()"
	with pytest.raises(NotASymbol):
		request("(1 2)")
	with pytest.raises(NotASymbol):
		request("((foo) 2)")


def test_parse_definition_errors():
	with pytest.raises(NotEnoughArgs) as e:
		request("(def)")
	assert e.value == NotEnoughArgs("def")
	with pytest.raises(NotEnoughArgs):
		request("(def foo)")
	with pytest.raises(NotASymbol):
		request("(def 1 2 add)")
	with pytest.raises(NotAnInteger):
		request("(def foo bar add)")
	with pytest.raises(NotAnInteger):
		request("(def foo -1 add)")
	with pytest.raises(UnknownBuiltin):
		request("(def foo 1 dup)")
	with pytest.raises(UsingFloat):
		request("(def foo 1 1.5)")


def test_parse_call_errors():
	with pytest.raises(IllegalArgumentType) as e:
		request('(foo 1 "two")')
	assert e.value.form == String("two")
	with pytest.raises(IllegalArgumentType) as e:
		request("(foo 1.5)")
	assert e.value.form == Float(1.5)
	with pytest.raises(IllegalArgumentType):
		request("(foo (1))")


def test_define_and_call():
	top_level = TopLevel()
	assert interpret(top_level, "(def sub2 2 swap sub)") is None
	assert top_level.programs["sub2"] == Program(2, [BuiltIn(Opcode.SWAP), BuiltIn(Opcode.SUB)])
	assert interpret(top_level, "(sub2 7 2)") == "5"
	assert interpret(top_level, "(sub2 2 7)") == "-5"


def test_redefinition_replaces():
	top_level = TopLevel()
	interpret(top_level, "(def f 1 2 mul)")
	assert interpret(top_level, "(f 4)") == "8"
	interpret(top_level, "(def f 0 42)")
	assert interpret(top_level, "(f)") == "42"
	assert interpret(top_level, "(f 4)")  \
			== "error: WrongNumberOfArgs{expected: 0, actual: 1}"


def test_program_not_found():
	top_level = TopLevel()
	assert interpret(top_level, "(missing 1)") == 'error: ProgramNotFound("missing")'
	with pytest.raises(ProgramNotFound):
		top_level.call("missing", [1])


def test_rendered_errors():
	top_level = TopLevel()
	interpret(top_level, "(def f 2 add)")
	assert interpret(top_level, "(f 1)")  \
			== "error: WrongNumberOfArgs{expected: 2, actual: 1}"
	assert interpret(top_level, "(def g 1 dup)") == 'error: UnknownBuiltin("dup")'
	assert interpret(top_level, '(def g 1 "s")') == "error: UsingString"
	assert interpret(top_level, "(f 1 x)") == "error: IllegalArgumentType(x)"
	assert interpret(top_level, "()") == 'error: NotEnoughArgs("()")'
	assert interpret(top_level, "(def g 0 add)") is None
	assert interpret(top_level, "(g)") == "error: NotEnoughValues"


def test_failed_definition_leaves_registry_untouched():
	top_level = TopLevel()
	interpret(top_level, "(def f 0 1)")
	interpret(top_level, "(def f 0 (2 3.0))")
	assert interpret(top_level, "(f)") == "1"
	assert "g" not in top_level.programs
	interpret(top_level, "(def g 0 nope)")
	assert "g" not in top_level.programs


def test_call_failure_keeps_other_programs():
	top_level = TopLevel()
	interpret(top_level, "(def boom 0 1 0 div)")
	interpret(top_level, "(def ok 0 3)")
	assert interpret(top_level, "(boom)") == "error: DivisionByZero"
	assert interpret(top_level, "(ok)") == "3"


def test_define_directly():
	top_level = TopLevel()
	top_level.define("twice", 1, [Integer(2), BuiltIn(Opcode.MUL)])
	assert top_level.call("twice", [21]) == 42


def test_prelude():
	assert TopLevel().programs == {}
	top_level = TopLevel(prelude=True)
	assert set(top_level.programs) == set(prelude_programs())
	assert interpret(top_level, "(sub 7 2)") == "5"
	assert interpret(top_level, "(div 7 2)") == "3"
	assert interpret(top_level, "(lt 1 2)") == "1"
	assert interpret(top_level, "(sub 7)")  \
			== "error: WrongNumberOfArgs{expected: 2, actual: 1}"
	# Prelude names may be redefined.
	interpret(top_level, "(def add 0 0)")
	assert interpret(top_level, "(add)") == "0"


def test_results_of_any_size_render():
	top_level = TopLevel()
	# Squaring 2 fourteen times gives 2 ** 16384, almost 5000 digits.
	interpret(top_level, "(def huge 0 2" + " 1 nget mul" * 14 + ")")
	result = interpret(top_level, "(huge)")
	assert len(result) > 4300
	assert int(result) == 2 ** 16384
