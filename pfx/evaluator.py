from pfx.builtins import apply_builtin
from pfx.commands import *
from pfx.debug import debug
from pfx.stack import Stack


def evaluate(stack: Stack, commands) -> Stack:
	"""
	Folds the commands over the stack, strictly in order.

	Integers push themselves, executable sequences push themselves unevaluated
	and built-ins operate on the stack.
	An exec continues the fold with the popped sequence's commands
	on the same stack; a frame per active sequence is kept here rather than
	recursing, so quotation depth does not consume the Python call stack.
	The first error raised aborts the whole fold.
	"""
	frames = [iter(commands)]
	while frames:
		command = next(frames[-1], None)
		if command is None:
			frames.pop()
			continue

		match command:
			case Integer() | ExecutableSequence():
				stack.push(command)
			case BuiltIn(value=Opcode.EXEC):
				sequence = stack.pop_executable_sequence()
				frames.append(iter(sequence.commands))
			case BuiltIn(value=opcode):
				apply_builtin(stack, opcode)
			case _:
				assert False  # Bodies only hold commands.

		debug("EVAL:", command, "=>", stack)
	return stack
