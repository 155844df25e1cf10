import sys

import pfx.debug
import pfx.sexp as sexp
from pfx import reader
from pfx.top_level import TopLevel


BANNER = "Welcome to the Postfix interpreter!"
PROMPT = "postfix> "
CONTINUATION_PROMPT = "> "


def print_usage():
	print(f"Usage: {sys.argv[0]} [--debug] [--prelude] [run [filename]]")


def respond(top_level, form):
	"""Returns the text to show for one form, or None for nothing."""
	if isinstance(form, sexp.List):
		return top_level.interpret(form)
	# Bare atoms are not requests.
	return str(form)


class PromptingLineSource:
	"""
	A character source for the reader that fetches whole lines with input(),
	so line editing and history are available when readline is.
	The primary prompt is shown when a new form starts,
	the continuation prompt while a form spans several lines.
	"""
	def __init__(self):
		self.pending = []
		self.prompt = PROMPT
		self.eof = False

	def start_form(self):
		self.prompt = PROMPT

	def __call__(self):
		while not self.pending:
			if self.eof:
				return ""
			try:
				line = input(self.prompt)
			except EOFError:
				print()
				self.eof = True
				return ""
			self.prompt = CONTINUATION_PROMPT
			self.pending.extend(reversed(line + "\n"))
		return self.pending.pop()


def repl(top_level):
	try:
		import readline  # noqa: F401  line editing for input()
	except ImportError:
		pass

	print(BANNER)
	source = PromptingLineSource()
	with reader.fresh_reader_state():
		forms = reader.load_forms(source)
		while True:
			source.start_form()
			try:
				form = next(forms)
			except reader.ParseError as e:
				print(str(e), file=sys.stderr)
				break
			except StopIteration:
				break

			result = respond(top_level, form)
			if result is not None:
				print(result, flush=True)


def run_file(top_level, filename):
	if filename == "-":
		f = sys.stdin
	else:
		f = open(filename)
	with f, reader.fresh_reader_state():
		try:
			for form in reader.load_forms(lambda: f.read(1)):
				result = respond(top_level, form)
				if result is not None:
					print(result, flush=True)
		except reader.ParseError as e:
			sys.exit(str(e))


def main(argv):
	name, *args = argv
	options = {"--debug": False, "--prelude": False}
	while args and args[0] in options:
		options[args.pop(0)] = True

	pfx.debug.enabled = options["--debug"]
	top_level = TopLevel(prelude=options["--prelude"])

	match args:
		case [] | ["run"]:
			repl(top_level)
		case ["run", filename]:
			run_file(top_level, filename)
		case _:
			print_usage()
			return 2
	return 0


def run():
	sys.exit(main(sys.argv))


if __name__ == "__main__":
	run()
