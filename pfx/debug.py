# Toggled by the --debug command line option.
enabled = False


if __debug__:
	import sys
	from functools import wraps
	def debug(*args, **kws):
		if not enabled:
			return
		kws.setdefault("file", sys.stderr)
		print("[DEBUG]", *args, **kws)

	def _format_item(kv):
		return f"{kv[0]}={kv[1]!r}"
	def _format_call(fn, args, kws):
		if len(kws) == 0:
			kws_str = ""
		else:
			kws_str = ", " + ", ".join(map(_format_item, kws.items()))
		return f"{fn.__name__}({', '.join(map(repr, args))}{kws_str})"

	def trace_entry(fn):
		@wraps(fn)
		def _(*args, **kws):
			if enabled:
				debug(f"CALL: {_format_call(fn, args, kws)}")
			return fn(*args, **kws)
		return _

	def trace_exit(fn):
		@wraps(fn)
		def _(*args, **kws):
			result = fn(*args, **kws)
			if enabled:
				debug(f"RETN: {_format_call(fn, args, kws)} -> {result!r}")
			return result
		return _

else:
	def debug(*args, **kws):
		pass
	def trace_entry(fn):
		return fn
	def trace_exit(fn):
		return fn
