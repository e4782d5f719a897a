"""
# Process-wide defaults for path construction and filesystem access.

# Unqualified parsing and rendering use &default_syntax, and filesystem-bound
# paths that were not given a backend use &default_backend. Both are meant to be
# set once at startup with &configure; &configured is available for temporarily
# replacing them.

# [ Elements ]
# /native/
	# The &Syntax of the host operating system.
# /environment_variable/
	# The environment variable consulted for the initial default syntax.
	# Accepts `posix` or `windows`.
"""
import os
import logging
import contextlib

from ..route.core import Syntax

logger = logging.getLogger(__name__)

native = Syntax.windows if os.name == 'nt' else Syntax.posix
environment_variable = 'CROSSPATH_SYNTAX'

def initial_syntax(environ=os.environ) -> Syntax:
	"""
	# Identify the default syntax from &environment_variable, falling back to &native.
	"""
	name = environ.get(environment_variable, '').strip().lower()
	if not name:
		return native

	try:
		return Syntax[name]
	except KeyError:
		logger.warning("ignoring unrecognized %s value %r", environment_variable, name)
		return native

_syntax = initial_syntax()
_backend = None

def select_backend(syntax:Syntax=native):
	"""
	# Construct the backend implementing the filesystem operations for &syntax.
	"""
	if syntax is Syntax.windows:
		from .windows import WindowsBackend
		return WindowsBackend()
	else:
		from .posix import PosixBackend
		return PosixBackend()

def default_syntax() -> Syntax:
	"""
	# The syntax used when parsing or rendering without an explicit one.
	"""
	return _syntax

def default_backend():
	"""
	# The backend used by filesystem-bound paths that were not given one.
	# Selected for the &native syntax on first use.
	"""
	global _backend

	if _backend is None:
		_backend = select_backend(native)
		logger.debug("selected %s for %s hosts", type(_backend).__name__, native.value)

	return _backend

def configure(syntax:Syntax=None, backend=None):
	"""
	# Set the process-wide default syntax and backend.
	# Parameters given as &None leave the current value in place.

	# [ Returns ]
	# The previous `(syntax, backend)` pair.
	"""
	global _syntax, _backend

	previous = (_syntax, _backend)
	if syntax is not None:
		_syntax = syntax
	if backend is not None:
		_backend = backend

	logger.debug("configured default syntax %s and backend %r", _syntax.value, _backend)
	return previous

@contextlib.contextmanager
def configured(syntax:Syntax=None, backend=None):
	"""
	# Apply &configure for the duration of the context and restore the
	# previous values on exit.
	"""
	global _syntax, _backend

	previous = configure(syntax, backend)
	try:
		yield previous
	finally:
		_syntax, _backend = previous
