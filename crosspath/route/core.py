"""
# Implementation of the path syntaxes and the string tools used by &.types.Route.

# The functions here operate on plain strings and tuples of segments so that they
# can be used without constructing route instances. &split tokenizes, &parse
# identifies the absolute status and segments of a string in a given &Syntax, and
# &serialize renders segments back into a string.

# [ Elements ]
# /drive_designator_length/
	# The number of characters in a Windows drive designator; `'C:'`.
"""
from collections.abc import Iterator, Sequence
import enum
import functools

drive_designator_length = 2

class Syntax(enum.Enum):
	"""
	# The separator and absolute-prefix conventions of a path string.

	# [ Elements ]
	# /posix/
		# `/` separated paths; absolute when the string starts with `/`.
	# /windows/
		# `\\` or `/` separated paths; absolute when the string starts with
		# a drive designator followed by a separator.
	"""

	posix = 'posix'
	windows = 'windows'

	@property
	def separator(self) -> str:
		"""
		# The separator used when rendering segments in this syntax.
		"""
		return _separator[self]

	@property
	def separators(self) -> str:
		"""
		# The set of characters accepted as separators when parsing.
		"""
		return _accepted[self]

_separator = {
	Syntax.posix: '/',
	Syntax.windows: '\\',
}

_accepted = {
	Syntax.posix: '/',
	Syntax.windows: '/\\',
}

def split(string:str, separators:str) -> Iterator[str]:
	"""
	# Produce the maximal substrings of &string that contain no &separators.

	# Leading, trailing and consecutive separators never produce empty segments.
	"""
	start = None

	for i, c in enumerate(string):
		if c in separators:
			if start is not None:
				yield string[start:i]
				start = None
		elif start is None:
			start = i

	if start is not None:
		yield string[start:]

def drive(string:str) -> bool:
	"""
	# Whether &string opens with a drive designator and a separator.

	# The check is strict: `'C:'` alone is not a drive root.
	"""
	if len(string) < 3:
		return False

	letter = string[0]
	return (
		letter.isascii() and letter.isalpha()
		and string[1] == ':'
		and string[2] in _accepted[Syntax.windows]
	)

@functools.lru_cache(64)
def parse(string:str, syntax:Syntax) -> tuple[bool, tuple[str, ...]]:
	"""
	# Identify whether &string is absolute and decompose it into segments.

	# [ Returns ]
	# A pair; the absolute flag and the tuple of segments in root order.
	# For absolute Windows paths, the first segment is the drive designator.
	"""
	separators = syntax.separators

	if syntax is Syntax.windows:
		if drive(string):
			n = drive_designator_length
			return True, (string[:n],) + tuple(split(string[n+1:], separators))
		return False, tuple(split(string, separators))

	return string[:1] == '/', tuple(split(string, separators))

def serialize(syntax:Syntax, absolute:bool, segments:Sequence[str], target:Syntax) -> str:
	"""
	# Render &segments using the separator of &target.

	# [ Parameters ]
	# /syntax/
		# The syntax that produced &segments; selects the absolute-prefix convention.
	# /absolute/
		# Whether the segments form an absolute path.
	# /segments/
		# The segments to join.
	# /target/
		# The syntax whose separator is used.
	"""
	sep = target.separator
	body = sep.join(segments)

	if absolute:
		if syntax is Syntax.posix:
			return sep + body
		elif len(segments) == 1:
			# Drive root; 'C:' alone would parse as relative.
			return body + sep

	return body
