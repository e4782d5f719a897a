"""
# Path value type and the composition rules connecting instances.

# &Route is the platform-agnostic representation of a filesystem path: the &Syntax
# that produced it, whether it is absolute, and its segments in root order.
# Instances do not touch the filesystem; &..system.files.Path provides the
# filesystem-bound subclass.
"""
from collections.abc import Iterator, Sequence
from typing import Optional, Union
import functools

from . import core
from ..system import runtime

Syntax = core.Syntax

class ConstructionError(ValueError):
	"""
	# Exception raised when two routes cannot be composed.

	# [ Properties ]
	# /c_kind/
		# The subtype declaring the kind of violation that occurred.
		# /`'absolute'`/
			# The addend was an absolute path.
		# /`'syntax'`/
			# The addend was parsed with a different syntax than the base.
	# /c_base/
		# The route being extended.
	# /c_addend/
		# The route that was rejected.
	"""

	def __init__(self, kind, base, addend):
		self.c_kind = kind
		self.c_base = base
		self.c_addend = addend
		super().__init__(str(self))

	def __str__(self):
		if self.c_kind == 'absolute':
			desc = "cannot compose an absolute addend"
		elif self.c_kind == 'syntax':
			desc = "cannot compose routes of mismatched syntax: "
			desc += f"{self.c_base.syntax.value} and {self.c_addend.syntax.value}"
		else:
			desc = self.c_kind

		return f"{desc}\nBASE: {self.c_base!r}\nADDEND: {self.c_addend!r}"

def compose(base:'Route', addend:'Route') -> 'Route':
	"""
	# Construct a new route by appending the segments of &addend to &base.

	# [ Exceptions ]
	# /&ConstructionError/
		# Raised when &addend is absolute or its syntax differs from &base's.
	"""
	if addend.absolute:
		raise ConstructionError('absolute', base, addend)
	if base.syntax is not addend.syntax:
		raise ConstructionError('syntax', base, addend)

	return base._derive(base.segments + addend.segments)

@functools.total_ordering
class Route(object):
	"""
	# Filesystem path decoupled from the operating system's native syntax.

	# [ Properties ]
	# /syntax/
		# The &Syntax that produced the route.
	# /absolute/
		# Whether the route is anchored at a root.
	# /segments/
		# The path components in root order. For absolute Windows routes,
		# the first segment is the drive designator.
	"""
	__slots__ = ('syntax', 'absolute', 'segments',)

	syntax: Syntax
	absolute: bool
	segments: tuple[str, ...]

	def __init__(self, syntax:Syntax, absolute:bool, segments:Sequence[str]):
		self.syntax = syntax
		self.absolute = absolute
		self.segments = tuple(segments)

	@classmethod
	def from_string(Class, string:str, syntax:Optional[Syntax]=None):
		"""
		# Construct a route by parsing &string.

		# [ Parameters ]
		# /string/
			# The path string.
		# /syntax/
			# The conventions used to interpret &string.
			# Defaults to &runtime.default_syntax.
		"""
		if syntax is None:
			syntax = runtime.default_syntax()

		absolute, segments = core.parse(string, syntax)
		return Class(syntax, absolute, segments)

	@classmethod
	def from_bytes(Class, data:bytes, syntax:Optional[Syntax]=None, encoding='utf-8'):
		"""
		# Construct a route by decoding &data and parsing the resulting string.
		"""
		return Class.from_string(data.decode(encoding, 'surrogateescape'), syntax)

	@classmethod
	def from_route(Class, route:'Route'):
		"""
		# Construct an instance of &Class holding the same path as &route.
		"""
		return Class(route.syntax, route.absolute, route.segments)

	def _derive(self, segments:Sequence[str]):
		# Subclasses carrying additional state override this.
		return self.__class__(self.syntax, self.absolute, segments)

	def to_string(self, target:Optional[Syntax]=None) -> str:
		"""
		# Render the route using the separator of &target.
		# Defaults to &runtime.default_syntax.
		"""
		if target is None:
			target = runtime.default_syntax()

		return core.serialize(self.syntax, self.absolute, self.segments, target)

	def to_bytes(self, target:Optional[Syntax]=None, encoding='utf-8') -> bytes:
		"""
		# Render the route with &to_string and encode the result.
		"""
		return self.to_string(target).encode(encoding, 'surrogateescape')

	def to_wide(self, target:Optional[Syntax]=None) -> bytes:
		"""
		# Render the route as UTF-16 little endian code units; the form consumed
		# by wide character Windows interfaces.
		"""
		return self.to_string(target).encode('utf-16-le', 'surrogatepass')

	def __str__(self):
		return self.to_string()

	def __repr__(self):
		return "(%s@%r)" %(self.syntax.value, self.to_string(self.syntax))

	def __reduce__(self):
		return (self.__class__, (self.syntax, self.absolute, self.segments))

	def _key(self):
		return (self.syntax.value, self.absolute, self.segments)

	def __hash__(self):
		return hash(self._key())

	def __eq__(self, operand):
		if isinstance(operand, Route) and type(operand) is type(self):
			return self._key() == operand._key()
		return NotImplemented

	def __lt__(self, operand):
		if isinstance(operand, Route) and type(operand) is type(self):
			return self._key() < operand._key()
		return NotImplemented

	# Sequence Interfaces

	def __len__(self):
		return len(self.segments)

	def __iter__(self) -> Iterator[str]:
		return iter(self.segments)

	def __getitem__(self, index):
		return self.segments[index]

	# Route Interfaces

	def __truediv__(self, addend:Union['Route', str]):
		"""
		# Composition; &addend strings are parsed using &self.syntax.
		"""
		if isinstance(addend, str):
			addend = Route.from_string(addend, self.syntax)
		elif not isinstance(addend, Route):
			return NotImplemented

		return compose(self, addend)

	@property
	def empty(self) -> bool:
		"""
		# Whether the route has no segments.
		"""
		return not self.segments

	@property
	def filename(self) -> str:
		"""
		# The final segment; empty string when the route has no segments.
		"""
		if not self.segments:
			return ''
		return self.segments[-1]

	@property
	def container(self):
		"""
		# The route without its final segment.

		# When the final segment is `.` or `..`, or there are no segments,
		# `..` is appended instead so the route still ascends.
		"""
		segments = self.segments
		if segments and segments[-1] not in ('.', '..'):
			return self._derive(segments[:-1])
		return self._derive(segments + ('..',))
