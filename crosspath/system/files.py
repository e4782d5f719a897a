"""
# Filesystem-bound routes.

# &Path extends &..route.types.Route with filesystem queries and mutations
# performed by a &..route.abstract.Backend. Paths are rendered with the backend's
# syntax before being handed to it. Status is queried fresh for every call and
# never retained by the instance.
"""
from collections.abc import Sequence
from typing import Optional
import shutil
import logging
import tempfile
import contextlib

from ..route.core import Syntax
from ..route.types import Route
from ..route.abstract import Backend, ResolutionError, UNAVAILABLE
from . import runtime

logger = logging.getLogger(__name__)

class Path(Route):
	"""
	# - &..route.types.Route
	# - &..route.abstract.Backend

	# Route implementation providing filesystem controls.

	# [ Properties ]
	# /backend/
		# The &Backend bound to the path; &None to use &runtime.default_backend.
	"""
	__slots__ = ('backend',)

	ResolutionError = ResolutionError

	backend: Optional[Backend]

	def __init__(self, syntax:Syntax, absolute:bool, segments:Sequence[str], backend:Optional[Backend]=None):
		super().__init__(syntax, absolute, segments)
		self.backend = backend

	@classmethod
	def from_route(Class, route:Route, backend:Optional[Backend]=None):
		"""
		# Construct a &Path identifying the same location as &route.
		"""
		return Class(route.syntax, route.absolute, route.segments, backend)

	def _derive(self, segments):
		return self.__class__(self.syntax, self.absolute, segments, self.backend)

	def __reduce__(self):
		return (self.__class__, (self.syntax, self.absolute, self.segments))

	def bind(self, backend:Backend):
		"""
		# Construct a new path identifying the same location that uses &backend.
		"""
		return self.__class__(self.syntax, self.absolute, self.segments, backend)

	@property
	def fs_backend(self) -> Backend:
		"""
		# The backend performing operations for the path.
		"""
		return self.backend if self.backend is not None else runtime.default_backend()

	@property
	def fullpath(self) -> str:
		"""
		# The path string in the syntax of &fs_backend.
		"""
		return self.to_string(self.fs_backend.syntax)

	def __fspath__(self) -> str:
		return self.fullpath

	@classmethod
	def _from_backend(Class, string:str, backend:Backend):
		return Class.from_string(string, backend.syntax).bind(backend)

	@classmethod
	def fs_pwd(Class, backend:Optional[Backend]=None):
		"""
		# Construct a &Path to the current working directory.

		# [ Exceptions ]
		# /&ResolutionError/
			# Raised when the system could not report the directory.
		"""
		backend = backend or runtime.default_backend()
		return Class._from_backend(backend.current_working_directory(), backend)

	@classmethod
	def fs_executable(Class, backend:Optional[Backend]=None):
		"""
		# Construct a &Path to the executable image of the running process.

		# [ Exceptions ]
		# /&ResolutionError/
			# Raised when the system could not report the image.
		"""
		backend = backend or runtime.default_backend()
		return Class._from_backend(backend.executable_image_path(), backend)

	@classmethod
	@contextlib.contextmanager
	def fs_tmpdir(Class, backend:Optional[Backend]=None, *, TemporaryDirectory=tempfile.mkdtemp):
		"""
		# Create a temporary directory at a new path using a context manager.

		# A &Path to the temporary directory is returned on entrance,
		# and that same directory and its contents are destroyed on exit.
		"""
		backend = backend or runtime.default_backend()
		d = TemporaryDirectory()
		logger.debug("allocated temporary directory %r", d)
		try:
			yield Class._from_backend(d, backend)
		finally:
			shutil.rmtree(d, ignore_errors=True)

	# Queries

	def exists(self) -> bool:
		"""
		# Query the filesystem and return whether or not the file exists.
		"""
		return self.fs_backend.query_exists(self.fullpath)

	def fs_is_directory(self) -> bool:
		"""
		# Whether the path identifies an existing directory.
		"""
		return self.fs_backend.query_is_directory(self.fullpath)

	def fs_is_file(self) -> bool:
		"""
		# Whether the path identifies an existing regular file.
		"""
		return self.fs_backend.query_is_file(self.fullpath)

	def fs_size(self) -> int:
		"""
		# The number of bytes in the regular file; &UNAVAILABLE, `-1`, when
		# the path does not identify a regular file.
		"""
		return self.fs_backend.query_size(self.fullpath)

	def fs_type(self) -> str:
		"""
		# The type of file the path points to.

		# [ Returns ]
		# - `'directory'`
		# - `'data'`
		# - `'void'`
		# - `'unknown'`, for files that exist but are neither directories nor regular files.
		"""
		backend = self.fs_backend
		fp = self.fullpath

		if backend.query_is_directory(fp):
			return 'directory'
		elif backend.query_is_file(fp):
			return 'data'
		elif backend.query_exists(fp):
			return 'unknown'
		return 'void'

	def fs_resolve(self):
		"""
		# Construct the absolute path reported by the system for &self.

		# [ Exceptions ]
		# /&ResolutionError/
			# Raised when the path could not be resolved; usually because
			# it does not exist.
		"""
		backend = self.fs_backend
		return self._from_backend(backend.resolve_absolute(self.fullpath), backend)

	def fs_list(self) -> list['Path']:
		"""
		# Construct paths for the files contained by the directory, &self.

		# On POSIX hosts, the listing includes the `.` and `..` entries.
		# If &self is not a directory or cannot be read, an empty list is returned.
		"""
		return [self / name for name in self.fs_backend.list_directory(self.fullpath)]

	# Navigation

	def parent_path(self):
		"""
		# The &container of the path; resolved with &fs_resolve when &self is absolute.
		"""
		c = self.container
		if self.absolute:
			return c.fs_resolve()
		return c

	def extension(self) -> str:
		"""
		# The characters following the last `.` of the filename.

		# Only directories are considered; the empty string is returned when
		# the path does not identify an existing directory or when the filename
		# has no `.` characters.
		"""
		if not self.fs_is_directory():
			return ''

		name = self.filename
		p = name.rfind('.')
		if p == -1:
			return ''

		return name[p+1:]

	# Mutations

	def fs_void(self) -> bool:
		"""
		# Remove the file identified by &self. &False when the removal failed.
		"""
		return self.fs_backend.remove_file(self.fullpath)

	def fs_truncate(self, length:int) -> bool:
		"""
		# Adjust the size of the file to &length bytes. &False when the adjustment failed.
		"""
		return self.fs_backend.truncate_file(self.fullpath, length)

	def fs_mkdir(self) -> bool:
		"""
		# Create a directory at the location identified by &self.
		# Leading directories are not created. &False when the creation failed.
		"""
		return self.fs_backend.create_directory(self.fullpath)

	# Content

	def fs_load(self) -> bytes:
		"""
		# Retrieve the binary data stored at the location identified by &self.
		"""
		with open(self.fullpath, 'rb') as f:
			return f.read()

	def fs_store(self, data:bytes):
		"""
		# Store the given &data at the location identified by &self.
		"""
		with open(self.fullpath, 'wb') as f:
			f.write(data)
		return self

def fs_pwd(backend:Optional[Backend]=None) -> Path:
	"""
	# Construct a &Path to the current working directory of the process.
	"""
	return Path.fs_pwd(backend)

def fs_executable(backend:Optional[Backend]=None) -> Path:
	"""
	# Construct a &Path to the executable image of the process.
	"""
	return Path.fs_executable(backend)
