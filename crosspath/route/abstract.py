"""
# Interface description of the filesystem backends used by &..system.files.Path.

# Backends consume serialized path strings, never route instances, and translate
# the results of the host's system calls into booleans, integers and strings.

# [ Query Sentinels ]

# Queries that cannot complete do not raise. Boolean queries return &False and
# &Backend.query_size returns &UNAVAILABLE. Operations that are expected to
# succeed, resolution and process lookups, raise &ResolutionError.
"""
from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol, Optional, runtime_checkable

from .core import Syntax

UNAVAILABLE = -1

class ResolutionError(OSError):
	"""
	# Exception raised when the system could not resolve a path.

	# [ Properties ]
	# /fs_path/
		# The path string given to the backend; &None for process lookups.
	# /fs_operation/
		# The backend operation that failed.
		# /`'resolve'`/
			# Absolute path resolution.
		# /`'working-directory'`/
			# Current working directory lookup.
		# /`'executable'`/
			# Executable image lookup.
	# /errno/
		# The error code reported by the system.
	"""

	def __init__(self, path:Optional[str], operation:str, code:int, reason:Optional[str]=None):
		super().__init__(code, reason or operation)
		self.fs_path = path
		self.fs_operation = operation

	def __str__(self):
		return f"{self.fs_operation} failed with error {self.errno}: {self.strerror}\nPATH: {self.fs_path!r}"

@runtime_checkable
class Backend(Protocol):
	"""
	# Filesystem capability: queries, resolution, enumeration and mutation.

	# [ Properties ]
	# /syntax/
		# The syntax that path strings given to the backend must use.
	"""

	syntax: Syntax

	@abstractmethod
	def query_size(self, path:str) -> int:
		"""
		# The number of bytes in the regular file at &path.
		# &UNAVAILABLE when &path is not a regular file or cannot be inspected.
		"""
		raise NotImplementedError

	@abstractmethod
	def query_is_directory(self, path:str) -> bool:
		"""
		# Whether &path identifies a directory; &False when it does not exist.
		"""
		raise NotImplementedError

	@abstractmethod
	def query_is_file(self, path:str) -> bool:
		"""
		# Whether &path identifies a regular file; &False when it does not exist.
		"""
		raise NotImplementedError

	@abstractmethod
	def query_exists(self, path:str) -> bool:
		"""
		# Whether any file is present at &path.
		"""
		raise NotImplementedError

	@abstractmethod
	def resolve_absolute(self, path:str) -> str:
		"""
		# The absolute form of &path as reported by the system.

		# [ Exceptions ]
		# /&ResolutionError/
			# Raised when the system cannot resolve &path.
		"""
		raise NotImplementedError

	@abstractmethod
	def list_directory(self, path:str) -> Sequence[str]:
		"""
		# The names of the files contained by the directory at &path.
		# Empty when &path is not a directory or cannot be read.
		"""
		raise NotImplementedError

	@abstractmethod
	def remove_file(self, path:str) -> bool:
		"""
		# Delete the file at &path. &False when the removal failed.
		"""
		raise NotImplementedError

	@abstractmethod
	def truncate_file(self, path:str, length:int) -> bool:
		"""
		# Adjust the size of the file at &path to &length bytes.
		# &False when the adjustment failed.
		"""
		raise NotImplementedError

	@abstractmethod
	def create_directory(self, path:str) -> bool:
		"""
		# Create a directory at &path. Leading directories are not created.
		# &False when the creation failed.
		"""
		raise NotImplementedError

	@abstractmethod
	def current_working_directory(self) -> str:
		"""
		# The absolute path of the working directory of the process.
		"""
		raise NotImplementedError

	@abstractmethod
	def executable_image_path(self) -> str:
		"""
		# The absolute path of the executable image of the process.
		"""
		raise NotImplementedError
