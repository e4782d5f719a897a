"""
# Filesystem backend for Windows hosts.

# The attribute, resolution, directory and process queries are performed with
# the wide character kernel32 interfaces. &load_kernel32 binds them through &ctypes;
# &WindowsBackend accepts any object providing the same functions.
"""
import os
import errno
import ctypes
import logging

from ..route.core import Syntax
from ..route.abstract import Backend, ResolutionError, UNAVAILABLE

logger = logging.getLogger(__name__)

INVALID_FILE_ATTRIBUTES = 0xFFFFFFFF
FILE_ATTRIBUTE_DIRECTORY = 0x10
MAX_PATH = 260

def load_kernel32():
	"""
	# Bind the kernel32 functions used by &WindowsBackend.

	# [ Exceptions ]
	# /&OSError/
		# Raised on hosts that are not Windows.
	"""
	if os.name != 'nt':
		raise OSError(errno.ENOSYS, "kernel32 is only available on Windows hosts")

	from ctypes import wintypes
	k = ctypes.WinDLL('kernel32', use_last_error=True)

	k.GetFileAttributesW.argtypes = [wintypes.LPCWSTR]
	k.GetFileAttributesW.restype = wintypes.DWORD

	k.GetFullPathNameW.argtypes = [wintypes.LPCWSTR, wintypes.DWORD, wintypes.LPWSTR, ctypes.c_void_p]
	k.GetFullPathNameW.restype = wintypes.DWORD

	k.GetCurrentDirectoryW.argtypes = [wintypes.DWORD, wintypes.LPWSTR]
	k.GetCurrentDirectoryW.restype = wintypes.DWORD

	k.GetModuleFileNameW.argtypes = [wintypes.HMODULE, wintypes.LPWSTR, wintypes.DWORD]
	k.GetModuleFileNameW.restype = wintypes.DWORD

	k.CreateDirectoryW.argtypes = [wintypes.LPCWSTR, ctypes.c_void_p]
	k.CreateDirectoryW.restype = wintypes.BOOL

	k.DeleteFileW.argtypes = [wintypes.LPCWSTR]
	k.DeleteFileW.restype = wintypes.BOOL

	return k

class WindowsBackend(Backend):
	"""
	# &Backend implementation using kernel32.

	# [ Properties ]
	# /kernel32/
		# The object providing the kernel32 functions.
	# /last_error/
		# Callable returning the error code of the last failed kernel32 call.
	# /format_error/
		# Callable producing the system message for an error code; &None when
		# the host provides no formatter.
	"""

	syntax = Syntax.windows

	def __init__(self, kernel32=None, last_error=None, format_error=None):
		self.kernel32 = kernel32 if kernel32 is not None else load_kernel32()
		self.last_error = last_error if last_error is not None else ctypes.get_last_error
		self.format_error = format_error if format_error is not None else getattr(ctypes, 'FormatError', None)

	def __repr__(self):
		return self.__class__.__name__ + '()'

	def _attributes(self, path):
		a = self.kernel32.GetFileAttributesW(path)
		if a == INVALID_FILE_ATTRIBUTES:
			return None
		return a

	def _fill(self, call, operation, path=None, *, Buffer=ctypes.create_unicode_buffer):
		# Call with increasing buffer sizes until the result fits.
		# &call returns the kernel32 length result for a given buffer and size.
		size = MAX_PATH
		while True:
			buf = Buffer(size)
			n = call(buf, size)
			if n == 0:
				code = self.last_error()
				logger.debug("%s failed for %r with error %d", operation, path, code)
				reason = self.format_error(code) if self.format_error is not None else None
				raise ResolutionError(path, operation, code, reason)
			if n < size:
				return buf.value
			size = max(n, size * 2)

	def query_size(self, path, *, status=os.stat):
		if not self.query_is_file(path):
			return UNAVAILABLE

		try:
			return status(path).st_size
		except (OSError, ValueError):
			return UNAVAILABLE

	def query_is_directory(self, path):
		a = self._attributes(path)
		return a is not None and (a & FILE_ATTRIBUTE_DIRECTORY) != 0

	def query_is_file(self, path):
		a = self._attributes(path)
		return a is not None and (a & FILE_ATTRIBUTE_DIRECTORY) == 0

	def query_exists(self, path):
		return self._attributes(path) is not None

	def resolve_absolute(self, path):
		k = self.kernel32
		return self._fill((lambda buf, size: k.GetFullPathNameW(path, size, buf, None)), 'resolve', path)

	def list_directory(self, path, *, scandir=os.scandir):
		if not self.query_is_directory(path):
			return []

		try:
			dl = scandir(path)
		except OSError:
			return []

		with dl as scan:
			return [de.name for de in scan]

	def remove_file(self, path):
		return bool(self.kernel32.DeleteFileW(path))

	def truncate_file(self, path, length, *, truncate=os.truncate):
		try:
			truncate(path, length)
		except (OSError, ValueError):
			return False
		return True

	def create_directory(self, path):
		return bool(self.kernel32.CreateDirectoryW(path, None))

	def current_working_directory(self):
		k = self.kernel32
		return self._fill((lambda buf, size: k.GetCurrentDirectoryW(size, buf)), 'working-directory')

	def executable_image_path(self):
		k = self.kernel32
		return self._fill((lambda buf, size: k.GetModuleFileNameW(None, buf, size)), 'executable')
