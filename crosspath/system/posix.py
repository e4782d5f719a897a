"""
# Filesystem backend for POSIX hosts.
"""
import os
import os.path
import sys
import stat
import errno
import logging

from ..route.core import Syntax
from ..route.abstract import Backend, ResolutionError, UNAVAILABLE

logger = logging.getLogger(__name__)

class PosixBackend(Backend):
	"""
	# &Backend implementation using the POSIX interfaces exposed by &os.

	# [ Properties ]
	# /executable_link/
		# The procfs link identifying the executable image of the process.
	"""

	syntax = Syntax.posix
	executable_link = '/proc/self/exe'

	def __repr__(self):
		return self.__class__.__name__ + '()'

	def _mode(self, path, *, status=os.stat):
		# ValueError for strings containing NUL.
		try:
			return status(path).st_mode
		except (OSError, ValueError):
			return None

	def query_size(self, path, *, status=os.stat, isreg=stat.S_ISREG):
		try:
			st = status(path)
		except (OSError, ValueError):
			return UNAVAILABLE

		if not isreg(st.st_mode):
			return UNAVAILABLE
		return st.st_size

	def query_is_directory(self, path, *, isdir=stat.S_ISDIR):
		mode = self._mode(path)
		return mode is not None and isdir(mode)

	def query_is_file(self, path, *, isreg=stat.S_ISREG):
		mode = self._mode(path)
		return mode is not None and isreg(mode)

	def query_exists(self, path):
		return self._mode(path) is not None

	def resolve_absolute(self, path, *, realpath=os.path.realpath):
		if not path:
			raise ResolutionError(path, 'resolve', errno.ENOENT, os.strerror(errno.ENOENT))

		try:
			return realpath(path, strict=True)
		except OSError as err:
			logger.debug("could not resolve %r: %s", path, err)
			raise ResolutionError(path, 'resolve', err.errno, err.strerror) from err

	def list_directory(self, path, *, scandir=os.scandir):
		if not self.query_is_directory(path):
			return []

		try:
			dl = scandir(path)
		except OSError:
			# Error indifferent.
			# User must make explicit checks to interrogate permission/existence.
			return []

		with dl as scan:
			names = [de.name for de in scan]

		# scandir omits the self and parent entries that readdir reports.
		return ['.', '..'] + names

	def remove_file(self, path, *, remove=os.remove):
		try:
			remove(path)
		except (OSError, ValueError):
			return False
		return True

	def truncate_file(self, path, length, *, truncate=os.truncate):
		try:
			truncate(path, length)
		except (OSError, ValueError):
			return False
		return True

	def create_directory(self, path, *, mkdir=os.mkdir, mode=stat.S_IRWXU):
		try:
			mkdir(path, mode)
		except (OSError, ValueError):
			return False
		return True

	def current_working_directory(self, *, getcwd=os.getcwd):
		try:
			return getcwd()
		except OSError as err:
			raise ResolutionError(None, 'working-directory', err.errno, err.strerror) from err

	def executable_image_path(self, *, readlink=os.readlink, realpath=os.path.realpath):
		try:
			return readlink(self.executable_link)
		except OSError as err:
			if sys.executable:
				# Hosts without procfs.
				return realpath(sys.executable)
			raise ResolutionError(None, 'executable', err.errno, err.strerror) from err
