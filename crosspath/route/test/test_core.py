"""
# Check the string tools of &.core: splitting, drive detection, parsing and serialization.
"""
import warnings

from .. import core as module

posix = module.Syntax.posix
windows = module.Syntax.windows

def test_Syntax_separators(test):
	test/posix.separator == '/'
	test/windows.separator == '\\'
	test/posix.separators == '/'
	test/set(windows.separators) == {'/', '\\'}

def test_split(test):
	"""
	# - &module.split
	"""
	s = (lambda x, seps='/': list(module.split(x, seps)))
	test/s('') == []
	test/s('/') == []
	test/s('///') == []
	test/s('a') == ['a']
	test/s('/a/b') == ['a', 'b']
	test/s('a//b///c/') == ['a', 'b', 'c']
	test/s('a\\b/c', '/\\') == ['a', 'b', 'c']
	test/s('a\\b', '/') == ['a\\b']

def test_split_laziness(test):
	i = module.split('first/second', '/')
	test/next(i) == 'first'
	test/next(i) == 'second'
	test/StopIteration ^ (lambda: next(i))

def test_drive(test):
	"""
	# - &module.drive
	"""
	test/module.drive('C:\\') == True
	test/module.drive('c:/x') == True
	test/module.drive('C:') == False
	test/module.drive('C') == False
	test/module.drive('') == False
	test/module.drive('1:\\') == False
	test/module.drive('CC:\\') == False
	# Non-ASCII letters are not drive letters.
	test/module.drive('\u00e9:\\') == False

def test_parse_posix(test):
	test/module.parse('', posix) == (False, ())
	test/module.parse('/', posix) == (True, ())
	test/module.parse('//', posix) == (True, ())
	test/module.parse('/usr/lib', posix) == (True, ('usr', 'lib'))
	test/module.parse('usr//lib/', posix) == (False, ('usr', 'lib'))
	test/module.parse('a\\b', posix) == (False, ('a\\b',))

def test_parse_windows(test):
	test/module.parse('C:\\Users\\x', windows) == (True, ('C:', 'Users', 'x'))
	test/module.parse('C:/Users/x', windows) == (True, ('C:', 'Users', 'x'))
	test/module.parse('C:\\', windows) == (True, ('C:',))
	test/module.parse('C:', windows) == (False, ('C:',))
	test/module.parse('C:x', windows) == (False, ('C:x',))
	test/module.parse('a\\b/c', windows) == (False, ('a', 'b', 'c'))
	test/module.parse('\\\\', windows) == (False, ())
	test/module.parse('', windows) == (False, ())

def test_serialize(test):
	"""
	# - &module.serialize
	"""
	test/module.serialize(posix, False, (), posix) == ''
	test/module.serialize(posix, True, (), posix) == '/'
	test/module.serialize(posix, True, ('usr', 'lib'), posix) == '/usr/lib'
	test/module.serialize(posix, True, ('usr', 'lib'), windows) == '\\usr\\lib'
	test/module.serialize(posix, False, ('a', 'b'), windows) == 'a\\b'
	test/module.serialize(windows, False, (), windows) == ''
	test/module.serialize(windows, True, ('C:', 'Users'), windows) == 'C:\\Users'
	test/module.serialize(windows, True, ('C:', 'Users'), posix) == 'C:/Users'

def test_serialize_drive_root(test):
	"""
	# - &module.serialize

	# A lone drive designator keeps its separator so that it parses as absolute.
	"""
	s = module.serialize(windows, True, ('C:',), windows)
	test/s == 'C:\\'
	test/module.parse(s, windows) == (True, ('C:',))

def test_source_escapes(test):
	"""
	# The module compiles without escape sequence warnings.
	"""
	with open(module.__file__, encoding='utf-8') as f:
		source = f.read()

	with warnings.catch_warnings():
		warnings.simplefilter('error')
		compile(source, module.__file__, 'exec')

	test/module.Syntax.__doc__ << '`\\` or `/` separated'

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
