"""
# Check the &.types.Route value and composition.
"""
import pickle

from .. import types as module
from ...system import runtime

posix = module.Syntax.posix
windows = module.Syntax.windows
P = (lambda x: module.Route.from_string(x, posix))
W = (lambda x: module.Route.from_string(x, windows))

def test_Route_from_string(test):
	r = P('/usr/lib')
	test/r.syntax == posix
	test/r.absolute == True
	test/r.segments == ('usr', 'lib')
	test/len(r) == 2
	test/list(r) == ['usr', 'lib']
	test/r[-1] == 'lib'

def test_Route_empty(test):
	"""
	# - &module.Route.empty
	"""
	r = P('')
	test/r.segments == ()
	test/r.absolute == False
	test/r.empty == True
	test/r.to_string(posix) == ''
	test/r.to_string(windows) == ''
	test/r.filename == ''
	test/P('/').empty == True
	test/P('/x').empty == False

def test_Route_drive_boundary(test):
	r = W('C:\\Users\\x')
	test/r.absolute == True
	test/r.segments == ('C:', 'Users', 'x')

	r = W('C:')
	test/r.absolute == False
	test/r.segments == ('C:',)

def test_Route_mixed_separators(test):
	test/W('a\\b/c').segments == ('a', 'b', 'c')
	test/W('C:/a\\\\b').segments == ('C:', 'a', 'b')

def test_Route_round_trip(test):
	"""
	# Rendering and re-parsing in the same syntax produces an equal route.
	"""
	samples = {
		posix: ['', '/', '//', '/a//b/', 'a/b', './a/../b', '///x'],
		windows: ['', 'C:\\', 'C:/a//b\\', 'a\\b/c', 'C:', '..\\x', '\\\\'],
	}
	for syntax, strings in samples.items():
		for s in strings:
			r = module.Route.from_string(s, syntax)
			rendered = r.to_string(syntax)
			test/module.Route.from_string(rendered, syntax) == r
			# Rendering is stable after the first pass.
			test/module.Route.from_string(rendered, syntax).to_string(syntax) == rendered

def test_Route_cross_rendering(test):
	test/P('/usr/bin').to_string(windows) == '\\usr\\bin'
	test/W('C:\\Users').to_string(windows) == 'C:\\Users'
	test/W('C:\\Users').to_string(posix) == 'C:/Users'
	test/W('a\\b').to_string(posix) == 'a/b'

def test_Route_equality(test):
	test/P('a/b') == P('a//b/')
	test/P('a/b') != P('/a/b')
	test/P('a/b') != W('a/b')
	test/hash(P('a/b')) == hash(P('a/b'))
	test/(P('a') < P('b')) == True
	test/len({P('a'), P('a/'), W('a')}) == 2

def test_Route_compose(test):
	"""
	# - &module.compose
	# - &module.Route.__truediv__
	"""
	r = P('a/b') / P('c')
	test/r.segments == ('a', 'b', 'c')
	test/r.absolute == False

	r = P('/usr') / P('lib/python')
	test/r.segments == ('usr', 'lib', 'python')
	test/r.absolute == True
	test/r.to_string(posix) == '/usr/lib/python'

	r = W('C:\\Users') / W('x\\y')
	test/r.to_string(windows) == 'C:\\Users\\x\\y'

	# Dot segments are retained.
	test/(P('a') / P('../b')).segments == ('a', '..', 'b')

def test_Route_compose_string(test):
	test/(P('/usr') / 'lib/python').segments == ('usr', 'lib', 'python')
	test/(W('C:\\') / 'a\\b').segments == ('C:', 'a', 'b')
	test/(P('/usr') / '').segments == ('usr',)

def test_Route_compose_rejection(test):
	"""
	# - &module.ConstructionError
	"""
	base = P('/usr')

	with test/module.ConstructionError as exc:
		base / P('/bin')
	test/exc().c_kind == 'absolute'
	test/exc().c_base == base
	test/str(exc()) << 'absolute'

	test/module.ConstructionError ^ (lambda: base / '/bin')
	test/module.ConstructionError ^ (lambda: W('C:\\') / W('D:\\x'))

	with test/module.ConstructionError as exc:
		base / W('bin')
	test/exc().c_kind == 'syntax'
	test/str(exc()) << 'windows'

	test/ValueError ^ (lambda: base / W('bin'))

def test_Route_compose_fresh(test):
	base = P('a')
	r = base / P('b')
	test/base.segments == ('a',)
	test/r.segments == ('a', 'b')

	# Empty addends still derive a new instance.
	same = base / P('')
	test/same == base
	test/(same is base) == False
	test/((base / '') is base) == False

def test_Route_filename(test):
	r = P('/a/b/c.txt')
	test/r.filename == 'c.txt'
	test/W('C:\\').filename == 'C:'

def test_Route_container(test):
	"""
	# - &module.Route.container
	"""
	r = P('/a/b/c.txt')
	c = r.container
	test/c.segments == ('a', 'b')
	test/c.absolute == True

	test/P('a/..').container.segments == ('a', '..', '..')
	test/P('.').container.segments == ('.', '..')
	test/P('').container.segments == ('..',)
	test/P('x').container.segments == ()

def test_Route_encodings(test):
	r = P('/tmp/\u00e9')
	test/r.to_bytes(posix) == '/tmp/\u00e9'.encode('utf-8')
	test/r.to_wide(windows) == '\\tmp\\\u00e9'.encode('utf-16-le')
	test/module.Route.from_bytes(b'/tmp/x', posix) == P('/tmp/x')

def test_Route_default_syntax(test):
	"""
	# Unqualified parsing and rendering use the configured default syntax.
	"""
	with runtime.configured(syntax=windows):
		r = module.Route.from_string('C:\\x')
		test/r.syntax == windows
		test/r.absolute == True
		test/str(P('/a/b')) == '\\a\\b'

	with runtime.configured(syntax=posix):
		test/module.Route.from_string('C:\\x').segments == ('C:\\x',)
		test/str(P('/a/b')) == '/a/b'

def test_Route_repr(test):
	test/repr(P('/a')) == "(posix@'/a')"
	test/repr(W('C:\\a')) == "(windows@'C:\\\\a')"

def test_Route_pickling(test):
	for r in (P(''), P('/a/b'), W('C:\\x')):
		test/pickle.loads(pickle.dumps(r)) == r

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
