"""
# Provide the contention harness to test functions collected by pytest.
"""
import pytest

from crosspath.test import types

class Test(types.Test):
	"""
	# &types.Test concluding through pytest's outcomes.
	"""
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip("not applicable to this host")

	def fail(self, message=None):
		pytest.fail(message or "test concluded failure")

@pytest.fixture
def test(request):
	t = Test(request.node.name, request.function)
	with t.exits:
		yield t
