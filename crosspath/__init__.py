"""
# Cross-platform filesystem paths.

# [ Sections ]
# /route/
	# Platform-agnostic path values: parsing, composition and serialization.
# /system/
	# Filesystem-bound paths and the POSIX and Windows backends.
# /test/
	# The contention harness used by the `test` directories of each section.
"""
