"""
# Filesystem access for routes.

# &.files.Path binds routes to a backend; &.posix and &.windows implement the
# backends, and &.runtime holds the process-wide defaults.
"""
