name = 'crosspath'
abstract = 'cross-platform filesystem path values and filesystem backends'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
