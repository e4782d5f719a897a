"""
# Path values decoupled from the operating system's native syntax.

# &.core provides the string tools, &.types the &.types.Route value, and
# &.abstract the interface filesystem backends implement.
"""
