"""
objaide – object and number utilities.

Null-safe comparison and selection, emptiness and equality checks, mutable
numeric wrappers, and a cloning dispatcher for duplicable objects.
"""
