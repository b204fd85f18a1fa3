"""
Mutable wrappers for values.

Includes the Mutable protocol, the MutableNumber base, and MutableInt.
"""
