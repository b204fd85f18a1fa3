"""
Generic object utilities shared across modules.

Includes null checks, comparison/selection helpers, array helpers, and the
cloning dispatcher.
"""
