"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .cmp import cmp
from .inspect import inspect

__all__ = ["cmp", "inspect"]
