"""
Typepred - Runtime type predicates with static narrowing.

Re-exports the public surface of ``typepred.core``.
"""

__version__ = "0.1.0"

from typepred.core import *  # noqa
from typepred.core import __all__  # noqa: F401
