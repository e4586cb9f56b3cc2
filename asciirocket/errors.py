"""
errors.py

Exception hierarchy shared by the renderer, the parts catalogue and the CLI.
"""

from __future__ import annotations


class RocketError(RuntimeError):
    pass


class InvalidInput(RocketError, ValueError):
    """Raised for a missing, non-numeric, zero or negative height."""


class AssemblyError(RocketError):
    """Raised when parts do not join or do not fit in the row budget."""


class PartsError(RocketError, ValueError):
    """Raised when a parts catalogue cannot be loaded or is malformed."""
