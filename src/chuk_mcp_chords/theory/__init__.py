"""
Theory datasets - the tables the chord engine runs on.

A built-in default dataset ships in library/; projects can override it
or add their own under ./theory.
"""

from chuk_mcp_chords.theory.loader import TheoryLoader

__all__ = [
    "TheoryLoader",
]
