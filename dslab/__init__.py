"""Algorithm exercises: random tree shapes, combinatorics, subarrays and small puzzles."""

__version__ = "0.1.0"