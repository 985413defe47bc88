"""Graph, number and sequence routines for contest-style problems."""

__version__ = "0.1.0"
__all__ = ["graphs", "numbers", "sequences"]