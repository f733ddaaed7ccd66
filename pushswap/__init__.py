"""Sort integers with two stacks and a limited set of stack operations.

Also holds small helpers for characters, strings, byte buffers, a linked
list and printf-style output.
"""

__version__ = "0.1.0"
__all__ = ["algorithm", "chars", "cli", "linked", "memory", "output", "parsing", "stack", "strings"]