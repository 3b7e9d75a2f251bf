"""Sort integers with two stacks and the push_swap instruction set."""

__version__ = "1.0.0"
__all__ = ["cli", "instructions", "parsing", "sorter", "stack"]