"""Sort integers on two stacks with a limited set of instructions and print the moves."""

__version__ = "1.0.0"