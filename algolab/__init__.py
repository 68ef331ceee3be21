"""Binary search trees, stacks, sorting, median, graphs and maximum-flow problems."""

__version__ = "0.1.0"