"""Unix-style system commands (nice, ps, rm, touch, tail, sudo and more) and a terminal dashboard."""

__version__ = "0.1.0"