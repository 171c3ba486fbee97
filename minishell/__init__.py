"""Shell built-ins with an environment snapshot, a printf-style formatter, a line reader and string helpers."""

__version__ = "0.1.0"
__all__ = ["builtins", "cli", "environment", "printf", "reader", "text"]