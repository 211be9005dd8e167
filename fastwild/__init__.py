"""Wildcard matching with '*' and '?' for byte and code-point text, plus reference suites and a runner."""

__version__ = "1.0.0"

__all__ = ["matching", "suites", "cli"]