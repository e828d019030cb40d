"""Two-stack integer sorting with a restricted set of printed operations,
with small character, string, buffer and output helpers."""

__version__ = "0.1.0"