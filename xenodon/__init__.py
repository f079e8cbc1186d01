"""Parsing, command-line option handling, logging and vector/quaternion math for a volume renderer."""

__version__ = "0.1.0"