"""toyrobot — a toy robot simulator driven by line-based commands."""

__version__ = "0.1.0"
