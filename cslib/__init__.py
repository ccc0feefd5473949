"""Collections, file helpers, option parsing, console input and an in-memory graphics object model."""

__version__ = "0.1.0"