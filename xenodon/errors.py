"""Base error type with brace-style message formatting."""


class Error(RuntimeError):
    """Runtime error whose message is built with ``str.format``."""

    def __init__(self, fmt, *args):
        message = fmt.format(*args) if args else fmt
        super().__init__(message)
        self.message = message