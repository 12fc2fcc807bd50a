"""Errors raised by the notification domain."""


class InvalidArgument(ValueError):
    """Raised when a setter or mutator receives an unacceptable value."""


class InvalidRichObject(ValueError):
    """Raised when a rich object string or one of its parameters is malformed."""


__all__ = ["InvalidArgument", "InvalidRichObject"]
