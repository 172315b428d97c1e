"""
Converter-specific exception classes.
"""


class ConversionError(Exception):
    """Base class for all converter errors.
    """


class TypeNotFoundError(ConversionError, LookupError):
    """A type name could not be resolved to a class.
    """

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        message = name if reason is None else f'{name}: {reason}'
        super().__init__(message)


class InvalidArgument(ConversionError, ValueError):
    """A stored value cannot be converted back to its domain value.

    The offending value is kept on ``argument``; the underlying failure is
    chained as ``__cause__``.
    """

    def __init__(self, argument: object) -> None:
        self.argument = argument
        super().__init__(argument)


ResolutionError = (
    TypeNotFoundError,
    InvalidArgument,
    )
