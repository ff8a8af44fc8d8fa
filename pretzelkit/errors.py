"""
Exception hierarchy for pretzelkit.

Malformed input and shape errors are recoverable and derive from
ValueError. Contract violations signal an internal inconsistency and
are never caught inside the library.
"""


class PretzelError(Exception):
    """Base class for all pretzelkit errors."""


class PretzelParseError(PretzelError, ValueError):
    """Raised when a string is not valid braid or pretzel notation."""

    def __init__(self, text: str, reason: str = "unrecognised notation"):
        self.text = text
        self.reason = reason
        super().__init__(f"Failed to parse {text!r} as pretzel: {reason}")


class DimensionMismatchError(PretzelError, ValueError):
    """Raised when matrix shapes are incompatible for an operation."""


class ContractViolation(PretzelError, RuntimeError):
    """
    An algorithm reached a configuration that well-formed input cannot
    produce.

    Attributes:
        tag: Short identifier of the violated contract, e.g. "seifert-case"
    """

    def __init__(self, tag: str, message: str):
        self.tag = tag
        super().__init__(f"[{tag}] {message}")
