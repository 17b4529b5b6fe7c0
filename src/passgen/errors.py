from __future__ import annotations


class PassgenError(ValueError):
    """Base class for user-facing passgen errors."""


class InvalidLengthError(PassgenError):
    """Password length is outside the supported range."""


class InvalidCountError(PassgenError):
    """Requested number of passwords is outside the supported range."""


class IncompatibleSpecialLengthError(PassgenError):
    """Special characters were requested with a length too short to hold them."""


class InvalidArgumentError(PassgenError):
    """An option value is missing or is not an integer."""


class UnknownFlagError(PassgenError):
    """An unrecognized command-line option was given."""


class PolicyError(PassgenError):
    """The generator was handed a policy that upstream validation should have rejected."""
