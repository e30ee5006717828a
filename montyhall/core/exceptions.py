"""Exceptions raised by the Monty Hall simulation."""


class MontyHallError(ValueError):
    """Base class for all simulation errors."""


class InvalidInputError(MontyHallError):
    """A door identifier or door assignment is malformed."""


class InvalidStateError(MontyHallError):
    """Game pieces were composed in a way the rules never allow.

    This signals a bug in the caller, not bad user input.
    """


class InvalidArgumentError(MontyHallError):
    """A batch was requested with a non-positive trial count."""
