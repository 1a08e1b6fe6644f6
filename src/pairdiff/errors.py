"""Errors raised around the diff engine (the engine itself never raises)"""


class InvalidInputError(ValueError):
    """An input could not be canonicalized, so no diff is computed."""


class InputTooLargeError(ValueError):
    """An input exceeds the configured line cap."""
