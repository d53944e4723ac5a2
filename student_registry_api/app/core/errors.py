"""
Exception types raised by the service layer.

The API layer maps these onto HTTP responses in ``main.py``; services
never build HTTP responses themselves.
"""


class StudentRegistryError(Exception):
    """Base class for all errors raised by the student registry."""


class StudentValidationError(StudentRegistryError):
    """A student payload is missing a required field."""


class SeedFetchError(StudentRegistryError):
    """The seed data could not be fetched from the remote API."""
