"""
SafePass Exceptions
====================

The analyzers are total over string input and raise nothing; these
exceptions cover configuration mistakes and the password generator's
dependency on the operating system's random source.
"""


class SafePassError(Exception):
    """Base class for every error raised by SafePass."""

    pass


class InvalidConfigurationError(SafePassError):
    """Options or tier tables that cannot produce a meaningful result.

    Raised when the generator's character pool is empty, when a generator
    length is not positive, or when a tier table is empty or violates the
    tier-0 invariant.
    """

    pass


class CryptographicUnavailableError(SafePassError):
    """The secure random source could not supply bytes."""

    pass
