# howmuch/errors.py


class HowmuchError(Exception):
    """Base class for every error that aborts a howmuch command."""


class FetchError(HowmuchError, ConnectionError):
    """A gateway could not be reached or answered with an error status."""


class MissingOrMalformedFieldError(HowmuchError, ValueError):
    """A required JSON field is absent or not a non-negative integer."""


class PreconditionError(HowmuchError, ValueError):
    """The block gas price cannot be divided out of the actual fee."""


class InputConfigurationError(HowmuchError, ValueError):
    """Invalid combination of inputs, or an override value that does not parse."""
