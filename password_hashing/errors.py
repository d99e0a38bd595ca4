class PasswordHashError(Exception):
    """Base class for errors raised by password_hashing."""


class ConfigurationError(PasswordHashError, ValueError):
    """A hasher was configured with unusable parameters."""


class MissingPasswordError(PasswordHashError, TypeError):
    """A password argument was None."""


class MissingHashError(PasswordHashError, TypeError):
    """A hash string argument was None."""


class HashFormatError(PasswordHashError, ValueError):
    """A hash string could not be parsed by any registered family."""
