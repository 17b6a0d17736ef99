"""Exceptions raised by the helper commands."""


class HelperError(Exception):
    """Base class for every error a helper command can report to the user."""


class InvalidResult(HelperError):
    """A lookup result cannot be formatted (it has no senses)."""


class TranslationError(HelperError):
    """The translation service failed or returned nothing usable."""


class LookupServiceError(HelperError):
    """The dictionary service could not be reached or sent a bad reply."""


class ConfigError(HelperError):
    """Settings are missing or invalid."""
