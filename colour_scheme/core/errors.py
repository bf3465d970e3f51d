"""Errors raised by the colour codec and everything built on it."""


class ColourError(ValueError):
    """Base class for invalid colour input."""


class InvalidFormat(ColourError):
    """Hex string with a bad digit count or non-hex characters, or an unusable input type."""


class InvalidRange(ColourError):
    """A channel or component outside its allowed range."""


class UndefinedInput(ColourError):
    """A colour was required but None was given."""
