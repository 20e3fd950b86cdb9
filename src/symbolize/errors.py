class SymbolizeError(Exception):
    """Base class for errors raised while converting an image."""


class InvalidInputError(SymbolizeError, ValueError):
    """Raised for arguments rejected before any pixel work starts."""


class PaletteLookupError(SymbolizeError, RuntimeError):
    """Raised when a pixel cannot be matched against the working palette."""
