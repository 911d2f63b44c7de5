"""
CipherKit - error types.

Every error derives from ``CipherError``, which is a ``ValueError`` so code
written against PyCryptodome-style ``except ValueError`` keeps working.
"""


class CipherError(ValueError):
    """Base class for all cipher errors."""


class ConfigurationError(CipherError):
    """Missing or malformed construction options (IV, family, padding)."""


class KeyLengthError(CipherError):
    """Key length is not one of the cipher family's allowed sizes."""


class ModeError(CipherError):
    """Unknown or unsupported mode of operation."""


class InputLengthError(CipherError):
    """Input is not aligned to the block size where alignment is required."""


class PaddingError(CipherError):
    """Trailing padding bytes are invalid."""
