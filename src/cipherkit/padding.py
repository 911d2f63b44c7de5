"""
CipherKit - padding schemes for the block-aligned modes (ECB, CBC).

A scheme is any object with ``pad(data, block_size)`` and
``unpad(data, block_size)``; the modes accept one directly or by name.
"""

from Crypto.Util.Padding import pad as crypto_pad, unpad as crypto_unpad

from .errors import ConfigurationError, InputLengthError, PaddingError


class PaddingScheme:

    name = None

    def pad(self, data, block_size):
        raise NotImplementedError("Subclasses must implement this method")

    def unpad(self, data, block_size):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class PKCS7Padding(PaddingScheme):
    """Append n bytes of value n, 1 <= n <= block_size."""

    name = "PKCS7"

    def pad(self, data, block_size):
        padding_length = block_size - (len(data) % block_size)
        if padding_length == 0:
            padding_length = block_size
        return bytes(data) + bytes([padding_length] * padding_length)

    def unpad(self, data, block_size):
        if len(data) == 0:
            raise PaddingError("Cannot unpad empty data")

        padding_length = data[-1]

        if padding_length == 0 or padding_length > block_size:
            raise PaddingError(f"Invalid padding length: {padding_length}")

        if padding_length > len(data):
            raise PaddingError(f"Padding length {padding_length} exceeds data length {len(data)}")

        # every padding byte must carry the padding length
        for i in range(1, padding_length + 1):
            if data[-i] != padding_length:
                raise PaddingError("Invalid padding")

        return bytes(data[:-padding_length])


class _CryptoStylePadding(PaddingScheme):
    # schemes PyCryptodome already implements
    style = None

    def pad(self, data, block_size):
        return crypto_pad(bytes(data), block_size, style=self.style)

    def unpad(self, data, block_size):
        try:
            return crypto_unpad(bytes(data), block_size, style=self.style)
        except ValueError as e:
            raise PaddingError(f"Invalid {self.name} padding: {e}") from e


class X923Padding(_CryptoStylePadding):
    """ANSI X9.23: zero bytes followed by the padding length."""

    name = "X923"
    style = "x923"


class ISO7816Padding(_CryptoStylePadding):
    """ISO/IEC 7816-4: a 0x80 marker followed by zero bytes."""

    name = "ISO7816"
    style = "iso7816"


class NoPadding(PaddingScheme):
    """Leave data as is; the caller guarantees block alignment."""

    name = "NONE"

    def pad(self, data, block_size):
        if len(data) % block_size != 0:
            raise InputLengthError(
                f"Data length {len(data)} is not a multiple of {block_size} and padding is disabled"
            )
        return bytes(data)

    def unpad(self, data, block_size):
        return bytes(data)


PADDING_SCHEMES = {
    "PKCS7": PKCS7Padding,
    "X923": X923Padding,
    "ISO7816": ISO7816Padding,
    "NONE": NoPadding,
}

DEFAULT_PADDING = "PKCS7"


def get_padding(padding=None):
    """
    Resolve a padding option to a scheme instance.

    Args:
        padding: None for PKCS7, a scheme name, or an object with pad/unpad

    Returns:
        PaddingScheme: The padding scheme to use
    """
    if padding is None:
        padding = DEFAULT_PADDING

    if isinstance(padding, str):
        try:
            return PADDING_SCHEMES[padding.upper()]()
        except KeyError:
            raise ConfigurationError(
                f"Unknown padding scheme: {padding!r}. Available: {', '.join(PADDING_SCHEMES)}"
            ) from None

    if isinstance(padding, type) and issubclass(padding, PaddingScheme):
        return padding()

    if callable(getattr(padding, "pad", None)) and callable(getattr(padding, "unpad", None)):
        return padding

    raise ConfigurationError(f"Padding must be a scheme name or provide pad/unpad, got {padding!r}")
