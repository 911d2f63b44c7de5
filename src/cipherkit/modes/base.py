"""
CipherKit - shared machinery for modes of operation.

A mode wraps any BlockCipher. Modes that chain keep one feedback register
per direction, both seeded from the IV, so a single instance can encrypt one
stream and decrypt another. Registers persist across calls; ``reset`` puts
them back to the IV. Concurrent calls on one instance race on the registers.
"""

import logging

from ..errors import ConfigurationError, InputLengthError
from ..padding import get_padding
from ..utils import xor_bytes

logger = logging.getLogger("CipherKit")


class FeedbackRegister:
    """Chaining state for one direction of one mode instance."""

    __slots__ = ("value", "keystream", "used", "segment")

    def __init__(self, iv):
        # previous ciphertext block, or the last keystream block for OFB
        self.value = iv
        # keystream block currently being consumed by CFB/OFB
        self.keystream = None
        self.used = 0
        # ciphertext bytes emitted against the current keystream block (CFB)
        self.segment = bytearray()


class ModeOfOperation:

    name = None
    requires_iv = True
    uses_padding = False

    def __init__(self, cipher, iv=None, padding=None):
        self.cipher = cipher
        self.block_size = cipher.block_size
        self.padding = get_padding(padding) if self.uses_padding else None

        if self.requires_iv:
            self.iv = self._validate_iv(iv)
        else:
            if iv is not None:
                logger.debug(f"IV ignored in {self.name} mode")
            self.iv = None

        self.reset()
        logger.debug(f"Created {self.name} mode over {cipher.name}")

    def _validate_iv(self, iv):
        if iv is None:
            raise ConfigurationError(f"{self.name} mode requires an IV")
        iv = bytes(iv)
        if len(iv) != self.block_size:
            raise ConfigurationError(f"IV must be exactly {self.block_size} bytes, got {len(iv)}")
        return iv

    def reset(self, iv=None):
        """Restart both directions from the IV, optionally replacing it first."""
        if iv is not None and self.requires_iv:
            self.iv = self._validate_iv(iv)

        self._encrypt_register = FeedbackRegister(self.iv)
        self._decrypt_register = FeedbackRegister(self.iv)

    def _check_aligned(self, data):
        if len(data) % self.block_size != 0:
            raise InputLengthError(
                f"Input length {len(data)} is not a multiple of {self.block_size} in {self.name} mode"
            )

    def _blocks(self, data):
        block_size = self.block_size
        for i in range(0, len(data), block_size):
            yield data[i:i + block_size]

    def encrypt(self, data: bytes) -> bytes:
        raise NotImplementedError("Subclasses must implement this method")

    def decrypt(self, data: bytes) -> bytes:
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{type(self).__name__} {self.cipher.name}-{self.name}>"


class StreamMode(ModeOfOperation):
    """Feedback modes that turn the forward block transform into a keystream.

    Unused keystream bytes carry over to the next call, so a message split
    across calls encrypts exactly like the whole buffer in one call.
    """

    def encrypt(self, data):
        return self._process(self._encrypt_register, bytes(data), encrypting=True)

    def decrypt(self, data):
        return self._process(self._decrypt_register, bytes(data), encrypting=False)

    def _next_keystream(self, register):
        # always the forward transform, in both directions
        return self.cipher.encrypt_block(register.value)

    def _absorb(self, register, ciphertext):
        # OFB feeds back keystream only, so emitted bytes are not needed
        pass

    def _process(self, register, data, encrypting):
        block_size = self.block_size
        output = bytearray()
        pos = 0

        while pos < len(data):
            if register.keystream is None:
                register.keystream = self._next_keystream(register)
                register.used = 0

            take = min(block_size - register.used, len(data) - pos)
            chunk = data[pos:pos + take]
            out = xor_bytes(chunk, register.keystream[register.used:register.used + take])
            output += out

            self._absorb(register, out if encrypting else chunk)

            register.used += take
            pos += take
            if register.used == block_size:
                register.keystream = None

        return bytes(output)
