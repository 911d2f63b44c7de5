"""
CipherKit - Camellia block transform (RFC 3713) backed by cryptography.io.

Only the single-block capability lives here; chaining goes through the
generic mode layer like any other family.
"""

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.decrepit.ciphers.algorithms import Camellia
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .base import BlockCipher
from .registry import register_cipher


def camellia_supported():
    # some OpenSSL builds ship without Camellia
    sample = Camellia(bytes(16))
    return default_backend().cipher_supported(sample, modes.ECB())


@register_cipher("camellia")
class CamelliaCipher(BlockCipher):
    """Camellia in the shared block-cipher interface."""

    name = "Camellia"
    block_size = 16
    key_sizes = (16, 24, 32)

    def __init__(self, key):
        key = bytes(key)
        self.validate_key(key)
        self.key_size = len(key)
        self._cipher = Cipher(Camellia(key), modes.ECB(), backend=default_backend())

    def encrypt_block(self, block):
        self.check_block(block)
        encryptor = self._cipher.encryptor()
        return encryptor.update(bytes(block)) + encryptor.finalize()

    def decrypt_block(self, block):
        self.check_block(block)
        decryptor = self._cipher.decryptor()
        return decryptor.update(bytes(block)) + decryptor.finalize()
