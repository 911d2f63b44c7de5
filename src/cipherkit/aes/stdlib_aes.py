"""
CipherKit - AES block transform backed by PyCryptodome.

Same capability as CustomAES; used as the reference cipher when chaining
through the mode layer.
"""

from Crypto.Cipher import AES as CryptoAES

from ..base import BlockCipher
from ..registry import register_cipher


@register_cipher("aes_stdlib")
class StdlibAES(BlockCipher):

    name = "AES (PyCryptodome)"
    block_size = CryptoAES.block_size
    key_sizes = CryptoAES.key_size

    def __init__(self, key):
        key = bytes(key)
        self.validate_key(key)
        self.key_size = len(key)
        self._ecb = CryptoAES.new(key, CryptoAES.MODE_ECB)

    def encrypt_block(self, block):
        self.check_block(block)
        return self._ecb.encrypt(bytes(block))

    def decrypt_block(self, block):
        self.check_block(block)
        return self._ecb.decrypt(bytes(block))
