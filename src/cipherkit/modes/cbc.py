"""
CipherKit - CBC mode.

Each plaintext block is XORed with the previous ciphertext block (the IV for
the first) before encryption.
"""

from ..utils import xor_bytes
from .base import ModeOfOperation


class CBCMode(ModeOfOperation):

    name = "CBC"
    uses_padding = True

    def encrypt(self, data):
        register = self._encrypt_register
        padded = self.padding.pad(bytes(data), self.block_size)

        result = bytearray()
        previous_block = register.value

        for block in self._blocks(padded):
            # XOR with previous ciphertext block (or IV)
            encrypted_block = self.cipher.encrypt_block(xor_bytes(block, previous_block))
            result += encrypted_block
            previous_block = encrypted_block

        register.value = previous_block
        return bytes(result)

    def decrypt(self, data):
        register = self._decrypt_register
        data = bytes(data)
        self._check_aligned(data)

        result = bytearray()
        previous_block = register.value

        for block in self._blocks(data):
            result += xor_bytes(self.cipher.decrypt_block(block), previous_block)
            # chain on the ciphertext block just consumed
            previous_block = block

        plaintext = self.padding.unpad(bytes(result), self.block_size)

        # commit the chain only once the padding checked out
        register.value = previous_block
        return plaintext
