"""
CipherKit - ECB mode.

Blocks are transformed independently; equal plaintext blocks give equal
ciphertext blocks under one key.
"""

from .base import ModeOfOperation


class ECBMode(ModeOfOperation):

    name = "ECB"
    requires_iv = False
    uses_padding = True

    def encrypt(self, data):
        """
        Pad and encrypt every block on its own.

        Args:
            data: Plaintext of any length

        Returns:
            bytes: Ciphertext, a multiple of the block size
        """
        padded = self.padding.pad(bytes(data), self.block_size)
        encrypt_block = self.cipher.encrypt_block
        return b"".join(encrypt_block(block) for block in self._blocks(padded))

    def decrypt(self, data):
        """
        Decrypt every block on its own and strip the padding.

        Args:
            data: Ciphertext, a multiple of the block size

        Returns:
            bytes: Plaintext
        """
        data = bytes(data)
        self._check_aligned(data)

        decrypt_block = self.cipher.decrypt_block
        padded = b"".join(decrypt_block(block) for block in self._blocks(data))
        return self.padding.unpad(padded, self.block_size)
