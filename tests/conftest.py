import random

import pytest

from cipherkit.base import BlockCipher


class RotateXorCipher(BlockCipher):
    # toy 8-byte family: rotate left one byte, then XOR the key
    name = "RotateXor"
    block_size = 8
    key_sizes = (8,)

    def __init__(self, key):
        self.validate_key(key)
        self.key = bytes(key)
        self.decrypt_calls = 0

    def encrypt_block(self, block):
        self.check_block(block)
        rotated = bytes(block[1:]) + bytes(block[:1])
        return bytes(b ^ k for b, k in zip(rotated, self.key))

    def decrypt_block(self, block):
        self.check_block(block)
        self.decrypt_calls += 1
        unmasked = bytes(b ^ k for b, k in zip(block, self.key))
        return unmasked[-1:] + unmasked[:-1]


@pytest.fixture
def rng():
    return random.Random(0xAE5)


@pytest.fixture
def toy_cipher():
    return RotateXorCipher(bytes(range(0x10, 0x18)))
