from .base import StreamMode


class CFBMode(StreamMode):
    """Cipher feedback with full-block (128-bit) segments.

    The register is refilled with each complete ciphertext block; no padding,
    output length always equals input length.
    """

    name = "CFB"

    def _absorb(self, register, ciphertext):
        register.segment += ciphertext
        if len(register.segment) == self.block_size:
            register.value = bytes(register.segment)
            register.segment.clear()
