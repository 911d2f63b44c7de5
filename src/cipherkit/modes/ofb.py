from .base import StreamMode


class OFBMode(StreamMode):
    """Output feedback: the register is fed the keystream itself.

    Encryption and decryption are the same operation.
    """

    name = "OFB"

    def _next_keystream(self, register):
        register.value = self.cipher.encrypt_block(register.value)
        return register.value
