from .errors import InputLengthError, KeyLengthError


class BlockCipher:
    """Single-block transform shared by every cipher family.

    Subclasses set ``name``, ``block_size`` and ``key_sizes`` and implement
    ``encrypt_block``/``decrypt_block``. The mode layer only talks to this
    interface.
    """

    name = None
    block_size = None
    key_sizes = ()

    @classmethod
    def validate_key(cls, key):
        if len(key) not in cls.key_sizes:
            allowed = ", ".join(str(size) for size in cls.key_sizes)
            raise KeyLengthError(
                f"Invalid key size for {cls.name}: {len(key)} bytes. Must be one of {allowed} bytes"
            )

    def check_block(self, block):
        if len(block) != self.block_size:
            raise InputLengthError(f"Block must be {self.block_size} bytes, got {len(block)}")

    def encrypt_block(self, block: bytes) -> bytes:
        raise NotImplementedError("Subclasses must implement this method")

    def decrypt_block(self, block: bytes) -> bytes:
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{type(self).__name__} {self.name} block_size={self.block_size}>"
