"""
CipherKit - cipher configuration.

Settings come either from a dictionary or from a JSON file such as::

    {"algorithm": "aes", "mode": "CBC", "key_hex": "000102...", "iv_hex": "...", "padding": "PKCS7"}
"""

import binascii
import json
import logging

from .cipher import DEFAULT_ALGORITHM, DEFAULT_MODE, new_cipher
from .errors import ConfigurationError

logger = logging.getLogger("CipherKit")


def _read_bytes(config, name):
    # "<name>_hex" wins over the raw value
    hex_value = config.get(f"{name}_hex")
    if hex_value is not None:
        try:
            return binascii.unhexlify(hex_value)
        except (binascii.Error, TypeError) as e:
            raise ConfigurationError(f"Invalid hex for {name}: {e}") from e
    return config.get(name)


class CipherConfig:
    """Options for ``new_cipher`` gathered in one place."""

    def __init__(self, key, mode=DEFAULT_MODE, iv=None, padding=None, algorithm=DEFAULT_ALGORITHM):
        self.key = key
        self.mode = mode
        self.iv = iv
        self.padding = padding
        self.algorithm = algorithm

    @classmethod
    def from_dict(cls, config):
        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(config).__name__}")

        key = _read_bytes(config, "key")
        if key is None:
            raise ConfigurationError("Configuration requires 'key' or 'key_hex'")

        return cls(
            key=key,
            mode=config.get("mode", DEFAULT_MODE),
            iv=_read_bytes(config, "iv"),
            padding=config.get("padding"),
            algorithm=config.get("algorithm", DEFAULT_ALGORITHM),
        )

    @classmethod
    def from_file(cls, path):
        # load configuration
        try:
            with open(path, 'r') as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration: {str(e)}")
            raise ConfigurationError(f"Cannot load configuration from {path}: {e}") from e
        return cls.from_dict(config)

    def create_cipher(self):
        return new_cipher(
            self.key,
            mode=self.mode,
            iv=self.iv,
            padding=self.padding,
            algorithm=self.algorithm,
        )

    def __repr__(self):
        # never print key material
        return f"CipherConfig(algorithm={self.algorithm!r}, mode={self.mode!r}, padding={self.padding!r})"
