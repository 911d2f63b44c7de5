"""
CipherKit - cipher construction.

``new_cipher`` checks every option up front: the mode, the key and the IV are
validated before the first byte is processed.
"""

import logging

from . import camellia  # noqa: F401  registers the "camellia" family
from .aes import CustomAES, StdlibAES  # noqa: F401  register the AES families
from .modes import get_mode
from .registry import get_cipher
from .utils import to_bytes

logger = logging.getLogger("CipherKit")

DEFAULT_MODE = "ECB"
DEFAULT_ALGORITHM = "aes"


def new_cipher(key, mode=DEFAULT_MODE, iv=None, padding=None, algorithm=DEFAULT_ALGORITHM):
    """
    Build a mode-of-operation object over a block cipher family.

    Args:
        key: Key as bytes, text or an iterable of ints
        mode: "ECB", "CBC", "CFB" or "OFB"
        iv: Block-sized IV, required for every mode except ECB
        padding: Padding scheme name or object for ECB/CBC (default PKCS7)
        algorithm: Registered block cipher family name (default "aes")

    Returns:
        ModeOfOperation: Object exposing encrypt(), decrypt() and reset()
    """
    mode_class = get_mode(mode)
    cipher_class = get_cipher(algorithm)

    block_cipher = cipher_class(to_bytes(key))

    if iv is not None:
        iv = to_bytes(iv)

    cipher = mode_class(block_cipher, iv=iv, padding=padding)
    logger.debug(f"New cipher: {cipher!r}")
    return cipher
