#!/usr/bin/env python3
"""
CipherKit
AES (Rijndael) in pure Python with generic ECB, CBC, CFB and OFB modes.
"""

from .base import BlockCipher
from .errors import (
    CipherError,
    ConfigurationError,
    KeyLengthError,
    ModeError,
    InputLengthError,
    PaddingError,
)
from .aes import CustomAES, StdlibAES
from .camellia import CamelliaCipher
from .cipher import new_cipher
from .config import CipherConfig
from .log import setup_logging
from .modes import MODES, get_mode, ECBMode, CBCMode, CFBMode, OFBMode
from .padding import (
    PADDING_SCHEMES,
    get_padding,
    PaddingScheme,
    PKCS7Padding,
    X923Padding,
    ISO7816Padding,
    NoPadding,
)
from .registry import register_cipher, get_cipher, list_ciphers

__all__ = [
    'BlockCipher', 'CipherError', 'ConfigurationError', 'KeyLengthError', 'ModeError',
    'InputLengthError', 'PaddingError', 'CustomAES', 'StdlibAES', 'CamelliaCipher',
    'new_cipher', 'CipherConfig', 'setup_logging', 'MODES', 'get_mode', 'ECBMode',
    'CBCMode', 'CFBMode', 'OFBMode', 'PADDING_SCHEMES', 'get_padding', 'PaddingScheme',
    'PKCS7Padding', 'X923Padding', 'ISO7816Padding', 'NoPadding', 'register_cipher',
    'get_cipher', 'list_ciphers',
]
