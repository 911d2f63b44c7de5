from ..errors import ModeError
from .base import FeedbackRegister, ModeOfOperation, StreamMode
from .cbc import CBCMode
from .cfb import CFBMode
from .ecb import ECBMode
from .ofb import OFBMode

MODES = {
    "ECB": ECBMode,
    "CBC": CBCMode,
    "CFB": CFBMode,
    "OFB": OFBMode,
}

def get_mode(name):
    # look up a mode class by its selector, case-insensitive
    if not isinstance(name, str) or name.upper() not in MODES:
        raise ModeError(f"Unsupported mode: {name!r}. Available: {', '.join(MODES)}")
    return MODES[name.upper()]
