import logging

from .errors import ConfigurationError

# setup logging
logger = logging.getLogger("CipherKit")

# dictionary to store block cipher families
CIPHER_FAMILIES = {}

def register_cipher(name):
    # register a block cipher family under a lookup name
    def decorator(cipher_class):
        CIPHER_FAMILIES[name.lower()] = cipher_class
        logger.debug(f"Registered block cipher family: {name}")
        return cipher_class
    return decorator

def get_cipher(name):
    # get a block cipher family by name
    try:
        return CIPHER_FAMILIES[name.lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"Unknown cipher family: {name!r}. Available: {', '.join(list_ciphers())}"
        ) from None

def list_ciphers():
    # list all registered families
    return sorted(CIPHER_FAMILIES.keys())
