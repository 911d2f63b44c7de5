import json
import logging

import pytest

from cipherkit import CipherConfig, ConfigurationError, KeyLengthError, ModeError, list_ciphers, setup_logging
from cipherkit.log import LOGGER_NAME
from cipherkit.utils import generate_iv, generate_key, to_bytes, xor_bytes

KEY_HEX = "000102030405060708090a0b0c0d0e0f"
IV_HEX = "0f0e0d0c0b0a09080706050403020100"


def test_from_dict_with_hex_values():
    config = CipherConfig.from_dict({"mode": "CBC", "key_hex": KEY_HEX, "iv_hex": IV_HEX})
    assert config.key == bytes.fromhex(KEY_HEX)
    assert config.iv == bytes.fromhex(IV_HEX)
    assert config.algorithm == "aes"

    cipher = config.create_cipher()
    assert cipher.name == "CBC"
    assert cipher.decrypt(cipher.encrypt(b"configured")) == b"configured"


def test_from_dict_defaults():
    config = CipherConfig.from_dict({"key": "YELLOW SUBMARINE"})
    assert config.mode == "ECB"
    assert config.iv is None
    assert config.padding is None
    assert config.create_cipher().encrypt(b"x") != b"x"


def test_from_file(tmp_path):
    path = tmp_path / "cipher.json"
    path.write_text(json.dumps({
        "algorithm": "aes",
        "mode": "OFB",
        "key_hex": KEY_HEX * 2,
        "iv_hex": IV_HEX,
    }))

    cipher = CipherConfig.from_file(path).create_cipher()
    assert cipher.cipher.key_size == 32
    assert len(cipher.encrypt(b"abc")) == 3


def test_from_file_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        CipherConfig.from_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ConfigurationError):
        CipherConfig.from_file(broken)


@pytest.mark.parametrize("config", [
    {},
    {"mode": "CBC"},
    {"key_hex": "zz"},
    ["not", "a", "mapping"],
])
def test_from_dict_rejects(config):
    with pytest.raises(ConfigurationError):
        CipherConfig.from_dict(config)


def test_errors_surface_when_cipher_is_created():
    with pytest.raises(KeyLengthError):
        CipherConfig.from_dict({"key_hex": "00" * 17}).create_cipher()
    with pytest.raises(ModeError):
        CipherConfig.from_dict({"key_hex": KEY_HEX, "mode": "XTS"}).create_cipher()


def test_repr_hides_key():
    config = CipherConfig(key=b"super secret key", mode="ECB")
    assert "secret" not in repr(config)


def test_registered_families():
    assert {"aes", "aes_stdlib", "camellia"} <= set(list_ciphers())


def test_to_bytes():
    assert to_bytes(b"abc") == b"abc"
    assert to_bytes(bytearray(b"abc")) == b"abc"
    assert to_bytes(memoryview(b"abc")) == b"abc"
    assert to_bytes("abc") == b"abc"
    assert to_bytes("é", encoding="latin-1") == b"\xe9"
    assert to_bytes([1, 2, 3]) == b"\x01\x02\x03"
    with pytest.raises(TypeError):
        to_bytes(1.5)
    with pytest.raises(TypeError):
        to_bytes([256])


def test_xor_bytes_truncates():
    assert xor_bytes(b"\x0f\xf0", b"\xff\xff\xff") == b"\xf0\x0f"


def test_generate_key_and_iv():
    assert len(generate_key(128)) == 16
    assert len(generate_key(256)) == 32
    assert len(generate_iv()) == 16
    assert generate_key() != generate_key()
    with pytest.raises(KeyLengthError):
        generate_key(100)


def test_setup_logging_is_idempotent():
    logger = setup_logging(logging.DEBUG)
    handlers = list(logger.handlers)
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG

    setup_logging(logging.WARNING)
    assert logger.handlers == handlers
    assert all(handler.level == logging.WARNING for handler in handlers)


def test_library_logs_key_expansion(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    CipherConfig.from_dict({"key_hex": KEY_HEX}).create_cipher()
    assert any("AES-128 key schedule" in record.getMessage() for record in caplog.records)
