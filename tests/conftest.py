import base64

import pytest

RFC4226_CODES = ["755224", "287082", "359152", "969429", "338314", "254676", "287922", "162583", "399871", "520489"]


def b32(raw: bytes) -> str:
    return base64.b32encode(raw).decode("ascii").rstrip("=")


@pytest.fixture
def rfc_secret() -> str:
    # "12345678901234567890", the RFC 4226 / RFC 6238 SHA1 seed
    return b32(b"12345678901234567890")


@pytest.fixture
def rfc_secrets():
    return {
        "SHA1": b32(b"12345678901234567890"),
        "SHA256": b32(b"12345678901234567890123456789012"),
        "SHA512": b32(b"1234567890" * 6 + b"1234"),
    }
