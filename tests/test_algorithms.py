import hashlib

import pytest

from otpcore import HashAlgorithm, UnsupportedAlgorithm


@pytest.mark.parametrize(
    "value,expected",
    [
        ("SHA1", HashAlgorithm.SHA1),
        ("sha256", HashAlgorithm.SHA256),
        ("SHA-512", HashAlgorithm.SHA512),
        (hashlib.sha256, HashAlgorithm.SHA256),
        (HashAlgorithm.SHA1, HashAlgorithm.SHA1),
    ],
)
def test_coerce(value, expected):
    assert HashAlgorithm.coerce(value) is expected


@pytest.mark.parametrize("value", ["MD5", "", hashlib.md5, None])
def test_coerce_rejects(value):
    with pytest.raises(UnsupportedAlgorithm):
        HashAlgorithm.coerce(value)


def test_digest_sizes():
    assert HashAlgorithm.SHA1.digest_size == 20
    assert HashAlgorithm.SHA256.digest_size == 32
    assert HashAlgorithm.SHA512.digest_size == 64
