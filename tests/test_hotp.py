import pytest

from conftest import RFC4226_CODES
from otpcore import HOTP, InvalidCodeFormat, InvalidCounter, InvalidSecretFormat, UnsupportedDigitLength, generate_code
from otpcore.otp import OTP, truncate


@pytest.mark.parametrize("counter,expected", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(rfc_secret, counter, expected):
    assert generate_code(rfc_secret, counter, "SHA1", 6) == expected


def test_generate_is_deterministic(rfc_secret):
    assert generate_code(rfc_secret, 123456, "SHA256", 8) == generate_code(rfc_secret, 123456, "SHA256", 8)


def test_secret_is_case_insensitive(rfc_secret):
    assert generate_code(rfc_secret.lower(), 0) == "755224"


def test_truncate_keeps_leading_zeros():
    digest = b"\x00\x00\x00\x2a" + b"\x00" * 16
    assert truncate(digest, 6) == "000042"


def test_truncate_masks_top_bit():
    # offset 0, bytes ff ff ff ff -> 0x7fffffff
    digest = b"\xff\xff\xff\xff" + b"\x00" * 16
    assert truncate(digest, 8) == str(0x7FFFFFFF % 10**8).zfill(8)


def test_int_to_bytestring():
    assert OTP.int_to_bytestring(0x3039) == b"\x00\x00\x00\x00\x00\x00\x30\x39"


@pytest.mark.parametrize("digits", [0, 5, 9, 10, True, "6"])
def test_unsupported_digits(rfc_secret, digits):
    with pytest.raises(UnsupportedDigitLength):
        generate_code(rfc_secret, 0, "SHA1", digits)


@pytest.mark.parametrize("counter", [-1, 2**64, 1.5])
def test_invalid_counter(rfc_secret, counter):
    with pytest.raises(InvalidCounter):
        generate_code(rfc_secret, counter)


@pytest.mark.parametrize("secret", ["", "ABC1ABCD", "JBSWY3DP!", "A"])
def test_invalid_secret(secret):
    with pytest.raises(InvalidSecretFormat):
        generate_code(secret, 0)


def test_errors_are_value_errors(rfc_secret):
    with pytest.raises(ValueError):
        generate_code(rfc_secret, -1)


def test_hotp_at_and_initial_count(rfc_secret):
    hotp = HOTP(rfc_secret)
    assert hotp.at(0) == "755224"
    assert hotp.at(9) == "520489"
    assert HOTP(rfc_secret, initial_count=3).at(1) == RFC4226_CODES[4]


def test_hotp_verify(rfc_secret):
    hotp = HOTP(rfc_secret)
    assert hotp.verify("755224", 0)
    assert not hotp.verify("755224", 1)
    assert not hotp.verify("000000", 0)


def test_hotp_verify_rejects_malformed_code(rfc_secret):
    hotp = HOTP(rfc_secret)
    with pytest.raises(InvalidCodeFormat):
        hotp.verify("75522", 0)
    with pytest.raises(InvalidCodeFormat):
        hotp.verify("75522a", 0)


def test_hotp_verify_window(rfc_secret):
    hotp = HOTP(rfc_secret)
    assert hotp.verify_window(RFC4226_CODES[7], 2, look_ahead=5) == 7
    assert hotp.verify_window(RFC4226_CODES[9], 2, look_ahead=5) is None
    assert hotp.verify_window(RFC4226_CODES[2], 2, look_ahead=0) == 2
