import hmac
import struct
from typing import Any, Optional, Union

from . import config
from .algorithms import HashAlgorithm
from .exceptions import InvalidCounter, UnsupportedDigitLength
from .secret import decode_secret


def check_digits(digits: int) -> int:
    if isinstance(digits, bool) or not isinstance(digits, int) or digits not in config.SUPPORTED_DIGITS:
        raise UnsupportedDigitLength("Digits may only be 6, 7, or 8")
    return digits


def check_counter(counter: int) -> int:
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidCounter("counter must be an integer")
    if counter < 0:
        raise InvalidCounter("counter must be a non-negative integer")
    if counter > config.MAX_COUNTER:
        raise InvalidCounter("counter does not fit in 8 bytes")
    return counter


def truncate(hmac_hash: bytes, digits: int) -> str:
    """
    RFC 4226 dynamic truncation of an HMAC digest to a decimal code.

    The low nibble of the last byte selects 4 bytes, read big-endian with the
    top bit masked off so the value is a non-negative 31 bit integer.
    """
    offset = hmac_hash[-1] & 0xF
    code = struct.unpack(">I", hmac_hash[offset : offset + 4])[0] & 0x7FFFFFFF
    return str(code % 10**digits).zfill(digits)


class OTP(object):
    """
    Base class for OTP handlers.

    Holds the per-secret configuration and implements the RFC 4226 code
    derivation shared by HOTP and TOTP.
    """

    def __init__(
        self,
        s: str,
        digits: int = config.DEFAULT_DIGITS,
        algorithm: Union[HashAlgorithm, str, Any] = config.DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> None:
        self.digits = check_digits(digits)
        self.algorithm = HashAlgorithm.coerce(algorithm)
        # decoded once so a malformed secret fails at construction
        self._key = decode_secret(s)
        self.secret = s
        self.name = name or "Secret"
        self.issuer = issuer

    @property
    def digest(self) -> Any:
        return self.algorithm.digest

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        check_counter(input)
        hmac_hash = hmac.new(self.byte_secret(), self.int_to_bytestring(input), self.digest).digest()
        return truncate(hmac_hash, self.digits)

    def byte_secret(self) -> bytes:
        return self._key

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return i.to_bytes(padding, "big")


def generate_code(
    secret: str,
    counter: int,
    algorithm: Union[HashAlgorithm, str] = config.DEFAULT_ALGORITHM,
    digits: int = config.DEFAULT_DIGITS,
) -> str:
    """
    Computes the HOTP value for a single counter.

    Pure and deterministic: the same inputs always give the same code.

    :param secret: base32 secret
    :param counter: non-negative HMAC counter
    :param algorithm: keyed-hash algorithm
    :param digits: code length, 6 to 8
    :returns: code left-padded with zeros to exactly `digits` characters
    """
    check_digits(digits)
    check_counter(counter)
    return OTP(secret, digits=digits, algorithm=algorithm).generate_otp(counter)
