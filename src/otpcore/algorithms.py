import enum
import hashlib
from typing import Any, Callable, Union

from .exceptions import UnsupportedAlgorithm


class HashAlgorithm(enum.Enum):
    """
    Keyed-hash primitives allowed by RFC 6238.

    The value is the name used in otpauth URIs.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest(self) -> Callable[..., Any]:
        """hashlib constructor handed to hmac.new"""
        return _DIGESTS[self]

    @property
    def digest_size(self) -> int:
        return self.digest().digest_size

    @classmethod
    def coerce(cls, value: Union["HashAlgorithm", str, Callable[..., Any]]) -> "HashAlgorithm":
        """
        Accepts a member, a name such as "sha256" or "SHA-512", or one of
        the matching hashlib constructors.

        :param value: algorithm in any of the accepted forms
        :returns: HashAlgorithm member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.replace("-", "").upper()
            try:
                return cls(name)
            except ValueError:
                raise UnsupportedAlgorithm(
                    "Invalid value for algorithm, must be SHA1, SHA256 or SHA512"
                ) from None
        for member, digest in _DIGESTS.items():
            if value is digest:
                return member
        raise UnsupportedAlgorithm("selected digest function is not one of sha1, sha256 or sha512")


_DIGESTS = {
    HashAlgorithm.SHA1: hashlib.sha1,
    HashAlgorithm.SHA256: hashlib.sha256,
    HashAlgorithm.SHA512: hashlib.sha512,
}
