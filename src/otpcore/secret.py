import base64
import binascii
import logging
import re
import secrets
from typing import Callable

from . import config
from .exceptions import InvalidSecretFormat, InvalidSecretLength, RandomSourceExhausted

log = logging.getLogger(__name__)

B32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_b32_re = re.compile("^[{}]+$".format(B32_ALPHABET))


def generate_secret(
    bits: int = config.DEFAULT_SECRET_BITS,
    random_source: Callable[[int], bytes] = secrets.token_bytes,
) -> str:
    """
    Issues a new shared secret.

    :param bits: secret size; a multiple of 8, at least MIN_SECRET_BITS
    :param random_source: callable returning n cryptographically secure bytes
    :returns: secret as unpadded, uppercase base32 text
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidSecretLength("bits must be an integer")
    if bits % 8 != 0:
        raise InvalidSecretLength("bits must be a multiple of 8")
    if bits < config.MIN_SECRET_BITS:
        raise InvalidSecretLength("Secrets should be at least {} bits".format(config.MIN_SECRET_BITS))

    nbytes = bits // 8
    try:
        raw = random_source(nbytes)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceExhausted("random source failed: {}".format(exc)) from exc
    if raw is None or len(raw) < nbytes:
        raise RandomSourceExhausted("random source returned fewer than {} bytes".format(nbytes))

    log.debug("issued %d bit secret", bits)
    return encode_secret(bytes(raw[:nbytes]))


def encode_secret(raw: bytes) -> str:
    """
    The otpauth scheme does not use base32 padding, so it is stripped.
    """
    return base64.b32encode(raw).decode("ascii").rstrip("=")


def decode_secret(secret: str) -> bytes:
    """
    Converts base32 secret text into the raw HMAC key.

    Decoding is case-insensitive and tolerates missing (or present) trailing
    padding.

    :param secret: base32 text
    :returns: key bytes
    """
    if not isinstance(secret, str):
        raise InvalidSecretFormat("secret must be base32 text")
    normalized = secret.strip().upper().rstrip("=")
    if not normalized:
        raise InvalidSecretFormat("secret must not be empty")
    if not _b32_re.match(normalized):
        raise InvalidSecretFormat("secret contains characters outside the base32 alphabet")

    missing_padding = len(normalized) % 8
    if missing_padding != 0:
        normalized += "=" * (8 - missing_padding)
    try:
        return base64.b32decode(normalized)
    except binascii.Error as exc:
        raise InvalidSecretFormat("secret has an invalid base32 length") from exc
