import unicodedata
from hmac import compare_digest

from .exceptions import InvalidCodeFormat


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))


def normalize_code(otp: str, digits: int) -> str:
    """
    Checks that a submitted code can possibly be valid.

    Fullwidth and other compatibility digits are folded to ASCII first, so
    "４８２１９３" is accepted as "482193".

    :param otp: code as typed by the user
    :param digits: expected code length
    :returns: the code as ASCII digits
    """
    if not isinstance(otp, str):
        raise InvalidCodeFormat("code must be a string")
    code = unicodedata.normalize("NFKC", otp)
    if len(code) != digits:
        raise InvalidCodeFormat("code must be exactly {} digits".format(digits))
    if not (code.isascii() and code.isdigit()):
        raise InvalidCodeFormat("code must contain only the digits 0-9")
    return code
