import logging
from re import split
from typing import Any, Dict
from urllib.parse import parse_qsl, unquote, urlparse

from .algorithms import HashAlgorithm as HashAlgorithm
from .clock import Clock as Clock
from .clock import FixedClock as FixedClock
from .clock import SystemClock as SystemClock
from .exceptions import InvalidCodeFormat as InvalidCodeFormat
from .exceptions import InvalidCounter as InvalidCounter
from .exceptions import InvalidPeriod as InvalidPeriod
from .exceptions import InvalidSecretFormat as InvalidSecretFormat
from .exceptions import InvalidSecretLength as InvalidSecretLength
from .exceptions import InvalidWindow as InvalidWindow
from .exceptions import OTPError as OTPError
from .exceptions import RandomSourceExhausted as RandomSourceExhausted
from .exceptions import UnsupportedAlgorithm as UnsupportedAlgorithm
from .exceptions import UnsupportedDigitLength as UnsupportedDigitLength
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .otp import generate_code as generate_code
from .provisioning import build_uri as build_uri
from .secret import generate_secret as generate_secret
from .totp import TOTP as TOTP
from .totp import counter_for as counter_for
from .totp import is_valid as is_valid
from .totp import time_remaining as time_remaining

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse_uri(uri: str) -> OTP:
    """
    Parses the provisioning URI for the OTP; works for either TOTP or HOTP.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param uri: the hotp/totp URI to parse
    :returns: OTP object
    """

    # Secret (to be filled in later)
    secret = None

    # Data we'll parse to the correct constructor
    otp_data: Dict[str, Any] = {}

    parsed_uri = urlparse(unquote(uri))

    if parsed_uri.scheme != "otpauth":
        raise ValueError("Not an otpauth URI")

    # Parse issuer/accountname info
    accountinfo_parts = split(":|%3A", parsed_uri.path[1:], maxsplit=1)
    if len(accountinfo_parts) == 1:
        otp_data["name"] = accountinfo_parts[0]
    else:
        otp_data["issuer"] = accountinfo_parts[0]
        otp_data["name"] = accountinfo_parts[1]

    for key, value in parse_qsl(parsed_uri.query):
        if key == "secret":
            secret = value
        elif key == "issuer":
            if "issuer" in otp_data and otp_data["issuer"] is not None and otp_data["issuer"] != value:
                raise ValueError("If issuer is specified in both label and parameters, it should be equal.")
            otp_data["issuer"] = value
        elif key == "algorithm":
            otp_data["algorithm"] = HashAlgorithm.coerce(value)
        elif key == "digits":
            otp_data["digits"] = int(value)
        elif key == "period":
            otp_data["interval"] = int(value)
        elif key == "counter":
            otp_data["initial_count"] = int(value)

    if not secret:
        raise ValueError("No secret found in URI")

    # digits, period and the secret itself are validated by the constructors
    if parsed_uri.netloc == "totp":
        otp_data.pop("initial_count", None)
        return TOTP(secret, **otp_data)
    elif parsed_uri.netloc == "hotp":
        otp_data.pop("interval", None)
        return HOTP(secret, **otp_data)
    raise ValueError("Not a supported OTP type")
