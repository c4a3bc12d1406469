"""
otpauth:// enrollment URIs, as understood by authenticator apps.

See also:
    https://github.com/google/google-authenticator/wiki/Key-Uri-Format
"""
from typing import Dict, Optional, Union
from urllib.parse import quote, urlencode, urlparse

from .algorithms import HashAlgorithm


def build_uri(
    secret: str,
    name: str,
    initial_count: Optional[int] = None,
    issuer: Optional[str] = None,
    algorithm: Optional[Union[HashAlgorithm, str]] = None,
    digits: Optional[int] = None,
    period: Optional[int] = None,
    **kwargs,
) -> str:
    """
    Returns the provisioning URI for the OTP; works for either TOTP or HOTP.

    This can then be encoded in a QR Code and used to provision an
    authenticator app. Every parameter that is given is written out, even
    when it matches the app defaults.

    :param secret: the hotp/totp secret used to generate the URI
    :param name: name of the account
    :param initial_count: starting counter value, defaults to None.
        If none, the OTP type will be assumed as TOTP.
    :param issuer: the name of the OTP issuer; this will be the
        organization title of the OTP entry in Authenticator
    :param algorithm: the algorithm used in the OTP generation.
    :param digits: the length of the OTP generated code.
    :param period: the number of seconds the OTP generator is set to
        expire every code.
    :param kwargs: other query string parameters to include in the URI
    :returns: provisioning uri
    """
    # initial_count may be 0 as a valid param
    is_initial_count_present = initial_count is not None

    otp_type = "hotp" if is_initial_count_present else "totp"
    base_uri = "otpauth://{0}/{1}?{2}"

    url_args: Dict[str, Union[None, int, str]] = {"secret": secret}

    label = quote(name)
    if issuer is not None:
        label = quote(issuer) + ":" + label
        url_args["issuer"] = issuer

    if is_initial_count_present:
        url_args["counter"] = initial_count
    if algorithm is not None:
        url_args["algorithm"] = HashAlgorithm.coerce(algorithm).value
    if digits is not None:
        url_args["digits"] = digits
    if period is not None and not is_initial_count_present:
        url_args["period"] = period
    for k, v in kwargs.items():
        if not isinstance(v, str):
            raise ValueError("All otpauth uri parameters must be strings")
        if k == "image":
            image_uri = urlparse(v)
            if image_uri.scheme != "https" or not image_uri.netloc or not image_uri.path:
                raise ValueError("{} is not a valid url".format(image_uri))
        url_args[k] = v

    return base_uri.format(otp_type, label, urlencode(url_args).replace("+", "%20"))
