import logging
from typing import Any, Optional, Union

from . import config, utils
from .algorithms import HashAlgorithm
from .exceptions import InvalidWindow
from .otp import OTP
from .provisioning import build_uri

log = logging.getLogger(__name__)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = config.DEFAULT_DIGITS,
        algorithm: Union[HashAlgorithm, str, Any] = config.DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param initial_count: starting HMAC counter value, defaults to 0
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash algorithm used in the HMAC (expected to be SHA1)
        :param name: account name
        :param issuer: issuer
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, algorithm=algorithm, name=name, issuer=issuer)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the current counter OTP.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        code = utils.normalize_code(otp, self.digits)
        return utils.strings_equal(code, self.at(counter))

    def verify_window(self, otp: str, counter: int, look_ahead: int = 10) -> Optional[int]:
        """
        Searches the next `look_ahead` counters for the OTP, so a server can
        resynchronise with a token that was pressed without being used.

        :param otp: the OTP to check against
        :param counter: the counter the server expects next
        :param look_ahead: how many counters past `counter` to try
        :returns: the matching counter, or None
        """
        if isinstance(look_ahead, bool) or not isinstance(look_ahead, int) or look_ahead < 0:
            raise InvalidWindow("look_ahead must be a non-negative integer")
        code = utils.normalize_code(otp, self.digits)
        for candidate in range(counter, counter + look_ahead + 1):
            if utils.strings_equal(code, self.at(candidate)):
                log.debug("hotp code matched %d counters ahead", candidate - counter)
                return candidate
        return None

    def provisioning_uri(
        self,
        name: Optional[str] = None,
        initial_count: Optional[int] = None,
        issuer_name: Optional[str] = None,
        **kwargs,
    ) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        :param name: name of the user account
        :param initial_count: starting HMAC counter value, defaults to 0
        :param issuer_name: the name of the OTP issuer
        :returns: provisioning URI
        """
        return build_uri(
            self.secret,
            name=name if name else self.name,
            initial_count=initial_count if initial_count is not None else self.initial_count,
            issuer=issuer_name if issuer_name else self.issuer,
            algorithm=self.algorithm,
            digits=self.digits,
            **kwargs,
        )
