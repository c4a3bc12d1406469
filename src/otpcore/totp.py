import datetime
import logging
import math
from typing import Any, Iterator, Optional, Union

from . import config, utils
from .algorithms import HashAlgorithm
from .clock import Clock, SystemClock
from .exceptions import InvalidPeriod, InvalidWindow
from .otp import OTP, check_counter
from .provisioning import build_uri

log = logging.getLogger(__name__)

Timestamp = Union[int, float, datetime.datetime]


def check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise InvalidPeriod("period must be a positive number of seconds")
    return period


def check_window(window: int) -> int:
    if isinstance(window, bool) or not isinstance(window, int) or window < 0:
        raise InvalidWindow("valid_window must be a non-negative integer")
    if window > config.MAX_VALID_WINDOW:
        raise InvalidWindow("valid_window may not exceed {}".format(config.MAX_VALID_WINDOW))
    return window


def _seconds(timestamp: Timestamp) -> int:
    if isinstance(timestamp, datetime.datetime):
        # naive datetimes are taken as local time
        timestamp = timestamp.timestamp()
    return math.floor(timestamp)


def counter_for(timestamp: Timestamp, period: int = config.DEFAULT_PERIOD) -> int:
    """
    Maps a point in time to its time-step counter.

    Uses floor division, so times before the epoch give negative counters
    instead of collapsing onto counter 0.

    :param timestamp: seconds since the Unix epoch, or a datetime
    :param period: time step in seconds
    :returns: floor(timestamp / period)
    """
    check_period(period)
    return _seconds(timestamp) // period


def time_remaining(timestamp: Timestamp, period: int = config.DEFAULT_PERIOD) -> int:
    """
    Seconds until the code for `timestamp` is replaced by the next one.

    :returns: a value in 1..period
    """
    check_period(period)
    return period - _seconds(timestamp) % period


def window_offsets(window: int) -> Iterator[int]:
    """
    Yields 0, -1, +1, -2, +2 ... up to +/- window.
    """
    yield 0
    for step in range(1, window + 1):
        yield -step
        yield step


def verify_counter_window(otp: OTP, code: str, counter: int, window: int) -> bool:
    """
    Compares an already validated code against every counter within
    `window` steps of `counter`.

    Counters that fall outside the 8 byte range are skipped. A miss scans
    the whole window, so a wrong code and one from outside the window take
    the same time to reject.
    """
    check_counter(counter)
    log.debug("checking counter %d with a window of %d", counter, window)
    for offset in window_offsets(window):
        candidate = counter + offset
        if candidate < 0 or candidate > config.MAX_COUNTER:
            continue
        if utils.strings_equal(code, otp.generate_otp(candidate)):
            log.debug("code accepted at offset %d", offset)
            return True
    log.debug("code rejected")
    return False


def is_valid(
    secret: str,
    period: int,
    algorithm: Union[HashAlgorithm, str],
    digits: int,
    submitted_code: str,
    current_time: Timestamp,
    window: int = config.DEFAULT_VALID_WINDOW,
) -> bool:
    """
    Verifies a submitted TOTP code with tolerance for clock drift.

    Configuration and format errors are raised before any hashing and are
    never reported as a rejected code.

    :param secret: base32 secret
    :param period: time step in seconds
    :param algorithm: keyed-hash algorithm
    :param digits: code length
    :param submitted_code: code supplied by the client
    :param current_time: verifier's current time in seconds since the epoch
    :param window: steps either side of the current one to accept
    :returns: True if the code matches any counter in the window
    """
    check_period(period)
    check_window(window)
    if window > config.DEFAULT_VALID_WINDOW:
        log.warning("verifying with a window of %d steps, %d codes are valid at once", window, 2 * window + 1)
    otp = OTP(secret, digits=digits, algorithm=algorithm)
    code = utils.normalize_code(submitted_code, otp.digits)
    return verify_counter_window(otp, code, counter_for(current_time, period), window)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = config.DEFAULT_DIGITS,
        algorithm: Union[HashAlgorithm, str, Any] = config.DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        interval: int = config.DEFAULT_PERIOD,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        :param s: secret in base32 format
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash algorithm used in the HMAC (expected to be SHA1)
        :param name: account name
        :param issuer: issuer
        :param clock: time source, defaults to the system clock
        """
        self.interval = check_period(interval)
        self.clock = clock if clock is not None else SystemClock()
        super().__init__(s=s, digits=digits, algorithm=algorithm, name=name, issuer=issuer)

    def timecode(self, for_time: Timestamp) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).
        """
        return counter_for(for_time, self.interval)

    def at(self, for_time: Timestamp, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(self.clock.now())

    def remaining(self, for_time: Optional[Timestamp] = None) -> int:
        """
        Seconds until the current code changes.
        """
        if for_time is None:
            for_time = self.clock.now()
        return time_remaining(for_time, self.interval)

    def verify(
        self,
        otp: str,
        for_time: Optional[Timestamp] = None,
        valid_window: int = config.DEFAULT_VALID_WINDOW,
    ) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :param valid_window: extends the validity to this many counter ticks before and after the current one
        :returns: True if verification succeeded, False otherwise
        """
        check_window(valid_window)
        code = utils.normalize_code(otp, self.digits)
        if for_time is None:
            for_time = self.clock.now()
        return verify_counter_window(self, code, self.timecode(for_time), valid_window)

    def provisioning_uri(self, name: Optional[str] = None, issuer_name: Optional[str] = None, **kwargs) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        :param name: name of the user account
        :param issuer_name: the name of the OTP issuer
        :returns: provisioning URI
        """
        return build_uri(
            self.secret,
            name=name if name else self.name,
            issuer=issuer_name if issuer_name else self.issuer,
            algorithm=self.algorithm,
            digits=self.digits,
            period=self.interval,
            **kwargs,
        )
