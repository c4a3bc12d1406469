class OTPError(ValueError):
    """
    Base class for every error raised by otpcore.

    Subclasses ValueError so callers that only expect bad-argument errors
    keep working.
    """


class InvalidSecretFormat(OTPError):
    """The secret is not valid unpadded base32 text."""


class InvalidSecretLength(OTPError):
    """A secret of the requested size cannot be issued."""


class UnsupportedDigitLength(OTPError):
    """The requested code length is outside the supported range."""


class UnsupportedAlgorithm(OTPError):
    """The hash algorithm is not one of SHA1, SHA256 or SHA512."""


class InvalidCounter(OTPError):
    """The HMAC counter is negative or does not fit in 8 bytes."""


class InvalidPeriod(OTPError):
    """The time step is not a positive number of seconds."""


class InvalidWindow(OTPError):
    """The verification window is negative or too wide."""


class InvalidCodeFormat(OTPError):
    """A submitted code has the wrong length or contains non-digits."""


class RandomSourceExhausted(OTPError):
    """The random source failed to supply the requested bytes."""
