"""
Defaults shared by every OTP object.

SHA1 with 6 digits and a 30 second period is what authenticator apps
support universally; other values should only be chosen when every client
is known to honour them.

A window of one step either side of the current counter tolerates up to
a minute of clock skew. Each extra step adds two more codes that are valid
at the same instant, so wider windows are capped at MAX_VALID_WINDOW.
"""
from .algorithms import HashAlgorithm

DEFAULT_DIGITS = 6
SUPPORTED_DIGITS = (6, 7, 8)

DEFAULT_PERIOD = 30

DEFAULT_ALGORITHM = HashAlgorithm.SHA1

DEFAULT_VALID_WINDOW = 1
MAX_VALID_WINDOW = 5

# RFC 4226 section 4 requires 128 bits and recommends 160
DEFAULT_SECRET_BITS = 160
MIN_SECRET_BITS = 80

# counters are packed as 8 byte unsigned integers
MAX_COUNTER = 2**64 - 1
