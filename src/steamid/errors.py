"""Error taxonomy for identifier conversions.

Codec functions do not raise these directly: they return them wrapped in an
``Err`` (see ``steamid.result``). ``Err.unwrap()`` raises the carried error.
"""


class CodecError(ValueError):
    """Base class for every conversion failure."""

    pass


class InvalidFormatError(CodecError):
    """Raised when a string does not match the target grammar."""

    pass


class OutOfRangeError(CodecError):
    """Raised when a parsed or supplied value fails validation."""

    pass


class InvalidDigitError(CodecError):
    """Raised when a character is outside the expected alphabet."""

    pass


class HashUnavailableError(CodecError):
    """Raised when the MD5 digest needed by the friend code is unavailable."""

    pass
