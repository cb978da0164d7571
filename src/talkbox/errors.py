class TalkboxError(Exception):
    """Base class for dialogue box errors."""


class LayoutError(TalkboxError, ValueError):
    """Raised when text cannot be laid out with the given geometry or font."""


class UnknownOptionError(TalkboxError, KeyError):
    """Raised when a dialogue option name is not in the option table."""
