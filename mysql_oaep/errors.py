class ProtocolError(Exception):
    """Base class for every failure raised while encrypting a password."""


class EncodingError(ProtocolError):
    """The server's key bytes are not valid UTF-8."""


class FormatError(ProtocolError):
    """The key envelope or its DER body is not in the expected shape."""


class CapacityError(ProtocolError):
    """The message does not fit in one OAEP block for the key and hash."""
