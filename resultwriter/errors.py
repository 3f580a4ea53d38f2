class ResultWriterError(Exception):
    """Base class for errors raised by the result writer."""


class SerializationFailure(ResultWriterError):
    """
    Encoding or writing an outbound value failed.

    Never carries the underlying cause.
    """

    def __init__(self) -> None:
        super().__init__("serialization failure")


class DeserializationFailure(ResultWriterError):
    """Decoding an inbound value failed."""

    def __init__(self) -> None:
        super().__init__("deserialization failure")
