from typing import Any
from typing import Callable
from typing import Optional
from typing import Protocol
from typing import runtime_checkable

from resultwriter.errors import DeserializationFailure
from resultwriter.errors import SerializationFailure


class WritableStream(Protocol):
    def write(self, data: bytes) -> Any: ...


class ReadableStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...


@runtime_checkable
class Serializer(Protocol):
    """
    Serializer protocol: encodes a value onto a byte stream.

    Implementations raise SerializationFailure on any encoding or write
    problem and must stay usable for later, independent calls.
    """

    @property
    def content_type(self) -> str:
        """
        The content type of the bytes this serializer produces.
        """
        ...

    def serialize(self, stream: WritableStream, value: Any) -> None:
        """
        Encode `value` fully onto `stream`.
        """
        ...


@runtime_checkable
class Deserializer(Protocol):
    """
    Deserializer protocol: decodes a value from a byte stream.
    """

    def deserialize(
        self, stream: ReadableStream, into: Optional[Any] = None
    ) -> Any:
        """
        Decode a full value from `stream`, optionally validated into `into`.
        """
        ...


SerializerFactory = Callable[[], Serializer]

__all__ = [
    "Serializer",
    "Deserializer",
    "SerializerFactory",
    "SerializationFailure",
    "DeserializationFailure",
    "WritableStream",
    "ReadableStream",
]
