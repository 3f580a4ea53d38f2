from typing import Any
from typing import Optional
from typing import Type

from google.protobuf.message import Message as PBMessage

from resultwriter.serializers.base import DeserializationFailure
from resultwriter.serializers.base import Deserializer
from resultwriter.serializers.base import ReadableStream
from resultwriter.serializers.base import SerializationFailure
from resultwriter.serializers.base import Serializer
from resultwriter.serializers.base import WritableStream

PROTOBUF_CONTENT_TYPE = "application/x-protobuf"


class ProtobufSerializer(Serializer):
    """
    Protobuf message → bytes.
    You must pass in the generated protobuf Message class to the constructor.
    """

    def __init__(self, message_type: Type[PBMessage]):
        self._message_type = message_type

    @property
    def content_type(self) -> str:
        return PROTOBUF_CONTENT_TYPE

    def serialize(self, stream: WritableStream, value: Any) -> None:
        if not isinstance(value, self._message_type):
            raise SerializationFailure()
        try:
            stream.write(value.SerializeToString())
        except Exception:
            raise SerializationFailure() from None


class ProtobufDeserializer(Deserializer):
    """
    Bytes → protobuf message of the configured type.
    """

    def __init__(self, message_type: Type[PBMessage]):
        self._message_type = message_type

    def deserialize(
        self, stream: ReadableStream, into: Optional[Any] = None
    ) -> PBMessage:
        try:
            msg = (into or self._message_type)()
            msg.ParseFromString(stream.read())
        except Exception:
            raise DeserializationFailure() from None
        return msg
