import json
from typing import Any
from typing import Optional

from pydantic import BaseModel
from pydantic import TypeAdapter

from resultwriter.serializers.base import DeserializationFailure
from resultwriter.serializers.base import Deserializer
from resultwriter.serializers.base import ReadableStream
from resultwriter.serializers.base import SerializationFailure
from resultwriter.serializers.base import Serializer
from resultwriter.serializers.base import WritableStream

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def _encode_model(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(
        f"Object of type {type(obj).__name__} is not JSON serializable"
    )


class JSONSerializer(Serializer):
    """
    Value → JSON bytes, one document per call, newline terminated.
    """

    @property
    def content_type(self) -> str:
        return JSON_CONTENT_TYPE

    def serialize(self, stream: WritableStream, value: Any) -> None:
        try:
            # encode fully before touching the stream
            text = json.dumps(
                value,
                default=_encode_model,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
            stream.write((text + "\n").encode("utf-8"))
        except Exception:
            raise SerializationFailure() from None


class JSONDeserializer(Deserializer):
    """
    JSON bytes → value. Pass `into` to validate the result with pydantic.
    """

    def deserialize(
        self, stream: ReadableStream, into: Optional[Any] = None
    ) -> Any:
        try:
            raw = json.loads(stream.read().decode("utf-8"))
            if into is None:
                return raw
            return TypeAdapter(into).validate_python(raw)
        except Exception:
            raise DeserializationFailure() from None
