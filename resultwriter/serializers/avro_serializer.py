import io
from typing import Any
from typing import Dict
from typing import Optional

from fastavro import parse_schema
from fastavro import schemaless_reader
from fastavro import schemaless_writer

from resultwriter.serializers.base import DeserializationFailure
from resultwriter.serializers.base import Deserializer
from resultwriter.serializers.base import ReadableStream
from resultwriter.serializers.base import SerializationFailure
from resultwriter.serializers.base import Serializer
from resultwriter.serializers.base import WritableStream

AVRO_CONTENT_TYPE = "application/avro"


class AvroSerializer(Serializer):
    """
    Record → Avro binary using a fastavro schema (no container header).
    """

    def __init__(self, schema_dict: Dict[str, Any]):
        # schema_dict should be a Python dict representing your Avro schema
        # (e.g. loaded from JSON).
        self._parsed_schema = parse_schema(schema_dict)

    @property
    def content_type(self) -> str:
        return AVRO_CONTENT_TYPE

    def serialize(self, stream: WritableStream, value: Any) -> None:
        buf = io.BytesIO()
        try:
            schemaless_writer(buf, self._parsed_schema, value)
            stream.write(buf.getvalue())
        except Exception:
            raise SerializationFailure() from None


class AvroDeserializer(Deserializer):
    """
    Avro binary → Python dict. `into` is ignored: the schema is the type.
    """

    def __init__(self, schema_dict: Dict[str, Any]):
        self._parsed_schema = parse_schema(schema_dict)

    def deserialize(
        self, stream: ReadableStream, into: Optional[Any] = None
    ) -> Any:
        try:
            # read everything first so a short stream fails as a whole
            buf = io.BytesIO(stream.read())
            value = schemaless_reader(
                buf, self._parsed_schema, self._parsed_schema
            )
        except Exception:
            raise DeserializationFailure() from None
        if buf.read(1):
            # trailing garbage
            raise DeserializationFailure()
        return value
