import io
from functools import partial
from typing import Any
from typing import NamedTuple
from typing import Optional
from typing import Union

from resultwriter.config import WriterConfig
from resultwriter.log_config import logger
from resultwriter.negotiation import accept_header
from resultwriter.negotiation import negotiate
from resultwriter.results import BinaryResult
from resultwriter.results import SerializeResult
from resultwriter.results import StreamResult
from resultwriter.results import TextResult
from resultwriter.results import serves_itself
from resultwriter.serializers.registry import SerializerRegistry
from resultwriter.transport import Request
from resultwriter.transport import ResponseSink

DEFAULT_STATUS = 200


class PlainText(NamedTuple):
    """A bare str, bytes or bool return value."""

    content: bytes


Shape = Union[
    None, TextResult, BinaryResult, StreamResult, SerializeResult, PlainText
]


class Rendered(NamedTuple):
    status_code: int
    content_type: str
    body: bytes


def classify(value: Any) -> Shape:
    """
    Map a handler's return value onto exactly one result shape.
    Unknown types become a SerializeResult with no overrides.
    """
    if value is None or isinstance(
        value, (TextResult, BinaryResult, StreamResult, SerializeResult)
    ):
        return value
    if isinstance(value, bool):
        return PlainText(b"true" if value else b"false")
    if isinstance(value, str):
        return PlainText(value.encode("utf-8"))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return PlainText(bytes(value))
    return SerializeResult(content=value)


def _status(status_code: int) -> int:
    return status_code or DEFAULT_STATUS


class Writer:
    """
    Renders handler return values onto a ResponseSink.

    Serializers are negotiated per call from the request's Accept header,
    and serialized output is buffered so a failure leaves the sink untouched.
    """

    def __init__(
        self,
        registry: SerializerRegistry,
        config: Optional[WriterConfig] = None,
    ) -> None:
        self._registry = registry
        self._config = config or WriterConfig()

    def write(
        self, response: ResponseSink, request: Request, value: Any
    ) -> None:
        if serves_itself(value):
            logger.debug("Handing response to %s", type(value).__name__)
            value.serve(response, request)
            return

        shape = classify(value)
        if isinstance(shape, StreamResult):
            self._write_stream(response, shape)
            return

        rendered = self.render(shape, request)
        response.set_status(rendered.status_code)
        if rendered.content_type:
            response.set_header("Content-Type", rendered.content_type)
        if rendered.body:
            response.write(rendered.body)

    def render(self, shape: Shape, request: Request) -> Rendered:
        """
        Status, content-type and body for every shape except streams,
        which are never buffered. Raises SerializationFailure.
        """
        text_type = self._config.text_content_type

        if shape is None:
            return Rendered(DEFAULT_STATUS, "", b"")

        if isinstance(shape, PlainText):
            return Rendered(DEFAULT_STATUS, text_type, shape.content)

        if isinstance(shape, TextResult):
            status = _status(shape.status_code)
            if not shape.content:
                return Rendered(status, "", b"")
            return Rendered(
                status,
                shape.content_type or text_type,
                shape.content.encode("utf-8"),
            )

        if isinstance(shape, BinaryResult):
            status = _status(shape.status_code)
            if not shape.content:
                return Rendered(status, "", b"")
            return Rendered(status, shape.content_type, shape.content)

        if isinstance(shape, SerializeResult):
            return self._serialize(shape, request)

        raise TypeError(f"cannot render {type(shape).__name__}")

    def _serialize(
        self, shape: SerializeResult, request: Request
    ) -> Rendered:
        status = _status(shape.status_code)
        if shape.content is None:
            return Rendered(status, "", b"")

        serializer = negotiate(accept_header(request), self._registry)
        buf = io.BytesIO()
        serializer.serialize(buf, shape.content)
        body = buf.getvalue()
        if not body:
            return Rendered(status, "", b"")
        return Rendered(
            status, shape.content_type or serializer.content_type, body
        )

    def _write_stream(
        self, response: ResponseSink, shape: StreamResult
    ) -> None:
        status = _status(shape.status_code)
        if shape.content is None:
            response.set_status(status)
            return

        chunks = iter(
            partial(shape.content.read, self._config.stream_chunk_size), b""
        )
        # a failing first read leaves the sink untouched
        first = next(chunks, b"")
        response.set_status(status)
        if not first:
            return
        if shape.content_type:
            response.set_header("Content-Type", shape.content_type)
        response.write(first)
        for chunk in chunks:
            response.write(chunk)
