import json
from typing import Any

import pytest
from starlette.requests import Request

from resultwriter.serializers.registry import SerializerRegistry
from resultwriter.transport import BufferedResponse
from resultwriter.writer import Writer


class BracketSerializer:
    """
    Writes "{" + the JSON encoding with quotes stripped + "}" so tests can
    tell serialized bodies apart from literal ones.
    """

    def __init__(self, content_type: str) -> None:
        self._content_type = content_type

    @property
    def content_type(self) -> str:
        return self._content_type

    def serialize(self, stream: Any, value: Any) -> None:
        raw = json.dumps(value).replace('"', "")
        stream.write(("{" + raw + "}").encode("utf-8"))


@pytest.fixture
def registry():
    return SerializerRegistry(
        {
            "": lambda: BracketSerializer("application/json; charset=utf-8"),
            "application/xml": lambda: BracketSerializer(
                "application/xml; charset=utf-8"
            ),
        }
    )


@pytest.fixture
def writer(registry):
    return Writer(registry)


@pytest.fixture
def make_request():
    def _make(accept=None, path="/"):
        headers = []
        if accept is not None:
            headers.append((b"accept", accept.encode("latin-1")))
        return Request(
            {
                "type": "http",
                "method": "GET",
                "path": path,
                "query_string": b"",
                "headers": headers,
            }
        )

    return _make


@pytest.fixture
def record(writer, make_request):
    def _record(value, accept=None):
        response = BufferedResponse()
        writer.write(response, make_request(accept), value)
        return response

    return _record
