from typing import Dict
from typing import Mapping
from typing import Optional
from typing import Protocol

from starlette.responses import Response


class ResponseSink(Protocol):
    """Protocol for the writable half of an HTTP exchange."""

    def set_status(self, status_code: int) -> None: ...
    def set_header(self, name: str, value: str) -> None: ...
    def write(self, data: bytes) -> int: ...


class Request(Protocol):
    """
    Protocol for the readable half of an HTTP exchange.
    `headers` must be case-insensitive and return the first value of a
    repeated header, as Starlette's `Headers` does.
    """

    @property
    def headers(self) -> Mapping[str, str]: ...


class BufferedResponse(ResponseSink):
    """
    In-memory ResponseSink that enforces transport ordering:
    status is set once, and headers are frozen by the first body byte.
    """

    def __init__(self) -> None:
        self.status_code: Optional[int] = None
        self.headers: Dict[str, str] = {}
        self._body = bytearray()
        self._committed = False

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("content-type")

    def set_status(self, status_code: int) -> None:
        if self.status_code is not None or self._committed:
            raise RuntimeError("status already sent")
        self.status_code = status_code

    def set_header(self, name: str, value: str) -> None:
        if self._committed:
            raise RuntimeError(f"cannot set header {name!r} after body")
        self.headers[name.lower()] = value

    def write(self, data: bytes) -> int:
        if not data:
            return 0
        if self.status_code is None:
            self.status_code = 200
        self._committed = True
        self._body.extend(data)
        return len(data)

    def to_response(self) -> Response:
        return Response(
            content=self.body,
            status_code=self.status_code or 200,
            headers=self.headers,
        )
