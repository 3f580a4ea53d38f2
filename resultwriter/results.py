from typing import Any
from typing import List
from typing import Optional
from typing import Protocol
from typing import runtime_checkable

from pydantic import BaseModel
from pydantic import Field

from resultwriter.transport import Request
from resultwriter.transport import ResponseSink


class _Result(BaseModel):
    # zero means "use 200"
    status_code: int = 0
    # empty means "no override"
    content_type: str = ""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class TextResult(_Result):
    """A text body, sent as text/plain unless overridden."""

    content: str = ""


class BinaryResult(_Result):
    """A byte body. No content-type is sent unless one is given."""

    content: Optional[bytes] = None


class StreamResult(_Result):
    """
    A body read from `content`, any object with `read(size) -> bytes`.
    The stream is drained once, to the end.
    """

    content: Optional[Any] = None


class SerializeResult(_Result):
    """A value encoded by the serializer negotiated from `Accept`."""

    content: Any = None


@runtime_checkable
class SelfHandling(Protocol):
    """
    Any value with `serve(response, request)` writes its own response;
    the writer hands over the raw sink and request untouched.
    """

    def serve(self, response: ResponseSink, request: Request) -> None: ...


def serves_itself(value: Any) -> bool:
    """
    True for instances with a callable `serve`. Classes and plain data
    carrying a `serve` field are rendered like any other value.
    """
    if isinstance(value, type) or not isinstance(value, SelfHandling):
        return False
    return callable(getattr(value, "serve", None))


class InputError(BaseModel):
    """
    Some kind of problem with the calling HTTP request.
    """

    # Exact location(s) of the error; valid prefixes are "path", "query",
    # "header", "form" and "body".
    fields: List[str] = Field(default_factory=list)
    # Numeric contractual identifier for a front-end message, if any.
    id: int = 0
    # String contractual identifier for a front-end message, if any.
    name: str = ""
    # Friendly, user-facing explanation.
    message: str = ""

    def model_dump(self, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """Empty fields are left out unless asked for."""
        kwargs.setdefault("exclude_defaults", True)
        return super().model_dump(*args, **kwargs)

    def __str__(self) -> str:
        return self.message
