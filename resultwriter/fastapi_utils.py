import inspect
from typing import Any
from typing import Awaitable
from typing import Callable
from typing import Sequence

from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from starlette.concurrency import run_in_threadpool

from resultwriter.errors import SerializationFailure
from resultwriter.log_config import logger
from resultwriter.transport import BufferedResponse
from resultwriter.writer import Writer

Handler = Callable[[Request], Any]


def render(writer: Writer, request: Request, value: Any) -> Response:
    """
    Run `value` through the writer and return the Starlette response.
    """
    sink = BufferedResponse()
    writer.write(sink, request, value)
    return sink.to_response()


def writer_endpoint(
    writer: Writer, handler: Handler
) -> Callable[[Request], Awaitable[Response]]:
    """
    Wrap `handler(request)` (sync or async) into an endpoint whose return
    value is rendered by `writer`. Sync handlers run in the threadpool.
    """

    async def endpoint(request: Request) -> Response:
        if inspect.iscoroutinefunction(handler):
            value = await handler(request)
        else:
            value = await run_in_threadpool(handler, request)
        try:
            return render(writer, request, value)
        except SerializationFailure:
            logger.error(
                "Serialization failed for %s %s (%s result)",
                request.method,
                request.url.path,
                type(value).__name__,
            )
            return Response(status_code=500)

    endpoint.__name__ = getattr(handler, "__name__", endpoint.__name__)
    return endpoint


def add_writer_route(
    app: FastAPI,
    path: str,
    handler: Handler,
    writer: Writer,
    methods: Sequence[str] = ("GET",),
) -> None:
    app.add_api_route(
        path, writer_endpoint(writer, handler), methods=list(methods)
    )
    logger.debug("Writer route added for %s %s", ",".join(methods), path)
