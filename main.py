import io
import logging
from typing import Any
from typing import Dict
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi import Request

from resultwriter.config import WriterConfig
from resultwriter.fastapi_utils import add_writer_route
from resultwriter.log_config import configure_logging
from resultwriter.results import InputError
from resultwriter.results import SerializeResult
from resultwriter.results import StreamResult
from resultwriter.results import TextResult
from resultwriter.serializers.avro_serializer import AvroSerializer
from resultwriter.serializers.registry import default_registry
from resultwriter.transport import ResponseSink
from resultwriter.writer import Writer

# Configure logging level
logging.basicConfig(level=logging.INFO)

# ─────────────────────────────────────────────────────────────────────────────
# 0. Data
# ─────────────────────────────────────────────────────────────────────────────

ITEM_SCHEMA: Dict[str, Any] = {
    "name": "Item",
    "type": "record",
    "fields": [
        {"name": "id", "type": "int"},
        {"name": "name", "type": "string"},
    ],
}

ITEMS: Dict[int, Dict[str, Any]] = {
    1: {"id": 1, "name": "widget"},
    2: {"id": 2, "name": "gadget"},
}

# ─────────────────────────────────────────────────────────────────────────────
# 1. Writer
# ─────────────────────────────────────────────────────────────────────────────

cfg = WriterConfig(json_logging=False, log_level="INFO")
configure_logging(cfg)

registry = default_registry(
    {"application/avro": lambda: AvroSerializer(ITEM_SCHEMA)}
)
writer: Writer = Writer(registry, cfg)

# ─────────────────────────────────────────────────────────────────────────────
# 2. Handlers
# ─────────────────────────────────────────────────────────────────────────────


def health(request: Request) -> bool:
    return True


async def get_item(request: Request) -> Any:
    raw = request.path_params["item_id"]
    if not raw.isdigit():
        return SerializeResult(
            status_code=422,
            content=InputError(
                fields=["path:item_id"],
                name="invalid-item-id",
                message="item id must be numeric",
            ),
        )
    item: Optional[Dict[str, Any]] = ITEMS.get(int(raw))
    if item is None:
        return TextResult(status_code=404, content="item not found")
    # JSON by default, Avro for "Accept: application/avro"
    return SerializeResult(content=item)


def export_items(request: Request) -> StreamResult:
    lines = "".join(f"{i['id']},{i['name']}\n" for i in ITEMS.values())
    return StreamResult(
        content_type="text/csv", content=io.BytesIO(lines.encode("utf-8"))
    )


class Redirect:
    """Writes its own response."""

    def __init__(self, location: str) -> None:
        self.location = location

    def serve(self, response: ResponseSink, request: Any) -> None:
        response.set_status(307)
        response.set_header("Location", self.location)


def legacy_items(request: Request) -> Redirect:
    return Redirect("/items/export")


# ─────────────────────────────────────────────────────────────────────────────
# 3. FastAPI app
# ─────────────────────────────────────────────────────────────────────────────

app: FastAPI = FastAPI()
add_writer_route(app, "/health", health, writer)
add_writer_route(app, "/items/export", export_items, writer)
add_writer_route(app, "/items/legacy", legacy_items, writer)
add_writer_route(app, "/items/{item_id}", get_item, writer)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
