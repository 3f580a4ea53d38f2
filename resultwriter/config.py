from typing import Literal

from pydantic import BaseModel
from pydantic import Field

TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class WriterConfig(BaseModel):
    """
    Configuration for the result writer.
    """

    json_logging: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"
    text_content_type: str = TEXT_CONTENT_TYPE
    stream_chunk_size: int = Field(default=64 * 1024, gt=0)

    model_config = {"frozen": True}
