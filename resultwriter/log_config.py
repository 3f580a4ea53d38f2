import json
import logging
import logging.handlers
import queue
from typing import Optional

from resultwriter.config import WriterConfig

# Thread-safe queue for log records
_log_queue: queue.SimpleQueue = queue.SimpleQueue()

# QueueHandler enqueues log records without blocking the request thread
queue_handler = logging.handlers.QueueHandler(_log_queue)

# Console handler to actually emit the logs
console_handler = logging.StreamHandler()

listener = logging.handlers.QueueListener(_log_queue, console_handler)
listener.start()

# Dedicated logger name so we don't clobber the root or uvicorn
logger = logging.getLogger("resultwriter")
logger.setLevel(logging.DEBUG)
logger.addHandler(queue_handler)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def configure_logging(config: Optional[WriterConfig] = None) -> None:
    """
    Call this at application startup: applies the config's log level
    and picks JSON or text output for the console.
    """
    config = config or WriterConfig()
    logger.setLevel(config.log_level)
    if config.json_logging:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s"
            )
        )
