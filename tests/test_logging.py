import json
import logging

from resultwriter.config import WriterConfig
from resultwriter.log_config import JSONFormatter
from resultwriter.log_config import configure_logging
from resultwriter.log_config import console_handler
from resultwriter.transport import BufferedResponse


def test_self_handling_logging(writer, make_request, caplog):
    class Custom:
        def serve(self, response, request):
            pass

    caplog.set_level(logging.DEBUG)
    writer.write(BufferedResponse(), make_request(), Custom())
    assert "Handing response to Custom" in caplog.text


def test_configure_logging_json():
    configure_logging(WriterConfig(json_logging=True))
    try:
        assert isinstance(console_handler.formatter, JSONFormatter)
        record = logging.LogRecord(
            "resultwriter",
            logging.INFO,
            __file__,
            1,
            "hi %s",
            ("there",),
            None,
        )
        payload = json.loads(console_handler.formatter.format(record))
        assert payload["message"] == "hi there"
        assert payload["level"] == "INFO"
        assert payload["name"] == "resultwriter"
    finally:
        configure_logging()
    assert not isinstance(console_handler.formatter, JSONFormatter)


def test_configure_logging_level():
    logger = logging.getLogger("resultwriter")
    configure_logging(WriterConfig(log_level="WARNING"))
    try:
        assert logger.level == logging.WARNING
    finally:
        configure_logging()
    assert logger.level == logging.DEBUG
