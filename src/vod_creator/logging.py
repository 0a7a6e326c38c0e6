import logging
import sys

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """
    Configures logging for the VOD creator.

    With ``json_format`` enabled, every record is emitted as a JSON object
    holding timestamp, level, logger name, message, trace_id and span_id,
    plus any ``extra`` fields attached by the caller. Otherwise a plain text
    formatter is installed so progress lines stay readable on a terminal.
    The root logger's handlers are replaced and the Azure SDK loggers are
    quietened so their HTTP traces do not drown the workflow output.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    if json_format:
        formatter = JsonFormatter(JSON_FORMAT)
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["azure", "azure.core.pipeline.policies.http_logging_policy", "urllib3"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
