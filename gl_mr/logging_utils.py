"""Logging utilities for gl-mr."""

from __future__ import annotations

import json
import logging
import sys

TEXT_FORMAT = "[%(levelname)-7s] %(message)s"


class StructuredFormatter(logging.Formatter):
    """Renders text lines, or one JSON object per record in JSON mode.

    Records carrying a ``dispatch_result`` are written as that result's dict so
    consumers get one object per target branch.
    """

    def __init__(self, json_mode: bool = False):
        super().__init__(fmt=TEXT_FORMAT)
        self.json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:
        if not self.json_mode:
            return super().format(record)
        result = getattr(record, "dispatch_result", None)
        line = result.to_dict() if result is not None else {"level": record.levelname, "message": record.getMessage()}
        return json.dumps(line, ensure_ascii=False)


def setup_logging(json_mode: bool = False, verbose: bool = False, stream=None) -> logging.Logger:
    logger = logging.getLogger("gl-mr")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(StructuredFormatter(json_mode=json_mode))
    logger.addHandler(handler)
    return logger
