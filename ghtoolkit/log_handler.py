"""
Bridge from the `logging` module to runner annotations.

    install_annotation_handler()
    log.warning("deprecated key", extra={"annotation_file": "action.yml", "annotation_line": 3})

WARNING and ERROR records surface in the run summary; DEBUG records only
when step debugging is on. INFO records are written as plain log lines.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from .annotation import Annotation
from .client import Toolkit, default_toolkit
from .command import write_line
from .config import get_log_level


class AnnotationHandler(logging.Handler):
    def __init__(self, toolkit: Optional[Toolkit] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._toolkit = toolkit

    @property
    def toolkit(self) -> Toolkit:
        return self._toolkit if self._toolkit is not None else default_toolkit()

    def to_annotation(self, record: logging.LogRecord, message: str) -> Optional[Annotation]:
        if record.levelno >= logging.ERROR:
            a = Annotation.error(message)
        elif record.levelno >= logging.WARNING:
            a = Annotation.warning(message)
        elif record.levelno < logging.INFO:
            a = Annotation.debug(message)
        else:
            return None
        return a.at(
            file=getattr(record, "annotation_file", None),
            line=getattr(record, "annotation_line", None),
            col=getattr(record, "annotation_col", None),
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            annotation = self.to_annotation(record, message)
            if annotation is None:
                write_line(self.toolkit.sink, message)
            else:
                self.toolkit.annotate(annotation)
        except Exception:
            self.handleError(record)


def install_annotation_handler(
    logger: Optional[Union[logging.Logger, str]] = None,
    toolkit: Optional[Toolkit] = None,
    level: Optional[int] = None,
) -> AnnotationHandler:
    if not isinstance(logger, logging.Logger):
        logger = logging.getLogger(logger)
    handler = AnnotationHandler(toolkit, level=get_log_level() if level is None else level)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > handler.level:
        logger.setLevel(handler.level)
    return handler
