from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import sys
import traceback
from typing import Callable, Dict, List, Optional, TextIO


class ForthLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @classmethod
    def get(cls, name: str) -> 'ForthLogger':
        return cls(logging.getLogger(name))

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        # Collecting the caller's frame is expensive, and debug messages are
        # logged for every token.
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        caller = inspect.stack()[1]
        _log(self._logger.debug, format_string, caller, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        caller = inspect.stack()[1]
        _log(self._logger.error, format_string, caller, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        caller = inspect.stack()[1]
        _log(self._logger.warning, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        caller = inspect.stack()[1]
        _log(self._logger.info, format_string, caller, args, kwargs)


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                # arguments for the formatting string don't need to be in the JSON
                'level_name': obj.levelname,
                'path_name': obj.caller.filename,
                'file_name': pathlib.Path(obj.caller.filename).name,
                'module': obj.caller.frame.f_globals['__name__'],
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': obj.caller.lineno,
                'function_name': obj.caller.function,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
            }
        return super().default(obj)


class _JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


def configure(
    verbose: bool = False, stream: Optional[TextIO] = None
) -> Optional[logging.Handler]:
    """Send minforth's logs to stderr (or `stream`) as JSON lines.

    Nothing is configured unless `verbose` is set. The library itself never
    calls this; it is for the command line driver.
    """
    if not verbose:
        return None
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(_JSONFormatter())
    logger = logging.getLogger('minforth')
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
