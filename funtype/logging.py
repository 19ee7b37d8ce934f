from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import traceback
from typing import Callable, Dict, Sequence


class FuntypeLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax.

    Messages are only formatted when a handler actually emits the record, so
    debug calls that format whole type trees cost little when disabled."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        # https://stackoverflow.com/a/44164714/3455228
        caller = inspect.stack()[1]
        _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        caller = inspect.stack()[1]
        _log(self._logger.info, format_string, caller, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.WARNING):
            return
        caller = inspect.stack()[1]
        _log(self._logger.warning, format_string, caller, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.ERROR):
            return
        caller = inspect.stack()[1]
        _log(self._logger.error, format_string, caller, args, kwargs)


def get_logger(name: str) -> FuntypeLogger:
    python_logger = logging.getLogger(name)
    python_logger.addHandler(logging.NullHandler())
    return FuntypeLogger(python_logger)


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: Sequence[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = kwargs.pop('exc_info', None)
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self,
        format_string: str,
        args: Sequence[object],
        kwargs: Dict[str, object],
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            # records that didn't go through FuntypeLogger have no caller
            caller = getattr(obj, 'caller', None)
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                'level_name': obj.levelname,
                'path_name': caller.filename if caller else obj.pathname,
                'file_name': pathlib.Path(
                    caller.filename if caller else obj.pathname
                ).name,
                'module': (
                    caller.frame.f_globals['__name__']
                    if caller
                    else obj.module
                ),
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': caller.lineno if caller else obj.lineno,
                'function_name': caller.function if caller else obj.funcName,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
            }
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)
