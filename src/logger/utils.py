from __future__ import annotations

import atexit
import copy
import logging
import logging.config
import os
import sys
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import SimpleQueue
from typing import Any

import tomli
from pydantic import BaseModel, Field

PROFILE_ENV_VAR = "INJECTION_LOGGER_PROFILE"

DETAILED_FORMAT = (
    "%(asctime)s.%(msecs)03d %(name)s:%(lineno)d %(levelname)s - %(message)s"
)
SIMPLE_FORMAT = "%(asctime)s - %(name)-45s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "detailed": {"format": DETAILED_FORMAT, "datefmt": DATE_FORMAT},
        "simple": {"format": SIMPLE_FORMAT, "datefmt": DATE_FORMAT},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
            "stream": "ext://sys.stdout",
        },
        "file": {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
        },
    },
    "loggers": {},
    "root": {"level": "INFO", "handlers": ["console"]},
}


class LoggingOutput(BaseModel, extra="ignore"):
    """The ``[logging.output]`` table of pyproject.toml."""

    log_to_console: bool = Field(default=False)
    datetime_log_file: bool = Field(default=False)
    log_dir: str = Field(default="log")


class _QueueLogging:
    listener: QueueListener | None = None
    atexit_registered: bool = False


def get_logger_profile() -> str:
    return os.environ.get(PROFILE_ENV_VAR, "default")


def running_under_pytest() -> bool:
    return "pytest" in sys.modules


def find_pyproject_toml(start: Path | None = None) -> Path | None:
    """
    Return the pyproject.toml of the current working directory, or else the
    closest one above ``start`` (this module by default).
    """
    base = start or Path(__file__).resolve()
    for directory in [Path.cwd(), base, *base.parents]:
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate.resolve()
    return None


def read_logging_table(pyproject_path: Path | None = None) -> dict[str, Any]:
    pyproject_path = pyproject_path or find_pyproject_toml()
    if pyproject_path is None:
        return {}
    try:
        with open(pyproject_path, "rb") as f:
            return dict(tomli.load(f).get("logging", {}))
    except (OSError, tomli.TOMLDecodeError) as e:
        sys.stderr.write(f"Warning: cannot read [logging] from {pyproject_path}: {e}\n")
        return {}


def get_logging_output() -> LoggingOutput:
    return LoggingOutput.model_validate(read_logging_table().get("output", {}))


def get_log_config() -> dict[str, Any]:
    """
    The ``[logging.config]`` table as a ``logging.config.dictConfig`` mapping,
    or a built-in console/file configuration when pyproject.toml has none.
    """
    config = read_logging_table().get("config")
    if isinstance(config, dict) and config:
        return copy.deepcopy(config)
    return copy.deepcopy(DEFAULT_LOGGING_CONFIG)


def build_formatter(config: dict[str, Any], name: str | None) -> logging.Formatter:
    spec = config.get("formatters", {}).get(name or "", {})
    return logging.Formatter(
        fmt=spec.get("format", DETAILED_FORMAT),
        datefmt=spec.get("datefmt", DATE_FORMAT),
    )


def build_console_handler(config: dict[str, Any]) -> logging.Handler:
    spec = config.get("handlers", {}).get("console", {})
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(spec.get("level", "INFO"))
    handler.setFormatter(build_formatter(config, spec.get("formatter", "simple")))
    return handler


def build_file_handler(
    config: dict[str, Any], output: LoggingOutput
) -> logging.Handler | None:
    log_file = resolve_log_file(output)
    if log_file is None:
        return None
    spec = config.get("handlers", {}).get("file", {})
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setLevel(spec.get("level", "DEBUG"))
    handler.setFormatter(build_formatter(config, spec.get("formatter", "detailed")))
    return handler


def resolve_log_file(output: LoggingOutput) -> Path | None:
    """
    Log file inside ``output.log_dir``, relative to the repository root.
    Test runs always append to ``pytest_log.log``.
    """
    log_dir = Path(output.log_dir)
    if not log_dir.is_absolute():
        log_dir = Path(__file__).resolve().parents[2] / log_dir

    if running_under_pytest():
        file_name = "pytest_log.log"
    elif output.datetime_log_file:
        file_name = f"{datetime.now():%Y-%m-%d_%H-%M-%S}_injection_log.log"
    else:
        file_name = "injection_log.log"

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        sys.stderr.write(f"Warning: cannot create log directory {log_dir}: {e}\n")
        return None
    return log_dir / file_name


def configure_console_profile() -> None:
    """Stdout only, handled synchronously on the root logger."""
    config = get_log_config()
    config.get("handlers", {}).pop("file", None)
    config["root"] = {
        "level": config.get("root", {}).get("level", "INFO"),
        "handlers": [],
    }
    logging.config.dictConfig(config)
    logging.getLogger().addHandler(build_console_handler(config))


def configure_default_profile() -> None:
    """
    Loggers only enqueue records; a ``QueueListener`` thread owns the file
    handler and, when ``log_to_console`` is set outside pytest, a console
    handler.
    """
    config = get_log_config()
    output = get_logging_output()
    handler_specs = config.pop("handlers", {})
    config["root"] = {
        "level": config.get("root", {}).get("level", "INFO"),
        "handlers": [],
    }
    logging.config.dictConfig(config)
    config["handlers"] = handler_specs

    handlers = []
    if output.log_to_console and not running_under_pytest():
        handlers.append(build_console_handler(config))
    file_handler = build_file_handler(config, output)
    if file_handler is not None:
        handlers.append(file_handler)
    start_queue_listener(handlers)


def start_queue_listener(handlers: list[logging.Handler]) -> None:
    if _QueueLogging.listener is not None:
        return

    queue: SimpleQueue = SimpleQueue()
    listener = QueueListener(queue, *handlers, respect_handler_level=True)
    listener.start()
    _QueueLogging.listener = listener

    if not _QueueLogging.atexit_registered:
        atexit.register(stop_queue_listener)
        _QueueLogging.atexit_registered = True

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(QueueHandler(queue))


def stop_queue_listener() -> None:
    listener, _QueueLogging.listener = _QueueLogging.listener, None
    if listener is not None:
        listener.stop()
        for handler in listener.handlers:
            handler.close()
