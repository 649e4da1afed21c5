import datetime
import inspect
import logging
import logging.config
import os
import time
from functools import wraps
from pathlib import Path
from typing import Any, Callable


def setup_logging() -> logging.Logger:
    """
    Configures logging for the product trend analyzer.

    A console handler with the standard formatter is always attached to the root logger. When the
    PTA_LOG_DIR environment variable points at a directory, two file handlers are added as well: one
    in the standard text format and one in JSON, the latter produced by python-json-logger so that
    load timings and analyzer calls can be shipped to a log aggregator as structured records.

    Features:
        - Console Handler: human readable lines on stderr.
        - File Handlers (optional): `<PTA_LOG_DIR>/<YYYY-MM-DD>/std_logs.log` and `json_logs.log`.
        - Log Level: taken from PTA_LOG_LEVEL ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), INFO by default.
        - Quiet Third Parties: uvicorn access logs and the HTTP client stack are held at WARNING.

    Note:
        - The dated folder uses day granularity so that all runs of one day share a folder.

    Returns:
        logging.Logger: The configured root logger.
    """
    log_level: str = os.getenv("PTA_LOG_LEVEL", "INFO").upper()
    log_dir: str = os.getenv("PTA_LOG_DIR", "")

    log_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s | %(message)s"
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            },
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "standard"}
        },
        "loggers": {
            "uvicorn.access": {"level": "WARNING"},
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
        "root": {"handlers": ["console"], "level": log_level},
    }

    if log_dir:
        run_dir = Path(log_dir) / datetime.datetime.now().strftime("%Y-%m-%d")
        run_dir.mkdir(parents=True, exist_ok=True)
        log_config["handlers"].update(
            {
                "file": {
                    "class": "logging.FileHandler",
                    "filename": str(run_dir / "std_logs.log"),
                    "formatter": "standard",
                },
                "json_file": {
                    "class": "logging.FileHandler",
                    "filename": str(run_dir / "json_logs.log"),
                    "formatter": "json",
                },
            }
        )
        log_config["root"]["handlers"].extend(["file", "json_file"])

    logging.config.dictConfig(log_config)

    return logging.getLogger()


# Initialize logger
logger = setup_logging()


def get_logger(module_name: str) -> logging.Logger:
    """
    Retrieves a logger instance for the specified module.

    Args:
        module_name (str): The name of the module for which the logger is being requested.

    Returns:
        logging.Logger: A logger configured through setup_logging.
    """
    return logging.getLogger(module_name)


def _describe(value: Any) -> str:
    if isinstance(value, (int, float, str, bool)) or value is None:
        return repr(value)
    if isinstance(value, (list, tuple, dict, set)):
        return f"{type(value).__name__}[{len(value)}]"
    return "Complex Type"


def log_function_call(logger: logging.Logger) -> Callable:
    """
    A decorator for logging the call details of a function.

    Logs, at DEBUG level, the start of the call with its argument names, types and a short value
    summary (scalars as-is, containers by length), then the end of the call with its execution time.
    Both records name the calling module.function and the called module.function.

    Args:
        logger (logging.Logger): The logger object to use for logging.

    Returns:
        function: A wrapper function that adds logging to the decorated function.
    """

    def decorator_log_function_call(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            caller_frame = inspect.currentframe().f_back

            caller_module, caller_func_name = "__main__", "Unknown"
            if caller_frame:
                module = inspect.getmodule(caller_frame)
                if module:
                    caller_module = module.__name__
                caller_func_name = caller_frame.f_code.co_name

            func_module = func.__module__
            start_time = time.perf_counter()

            arg_names = func.__code__.co_varnames[: func.__code__.co_argcount]
            arg_summary = (
                ", ".join(
                    [f"{name}={type(a).__name__} ({_describe(a)})" for name, a in zip(arg_names, args)]
                    + [f"{k}={type(v).__name__} ({_describe(v)})" for k, v in kwargs.items()]
                )
                or "None"
            )

            logger.debug(
                f"Function {func_module}.{func.__name__} called by {caller_module}.{caller_func_name} with args: {arg_summary}"
            )

            result = func(*args, **kwargs)

            execution_time = time.perf_counter() - start_time
            logger.debug(
                f"Function {func_module}.{func.__name__} called by {caller_module}.{caller_func_name} ended in {execution_time:.4f} seconds"
            )

            return result

        return wrapper

    return decorator_log_function_call

