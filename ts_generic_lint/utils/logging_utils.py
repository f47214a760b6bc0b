import logging
import logging.config
import sys

from ts_generic_lint.environment_variables import TS_GENERIC_LINT_LOGGING_LEVEL

# Logging format example:
# 2026/10/19 12:36:37 INFO ts_generic_lint.linter: Linting 12 file(s)
LOGGING_LINE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOGGING_DATETIME_FORMAT = "%Y/%m/%d %H:%M:%S"

ROOT_LOGGER_NAME = "ts_generic_lint"


class LintLoggingStream:
    """
    A Python stream for use with event logging APIs throughout ts-generic-lint (`eprint()`,
    `logger.info()`, etc.). This stream wraps `sys.stderr`, forwarding `write()` and
    `flush()` calls to the stream referred to by `sys.stderr` at the time of the call.
    It also provides capabilities for disabling the stream to silence event logs.
    """

    def __init__(self):
        self._enabled = True

    def write(self, text):
        if self._enabled:
            sys.stderr.write(text)

    def flush(self):
        if self._enabled:
            sys.stderr.flush()

    @property
    def enabled(self):
        return self._enabled

    @enabled.setter
    def enabled(self, value):
        self._enabled = value


LINT_LOGGING_STREAM = LintLoggingStream()


def disable_logging():
    """
    Disables the `LintLoggingStream`, silencing all subsequent event logs and `eprint()` output.
    """
    LINT_LOGGING_STREAM.enabled = False


def enable_logging():
    """
    Enables the `LintLoggingStream`. This reverses the effects of `disable_logging()`.
    """
    LINT_LOGGING_STREAM.enabled = True


class LintFormatter(logging.Formatter):
    """
    Formatter that colors a record when it carries a `color` attribute, e.g.
    ``_logger.warning("...", extra={"color": "yellow"})``.
    ANSI escape codes are skipped on win32.
    """

    COLORS = {
        "red": 31,
        "green": 32,
        "yellow": 33,
        "blue": 34,
        "purple": 35,
        "cyan": 36,
        "light_black": 90,
        "light_red": 91,
        "light_yellow": 93,
    }
    RESET = "\033[0m"

    def format(self, record):
        if color := getattr(record, "color", None):
            if color in self.COLORS and sys.platform != "win32":
                color_code = self._escape(self.COLORS[color])
                return f"{color_code}{super().format(record)}{self.RESET}"
        return super().format(record)

    def _escape(self, code: int) -> str:
        return f"\033[{code}m"


def _configure_lint_loggers(root_module_name):
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "lint_formatter": {
                    "()": LintFormatter,
                    "format": LOGGING_LINE_FORMAT,
                    "datefmt": LOGGING_DATETIME_FORMAT,
                },
            },
            "handlers": {
                "lint_handler": {
                    "formatter": "lint_formatter",
                    "class": "logging.StreamHandler",
                    "stream": LINT_LOGGING_STREAM,
                },
            },
            "loggers": {
                root_module_name: {
                    "handlers": ["lint_handler"],
                    "level": (TS_GENERIC_LINT_LOGGING_LEVEL.get() or "INFO").upper(),
                    "propagate": False,
                },
            },
        }
    )


def set_log_level(root_module_name=ROOT_LOGGER_NAME):
    """
    Re-reads ``TS_GENERIC_LINT_LOGGING_LEVEL`` and applies it to the package logger.
    """
    level_name = (TS_GENERIC_LINT_LOGGING_LEVEL.get() or "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")
    logging.getLogger(root_module_name).setLevel(level)


def eprint(*args, **kwargs):
    print(*args, file=LINT_LOGGING_STREAM, **kwargs)

