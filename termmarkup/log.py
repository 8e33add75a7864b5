import re

from loguru import logger


def escape_tag(s: str) -> str:
    """Escape loguru color tags so user text is logged verbatim."""
    return re.sub(r"</?((?:[fb]g\s)?[^<>\s]*)>", r"\\\g<0>", s)


class logger_wrapper:

    def __init__(self, logger_name: str) -> None:
        self._name = escape_tag(logger_name)

    def _log(self,
             level: str,
             message: str,
             exception: Exception | None = None) -> None:
        logger.opt(colors=True, exception=exception).log(
            level, f"<m>{self._name}</m> | " + message)

    def critical(self,
                 message: str,
                 exception: Exception | None = None) -> None:
        self._log("CRITICAL", message, exception)

    def error(self, message: str, exception: Exception | None = None) -> None:
        self._log("ERROR", message, exception)

    def warning(self,
                message: str,
                exception: Exception | None = None) -> None:
        self._log("WARNING", message, exception)

    def success(self,
                message: str,
                exception: Exception | None = None) -> None:
        self._log("SUCCESS", message, exception)

    def info(self, message: str, exception: Exception | None = None) -> None:
        self._log("INFO", message, exception)

    def debug(self, message: str, exception: Exception | None = None) -> None:
        self._log("DEBUG", message, exception)

    def trace(self, message: str, exception: Exception | None = None) -> None:
        self._log("TRACE", message, exception)
