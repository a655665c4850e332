import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
STDERR_HANDLER_NAME = "statement_splitter.stderr"
FILE_HANDLER_NAME = "statement_splitter.file"


class Log:
    """Process-wide logging facade for the splitter, store and matcher.

    Records go to stderr; stdout is left to the CLI summary. Handlers other
    components attach to the same logger are left alone.
    """

    _logger: logging.Logger = logging.getLogger("statement_splitter")

    @classmethod
    def configure(cls, log_level: str, log_file: Path | None = None) -> None:
        """Set the level and install the stderr (and optional file) handler once each."""
        cls._logger.setLevel(log_level.upper())
        installed = {h.get_name() for h in cls._logger.handlers}
        formatter = logging.Formatter(_FORMAT)
        if STDERR_HANDLER_NAME not in installed:
            cls._install(logging.StreamHandler(sys.stderr), STDERR_HANDLER_NAME, formatter)
        if log_file is not None and FILE_HANDLER_NAME not in installed:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            cls._install(
                logging.FileHandler(log_file, encoding="utf-8"), FILE_HANDLER_NAME, formatter
            )

    @classmethod
    def _install(
        cls, handler: logging.Handler, name: str, formatter: logging.Formatter
    ) -> None:
        handler.set_name(name)
        handler.setFormatter(formatter)
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)
