import logging

from src.base.middleware.correlation_middleware import CorrelationFilter


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.colored_levelname = (
                f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
            )
        else:
            record.colored_levelname = levelname

        # Last segment of the logger name, e.g. "user_service"
        if record.name:
            filename = record.name.split(".")[-1]
            record.filename_only = filename if filename != "__main__" else "app"
        else:
            record.filename_only = "unknown"

        # Short correlation ID, or "-" outside a request
        cid = getattr(record, "correlation_id", "")
        record.short_correlation_id = cid[:8] if cid else "-"

        return super().format(record)


class LoggingConfig:
    """Configuration class for console logging setup."""

    FORMAT = (
        "%(asctime)s | %(colored_levelname)s | %(short_correlation_id)s "
        "| %(filename_only)s | %(message)s"
    )

    @staticmethod
    def setup_logging(log_level: int = logging.INFO) -> None:
        """
        Configure logging with correlation ID support.

        Args:
            log_level: The logging level (default: logging.INFO)
        """
        logger = logging.getLogger()
        logger.setLevel(log_level)

        # Only add handlers if none exist to avoid duplicates
        if not logger.hasHandlers():
            handler = logging.StreamHandler()
            handler.setFormatter(
                ColoredFormatter(LoggingConfig.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
            handler.addFilter(CorrelationFilter())
            logger.addHandler(handler)

        # Request lines from the backend client are noise at INFO
        logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
