import logging

from colorlog import ColoredFormatter

logger = logging.getLogger("migration-map")
logger.propagate = False


def setup_logging(verbose_level: str = "INFO") -> logging.Logger:
    """Attach a colored stream handler to the package logger."""
    logger.handlers.clear()
    formatter = ColoredFormatter(
        "%(log_color)s%(asctime)s%(reset)s - %(name)s - %(log_color)s%(levelname)s%(reset)s - %(filename)s - %(funcName)s - line %(lineno)d - %(message)s",
        datefmt=None,
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(verbose_level.upper())

    return logger
