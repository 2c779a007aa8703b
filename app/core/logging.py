# app/core/logging.py
import logging
import sys
import colorlog

_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [{app}:%(name)s]%(reset)s %(message)s"

_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def configure_logging(debug: bool = False, app_name: str = "shopai") -> None:
    """Route every logger through one colored stdout handler."""
    level = logging.DEBUG if debug else logging.INFO

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            _FORMAT.format(app=app_name),
            datefmt="%H:%M:%S",
            log_colors=_COLORS,
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    # driver chatter drowns the request logs
    for noisy in ("pymongo", "motor", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
