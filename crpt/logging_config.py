import logging

from crpt.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    Library code only creates named ``crpt.*`` loggers; applications call this
    once at startup.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
