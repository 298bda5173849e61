import logging
from rich.console import Console
from rich.logging import RichHandler
from flashbook.config import settings


def configure_logging(level: str = None) -> None:
    """Route flashbook loggers through rich on stderr"""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
