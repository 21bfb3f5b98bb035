import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_SDK_LOGGER_NAME = "kinesisclient"


def setup_sdk_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Configures the logging output of the `kinesisclient` logger namespace.

    The library is silent by default (a `NullHandler` is attached at import
    time); call this function to see its logs. Existing handlers are cleared,
    so calling it again replaces the previous setup instead of duplicating
    output.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "INFO", "WARNING").
            Defaults to "INFO". At "DEBUG", every configuration override is logged.
        pretty (bool): If True, uses a Rich handler with colors, timestamps and
            formatted tracebacks.
        console (Optional[rich.console.Console]): The Rich console to write to
            in pretty mode. Defaults to a new Console(stderr=True).
        propagate (bool): Whether records also bubble up to the root logger.
            Defaults to False to avoid duplicate output in test runners.
    """
    logger = root_logging.getLogger(_SDK_LOGGER_NAME)

    if logger.hasHandlers():
        logger.handlers.clear()

    if pretty:
        handler = RichHandler(
            level=level,
            console=console or Console(stderr=True),
            show_time=True,
            show_path=True,
            # Messages carry caller values (names, endpoints) and are printed
            # verbatim; only records passing extra={"markup": True} are parsed.
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        formatter = root_logging.Formatter(fmt="%(name)s: %(message)s")
        init_message = f"SDK Logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = root_logging.StreamHandler(sys.stderr)
        formatter = root_logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        init_message = f"SDK Logging initialized at level: {level}"
        extra = {}

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None) -> root_logging.Logger:
    """
    Retrieves a logger within the `kinesisclient` namespace.

    Args:
        name: Typically `__name__` of the calling module
            (e.g. 'kinesisclient.config.kcl_config'). If None, the top-level
            library logger is returned.
    """
    return root_logging.getLogger(name or _SDK_LOGGER_NAME)
