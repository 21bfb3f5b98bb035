import io
import logging

from rich.console import Console

from kinesisclient import KinesisClientLibConfiguration
from kinesisclient.logging_config import get_logger, setup_sdk_logging


def test_null_handler_silence(capsys):
    """Verifies that the library is silent before setup_sdk_logging is called."""
    test_logger = get_logger("kinesisclient.test_silence")
    test_logger.warning("This should go into the void")

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_sdk_has_null_handler():
    sdk_logger = get_logger()
    assert sdk_logger.name == "kinesisclient"
    assert any(isinstance(h, logging.NullHandler) for h in sdk_logger.handlers)


def test_module_loggers_are_in_sdk_namespace():
    assert get_logger("kinesisclient.config.kcl_config").parent is get_logger()


# --- These override the NullHandler: must be called after the null_handler tests


def test_setup_clears_existing_handlers():
    """Verify that multiple calls do not duplicate handlers."""
    setup_sdk_logging(level="INFO", pretty=False)
    setup_sdk_logging(level="DEBUG", pretty=False)

    logger = get_logger()
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_uses_provided_console():
    """Verify the pretty handler writes to the given console."""
    custom_output = io.StringIO()
    test_console = Console(file=custom_output, force_terminal=False, width=200)

    setup_sdk_logging(level="DEBUG", pretty=True, console=test_console)
    KinesisClientLibConfiguration("app", "stream").with_max_records(123)

    output = custom_output.getvalue()
    assert "kinesisclient" in output
    assert "max_records=123" in output


def test_logger_isolation():
    """Ensure library logs do not propagate to the root logger by default."""
    setup_sdk_logging()
    assert get_logger().propagate is False


def test_pretty_logging_prints_bracketed_values_verbatim():
    """Values that look like Rich markup must not break or alter an override."""
    custom_output = io.StringIO()
    setup_sdk_logging(
        level="DEBUG",
        pretty=True,
        console=Console(file=custom_output, force_terminal=False, width=200),
    )

    config = KinesisClientLibConfiguration("app[/x]", "stream")
    assert config.with_table_name("leases[/x]") is config
    config.with_region_name("[/x]").with_max_records(7)

    assert config.table_name == "leases[/x]"
    assert config.region_name == "[/x]"
    assert config.max_records == 7
    assert "table_name='leases[/x]'" in custom_output.getvalue()
