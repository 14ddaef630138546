import logging

from rich.logging import RichHandler

from precalc.util.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_namespaces_under_precalc() -> None:
    assert get_logger().name == ROOT_LOGGER
    assert get_logger("precalc").name == "precalc"
    assert get_logger("precalc.util.math_expr").name == "precalc.util.math_expr"
    assert get_logger("cli").name == "precalc.cli"


def test_configure_logging_installs_one_rich_handler() -> None:
    logger = configure_logging(verbose=True)
    configure_logging(verbose=False)
    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.WARNING
    configure_logging(verbose=True)
    assert logger.level == logging.DEBUG
    logger.setLevel(logging.NOTSET)
