import logging

import pytest
from rich.logging import RichHandler

from webring import WebringClient
from webring.logging_config import get_logger, setup_logging


@pytest.fixture
def webring_logger():
    logger = logging.getLogger("webring")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.unit
class TestSetupLogging:

    def test_rich_handler(self, webring_logger: logging.Logger):
        logger = setup_logging(level="DEBUG")

        assert logger is webring_logger
        assert len(webring_logger.handlers) == 1
        assert isinstance(webring_logger.handlers[0], RichHandler)
        assert webring_logger.level == logging.DEBUG

    def test_plain_handler(self, webring_logger: logging.Logger):
        setup_logging(level="warning", use_rich=False)

        handler = webring_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, RichHandler)
        assert webring_logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, webring_logger: logging.Logger):
        setup_logging(level="chatty", use_rich=False)

        assert webring_logger.level == logging.INFO

    def test_repeated_calls_replace_handler(self, webring_logger: logging.Logger):
        setup_logging(use_rich=False)
        setup_logging(use_rich=True)

        assert len(webring_logger.handlers) == 1
        assert isinstance(webring_logger.handlers[0], RichHandler)

    def test_keeps_application_handlers(self, webring_logger: logging.Logger):
        own = logging.NullHandler()
        webring_logger.addHandler(own)

        setup_logging(use_rich=False)
        setup_logging(use_rich=False)

        assert own in webring_logger.handlers
        assert len(webring_logger.handlers) == 2

    def test_leaves_root_and_http_stack_alone(self, webring_logger: logging.Logger):
        root = logging.getLogger()
        root_handlers, root_level = root.handlers[:], root.level
        httpx_level = logging.getLogger("httpx").level

        setup_logging(level="DEBUG")

        assert root.handlers == root_handlers
        assert root.level == root_level
        assert logging.getLogger("httpx").level == httpx_level

    def test_propagation(self, webring_logger: logging.Logger):
        setup_logging(use_rich=False)
        assert webring_logger.propagate is False

        setup_logging(use_rich=False, propagate=True)
        assert webring_logger.propagate is True


@pytest.mark.unit
class TestGetLogger:

    def test_package_module(self):
        assert get_logger("webring.fetch") is logging.getLogger("webring.fetch")

    def test_nests_foreign_names(self):
        assert get_logger("ringbot").name == "webring.ringbot"

    def test_client_logs_under_package(self):
        assert WebringClient().logger.name == "webring.fetch"

    def test_client_records_reach_setup_handler(self, webring_logger: logging.Logger, caplog):
        setup_logging(level="DEBUG", use_rich=False, propagate=True)

        with caplog.at_level(logging.DEBUG, logger="webring"):
            WebringClient().logger.debug("fetching")

        assert [record.name for record in caplog.records] == ["webring.fetch"]
