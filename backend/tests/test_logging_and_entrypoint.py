import logging
import runpy
import unittest
from unittest import mock

from workflow_board.config import load_config, reset_config
from workflow_board.utils.logging import SYNC_LOGGER, parse_level, setup_logging

from db_case import MISSING_CONFIG


class TestSetupLogging(unittest.TestCase):
    def setUp(self) -> None:
        reset_config()
        self.config = load_config(MISSING_CONFIG)
        self.addCleanup(reset_config)

        sync_logger = logging.getLogger(SYNC_LOGGER)
        self.addCleanup(sync_logger.setLevel, sync_logger.level)

    def test_parse_level(self) -> None:
        self.assertEqual(parse_level("DEBUG"), logging.DEBUG)
        self.assertEqual(parse_level("warning"), logging.WARNING)
        self.assertEqual(parse_level("verbose"), logging.INFO)
        self.assertEqual(parse_level("verbose", logging.ERROR), logging.ERROR)

    def test_sync_logger_follows_sync_level(self) -> None:
        self.config.logging.level = "warning"
        self.config.sync.log_level = "debug"

        setup_logging()

        self.assertEqual(logging.getLogger(SYNC_LOGGER).level, logging.DEBUG)

    def test_unknown_sync_level_falls_back_to_global(self) -> None:
        self.config.logging.level = "error"
        self.config.sync.log_level = "chatty"

        setup_logging()

        self.assertEqual(logging.getLogger(SYNC_LOGGER).level, logging.ERROR)


class TestEntrypoint(unittest.TestCase):
    def setUp(self) -> None:
        reset_config()
        self.config = load_config(MISSING_CONFIG)
        self.addCleanup(reset_config)

    def test_runs_uvicorn_with_server_config(self) -> None:
        self.config.server.host = "127.0.0.1"
        self.config.server.port = 8123
        self.config.server.debug = True

        with mock.patch("uvicorn.run") as run:
            runpy.run_module("workflow_board.main", run_name="__main__")

        run.assert_called_once_with(
            "workflow_board.main:app", host="127.0.0.1", port=8123, reload=True
        )


if __name__ == "__main__":
    unittest.main()
