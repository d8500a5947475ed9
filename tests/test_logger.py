import pytest
from loguru import logger

from typeahead import logger as logger_module
from typeahead.logger import get_logger, setup_logger


@pytest.fixture
def log_file(tmp_path):
    previous = logger_module._log_file_path
    yield tmp_path / "typeahead.log"
    setup_logger(log_file=previous)


def test_records_carry_component_name_and_respect_level(log_file):
    setup_logger(log_file=str(log_file), log_level="INFO")

    get_logger("search_controller").info("lookup returned 2 option(s)")
    get_logger("search_controller").debug("not written at INFO")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "| INFO     | search_controller:" in content
    assert "lookup returned 2 option(s)" in content
    assert "not written at INFO" not in content


def test_unbound_logger_uses_project_name(log_file):
    setup_logger(log_file=str(log_file))

    get_logger().warning("plain record")
    logger.remove()

    assert "| WARNING  | typeahead:" in log_file.read_text(encoding="utf-8")


def test_later_setup_reuses_configured_path(log_file):
    setup_logger(log_file=str(log_file))
    setup_logger(log_level="DEBUG")

    assert logger_module._log_file_path == str(log_file)
