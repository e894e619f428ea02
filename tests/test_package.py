"""Basic package tests for wavetile."""

import logging


def test_package_imports():
    """Test that the package can be imported."""
    import wavetile
    assert wavetile.__version__ == "0.1.0"


def test_core_imports():
    """Test that core subpackage can be imported."""
    import wavetile.core


def test_generation_imports():
    """Test that generation subpackage can be imported."""
    import wavetile.generation


def test_catalog_imports():
    """Test that catalog subpackage can be imported."""
    import wavetile.catalog


def test_logging_config_imports():
    """Test that logging_config can be imported."""
    from wavetile.logging_config import setup_logging, get_logger


def test_setup_logging_creates_log_file(temp_data_dir):
    """setup_logging writes to debug.log under the data directory."""
    from wavetile.logging_config import setup_logging

    log_path = setup_logging(temp_data_dir / "logs")
    logging.getLogger("wavetile.test").debug("hello from the tests")
    for handler in logging.getLogger("wavetile").handlers:
        handler.flush()

    assert log_path == temp_data_dir / "logs" / "debug.log"
    assert log_path.exists()
    assert "hello from the tests" in log_path.read_text(encoding="utf-8")

    for handler in list(logging.getLogger("wavetile").handlers):
        handler.close()
    logging.getLogger("wavetile").handlers.clear()


def test_setup_logging_twice_replaces_handlers(temp_data_dir):
    """Re-running setup leaves one file handler and one console handler."""
    from wavetile.logging_config import setup_logging

    setup_logging(temp_data_dir)
    log_path = setup_logging(temp_data_dir, console_level=logging.ERROR)
    root = logging.getLogger("wavetile")

    assert len(root.handlers) == 2
    assert sorted(handler.level for handler in root.handlers) == [logging.DEBUG, logging.ERROR]
    for handler in root.handlers:
        handler.flush()
    assert "Logging to" in log_path.read_text(encoding="utf-8")

    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()


def test_get_logger_prefixes_names():
    from wavetile.logging_config import get_logger

    assert get_logger("tests.thing").name == "wavetile.tests.thing"
    assert get_logger("wavetile.generation.model").name == "wavetile.generation.model"
    assert get_logger("wavetile").name == "wavetile"


def test_log_contradiction_truncates(caplog):
    from wavetile.logging_config import get_logger, log_contradiction

    logger = get_logger("tests.contradiction")
    with caplog.at_level(logging.WARNING, logger="wavetile"):
        log_contradiction(logger, 12, [(i, 0) for i in range(7)])

    assert "STEP 000012 | CONTRADICTION | (0, 0), (1, 0)" in caplog.text
    assert "(+2 more)" in caplog.text
