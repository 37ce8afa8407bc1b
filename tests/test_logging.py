import logging

from gedcom_validator.logging import get_logger, list_active_loggers, set_debug


def test_module_loggers_nest_under_base():
    log = get_logger("some.module")
    assert log.name == "gedcom_validator.some.module"
    assert log.propagate is True
    assert log.handlers == []
    assert "gedcom_validator.some.module" in list_active_loggers()


def test_base_logger_owns_file_and_console_handlers():
    base = get_logger()
    assert base.name == "gedcom_validator"
    assert base.propagate is False
    assert any(isinstance(h, logging.FileHandler) for h in base.handlers)
    assert any(not isinstance(h, logging.FileHandler) for h in base.handlers)


def test_set_debug_toggles_levels():
    base = get_logger()
    module = get_logger("rules.catalog")
    try:
        set_debug(True)
        assert base.level == logging.DEBUG
        assert module.getEffectiveLevel() == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in base.handlers)
    finally:
        set_debug(False)

    assert base.level == logging.INFO
    assert module.getEffectiveLevel() == logging.INFO
