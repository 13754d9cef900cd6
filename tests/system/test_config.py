# -*- coding: utf-8 -*-
"""tests for the configuration and logging setup."""
import io
import logging

import pytest
from mycopy import core
from mycopy.core import MyCopy


def own_handlers(logger):
    """the handlers MyCopy installed on 'logger'"""
    return [h for h in logger.handlers if getattr(h, '_mycopy_handler', False)]


@pytest.fixture(autouse=True)
def fresh_logger():
    """Hands every test a 'MyCopy' logger without MyCopy's handlers."""
    logger = logging.getLogger('MyCopy')
    saved = own_handlers(logger), logger.propagate, logger.level
    for handler in saved[0]:
        logger.removeHandler(handler)
    logger.propagate = True
    yield logger
    for handler in own_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved[0]:
        logger.addHandler(handler)
    logger.propagate, logger.level = saved[1], saved[2]


def test_default_config():
    """Tests the built-in defaults."""
    config = MyCopy._load_config(no_cfgfile=True)
    assert config.getint('system', 'buffer_size') == 4096
    assert config.get('system', 'file_mode') == '0644'
    assert config.getboolean('logging', 'enabled') is False


def test_config_file_overrides_defaults(monkeypatch, tmp_path):
    """Tests that a config file in the root directory is picked up."""
    (tmp_path / ".mycopy_config").write_text("[system]\nbuffer_size=16\nfile_mode=0600\n")
    monkeypatch.setattr(core, "_MYCOPY_ROOT", str(tmp_path))

    mycopy = MyCopy()

    assert mycopy.buffer_size == 16
    assert mycopy.file_mode == 0o600


def test_no_cfgfile_ignores_config_file(monkeypatch, tmp_path):
    """Tests that no_cfgfile keeps the defaults."""
    (tmp_path / "mycopy.cfg").write_text("[system]\nbuffer_size=16\n")
    monkeypatch.setattr(core, "_MYCOPY_ROOT", str(tmp_path))

    assert MyCopy(no_cfgfile=True).buffer_size == 4096


def test_invalid_buffer_size(monkeypatch, tmp_path):
    """Tests that a non-positive buffer is refused."""
    (tmp_path / "mycopy.cfg").write_text("[system]\nbuffer_size=0\n")
    monkeypatch.setattr(core, "_MYCOPY_ROOT", str(tmp_path))

    with pytest.raises(ValueError):
        MyCopy()


def test_small_buffer_copy(monkeypatch, tmp_path):
    """Tests a full copy through a configured tiny buffer."""
    (tmp_path / "mycopy.cfg").write_text("[system]\nbuffer_size=3\n")
    monkeypatch.setattr(core, "_MYCOPY_ROOT", str(tmp_path))
    source_file = tmp_path / "source.txt"
    source_file.write_bytes(b"0123456789")
    dest_file = tmp_path / "dest.txt"

    assert MyCopy()(str(source_file), str(dest_file)) == 0
    assert dest_file.read_bytes() == b"0123456789"


def test_logging_disabled_by_default(fresh_logger):
    """Tests that nothing is logged unless asked for."""
    MyCopy(no_cfgfile=True)
    handlers = own_handlers(fresh_logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert fresh_logger.propagate is False


def test_logging_to_file(tmp_path, fresh_logger):
    """Tests logging into a file."""
    log_file = tmp_path / "mycopy.log"
    source_file = tmp_path / "source.txt"
    source_file.write_bytes(b"Hello")
    dest_file = tmp_path / "dest.txt"

    mycopy = MyCopy(
        log_setting={'enabled': True, 'level': 'DEBUG', 'file': str(log_file)},
        no_cfgfile=True,
    )
    errs = io.StringIO()
    assert mycopy(str(source_file), str(dest_file), errs=errs) == 0
    for handler in own_handlers(fresh_logger):
        handler.flush()

    assert fresh_logger.level == logging.DEBUG
    content = log_file.read_text()
    assert "copied 5 bytes" in content
    assert "[DEBUG]" in content
    assert errs.getvalue() == ""


def test_logging_failure(tmp_path, fresh_logger):
    """Tests that failures are logged with their kind."""
    log_file = tmp_path / "mycopy.log"
    mycopy = MyCopy(
        log_setting={'enabled': True, 'level': 'INFO', 'file': str(log_file)},
        no_cfgfile=True,
    )
    errs = io.StringIO()
    assert mycopy(str(tmp_path / "missing.txt"), str(tmp_path / "dest.txt"), errs=errs) == 1
    for handler in own_handlers(fresh_logger):
        handler.flush()

    assert errs.getvalue() == "Error: The source file does not exist.\n"
    assert "SourceNotFound" in log_file.read_text()


def test_unknown_log_level(fresh_logger):
    """Tests that an unknown level falls back to WARNING."""
    MyCopy(log_setting={'enabled': True, 'level': 'CHATTY'}, no_cfgfile=True)
    assert fresh_logger.level == logging.WARNING


def test_logging_to_file_with_foreign_handler(tmp_path, fresh_logger):
    """Tests that a handler installed by someone else does not stop the setup."""
    foreign = logging.NullHandler()
    fresh_logger.addHandler(foreign)
    log_file = tmp_path / "mycopy.log"
    try:
        MyCopy(
            log_setting={'enabled': True, 'level': 'INFO', 'file': str(log_file)},
            no_cfgfile=True,
        )
        fresh_logger.info("hello")
        for handler in own_handlers(fresh_logger):
            handler.flush()
        assert foreign in fresh_logger.handlers
    finally:
        fresh_logger.removeHandler(foreign)

    assert "hello" in log_file.read_text()


def test_reconfigure_replaces_own_handler(tmp_path, fresh_logger):
    """Tests that a second MyCopy swaps the handler of the first."""
    MyCopy(
        log_setting={'enabled': True, 'file': str(tmp_path / "mycopy.log")},
        no_cfgfile=True,
    )
    MyCopy(no_cfgfile=True)

    handlers = own_handlers(fresh_logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert fresh_logger.propagate is False
