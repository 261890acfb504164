from __future__ import annotations

from gaugesim.config import Settings
from gaugesim.logging_utils import logger, preview_bytes, set_debug, setup_file_logging


def test_settings_defaults() -> None:
    cfg = Settings()
    assert cfg.serial.port is None
    assert cfg.serial.baudrate == 115200
    assert cfg.reconnect.interval == 1.0
    assert cfg.logging.logdir is None


def test_settings_nested_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GAUGESIM_SERIAL__PORT", "/dev/ttyS9")
    monkeypatch.setenv("GAUGESIM_RECONNECT__MAX_ATTEMPTS", "5")

    cfg = Settings()

    assert cfg.serial.port == "/dev/ttyS9"
    assert cfg.reconnect.max_attempts == 5


def test_set_debug_toggles_level() -> None:
    set_debug(True)
    try:
        assert logger.isEnabledFor(10)
    finally:
        set_debug(False)
    assert not logger.isEnabledFor(10)


def test_preview_bytes_truncates() -> None:
    assert preview_bytes(b"\xff\n") == repr(b"\xff\n")
    text = preview_bytes(b"a" * 100, limit=4)
    assert text.startswith("b'aaaa'")
    assert "(100 bytes)" in text


def test_setup_file_logging_creates_log(tmp_path) -> None:
    logfile = setup_file_logging(str(tmp_path / "log"))
    try:
        logger.info("hello file")
        for h in logger.handlers:
            h.flush()
        assert "hello file" in open(logfile, encoding="utf-8").read()
    finally:
        for h in list(logger.handlers):
            if getattr(h, "baseFilename", None) == logfile:
                logger.removeHandler(h)
                h.close()
