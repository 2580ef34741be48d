import importlib

from blogapi import config


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'verbose')
    try:
        assert importlib.reload(config).LOG_LEVEL == 'INFO'
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    try:
        assert importlib.reload(config).LOG_LEVEL == 'DEBUG'
    finally:
        monkeypatch.undo()
        importlib.reload(config)
