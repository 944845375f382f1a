#!/usr/bin/env python3
"""
Test configuration, logging helpers and the gunicorn settings module
"""
import io
import logging

import pytest

import gunicorn_config
from spotify_token_app.config import Config
from spotify_token_app.lib.utils.logger import ColoredFormatter, mask, setup_logger


def test_default_config_is_valid():
    """The shipped dev config validates and derives the endpoint URLs"""
    Config.validate()
    assert Config.SPOTIFY_TOKEN_URL == f"{Config.SPOTIFY_API_ACCOUNT_BASE_URL}/api/token"
    assert Config.SPOTIFY_AUTH_URL == f"{Config.SPOTIFY_API_ACCOUNT_BASE_URL}/authorize"
    assert len(Config.SPOTIFY_SCOPE_LIST) == 11


def test_validate_reports_every_problem(monkeypatch):
    """validate collects all problems before raising"""
    monkeypatch.setattr(Config, 'SPOTIFY_REDIRECT_URI', '')
    monkeypatch.setattr(Config, 'SPOTIFY_SCOPE_LIST', [])
    monkeypatch.setattr(Config, 'PORT', 0)

    with pytest.raises(ValueError, match='3 error'):
        Config.validate()


def test_setup_logger_does_not_duplicate_handlers():
    """Repeated setup returns the same logger with one handler"""
    first = setup_logger('test-config-logger', level='debug', log_format='simple')
    second = setup_logger('test-config-logger')

    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.DEBUG


def test_mask_shortens_identifiers():
    """Identifiers are shortened for log output"""
    assert mask('0123456789abcdef') == '012345...'
    assert mask('abc') == 'abc'
    assert mask('') == '<empty>'


def test_gunicorn_settings():
    """Gunicorn settings use sync workers and keep query strings out of the access log"""
    assert gunicorn_config.worker_class == 'sync'
    assert gunicorn_config.proc_name == 'spotify-refresh-token'
    assert ':' in gunicorn_config.bind
    assert '%(q)s' not in gunicorn_config.access_log_format


def test_logger_writes_plain_text_to_non_terminal_stream():
    """Level names are not colored when the stream is not a terminal"""
    stream = io.StringIO()
    logger = setup_logger('test-config-plain', level='info', log_format='simple', stream=stream)

    logger.warning('token request rejected')

    assert stream.getvalue() == 'WARNING - token request rejected\n'


def test_colored_formatter_leaves_record_untouched():
    """Coloring applies to the formatted line only, not the shared record"""
    formatter = ColoredFormatter('%(levelname)s - %(message)s', use_color=True)
    record = logging.LogRecord('auth', logging.ERROR, __file__, 1, 'boom', None, None)

    line = formatter.format(record)

    assert line == '\033[31mERROR\033[0m - boom'
    assert record.levelname == 'ERROR'
