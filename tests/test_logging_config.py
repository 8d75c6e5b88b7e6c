import io
import json
import logging
import sys

import pytest

from logging_config import JsonFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def _record(message, *args, **kwargs):
    return logging.LogRecord('avatar', logging.INFO, __file__, 1, message, args, None, **kwargs)


def test_json_formatter_basic_fields():
    payload = json.loads(JsonFormatter().format(_record('Resolved %s names', 3)))
    assert payload == {'level': 'INFO', 'logger': 'avatar', 'message': 'Resolved 3 names'}


def test_json_formatter_includes_context():
    record = _record('Lightness adjusted')
    record.context = {'hue': 292, 'lightness': 38}

    payload = json.loads(JsonFormatter().format(record))

    assert payload['context'] == {'hue': 292, 'lightness': 38}


def test_json_formatter_includes_exception():
    try:
        raise ValueError('boom')
    except ValueError:
        record = logging.LogRecord('avatar', logging.ERROR, __file__, 1, 'failed', (), sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert 'ValueError: boom' in payload['exc_info']


def test_setup_logging_emits_json(restore_root_logger):
    stream = io.StringIO()
    setup_logging('debug', stream=stream)

    logging.getLogger('services.contrast_service').debug('hello %s', 'world', extra={'context': {'k': 1}})

    line = stream.getvalue().strip()
    assert json.loads(line) == {
        'level': 'DEBUG',
        'logger': 'services.contrast_service',
        'message': 'hello world',
        'context': {'k': 1},
    }
    assert len(restore_root_logger.handlers) == 1


@pytest.mark.parametrize('level_name', ['nonsense', '', 'handlers'])
def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger, level_name):
    setup_logging(level_name, stream=io.StringIO())
    assert restore_root_logger.level == logging.INFO
