import logging

import pytest

from classicipher.config import ENGINE_DEFAULT_PARAMS, EngineConfig, load_config


def test_defaults():
    config = load_config({})
    assert config.output_format == ENGINE_DEFAULT_PARAMS['output_format'] == 'no-spaces'
    assert config.group_size == 5
    assert config.hill_attempts == 1000
    assert config.log_level_value == logging.WARNING


def test_environment_overrides():
    config = load_config({
        'CLASSICIPHER_OUTPUT_FORMAT': 'five-group',
        'CLASSICIPHER_GROUP_SIZE': '4',
        'CLASSICIPHER_LOG_LEVEL': 'debug',
        'CLASSICIPHER_HILL_ATTEMPTS': '10',
        'UNRELATED': 'ignored',
    })
    assert config.output_format == 'five-group'
    assert config.group_size == 4
    assert config.log_level == 'DEBUG'
    assert config.log_level_value == logging.DEBUG
    assert config.hill_attempts == 10


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv('CLASSICIPHER_GROUP_SIZE', '3')
    assert load_config().group_size == 3


@pytest.mark.parametrize("name, value", [
    ('CLASSICIPHER_OUTPUT_FORMAT', 'columns'),
    ('CLASSICIPHER_GROUP_SIZE', 'five'),
    ('CLASSICIPHER_GROUP_SIZE', '0'),
    ('CLASSICIPHER_HILL_ATTEMPTS', '-1'),
    ('CLASSICIPHER_LOG_LEVEL', 'LOUD'),
])
def test_bad_override(name, value):
    with pytest.raises(ValueError):
        load_config({name: value})


def test_direct_construction_validates():
    with pytest.raises(ValueError):
        EngineConfig(group_size=0)
