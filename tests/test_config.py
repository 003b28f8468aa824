import logging
import os
from datetime import datetime
from pathlib import Path

import pytest

from outer_worlds_save.config import Config, default_output_dir, default_save_dir
from outer_worlds_save.logging_setup import PACKAGE_LOGGER, log_file_name, setup_logging

ENV_NAMES = (
    'OUTER_WORLDS_SAVE_DIR',
    'OUTER_WORLDS_SAVE_NAME',
    'OUTER_WORLDS_OUTPUT_DIR',
    'OUTER_WORLDS_LOG_DIR',
    'SKIP_FAILED_WRITES',
    'WHOLE_BUFFER_FALLBACK',
    'WRITE_MANIFEST',
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    config = Config.from_env(load_env_file=False)

    assert config.save_dir == default_save_dir()
    assert config.save_dir.parts[-2:] == ('Saved Games', 'The Outer Worlds')
    assert config.save_name == 'SaveGame.dat'
    assert config.output_dir == default_output_dir()
    assert config.log_dir == Path.cwd()
    assert config.skip_failed_writes is False
    assert config.whole_buffer_fallback is False
    assert config.write_manifest is True


def test_env_overrides(clean_env, tmp_path):
    clean_env.setenv('OUTER_WORLDS_SAVE_DIR', str(tmp_path / 'saves'))
    clean_env.setenv('OUTER_WORLDS_SAVE_NAME', 'Quick.dat')
    clean_env.setenv('SKIP_FAILED_WRITES', 'true')
    clean_env.setenv('WHOLE_BUFFER_FALLBACK', '1')
    clean_env.setenv('WRITE_MANIFEST', '0')

    config = Config.from_env(load_env_file=False)

    assert config.save_dir == tmp_path / 'saves'
    assert config.save_name == 'Quick.dat'
    assert config.skip_failed_writes is True
    assert config.whole_buffer_fallback is True
    assert config.write_manifest is False


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    (tmp_path / '.env').write_text('OUTER_WORLDS_SAVE_NAME=FromDotenv.dat\n')

    try:
        config = Config.from_env()
    finally:
        os.environ.pop('OUTER_WORLDS_SAVE_NAME', None)

    assert config.save_name == 'FromDotenv.dat'


def test_log_file_name_format():
    assert log_file_name(datetime(2024, 3, 9, 7, 5, 1)) == 'OuterWorldsSaveParser-2024-03-09-07-05-01.txt'


def test_setup_logging_writes_startup_line(tmp_path):
    logger, log_path = setup_logging(tmp_path / 'logs')

    logging.getLogger(PACKAGE_LOGGER + '.test').info('hello')

    assert logger.name == PACKAGE_LOGGER
    assert log_path.parent == (tmp_path / 'logs').resolve()
    text = log_path.read_text(encoding='utf-8')
    assert f"Log file: {log_path}" in text
    assert 'hello' in text


def test_setup_logging_twice_keeps_two_handlers(tmp_path):
    setup_logging(tmp_path)
    logger, _ = setup_logging(tmp_path)
    assert len(logger.handlers) == 2
