import os
import pytest
from workspace_api import config
from workspace_api.exceptions import ApiAuthError


def test_env_required_missing(monkeypatch):
    monkeypatch.delenv('WORKSPACE_TEST_VAR', raising=False)
    with pytest.raises(ApiAuthError):
        config.env('WORKSPACE_TEST_VAR')


def test_env_required_blank(monkeypatch):
    monkeypatch.setenv('WORKSPACE_TEST_VAR', '   ')
    with pytest.raises(ApiAuthError):
        config.env('WORKSPACE_TEST_VAR')


def test_env_optional(monkeypatch):
    monkeypatch.delenv('WORKSPACE_TEST_VAR', raising=False)
    assert config.env('WORKSPACE_TEST_VAR', required=False) is None


def test_load_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text(
        '# comment\n'
        '\n'
        'WS_NEW="quoted value"\n'
        "WS_SINGLE='single'\n"
        'WS_KEEP=from-file\n'
        'WS_EMPTY=filled\n'
        'not-a-pair\n',
        encoding='utf-8',
    )
    for k in ('WS_NEW', 'WS_SINGLE'):
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv('WS_KEEP', 'from-env')
    monkeypatch.setenv('WS_EMPTY', '')
    config.load_env_file(env_file)
    assert os.environ['WS_NEW'] == 'quoted value'
    assert os.environ['WS_SINGLE'] == 'single'
    assert os.environ['WS_KEEP'] == 'from-env'
    assert os.environ['WS_EMPTY'] == 'filled'


def test_load_env_file_missing_is_noop(tmp_path):
    config.load_env_file(tmp_path / 'absent.env')
