"""
Tests for the seafile command-line interface.

Commands run through click's CliRunner against a FakeDispatcher injected
in place of the configured transport.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from seafileclient.cli import cli
from seafileclient.config import get_default_config
from seafileclient.exit_codes import NOT_FOUND, API_ERROR, DATA_ERROR, CONFIG_ERROR, USAGE_ERROR, ConfigError

from conftest import FakeDispatcher, SAMPLE_LIBRARIES, SAMPLE_ENTRIES


def json_lines(output):
    """Parse the JSON lines of a command's output, skipping log lines."""
    return [json.loads(line) for line in output.splitlines() if line.startswith('{')]


@pytest.fixture
def config():
    config = get_default_config()
    config['server'].update({'url': 'https://cloud.example.com', 'token': 'secret'})
    return config


@pytest.fixture
def dispatcher():
    dispatcher = FakeDispatcher()
    dispatcher.add('GET', '/repos/', body=SAMPLE_LIBRARIES)
    dispatcher.add('GET', '/default-repo/', body={"exists": True, "repo_id": "aaaa-1111"})
    return dispatcher


@pytest.fixture
def run(config, dispatcher):
    runner = CliRunner()

    def invoke(*args):
        with patch('seafileclient.cli_utils.load_config', return_value=config), \
             patch('seafileclient.cli_utils.create_transport', return_value=dispatcher), \
             patch('seafileclient.cli_utils.configure_logging'):
            return runner.invoke(cli, list(args))

    return invoke


class TestLibraryCommands:
    """Tests for library commands."""

    def test_libraries_jsonl(self, run):
        result = run('libraries')

        assert result.exit_code == 0, result.output
        rows = json_lines(result.output)
        assert [r['name'] for r in rows] == ['Notes', 'Shared Photos']
        assert rows[0]['head_commit_id'] == 'c0ffee01'

    def test_libraries_type_filter(self, run, dispatcher):
        dispatcher.add('GET', '/repos/?type=mine', body=SAMPLE_LIBRARIES[:1])

        result = run('libraries', '--type', 'mine')

        assert result.exit_code == 0, result.output
        assert [r['id'] for r in json_lines(result.output)] == ['aaaa-1111']

    def test_libraries_invalid_type(self, run):
        result = run('libraries', '--type', 'everyone')
        assert result.exit_code == USAGE_ERROR

    def test_libraries_pretty(self, run):
        result = run('libraries', '--pretty')
        assert result.exit_code == 0, result.output
        assert 'Libraries (2)' in result.output

    def test_library_by_name(self, run):
        result = run('library', 'Shared Photos')
        assert result.exit_code == 0, result.output
        assert json_lines(result.output)[0]['id'] == 'bbbb-2222'

    def test_library_default(self, run):
        result = run('library')
        assert result.exit_code == 0, result.output
        assert json_lines(result.output)[0]['name'] == 'Notes'

    def test_library_not_found(self, run):
        result = run('library', 'nonexistent')

        assert result.exit_code == NOT_FOUND
        error = json_lines(result.output)[-1]
        assert error['type'] == 'NotFoundError'
        assert error['exit_code'] == NOT_FOUND

    def test_default_id(self, run):
        result = run('default-id')
        assert result.exit_code == 0, result.output
        assert 'aaaa-1111' in result.output

    def test_history(self, run, dispatcher):
        dispatcher.add('GET', '/repos/aaaa-1111/history',
                       body={"page_next": True, "commits": [{"id": "c2"}, {"id": "c1"}]})

        result = run('history', 'Notes')

        assert result.exit_code == 0, result.output
        assert [r['id'] for r in json_lines(result.output)] == ['c2', 'c1']

    def test_upload_link(self, run, dispatcher):
        dispatcher.add('GET', '/repos/aaaa-1111/upload-link/', body=b'"https://example.com/up/token"')

        result = run('upload-link')

        assert result.exit_code == 0, result.output
        assert result.output.strip().splitlines()[-1] == 'https://example.com/up/token'


class TestDirectoryCommands:
    """Tests for ls and mkdir."""

    def test_ls_root(self, run, dispatcher):
        dispatcher.add('GET', '/repos/aaaa-1111/dir/?p=%2F', body=SAMPLE_ENTRIES)

        result = run('ls', 'Notes')

        assert result.exit_code == 0, result.output
        assert [r['name'] for r in json_lines(result.output)] == ['projects', 'todo.md']

    def test_ls_recursive(self, run, dispatcher):
        dispatcher.add('GET', '/repos/aaaa-1111/dir/?p=%2Fprojects&recursive=1&t=d', body=[])

        result = run('ls', 'Notes', '/projects', '--recursive')

        assert result.exit_code == 0, result.output
        assert dispatcher.calls[-1].query == {'p': ['/projects'], 't': ['d'], 'recursive': ['1']}

    def test_ls_files(self, run, dispatcher):
        dispatcher.add('GET', '/repos/aaaa-1111/dir/?p=%2F&t=f', body=SAMPLE_ENTRIES[1:])

        result = run('ls', 'Notes', '/', '--files')

        assert result.exit_code == 0, result.output
        assert [r['name'] for r in json_lines(result.output)] == ['todo.md']

    def test_ls_files_and_recursive_conflict(self, run):
        result = run('ls', 'Notes', '/', '--files', '--recursive')
        assert result.exit_code == USAGE_ERROR

    def test_ls_decode_error(self, run, dispatcher):
        dispatcher.add('GET', '/repos/aaaa-1111/dir/?p=%2F', status=502, body=b'Bad Gateway')

        result = run('ls', 'Notes')

        assert result.exit_code == DATA_ERROR
        error = json_lines(result.output)[-1]
        assert error['status'] == 502
        assert error['body'] == 'Bad Gateway'

    def test_mkdir(self, run, dispatcher):
        dispatcher.add('POST', '/repos/aaaa-1111/dir/?p=%2Fnew', status=201, body='"success"')

        result = run('mkdir', 'Notes', '/new')

        assert result.exit_code == 0, result.output
        assert json_lines(result.output)[-1] == {'library': 'Notes', 'path': '/new', 'created': True}

    def test_mkdir_forbidden(self, run, dispatcher):
        dispatcher.add('POST', '/repos/aaaa-1111/dir/?p=%2Fnew', status=403,
                       body='{"error_msg": "Permission denied."}')

        result = run('mkdir', 'Notes', '/new')

        assert result.exit_code == API_ERROR
        assert json_lines(result.output)[-1]['status'] == 403


class TestConfigErrors:
    """Tests for commands run without a usable configuration."""

    def test_missing_server(self):
        runner = CliRunner()
        with patch('seafileclient.cli_utils.load_config', return_value=get_default_config()), \
             patch('seafileclient.cli_utils.configure_logging'):
            result = runner.invoke(cli, ['libraries'])

        assert result.exit_code == CONFIG_ERROR
        assert json_lines(result.output)[-1]['type'] == 'ConfigError'

    def test_login_with_malformed_config_file(self):
        runner = CliRunner()
        with patch('seafileclient.commands.account.load_config',
                   side_effect=ConfigError("Invalid configuration file: config.yaml")), \
             patch('seafileclient.commands.account.obtain_token') as obtain:
            result = runner.invoke(cli, ['login', '--server', 'https://cloud.example.com',
                                         '--username', 'alice@example.com', '--password', 'secret'])

        assert result.exit_code == CONFIG_ERROR
        error = json_lines(result.output)[-1]
        assert error['type'] == 'ConfigError'
        assert 'config.yaml' in error['error']
        obtain.assert_not_called()
