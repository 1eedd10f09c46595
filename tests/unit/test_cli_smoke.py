from pathlib import Path

from click.testing import CliRunner
from plq.cli import cli
from plq.version import __version__


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert 'playlist-queue-loader' in result.output.lower()
    assert __version__ in result.output


def test_cli_help_lists_commands():
    result = CliRunner().invoke(cli, ['--help'])
    assert result.exit_code == 0
    for command in ('load', 'plugins', 'config'):
        assert command in result.output


def test_plugins_command():
    result = CliRunner().invoke(cli, ['plugins'])
    assert result.exit_code == 0
    assert 'm3u' in result.output
    assert 'audio/x-scpls' in result.output


def test_config_section(monkeypatch):
    monkeypatch.setenv('PLQ__QUEUE__MAX_LENGTH', '12')
    result = CliRunner().invoke(cli, ['config', '--section', 'queue'])
    assert result.exit_code == 0
    assert '"max_length": 12' in result.output


def test_config_unknown_section():
    result = CliRunner().invoke(cli, ['config', '--section', 'nope'])
    assert result.exit_code != 0
    assert "No configuration section" in result.output


def test_load_from_library(tmp_path: Path, monkeypatch):
    music = tmp_path / 'music'
    (music / 'radio').mkdir(parents=True)
    (music / 'radio' / 'stations.m3u').write_text(
        "#EXTM3U\n#EXTINF:-1,Jazz\nhttp://jazz.example/live\n/home/user/secret.mp3\n", encoding='utf-8'
    )
    monkeypatch.setenv('PLQ__LIBRARY__MUSIC_DIRECTORY', str(music))

    result = CliRunner().invoke(cli, ['load', 'radio/stations.m3u'])

    assert result.exit_code == 0, result.output
    assert 'http://jazz.example/live  # Jazz' in result.output
    assert 'secret.mp3' not in result.output


def test_load_failure_exit_code_and_trace():
    result = CliRunner().invoke(cli, ['load', '--trace', '../etc/passwd'])
    assert result.exit_code == 1
    assert 'no_such_list' in result.output
    assert 'unclassified' in result.output


def test_load_disabled_stored_playlist():
    result = CliRunner().invoke(cli, ['load', 'favourites'])
    assert result.exit_code == 1
    assert 'disabled' in result.output
