"""Environment and .env configuration loading."""

from pathlib import Path
import textwrap

from plq.config import coerce_scalar, deep_merge, load_config, load_typed_config


def test_deep_merge_simple():
    a = {'a': 1, 'b': {'x': 1, 'y': 2}}
    b = {'b': {'y': 99, 'z': 5}, 'c': 3}
    merged = deep_merge(a, b)
    assert merged == {'a': 1, 'b': {'x': 1, 'y': 99, 'z': 5}, 'c': 3}
    assert a['b']['y'] == 2


def test_coerce_scalar():
    assert coerce_scalar('true') is True
    assert coerce_scalar('False') is False
    assert coerce_scalar('none') is None
    assert coerce_scalar('10') == 10
    assert coerce_scalar('1') == 1
    assert isinstance(coerce_scalar('10.5'), float)
    assert coerce_scalar('["http", "rtsp"]') == ["http", "rtsp"]
    assert coerce_scalar('/srv/music') == '/srv/music'


def test_defaults():
    cfg = load_config()
    assert cfg['playlists']['directory'] is None
    assert cfg['queue']['max_length'] == 16384


def test_env_override(monkeypatch, tmp_path: Path):
    monkeypatch.setenv('PLQ__LIBRARY__MUSIC_DIRECTORY', str(tmp_path))
    monkeypatch.setenv('PLQ__QUEUE__MAX_LENGTH', '42')
    monkeypatch.setenv('PLQ__STREAMING__SCHEMES', '["http"]')
    config = load_typed_config()
    assert config.library.music_directory == str(tmp_path)
    assert config.queue.max_length == 42
    assert config.streaming.schemes == ["http"]


def test_dotenv_then_env(tmp_path: Path, monkeypatch):
    (tmp_path / '.env').write_text(textwrap.dedent('''\
    # local settings
    PLQ__PLAYLISTS__DIRECTORY="/srv/playlists"  # stored playlists
    PLQ__INPUT__TIMEOUT=5
    OTHER_TOOL__KEY=ignored
    '''), encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('PLQ_ENABLE_DOTENV', '1')
    monkeypatch.setenv('PLQ__INPUT__TIMEOUT', '7.5')
    cfg = load_config()
    assert cfg['playlists']['directory'] == '/srv/playlists'
    assert cfg['input']['timeout'] == 7.5
    assert 'other_tool' not in cfg


def test_dotenv_skipped_under_pytest(tmp_path: Path, monkeypatch):
    (tmp_path / '.env').write_text('PLQ__QUEUE__MAX_LENGTH=3\n', encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    assert load_config()['queue']['max_length'] == 16384


def test_overrides_win(monkeypatch):
    monkeypatch.setenv('PLQ__LOG_LEVEL', 'WARNING')
    cfg = load_config({'log_level': 'DEBUG'})
    assert cfg['log_level'] == 'DEBUG'
