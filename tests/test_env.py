"""Tests for colourkit.core.env — .env loading, walk-up logic and settings."""

import os
from pathlib import Path

import pytest
from colourkit.core.env import Settings, _find_dotenv, _parse_dotenv, load_env, read_settings


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_COLOURKIT_KEY', '')
        monkeypatch.delenv('TEST_COLOURKIT_KEY')
        (tmp_path / '.env').write_text('TEST_COLOURKIT_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_COLOURKIT_KEY') == 'secret'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_COLOURKIT_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_COLOURKIT_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_COLOURKIT_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_COLOURKIT_KEY3', '')
        monkeypatch.delenv('TEST_COLOURKIT_KEY3')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_COLOURKIT_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TEST_COLOURKIT_KEY3') == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestReadSettings:
    def test_defaults(self) -> None:
        assert read_settings({}) == Settings(precision=4, min_distance=None, json=False)

    def test_all_set(self) -> None:
        env = {'COLOURKIT_PRECISION': '2', 'COLOURKIT_MIN_DISTANCE': '0.1', 'COLOURKIT_JSON': 'yes'}
        assert read_settings(env) == Settings(precision=2, min_distance=0.1, json=True)

    def test_json_false_values(self) -> None:
        for value in ('0', 'false', 'No', ''):
            assert read_settings({'COLOURKIT_JSON': value}).json is False

    def test_blank_numbers_use_defaults(self) -> None:
        settings = read_settings({'COLOURKIT_PRECISION': ' ', 'COLOURKIT_MIN_DISTANCE': ''})
        assert settings.precision == 4
        assert settings.min_distance is None

    @pytest.mark.parametrize(
        'key, value',
        [
            ('COLOURKIT_PRECISION', 'four'),
            ('COLOURKIT_PRECISION', '-1'),
            ('COLOURKIT_MIN_DISTANCE', 'far'),
            ('COLOURKIT_JSON', 'maybe'),
        ],
    )
    def test_malformed_raises(self, key: str, value: str) -> None:
        with pytest.raises(ValueError, match=key):
            read_settings({key: value})

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('COLOURKIT_PRECISION', '6')
        assert read_settings().precision == 6
