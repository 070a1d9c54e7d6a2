"""Tests for the file-backed token store in gcalendar_mcp/state/store.py"""

import json

import pytest

from gcalendar_mcp.errors import TokenNotFoundError, TokenParseError
from gcalendar_mcp.state.store import TokenStore
from gcalendar_mcp.state.types import CredentialRecord
from tests.conftest import write_tokens


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def cwd(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


class TestResolvePath:
    def test_override_returned_verbatim(self, tmp_path, home, cwd):
        override = tmp_path / "elsewhere" / "my-tokens.json"
        write_tokens(home / ".config" / "gcalendar-mcp" / "tokens.json", {"access_token": "a"})
        write_tokens(cwd / ".tokens.json", {"access_token": "b"})

        store = TokenStore(override=override, home=home, cwd=cwd)

        assert store.resolve_path() == override

    def test_standard_path_wins_when_present(self, home, cwd):
        standard = home / ".config" / "gcalendar-mcp" / "tokens.json"
        write_tokens(standard, {"access_token": "a"})
        write_tokens(cwd / ".tokens.json", {"access_token": "b"})

        assert TokenStore(home=home, cwd=cwd).resolve_path() == standard

    def test_project_path_used_when_only_it_exists(self, home, cwd):
        write_tokens(cwd / ".tokens.json", {"access_token": "b"})

        assert TokenStore(home=home, cwd=cwd).resolve_path() == cwd / ".tokens.json"

    def test_defaults_to_standard_path(self, home, cwd):
        store = TokenStore(home=home, cwd=cwd)

        assert store.resolve_path() == home / ".config" / "gcalendar-mcp" / "tokens.json"

    def test_resolution_is_idempotent(self, home, cwd):
        write_tokens(cwd / ".tokens.json", {"access_token": "b"})
        store = TokenStore(home=home, cwd=cwd)

        assert store.resolve_path() == store.resolve_path()


class TestReadWrite:
    def test_read_missing_file(self, store):
        with pytest.raises(TokenNotFoundError):
            store.read()

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[1, 2, 3]", json.dumps({"refresh_token": "r"})],
    )
    def test_read_malformed_file(self, store, token_path, content):
        write_tokens(token_path, content)

        with pytest.raises(TokenParseError):
            store.read()

    def test_read_non_utf8_file(self, store, token_path):
        token_path.parent.mkdir(parents=True)
        token_path.write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(TokenParseError):
            store.read()

    def test_read_expiry_beyond_datetime_range(self, store, token_path):
        write_tokens(token_path, {"access_token": "a", "refresh_token": "r", "expiry_date": 10**20})

        with pytest.raises(TokenParseError):
            store.read()

    def test_round_trip_keeps_token_fields(self, store):
        record = CredentialRecord(
            access_token="ya29.access",
            refresh_token="1//refresh",
            expiry_date=1705312800000,
            token_type="Bearer",
        )

        store.write(record)
        loaded = store.read()

        assert loaded.access_token == record.access_token
        assert loaded.refresh_token == record.refresh_token
        assert loaded.expiry_date == record.expiry_date
        assert loaded.token_type == record.token_type

    def test_unknown_keys_survive_round_trip(self, store, token_path):
        write_tokens(token_path, {"access_token": "a", "id_token": "jwt"})

        store.write(store.read())

        assert json.loads(token_path.read_text())["id_token"] == "jwt"

    def test_write_creates_parent_dirs_and_pretty_prints(self, store, token_path):
        assert not token_path.parent.exists()

        store.write(CredentialRecord(access_token="a"))

        text = token_path.read_text()
        assert text.startswith('{\n  "access_token": "a"')


class TestDelete:
    def test_delete_is_idempotent(self, store, token_path):
        write_tokens(token_path, {"access_token": "a"})

        store.delete()
        store.delete()

        assert not token_path.exists()

    def test_delete_without_file(self, store):
        store.delete()


class TestCredentialRecord:
    def test_degraded_without_refresh_token(self):
        assert CredentialRecord(access_token="a").is_degraded
        assert not CredentialRecord(access_token="a", refresh_token="r").is_degraded

    def test_expiry_converts_millis_to_naive_utc(self):
        record = CredentialRecord(access_token="a", expiry_date=1705312800000)

        assert record.expiry.isoformat() == "2024-01-15T10:00:00"
