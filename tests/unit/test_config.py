"""Unit tests for settings resolution."""

import pytest

from coins_api.config import Settings
from coins_api.errors import ServerConfigError


class TestResolvedDatabaseUrl:
    def test_explicit_url_wins(self):
        settings = Settings(database_url="postgresql+asyncpg://u:p@db:5432/coins", db_name="ignored")
        assert settings.resolved_database_url() == "postgresql+asyncpg://u:p@db:5432/coins"

    def test_composed_from_parts(self):
        settings = Settings(db_host="pg", db_port=6543, db_name="coins", db_user="svc", db_password="pw")
        assert settings.resolved_database_url() == "postgresql+asyncpg://svc:pw@pg:6543/coins"

    def test_incomplete_parts_fail_fast(self):
        settings = Settings(db_name="coins", db_user="svc")
        with pytest.raises(ServerConfigError):
            settings.resolved_database_url()

    @pytest.mark.parametrize(
        "url",
        ["postgresql://u:p@localhost:5432/coins", "postgres://u:p@localhost:5432/coins"],
    )
    def test_plain_postgres_url_uses_asyncpg(self, url):
        settings = Settings(database_url=url)
        assert settings.resolved_database_url() == "postgresql+asyncpg://u:p@localhost:5432/coins"

    def test_other_drivers_untouched(self):
        settings = Settings(database_url="sqlite+aiosqlite:///coins.db")
        assert settings.resolved_database_url() == "sqlite+aiosqlite:///coins.db"


class TestDatabaseSsl:
    def test_remote_url_uses_ssl(self):
        assert Settings(database_url="postgres://u:p@db.example.com:5432/coins").database_ssl() is True

    def test_localhost_url_is_plain(self):
        assert Settings(database_url="postgres://u:p@localhost:5432/coins").database_ssl() is False

    def test_discrete_settings_are_plain(self):
        settings = Settings(db_host="db.example.com", db_name="coins", db_user="svc", db_password="pw")
        assert settings.database_ssl() is False

    def test_explicit_setting_wins(self, monkeypatch):
        monkeypatch.setenv("COINS_DB_SSL", "false")
        assert Settings(database_url="postgres://u:p@db.example.com/coins").database_ssl() is False


class TestDefaults:
    def test_session_expiry_defaults_to_eight_hours(self):
        assert Settings().jwt_expire_minutes == 8 * 60

    def test_detailed_variant_by_default(self):
        assert Settings().balance_variant == "detailed"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("COINS_PORT", "8080")
        assert Settings().port == 8080
