"""
API tests for the greeting and heartbeat endpoints and app settings.
"""

from movies_api.api.config import Settings, get_api_port, get_query_timeout


class TestSystemEndpoints:
    """Tests for GET / and GET /heartbeat."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.text == "Welcome to the movie API!"
        assert r.headers["content-type"].startswith("text/plain")

    def test_heartbeat(self, client):
        r = client.get("/heartbeat")
        assert r.status_code == 200
        assert r.text == "Have fun with the project!"


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("API_PORT", raising=False)
        assert get_api_port() == 3000

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert get_api_port() == 8080

    def test_timeout_disabled(self, monkeypatch):
        monkeypatch.setenv("QUERY_TIMEOUT_SECONDS", "0")
        assert get_query_timeout() is None

    def test_dataset_paths_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MOVIES_DB_PATH", str(tmp_path / "m.db"))
        monkeypatch.setenv("RATINGS_DB_PATH", str(tmp_path / "r.db"))

        settings = Settings()

        assert settings.movies_db_path == str(tmp_path / "m.db")
        assert settings.ratings_db_path == str(tmp_path / "r.db")
