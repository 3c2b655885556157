"""Unit tests for connection settings."""

import pytest
from pydantic import ValidationError

from polyfeed.data.core import ApiInfo
from polyfeed.data.core.config import DEFAULT_API_URL, DEFAULT_STREAM_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any .env file."""
    for name in ("POLYGON_API_URL", "POLYGON_STREAM_URL", "POLYGON_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    info = ApiInfo(api_key="secret")
    assert info.api_url == DEFAULT_API_URL
    assert info.stream_url == DEFAULT_STREAM_URL
    assert info.api_key.get_secret_value() == "secret"


def test_api_key_is_not_shown():
    info = ApiInfo(api_key="secret")
    assert "secret" not in repr(info)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("POLYGON_API_KEY", "from-env")
    monkeypatch.setenv("POLYGON_API_URL", "http://localhost:8080/")
    monkeypatch.setenv("POLYGON_STREAM_URL", "ws://localhost:8081/stocks")

    info = ApiInfo()

    assert info.api_key.get_secret_value() == "from-env"
    assert info.api_url == "http://localhost:8080"
    assert info.stream_url == "ws://localhost:8081/stocks"


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("POLYGON_API_KEY=from-file\n")
    assert ApiInfo().api_key.get_secret_value() == "from-file"


def test_missing_api_key():
    with pytest.raises(ValidationError):
        ApiInfo()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"api_key": "   "},
        {"api_key": "k", "api_url": "ftp://api.polygon.io"},
        {"api_key": "k", "stream_url": "https://socket.polygon.io"},
    ],
    ids=["blank-key", "bad-api-scheme", "bad-stream-scheme"],
)
def test_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        ApiInfo(**kwargs)


def test_settings_are_frozen():
    info = ApiInfo(api_key="k")
    with pytest.raises(ValidationError):
        info.api_url = "https://other.example"
