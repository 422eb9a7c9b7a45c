from __future__ import annotations

from timekit_cli import config


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    monkeypatch.delenv(config.ENV_API_BASE_URL, raising=False)

    cfg = config.load_config()

    assert cfg.app == "demo"
    assert cfg.api_base_url == "https://api.timekit.io/"
    assert cfg.api_version == "v2"
    assert cfg.auth.api_token == ""


def test_save_config_omits_unset_optional_fields(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    cfg = config.default_config()
    cfg.app = "acme"
    cfg.auth.email = "a@b.com"
    cfg.auth.api_token = "tok"

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert "timezone =" not in contents
    assert 'app = "acme"' in contents

    loaded = config.load_config()
    assert loaded.app == "acme"
    assert loaded.auth.email == "a@b.com"
    assert loaded.auth.api_token == "tok"
    assert loaded.timezone is None


def test_env_overrides_base_url(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    monkeypatch.setenv(config.ENV_API_BASE_URL, "http://localhost:8000")

    assert config.load_config().api_base_url == "http://localhost:8000/"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("api.example.com") == "https://api.example.com/"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("127.0.0.1:8010") == "http://127.0.0.1:8010/"


def test_normalize_base_url_keeps_single_trailing_slash() -> None:
    assert config.normalize_base_url("https://api.timekit.io//") == "https://api.timekit.io/"
    assert config.normalize_base_url("  ") == ""
