from __future__ import annotations

import httpx

from timekit_client import TimekitClient
from timekit_client.config_types import ClientConfig, UserCredentials


def test_default_config_snapshot() -> None:
    client = TimekitClient()
    cfg = client.get_config()
    client.close()

    assert cfg["app"] == "demo"
    assert cfg["api_base_url"] == "https://api.timekit.io/"
    assert cfg["api_version"] == "v2"
    assert cfg["timezone"] is None


def test_configure_overwrites_only_supplied_keys() -> None:
    client = TimekitClient()
    before = client.get_config()

    result = client.configure({"app": "acme"})

    assert result["app"] == "acme"
    assert client.get_config()["app"] == "acme"
    for key, value in before.items():
        if key != "app":
            assert client.get_config()[key] == value
    client.close()


def test_configure_accepts_keyword_arguments() -> None:
    client = TimekitClient()
    client.configure(api_version="v9", timezone="Europe/Copenhagen")
    cfg = client.get_config()
    client.close()

    assert cfg["api_version"] == "v9"
    assert cfg["timezone"] == "Europe/Copenhagen"


def test_configure_keeps_unknown_keys() -> None:
    cfg = ClientConfig()
    cfg.merge({"localeHint": "da", "app": "x"})

    assert cfg.app == "x"
    assert cfg.extra == {"localeHint": "da"}
    assert cfg.snapshot()["localeHint"] == "da"


def test_get_config_returns_equal_independent_snapshots() -> None:
    client = TimekitClient()
    first = client.get_config()
    second = client.get_config()
    first["app"] = "mutated"

    assert second == client.get_config()
    assert client.get_config()["app"] == "demo"
    client.close()


def test_set_user_keeps_fields_that_are_omitted() -> None:
    client = TimekitClient()
    client.set_user("a@b.com", "tok1")
    client.set_user(api_token="tok2")
    assert client.get_user() == {"email": "a@b.com", "api_token": "tok2"}

    client.set_user("c@d.com")
    client.set_user("", None)
    assert client.get_user() == {"email": "c@d.com", "api_token": "tok2"}
    client.close()


def test_user_credentials_completeness() -> None:
    assert not UserCredentials().is_complete()
    assert not UserCredentials(email="a@b.com").is_complete()
    assert UserCredentials(email="a@b.com", api_token="t").is_complete()


def test_timeout_is_a_constructor_argument() -> None:
    client = TimekitClient(timeout_s=3.0)

    assert client._t._client.timeout == httpx.Timeout(3.0)
    assert "timeout_s" not in client.get_config()
    client.close()


def test_configure_timeout_does_not_pose_as_a_setting() -> None:
    client = TimekitClient()
    client.configure(timeout_s=1.0)

    # unknown keys pass through untouched; the pool keeps its timeout
    assert client.get_config()["timeout_s"] == 1.0
    assert client._t._client.timeout == httpx.Timeout(15.0)
    client.close()
