from __future__ import annotations

import pytest

from timekit_client import RedirectUnavailableError, TimekitClient


class _FakeNavigator:
    def __init__(self) -> None:
        self.visited: list[str] = []

    def navigate(self, url: str) -> None:
        self.visited.append(url)


def test_google_signup_returns_url_without_request(recorder) -> None:
    client = TimekitClient(http_transport=recorder.transport())
    client.configure(app="acme")

    url = client.account_google_signup()
    client.close()

    assert url == "https://api.timekit.io/v2/accounts/google/signup?Timekit-App=acme"
    assert recorder.requests == []


def test_google_signup_redirects_through_navigator() -> None:
    navigator = _FakeNavigator()
    client = TimekitClient(navigator=navigator)

    result = client.account_google_signup(should_redirect=True)
    client.close()

    assert result is None
    assert navigator.visited == ["https://api.timekit.io/v2/accounts/google/signup?Timekit-App=demo"]


def test_google_signup_redirect_without_navigator_raises() -> None:
    client = TimekitClient()
    with pytest.raises(RedirectUnavailableError):
        client.account_google_signup(should_redirect=True)
    assert client.account_google_signup() is not None
    client.close()


def test_webbrowser_navigator_opens_url(monkeypatch) -> None:
    from timekit_client import navigation

    opened = []
    monkeypatch.setattr(navigation.webbrowser, "open", lambda url, new=0: opened.append((url, new)))

    navigation.WebbrowserNavigator().navigate("https://example.test/")

    assert opened == [("https://example.test/", 2)]
