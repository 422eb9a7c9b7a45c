from __future__ import annotations

import webbrowser
from typing import Protocol


class Navigator(Protocol):
    def navigate(self, url: str) -> None:
        ...


class WebbrowserNavigator:
    """Opens URLs in the user's default browser."""

    def __init__(self, *, new_tab: bool = True):
        self._new = 2 if new_tab else 0

    def navigate(self, url: str) -> None:
        webbrowser.open(url, new=self._new)
