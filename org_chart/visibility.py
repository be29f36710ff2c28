"""Collapsed/expanded state per rendered node."""

from __future__ import annotations

from typing import Iterable


class VisibilityState:
    """Collapsed/expanded flag per node key. Unknown keys are expanded."""

    def __init__(self):
        self._collapsed: dict[str, bool] = {}

    def is_collapsed(self, key: str) -> bool:
        return self._collapsed.get(key, False)

    def toggle(self, key: str) -> bool:
        self._collapsed[key] = not self.is_collapsed(key)
        return self._collapsed[key]

    def collapse(self, key: str) -> None:
        self._collapsed[key] = True

    def expand(self, key: str) -> None:
        self._collapsed[key] = False

    def collapse_all(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.collapse(key)

    def collapsed_keys(self) -> set[str]:
        return {k for k, v in self._collapsed.items() if v}

    def reset(self) -> None:
        self._collapsed.clear()
