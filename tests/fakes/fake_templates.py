"""Fixed template path provider for testing."""

from __future__ import annotations


class FakeTemplatePathProvider:
    """Returns ``/<name>`` for every logical name and records the requests."""

    def __init__(self) -> None:
        self.requested: list[str] = []

    def get(self, name: str) -> str:
        self.requested.append(name)
        return f"/{name}"
