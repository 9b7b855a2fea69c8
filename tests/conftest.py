import base64

import pytest

from portfolio.core.config import settings
from portfolio.services.github import GitHubError


def readme_payload(text: str) -> dict:
    """README as the contents API returns it: base64 with line breaks."""
    encoded = base64.encodebytes(text.encode("utf-8")).decode("ascii")
    return {"name": "README.md", "encoding": "base64", "content": encoded}


class FakeGitHub:
    """Stands in for gh_get: maps request paths to payloads or exceptions."""

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.calls = []

    def __call__(self, path, params=None, accept=None):
        self.calls.append((path, accept))
        if path not in self.responses:
            raise GitHubError(path, 404, "Not found on GitHub")
        value = self.responses[path]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def account(monkeypatch):
    monkeypatch.setattr(settings, "GITHUB_ACCOUNT", "octo")
    monkeypatch.setattr(settings, "MAX_WORKERS", 4)
    return "octo"
