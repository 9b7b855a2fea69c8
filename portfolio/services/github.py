import logging

import requests
from portfolio.core.config import settings

logger = logging.getLogger(__name__)

HTML_ACCEPT = "application/vnd.github.html+json"


class GitHubError(Exception):
    """A GitHub call that failed in transport or returned a non-success status."""

    def __init__(self, path: str, status_code: int | None = None, detail: str = ""):
        self.path = path
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"GET {path} failed ({status_code or 'no response'}): {detail}")


def _headers(accept: str | None = None) -> dict:
    headers = {
        "Accept": accept or "application/vnd.github+json",
        "X-GitHub-Api-Version": settings.GITHUB_API_VERSION,
    }
    if settings.GITHUB_TOKEN:
        headers["Authorization"] = f"Bearer {settings.GITHUB_TOKEN}"
    return headers

def gh_get(path: str, params: dict | None = None, accept: str | None = None):
    url = f"{settings.GITHUB_API}{path}"
    try:
        r = requests.get(url, headers=_headers(accept), params=params or {}, timeout=20)
    except requests.RequestException as e:
        raise GitHubError(path, detail=str(e)) from e
    logger.debug("GET %s -> %s", path, r.status_code)
    if r.status_code == 404: raise GitHubError(path, 404, "Not found on GitHub")
    if r.status_code == 401: raise GitHubError(path, 401, "Invalid token or missing permissions")
    if r.status_code == 403: raise GitHubError(path, 403, "Forbidden or rate limited")
    if r.status_code >= 400: raise GitHubError(path, r.status_code, r.text)
    if accept == HTML_ACCEPT:
        return r.text
    try:
        return r.json()
    except ValueError as e:
        raise GitHubError(path, r.status_code, "invalid JSON body") from e

def gh_get_paginated(path: str, base_params: dict | None = None, max_pages: int = 10) -> list:
    items, params = [], dict(base_params or {})
    params.setdefault("per_page", 100)
    for page in range(1, max_pages + 1):
        params["page"] = page
        chunk = gh_get(path, params)
        if not isinstance(chunk, list) or not chunk: break
        items.extend(chunk)
        if len(chunk) < params["per_page"]: break
    return items
