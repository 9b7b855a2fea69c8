# portfolio/services/projects.py
"""
Curated project list for the portfolio.

Every repository of the account is checked for two things:
- metadata: a JSON object hidden in the first HTML comment of its README,
  e.g. ``<!--{"visible": "true", "tags": ["python"]}-->``
- cover image: the download URL of ``favimage.png`` at the repository root

Only repositories whose metadata says ``"visible": "true"`` (the string, not
the boolean) are returned. A failed lookup means "no metadata" / "no image",
never an error for the whole list.
"""

import base64
import binascii
import json
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from portfolio.core.config import settings
from portfolio.services.github import GitHubError, gh_get, gh_get_paginated

logger = logging.getLogger(__name__)

METADATA_COMMENT = re.compile(r"<!--(.*?)-->", re.DOTALL)


@dataclass
class VisibilityCheck:
    repo: dict
    visible: bool
    cover_image: Optional[str] = None


def fetch_cover_image(name: str) -> Optional[str]:
    """Download URL of the repository's cover image, or None if it has none."""
    path = f"/repos/{settings.GITHUB_ACCOUNT}/{name}/contents/{settings.COVER_IMAGE_PATH}"
    try:
        data = gh_get(path)
    except GitHubError as e:
        logger.warning("Cover image lookup failed for %s: %s", name, e)
        return None
    if not isinstance(data, dict):
        # a directory listing, not a file
        logger.warning("Cover image path of %s is not a file", name)
        return None
    return data.get("download_url")


def extract_metadata(text: str) -> Optional[dict]:
    """Parse the first ``<!-- ... -->`` block of a README as a JSON object."""
    match = METADATA_COMMENT.search(text)
    if not match:
        logger.info("No metadata found.")
        return None
    try:
        metadata = json.loads(match.group(1).strip())
    except json.JSONDecodeError as e:
        logger.warning("Error parsing metadata: %s", e)
        return None
    if not isinstance(metadata, dict):
        logger.warning("Metadata is not a JSON object: %r", metadata)
        return None
    return metadata


def fetch_metadata(name: str) -> Optional[dict]:
    try:
        readme = gh_get(f"/repos/{settings.GITHUB_ACCOUNT}/{name}/readme")
    except GitHubError as e:
        logger.warning("Failed to fetch metadata for %s: %s", name, e)
        return None
    try:
        content = base64.b64decode(readme["content"]).decode("utf-8")
    except (KeyError, TypeError, binascii.Error, UnicodeDecodeError) as e:
        logger.warning("Could not decode README of %s: %s", name, e)
        return None
    return extract_metadata(content)


def is_visible(metadata: Optional[dict]) -> bool:
    return metadata is not None and metadata.get("visible") == "true"


def filter_visible(repos: List[dict], max_workers: Optional[int] = None) -> List[dict]:
    """
    Run both lookups of every repo on a bounded pool and keep the visible ones.

    Input order is preserved. A lookup that raises only hides its own repo.
    """
    if not repos:
        return []

    workers = max(1, min(max_workers or settings.MAX_WORKERS, 2 * len(repos)))
    checks: List[VisibilityCheck] = []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        pending = [
            (r, executor.submit(fetch_metadata, r["name"]), executor.submit(fetch_cover_image, r["name"]))
            for r in repos
        ]
        for r, metadata_future, cover_future in pending:
            try:
                metadata = metadata_future.result()
                cover_image = cover_future.result()
            except Exception:
                logger.exception("Error checking visibility for %s", r.get("name"))
                checks.append(VisibilityCheck(repo=r, visible=False))
                continue
            checks.append(VisibilityCheck(repo=r, visible=is_visible(metadata), cover_image=cover_image))

    visible = []
    for check in checks:
        if not check.visible:
            continue
        project = dict(check.repo)
        if check.cover_image:
            project["coverImage"] = check.cover_image
        visible.append(project)

    logger.info("%d of %d repositories are visible", len(visible), len(repos))
    return visible


def list_projects() -> List[dict]:
    """All visible repositories of the account, enriched with ``coverImage``.

    Raises GitHubError if the repository list itself cannot be fetched.
    """
    repos = gh_get_paginated(f"/users/{settings.GITHUB_ACCOUNT}/repos")
    return filter_visible(repos)
