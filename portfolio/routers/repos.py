# portfolio/routers/repos.py
from fastapi import APIRouter

from portfolio.core.config import settings
from portfolio.core.errors import fetch_failure
from portfolio.services.github import HTML_ACCEPT, gh_get

router = APIRouter()

@router.get("/repos/{name}/readme")
def repo_readme(name: str):
    with fetch_failure(f"Failed to fetch README for {name}"):
        return gh_get(f"/repos/{settings.GITHUB_ACCOUNT}/{name}/readme", accept=HTML_ACCEPT)
