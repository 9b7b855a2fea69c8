# portfolio/routers/user.py
from fastapi import APIRouter

from portfolio.core.config import settings
from portfolio.core.errors import fetch_failure
from portfolio.services.github import HTML_ACCEPT, gh_get

router = APIRouter()

@router.get("/user")
def user():
    """Profile of the portfolio account, as GitHub returns it."""
    with fetch_failure("Failed to fetch user data"):
        return gh_get(f"/users/{settings.GITHUB_ACCOUNT}")

@router.get("/user/readme")
def user_readme():
    """Profile README (the `<account>/<account>` repo) rendered to HTML."""
    account = settings.GITHUB_ACCOUNT
    with fetch_failure("Failed to fetch user README"):
        return gh_get(f"/repos/{account}/{account}/readme", accept=HTML_ACCEPT)
