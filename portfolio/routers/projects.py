# portfolio/routers/projects.py
from fastapi import APIRouter

from portfolio.core.errors import fetch_failure
from portfolio.services.projects import list_projects

router = APIRouter()

@router.get("/projects")
def projects():
    """
    Repositories flagged visible in their README metadata, each with an
    optional `coverImage` URL. Per-repo lookup failures only hide that repo;
    a failure listing the repos is a 500.
    """
    with fetch_failure("Failed to fetch projects"):
        return list_projects()
