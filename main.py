from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # load .env before settings are read

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from portfolio.core.config import settings
from portfolio.core.errors import FetchFailed, fetch_failed_handler
from portfolio.routers import health, user, projects, repos

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

if not settings.GITHUB_TOKEN:
    logger.warning("GITHUB_TOKEN is not set, GitHub requests will be unauthenticated")

app = FastAPI(title="Portfolio GitHub Proxy")
app.add_exception_handler(FetchFailed, fetch_failed_handler)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(user.router, prefix="", tags=["user"])
app.include_router(projects.router, prefix="", tags=["projects"])
app.include_router(repos.router, prefix="", tags=["repos"])


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running at http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

# or: uvicorn main:app --reload --port 3000
