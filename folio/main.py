import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.routers import pages, posts
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    content_root = settings.content_root.resolve()
    if content_root.is_dir():
        logger.info(f"Serving posts from {content_root}")
    else:
        logger.warning(f"Content root {content_root} does not exist")

    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.SITE_TITLE,
    description=settings.SITE_DESCRIPTION,
    lifespan=lifespan,
)

app.include_router(posts.router)
app.include_router(pages.router)
