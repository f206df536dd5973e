import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from folio import dependencies as deps
from folio.errors import NotFoundError
from folio.schemas.blog import PostDetail, PostSlug, PostSummary
from folio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/slugs", response_model=List[PostSlug])
def list_post_slugs(service: PostsService = Depends(deps.get_posts_service)):
    """Get the slug of every post."""
    try:
        return service.list_post_slugs()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing post slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        return service.get_post(slug)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
