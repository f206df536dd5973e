import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, Response

from folio import dependencies as deps
from folio.errors import NotFoundError
from folio.services.image_service import get_post_image
from folio.services.page_service import PageService

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def home(pages: PageService = Depends(deps.get_page_service)):
    """Home page with the author intro and recent posts."""
    try:
        return HTMLResponse(pages.home())
    except Exception as e:
        logger.error(f"Unexpected error rendering home page: {e}")
        return HTMLResponse(
            pages.server_error("Failed to retrieve posts"), status_code=500
        )


@router.get("/highlight.css")
def highlight_css(renderer=Depends(deps.get_markdown_renderer)):
    """Pygments stylesheet for highlighted code blocks."""
    return Response(content=renderer.stylesheet(), media_type="text/css")


@router.get("/blogs")
def blog_index(pages: PageService = Depends(deps.get_page_service)):
    """Full listing of posts."""
    try:
        return HTMLResponse(pages.blog_index())
    except Exception as e:
        logger.error(f"Unexpected error rendering blog index: {e}")
        return HTMLResponse(
            pages.server_error("Failed to retrieve posts"), status_code=500
        )


@router.get("/blogs/{slug}")
def blog_post(slug: str, pages: PageService = Depends(deps.get_page_service)):
    """A single rendered post."""
    try:
        return HTMLResponse(pages.post(slug))
    except NotFoundError:
        logger.info(f"Post not found: {slug}")
        return HTMLResponse(pages.not_found(), status_code=404)
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        return HTMLResponse(
            pages.server_error("Failed to retrieve post"), status_code=500
        )


@router.get("/blogs/{slug}/{filename}")
def blog_asset(slug: str, filename: str, repo=Depends(deps.get_posts_repo)):
    """
    Serve an image stored next to the post's markdown
    """
    image_data, content_type = get_post_image(slug, filename, repo=repo)

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
