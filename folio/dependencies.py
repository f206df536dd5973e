from fastapi import Depends

from folio.repos.posts_repo import FilePostsRepo
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.page_service import PageService
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.content_root)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_markdown_renderer(current_settings: Settings = Depends(get_settings)):
    return MarkdownRenderer(
        url_prefix=current_settings.BLOG_URL_PREFIX,
        highlight_style=current_settings.HIGHLIGHT_STYLE,
    )


def get_page_service(
    posts_service=Depends(get_posts_service),
    renderer=Depends(get_markdown_renderer),
    current_settings: Settings = Depends(get_settings),
):
    return PageService(
        posts_service=posts_service, renderer=renderer, settings=current_settings
    )
