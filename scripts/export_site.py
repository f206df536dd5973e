import logging
import sys
from pathlib import Path

from folio.repos.posts_repo import FilePostsRepo
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.page_service import PageService
from folio.services.posts_service import PostsService
from folio.services.site_exporter import SiteExporter
from folio.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    output_dir = Path(sys.argv[1] if len(sys.argv) > 1 else settings.EXPORT_DIR)

    repo = FilePostsRepo(settings.content_root)
    posts_service = PostsService(repo=repo)
    renderer = MarkdownRenderer(
        url_prefix=settings.BLOG_URL_PREFIX,
        highlight_style=settings.HIGHLIGHT_STYLE,
    )
    pages = PageService(posts_service=posts_service, renderer=renderer, settings=settings)
    exporter = SiteExporter(
        pages, posts_service, repo, renderer, url_prefix=settings.BLOG_URL_PREFIX
    )

    try:
        exporter.export(output_dir)
        logger.info("Export completed successfully.")
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        sys.exit(1)
