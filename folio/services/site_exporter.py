import logging
import shutil
from pathlib import Path
from typing import List

from folio.services.image_service import get_content_type_from_filename

logger = logging.getLogger(__name__)


class SiteExporter:
    """
    Write every page of the site, the post assets and the highlight
    stylesheet to a directory that any static file server can host.
    """

    def __init__(self, pages, posts_service, repo, renderer, url_prefix: str = "/blogs"):
        self.pages = pages
        self.posts_service = posts_service
        self.repo = repo
        self.renderer = renderer
        self.url_prefix = url_prefix

    def export(self, output_dir: Path) -> List[Path]:
        output_dir = Path(output_dir)
        blogs_dir = output_dir / self.url_prefix.strip("/")
        written = [
            _write(output_dir / "index.html", self.pages.home()),
            _write(blogs_dir / "index.html", self.pages.blog_index()),
            _write(output_dir / "highlight.css", self.renderer.stylesheet()),
        ]

        for post_slug in self.posts_service.list_post_slugs():
            slug = post_slug.slug
            post_dir = blogs_dir / slug
            written.append(_write(post_dir / "index.html", self.pages.post(slug)))
            for filename in self.repo.list_assets(slug):
                if get_content_type_from_filename(filename) is None:
                    logger.debug(f"Skipping non-image asset {slug}/{filename}")
                    continue
                target = post_dir / filename
                shutil.copyfile(self.repo.get_asset_path(slug, filename), target)
                written.append(target)

        logger.info(f"Exported {len(written)} files to {output_dir}")
        return written


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote {path}")
    return path
