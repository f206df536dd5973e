import datetime
import logging
from typing import List

import yaml
from frontmatter.default_handlers import YAMLHandler

from folio.errors import NotFoundError, StorageError
from folio.schemas.blog import PostDetail, PostSlug, PostSummary
from folio.utils import parse_date

logger = logging.getLogger(__name__)

METADATA_KEYS = ("title", "spoiler", "date")


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_post_slugs(self) -> List[PostSlug]:
        return [PostSlug(slug=slug) for slug in self.repo.list_slugs()]

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for slug in self.repo.list_slugs():
            try:
                text = self.repo.read_post(slug)
            except NotFoundError as e:
                raise StorageError(f"Post directory {slug} has no index.md") from e
            posts.append(parse_post_data(text, slug))

        # Stable sort: posts sharing a date keep directory order.
        posts.sort(key=lambda p: _date_sort_key(p.get("date")), reverse=True)
        return [PostSummary(**p) for p in posts]

    def get_post(self, slug: str) -> PostDetail:
        text = self.repo.read_post(slug)
        return PostDetail(**parse_post_data(text, slug, include_content=True))


def parse_post_data(text: str, slug: str, include_content: bool = False) -> dict:
    """Parse frontmatter and return standardized post data"""
    metadata, content = _split_front_matter(text, slug)

    post_data = {"slug": slug}
    for key in METADATA_KEYS:
        post_data[key] = _convert_value(metadata.get(key))

    if include_content:
        post_data["content"] = content

    return post_data


def _split_front_matter(text: str, slug: str) -> tuple[dict, str]:
    stripped = text.strip()
    handler = YAMLHandler()
    if not handler.detect(stripped):
        return {}, stripped
    try:
        fm, content = handler.split(stripped)
    except ValueError:
        return {}, stripped

    # BaseLoader keeps every scalar a plain string: no timestamp or bool resolution.
    try:
        metadata = handler.load(fm, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        logger.warning(f"Malformed front-matter in post {slug}: {e}")
        metadata = {}

    if not isinstance(metadata, dict):
        metadata = {}
    return metadata, content.strip()


def _convert_value(value):
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    logger.debug(f"Ignoring non-scalar front-matter value: {value!r}")
    return None


def _date_sort_key(value: str | None) -> datetime.datetime:
    # Missing or unparseable dates sort as the oldest posts.
    return parse_date(value) or datetime.datetime.min
