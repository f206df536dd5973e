import logging
from pathlib import Path
from typing import List

from folio.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

POST_FILENAME = "index.md"


class FilePostsRepo:
    def __init__(self, content_root: Path):
        self.root = Path(content_root)

    def list_slugs(self) -> List[str]:
        try:
            entries = list(self.root.iterdir())
        except OSError as e:
            logger.error(f"Cannot read content root {self.root}: {e}")
            raise StorageError(f"Cannot read content root {self.root}") from e
        return sorted(
            entry.name
            for entry in entries
            if entry.is_dir() and self._is_valid(entry.name)
        )

    def read_post(self, slug: str) -> str:
        if not self._is_valid(slug):
            raise NotFoundError(slug)
        path = self.root / slug / POST_FILENAME
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError(slug) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read post file {path}: {e}")
            raise StorageError(f"Cannot read post file {path}") from e

    def list_assets(self, slug: str) -> List[str]:
        if not self._is_valid(slug):
            raise NotFoundError(slug)
        post_dir = self.root / slug
        try:
            entries = list(post_dir.iterdir())
        except FileNotFoundError as e:
            raise NotFoundError(slug) from e
        except OSError as e:
            raise StorageError(f"Cannot read post directory {post_dir}") from e
        return sorted(
            entry.name
            for entry in entries
            if entry.is_file()
            and entry.name != POST_FILENAME
            and self._is_valid(entry.name)
        )

    def get_asset_path(self, slug: str, filename: str) -> Path:
        if not (self._is_valid(slug) and self._is_valid(filename)):
            raise NotFoundError(f"{slug}/{filename}")
        path = self.root / slug / filename
        if filename == POST_FILENAME or not path.is_file():
            raise NotFoundError(f"{slug}/{filename}")
        return path

    @staticmethod
    def _is_valid(segment: str | None) -> bool:
        """A slug or file name must be a single, non-hidden path segment."""
        if not segment:
            return False
        return (
            "/" not in segment
            and "\\" not in segment
            and not segment.startswith(".")
        )
