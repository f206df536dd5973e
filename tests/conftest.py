import textwrap
from pathlib import Path

import pytest

from folio.errors import NotFoundError
from folio.settings import Settings


def write_post(root: Path, slug: str, raw: str) -> Path:
    """Create <root>/<slug>/index.md from an indented literal."""
    post_dir = root / slug
    post_dir.mkdir(parents=True, exist_ok=True)
    path = post_dir / "index.md"
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A small content store with three dated posts and one image."""
    root = tmp_path / "blogs"
    write_post(
        root,
        "hello-world",
        """
        ---
        title: "Hello World"
        date: "2024-01-01"
        spoiler: "The first one"
        ---
        Welcome to the blog.

        ![A cat](./cat.png)
        """,
    )
    write_post(
        root,
        "second-post",
        """
        ---
        title: "Second Post"
        date: "2024-03-15"
        spoiler: "More words"
        ---
        Some "quoted" text -- with a dash.

        ```python
        def greet():
            return "hi"
        ```
        """,
    )
    write_post(
        root,
        "old-news",
        """
        ---
        title: "Old News"
        date: "2019-07-04"
        spoiler: "Ancient history"
        ---
        Nothing to see.
        """,
    )
    (root / "hello-world" / "cat.png").write_bytes(b"\x89PNG\r\n")
    return root


@pytest.fixture
def site_settings(content_root: Path) -> Settings:
    return Settings(
        CONTENT_ROOT=str(content_root),
        SITE_TITLE="Test Blog",
        SITE_DESCRIPTION="Notes and posts",
        AUTHOR_NAME="Sam",
        AUTHOR_INTRO="I write software.\nI like music.",
        GITHUB_URL="https://github.com/example",
    )


class FakeRepo:
    """
    Minimal in-memory repo stand-in used in service tests.
    """

    def __init__(self, docs: dict[str, str]):
        self.docs = docs
        self.calls = []

    def list_slugs(self):
        self.calls.append("list_slugs")
        return sorted(self.docs)

    def read_post(self, slug: str) -> str:
        self.calls.append(slug)
        if slug not in self.docs or self.docs[slug] is None:
            raise NotFoundError(slug)
        return textwrap.dedent(self.docs[slug]).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self, list_posts_return=None, get_post_return=None, list_slugs_return=None
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._list_slugs_return = list_slugs_return or []

    def list_post_slugs(self):
        return self._list_slugs_return

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        if self._get_post_return is None:
            raise NotFoundError(slug)
        return self._get_post_return
