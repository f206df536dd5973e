import logging
from urllib.parse import urlparse

import markdown
from markdown.extensions import Extension
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.treeprocessors import Treeprocessor
from pygments.formatters import HtmlFormatter

logger = logging.getLogger(__name__)

# Must run after the "inline" tree processor (priority 20) has built <img> nodes.
IMAGE_SRC_PRIORITY = 15


def rewrite_image_src(src: str, slug: str, url_prefix: str = "/blogs") -> str:
    """
    Point a post-relative image URL at the post's asset route.
    Absolute and parent-relative URLs are returned unchanged.
    """
    if not src or _is_absolute(src):
        return src
    filename = src
    while filename.startswith("./"):
        filename = filename[2:]
    if not filename or filename.startswith("../"):
        return src
    return f"{url_prefix.rstrip('/')}/{slug}/{filename}"


def _is_absolute(src: str) -> bool:
    return src.startswith(("/", "#")) or bool(urlparse(src).scheme)


class ImageSrcTreeprocessor(Treeprocessor):
    """Rewrite relative <img> sources found directly inside paragraphs."""

    def __init__(self, md, slug: str, url_prefix: str):
        super().__init__(md)
        self.slug = slug
        self.url_prefix = url_prefix

    def run(self, root):
        for paragraph in root.iter("p"):
            for image in paragraph.findall("img"):
                src = image.get("src", "")
                rewritten = rewrite_image_src(src, self.slug, self.url_prefix)
                if rewritten != src:
                    logger.debug(f"Rewrote image src: {src} -> {rewritten}")
                    image.set("src", rewritten)
        return None


class ImageSrcExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "slug": ["", "Slug of the post being rendered"],
            "url_prefix": ["/blogs", "URL prefix of post asset routes"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.treeprocessors.register(
            ImageSrcTreeprocessor(
                md, self.getConfig("slug"), self.getConfig("url_prefix")
            ),
            "image_src",
            IMAGE_SRC_PRIORITY,
        )


class MarkdownRenderer:
    def __init__(
        self,
        url_prefix: str = "/blogs",
        highlight_style: str = "default",
        css_class: str = "highlight",
    ):
        self.url_prefix = url_prefix
        self.highlight_style = highlight_style
        self.css_class = css_class

    def extensions(self, slug: str) -> list:
        """Ordered pipeline: image URLs, smart punctuation, highlighted code."""
        return [
            ImageSrcExtension(slug=slug, url_prefix=self.url_prefix),
            "smarty",
            FencedCodeExtension(),
            CodeHiliteExtension(css_class=self.css_class, guess_lang=False),
        ]

    def render(self, content: str, slug: str) -> str:
        # A fresh instance per call; Markdown objects carry per-document state.
        md = markdown.Markdown(extensions=self.extensions(slug))
        return md.convert(content or "")

    def stylesheet(self) -> str:
        formatter = HtmlFormatter(style=self.highlight_style)
        return formatter.get_style_defs(f".{self.css_class}")
