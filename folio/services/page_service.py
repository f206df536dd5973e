import logging

from markupsafe import Markup

from folio.templating import render_page

logger = logging.getLogger(__name__)


class PageService:
    """Assembles post data and rendered markdown into complete HTML pages."""

    def __init__(self, posts_service, renderer, settings):
        self.posts_service = posts_service
        self.renderer = renderer
        self.settings = settings

    def home(self) -> str:
        posts = self.posts_service.list_posts()
        return render_page("home.html", site=self.settings, posts=posts)

    def blog_index(self) -> str:
        posts = self.posts_service.list_posts()
        return render_page(
            "blogs.html", site=self.settings, posts=posts, page_title="Blogs"
        )

    def post(self, slug: str) -> str:
        post = self.posts_service.get_post(slug)
        body = Markup(self.renderer.render(post.content, slug))
        return render_page(
            "post.html",
            site=self.settings,
            post=post,
            body=body,
            page_title=post.title,
            page_description=post.spoiler,
        )

    def not_found(self) -> str:
        return render_page("not_found.html", site=self.settings, page_title="Not found")

    def server_error(self, message: str) -> str:
        # Renders from settings only, so it works while the content store is down.
        return render_page(
            "error.html", site=self.settings, message=message, page_title="Error"
        )
