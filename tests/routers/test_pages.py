import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from folio import dependencies as deps
from folio.routers import pages
from folio.services.page_service import PageService
from folio.settings import Settings


def make_client(current_settings: Settings) -> TestClient:
    app = FastAPI()
    app.dependency_overrides[deps.get_settings] = lambda: current_settings
    app.include_router(pages.router)
    return TestClient(app)


@pytest.fixture
def client(site_settings):
    return make_client(site_settings)


def test_home_page(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Second Post" in res.text
    assert 'href="/blogs/old-news"' in res.text


def test_blog_index_page(client):
    res = client.get("/blogs")

    assert res.status_code == 200
    assert res.text.index("Second Post") < res.text.index("Old News")


def test_blog_post_page(client):
    res = client.get("/blogs/hello-world")

    assert res.status_code == 200
    assert "<h1>Hello World</h1>" in res.text
    assert 'src="/blogs/hello-world/cat.png"' in res.text


def test_blog_post_page_returns_404_page(client):
    res = client.get("/blogs/missing")

    assert res.status_code == 404
    assert "Post not found" in res.text


def test_blog_asset_serves_image(client):
    res = client.get("/blogs/hello-world/cat.png")

    assert res.status_code == 200
    assert res.content == b"\x89PNG\r\n"
    assert res.headers["content-type"] == "image/png"
    assert res.headers["Content-Length"] == "6"
    assert res.headers["Accept-Ranges"] == "bytes"


@pytest.mark.parametrize("path", ["/blogs/hello-world/dog.png", "/blogs/hello-world/index.md"])
def test_blog_asset_returns_404(client, path):
    res = client.get(path)

    assert res.status_code == 404
    assert res.json()["detail"] == "Image not found"


def test_highlight_css(client):
    res = client.get("/highlight.css")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/css")
    assert ".highlight" in res.text


def test_pages_return_html_500_when_content_root_missing(tmp_path):
    client = make_client(Settings(CONTENT_ROOT=str(tmp_path / "missing")))

    for path in ("/", "/blogs"):
        res = client.get(path)
        assert res.status_code == 500
        assert res.headers["content-type"].startswith("text/html")
        assert "Failed to retrieve posts" in res.text
        assert "Back to Home" in res.text


def test_post_page_returns_html_500_on_unexpected_error(site_settings):
    class BoomPages(PageService):
        def post(self, slug):
            raise RuntimeError("boom")

    boom = BoomPages(posts_service=None, renderer=None, settings=site_settings)
    app = FastAPI()
    app.dependency_overrides[deps.get_page_service] = lambda: boom
    app.include_router(pages.router)

    res = TestClient(app).get("/blogs/anything")

    assert res.status_code == 500
    assert res.headers["content-type"].startswith("text/html")
    assert "Failed to retrieve post" in res.text
    assert "<title>Error | Test Blog</title>" in res.text
