from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content store
    CONTENT_ROOT: str = "public/blogs"
    BLOG_URL_PREFIX: str = "/blogs"

    # Site chrome
    SITE_TITLE: str = "Blog"
    SITE_DESCRIPTION: str = ""
    AUTHOR_NAME: str = ""
    AUTHOR_INTRO: str = ""
    TWITTER_URL: str = ""
    GITHUB_URL: str = ""

    # Rendering
    HIGHLIGHT_STYLE: str = "default"

    # Static export
    EXPORT_DIR: str = "dist"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_root(self) -> Path:
        return Path(self.CONTENT_ROOT)

    @property
    def external_links(self) -> list[tuple[str, str]]:
        links = [("Twitter", self.TWITTER_URL), ("Github", self.GITHUB_URL)]
        return [(label, url) for label, url in links if url]


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
