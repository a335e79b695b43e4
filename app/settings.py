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

    # Content
    POSTS_DIR: str = "posts"
    IMAGES_SUBDIR: str = "images"
    STATIC_DIR: str = "public"
    COPY_IMAGES_ON_STARTUP: bool = True

    # Images
    IMAGE_BASE_URL: str = "/api/posts-images"
    IMAGE_CACHE_MAX_AGE: int = 86400

    # Site
    SITE_TITLE: str = "expfrom.me"
    SITE_DESCRIPTION: str = "A collection of blog posts on various topics."
    SITE_URL: str = "https://expfrom.me"
    OG_IMAGE: str = "/og-image.png"
    BLOG_DESCRIPTION: str = "フロントエンド、技術、何かしらの備忘録などを言語化する。"

    # Rendering
    RELATIVE_TIME_LOCALE: str = "ja"
    HIGHLIGHT_STYLE: str = "default"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def images_path(self) -> Path:
        return self.posts_path / self.IMAGES_SUBDIR

    @property
    def static_images_path(self) -> Path:
        return Path(self.STATIC_DIR) / "images"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
