import textwrap
from pathlib import Path

import frontmatter


def write_post(posts_dir: Path, name: str, raw: str) -> Path:
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


class FakeRepo:
    """
    Minimal in-memory repo stand-in used in service tests.
    """

    def __init__(self, posts: dict[str, str]):
        self.posts = posts
        self.loaded = []

    def list_post_files(self):
        return [Path(f"posts/{name}") for name in self.posts]

    def load(self, path: Path):
        self.loaded.append(path.name)
        raw = self.posts[path.name]
        if raw is None:
            raise OSError(f"cannot read {path}")
        return frontmatter.loads(textwrap.dedent(raw).lstrip())


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, posts=None, tags=None, post=None, error=None):
        self._posts = posts or []
        self._tags = tags or []
        self._post = post
        self._error = error

    def get_all_posts_data(self):
        if self._error:
            raise self._error
        return self._posts

    def get_all_tags(self):
        return self._tags

    def get_post_data(self, slug: str):
        if self._error:
            raise self._error
        if self._post is None:
            from app.services.posts_service import PostNotFoundError

            raise PostNotFoundError(slug)
        return self._post
