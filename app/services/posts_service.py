import datetime
import logging
from typing import Iterator, List, Optional, Tuple

import frontmatter

from app.schemas.blog import PostData, PostSummary, Tags
from app.services.content_parser import render_post_content

logger = logging.getLogger(__name__)


class PostNotFoundError(LookupError):
    def __init__(self, slug: str):
        super().__init__(f"Post with slug '{slug}' not found")
        self.slug = slug


class PostsService:
    def __init__(self, repo, image_base_url: str):
        self.repo = repo
        self.image_base_url = image_base_url

    def get_all_posts_data(self) -> List[PostSummary]:
        posts = []
        for post_id, parsed in self._iter_posts():
            try:
                posts.append(PostSummary(**parse_post_metadata(post_id, parsed.metadata)))
            except Exception as e:
                logger.warning(f"Failed to parse post {post_id}: {e}")

        posts.sort(key=lambda p: p.date or "", reverse=True)
        return posts

    def get_post_data(self, slug: str) -> PostData:
        for post_id, parsed in self._iter_posts():
            post_data = parse_post_metadata(post_id, parsed.metadata)
            if post_data["slug"] != slug:
                continue
            post_data["contentHtml"] = render_post_content(
                parsed.content, self.image_base_url
            )
            return PostData(**post_data)

        raise PostNotFoundError(slug)

    def get_all_tags(self) -> Tags:
        seen = {}
        for _post_id, parsed in self._iter_posts():
            for tag in _normalize_tags(parsed.metadata.get("tags")):
                seen.setdefault(tag, None)
        return list(seen)

    def _iter_posts(self) -> Iterator[Tuple[str, frontmatter.Post]]:
        for path in self.repo.list_post_files():
            try:
                yield path.stem, self.repo.load(path)
            except Exception as e:
                logger.warning(f"Skipping unreadable post {path}: {e}")


def parse_post_metadata(post_id: str, metadata: dict) -> dict:
    """Map front-matter onto the post fields shared by listings and detail pages."""
    metadata = metadata or {}
    return {
        "id": post_id,
        "slug": str(metadata.get("slug") or post_id),
        "title": _derive_title(metadata, post_id),
        "date": _convert_date(metadata.get("date")),
        "tags": _normalize_tags(metadata.get("tags")),
        "summary": _normalize_summary(metadata.get("summary")),
    }


def _derive_title(metadata: dict, post_id: str) -> str:
    if metadata.get("title"):
        return str(metadata["title"])
    return post_id.replace("-", " ").replace("_", " ").title()


def _normalize_tags(value) -> Tags:
    if not isinstance(value, list):
        return []
    return [str(tag) for tag in value if tag is not None]


def _normalize_summary(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _convert_date(value) -> Optional[str]:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)
