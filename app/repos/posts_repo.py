import logging
from pathlib import Path
from typing import List

import frontmatter

logger = logging.getLogger(__name__)


class FilePostsRepo:
    def __init__(self, posts_dir: Path | str):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[Path]:
        if not self.posts_dir.is_dir():
            logger.warning(f"Posts directory does not exist: {self.posts_dir}")
            return []
        return sorted(
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and path.suffix == ".md"
        )

    def load(self, path: Path) -> frontmatter.Post:
        return frontmatter.load(str(path), encoding="utf-8")
