import logging
import mimetypes
import re
import shutil
from pathlib import Path
from typing import List, Sequence


logger = logging.getLogger(__name__)


class ImageAccessDenied(PermissionError):
    """Requested path resolves outside the image directory."""


class ImageNotFound(FileNotFoundError):
    """Requested path does not point at a regular file."""


IMAGE_EXTENSIONS = r"(?:png|jpg|jpeg|gif|svg|webp|avif)"

obsidian_pattern = re.compile(r"!\[\[([^\]]+\." + IMAGE_EXTENSIONS + r")\]\]", re.IGNORECASE)
relative_path_pattern = re.compile(
    r"""!\[\s*([^\]]*?)\s*\]\(\s*(?:\.{1,2}/|/)?images/([^)\s]+)(\s+(?:"[^"]*"|'[^']*'))?\s*\)"""
)


def process_image_references(content: str, base_url: str) -> str:
    """
    Rewrite post-relative image references so they point at the image endpoint
    """
    base_url = base_url.rstrip("/")

    # Replace Obsidian image references
    content = obsidian_pattern.sub(lambda m: f"![]({base_url}/{m.group(1)})", content)

    # Replace images/, ./images/, ../images/ and /images/ paths
    content = relative_path_pattern.sub(
        lambda m: f"![{m.group(1)}]({base_url}/{m.group(2)}{m.group(3) or ''})", content
    )

    return content


def resolve_image_path(images_dir: Path | str, segments: Sequence[str]) -> Path:
    """
    Map a list of URL path segments to a file under the image directory.
    """
    root = Path(images_dir).resolve()
    candidate = root.joinpath(*segments).resolve()

    if candidate != root and root not in candidate.parents:
        raise ImageAccessDenied(f"{'/'.join(segments)} escapes {root}")

    if not candidate.is_file():
        raise ImageNotFound(str(candidate))

    return candidate


def get_content_type_from_filename(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename.lower())
    return content_type or "application/octet-stream"


def copy_images(src_dir: Path | str, dest_dir: Path | str) -> List[Path]:
    """
    Copy the post image tree into the static directory, replacing what was there
    """
    src_dir = Path(src_dir)
    dest_dir = Path(dest_dir)

    dest_dir.mkdir(parents=True, exist_ok=True)

    if not src_dir.exists():
        logger.info(f"{src_dir} does not exist. Creating...")
        src_dir.mkdir(parents=True, exist_ok=True)

    # Clear the previous copy
    for entry in dest_dir.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()

    copied = []
    for src_path in sorted(src_dir.rglob("*")):
        dest_path = dest_dir / src_path.relative_to(src_dir)
        if src_path.is_dir():
            dest_path.mkdir(parents=True, exist_ok=True)
            continue
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, dest_path)
        logger.info(f"Copied: {src_path} -> {dest_path}")
        copied.append(dest_path)

    logger.info(f"Images copied successfully ({len(copied)} files)")
    return copied
