import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.services.image_service import (
    ImageAccessDenied,
    ImageNotFound,
    get_content_type_from_filename,
    resolve_image_path,
)
from app.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

IMAGE_ROUTE_PREFIX = "/api/posts-images"
ALL_METHODS = [
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "TRACE",
    "CONNECT",
]


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def method_not_allowed() -> JSONResponse:
    return _error(405, "Method not allowed", headers={"Allow": "GET"})


@router.api_route(IMAGE_ROUTE_PREFIX + "/{image_path:path}", methods=ALL_METHODS)
def get_post_image(
    image_path: str,
    request: Request,
    current_settings: Settings = Depends(get_settings),
):
    """
    Serve files from the post image directory
    """
    if request.method != "GET":
        return method_not_allowed()

    segments = [segment for segment in image_path.split("/") if segment]

    try:
        file_path = resolve_image_path(current_settings.images_path, segments)
        image_data = file_path.read_bytes()
    except ImageAccessDenied:
        logger.warning(f"Rejected image path outside image directory: {image_path}")
        return _error(403, "Access denied")
    except ImageNotFound:
        return _error(404, "File not found")
    except Exception as e:
        logger.error(f"Error serving image {image_path}: {e}")
        return _error(500, "Internal server error")

    headers = {
        "Cache-Control": f"public, max-age={current_settings.IMAGE_CACHE_MAX_AGE}",
        "Content-Length": str(len(image_data)),
    }

    return Response(
        content=image_data,
        media_type=get_content_type_from_filename(file_path.name),
        headers=headers,
    )
