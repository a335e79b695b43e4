import logging

from app.services.image_service import copy_images
from app.settings import settings

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        copy_images(settings.images_path, settings.static_images_path)
    except Exception as e:
        logger.error(f"Copying post images failed: {e}", exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
