import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.routers import images, pages
from app.services.image_service import copy_images
from app.settings import settings
from app.templating import templates

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="expfrom.me", description="Personal blog rendered from markdown")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.COPY_IMAGES_ON_STARTUP:
        copy_images(settings.images_path, settings.static_images_path)
        logger.info(f"Post images copied to {settings.static_images_path}")
    yield


app.router.lifespan_context = lifespan

app.include_router(images.router)
app.include_router(pages.router)

app.mount(
    "/images",
    StaticFiles(directory=str(settings.static_images_path), check_dir=False),
    name="images",
)


@app.exception_handler(StarletteHTTPException)
async def render_http_error(request: Request, exc: StarletteHTTPException):
    # Custom methods never reach the image route; keep its JSON error shape
    if exc.status_code == 405 and request.url.path.startswith(images.IMAGE_ROUTE_PREFIX):
        return images.method_not_allowed()
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": exc.status_code, "detail": exc.detail, "metadata": {}},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
