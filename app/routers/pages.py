import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.services.posts_service import PostNotFoundError, PostsService
from app.settings import Settings, get_settings
from app.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(request, "index.html")


@router.get("/blog", response_class=HTMLResponse)
def blog_index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """List every post with the tags used across the blog."""
    try:
        all_posts_data = service.get_all_posts_data()
        all_tags = service.get_all_tags()
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")

    metadata = {
        "title": "Blog",
        "description": current_settings.SITE_DESCRIPTION,
        "image": current_settings.OG_IMAGE,
        "url": current_settings.SITE_URL,
    }
    return templates.TemplateResponse(
        request,
        "blog.html",
        {"all_posts_data": all_posts_data, "all_tags": all_tags, "metadata": metadata},
    )


@router.get("/blog/{slug}", response_class=HTMLResponse)
def post_page(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Render a single post."""
    try:
        post_data = service.get_post_data(slug)
    except PostNotFoundError as e:
        logger.info(str(e))
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    return templates.TemplateResponse(
        request,
        "post.html",
        {"post": post_data, "metadata": {"title": post_data.title}},
    )
