from fastapi import Depends

from app.repos.posts_repo import FilePostsRepo
from app.services.posts_service import PostsService
from app.settings import Settings, get_settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.posts_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, image_base_url=current_settings.IMAGE_BASE_URL)
