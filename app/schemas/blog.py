from typing import List, Optional

from pydantic import BaseModel, Field

Tags = List[str]


class PostSummary(BaseModel):
    id: str
    slug: str
    title: str
    date: Optional[str] = None
    tags: Tags = Field(default_factory=list)
    summary: Optional[str] = None


class PostData(PostSummary):
    contentHtml: str = ""
