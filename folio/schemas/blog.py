from typing import Optional

from pydantic import BaseModel


class PostSlug(BaseModel):
    slug: str


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    spoiler: Optional[str] = None
    date: Optional[str] = None


class PostDetail(PostSummary):
    content: str
