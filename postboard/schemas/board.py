"""Pydantic schemas for posts and comments as returned by the GraphQL API."""
from pydantic import BaseModel, Field


class AuthorOut(BaseModel):
    name: str
    email: str | None = None


class CommentOut(BaseModel):
    id: int
    text: str
    created_at: str = Field(alias="createdAt")
    author: AuthorOut | None = None

    class Config:
        populate_by_name = True


class PostOut(BaseModel):
    id: int
    title: str
    content: str
    author: AuthorOut | None = None
    comment_count: int = Field(alias="commentCount")
    comments: list[CommentOut] = []

    class Config:
        populate_by_name = True


__all__ = ["AuthorOut", "CommentOut", "PostOut"]
