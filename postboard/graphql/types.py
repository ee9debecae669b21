"""Strawberry object types for users, posts, comments and login payloads."""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from postboard.models import Comment, Post, User
from postboard.schemas.auth import UserView


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str
    name: str

    @classmethod
    def from_view(cls, view: UserView) -> "UserType":
        return cls(id=strawberry.ID(str(view.id)), email=view.email, name=view.name)

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls.from_view(UserView.model_validate(user))


async def _author(info: Info, user_id: int) -> Optional[UserType]:
    # Dangling user ids resolve to null instead of failing the request.
    user = await info.context.loader.user(user_id)
    return UserType.from_model(user) if user else None


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    text: str
    created_at: str
    user_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        return cls(
            id=strawberry.ID(str(comment.id)),
            text=comment.text,
            created_at=comment.created_at_iso(),
            user_id=comment.user_id,
        )

    @strawberry.field
    async def author(self, info: Info) -> Optional[UserType]:
        return await _author(info, self.user_id)


@strawberry.type(name="Post")
class PostType:
    id: strawberry.ID
    title: str
    content: str
    post_id: strawberry.Private[int]
    author_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, post: Post) -> "PostType":
        return cls(
            id=strawberry.ID(str(post.id)),
            title=post.title,
            content=post.content,
            post_id=post.id,
            author_id=post.author_id,
        )

    @strawberry.field
    async def author(self, info: Info) -> Optional[UserType]:
        return await _author(info, self.author_id)

    @strawberry.field
    async def comments(self, info: Info) -> List[CommentType]:
        comments = await info.context.loader.comments(self.post_id)
        return [CommentType.from_model(c) for c in comments]

    @strawberry.field
    async def comment_count(self, info: Info) -> int:
        return await info.context.loader.comment_count(self.post_id)


@strawberry.type(name="AuthPayload")
class AuthPayloadType:
    token: str
    user: UserType
