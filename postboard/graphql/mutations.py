"""Mutation resolvers: login and addComment."""
import logging
from typing import Optional

import strawberry
from strawberry.types import Info

from postboard.core.errors import (
    AuthenticationError,
    InvalidCredentialsError,
    PostboardError,
    ValidationError,
)
from postboard.core.security import issue_token
from postboard.graphql.types import AuthPayloadType, CommentType, UserType

logger = logging.getLogger(__name__)

# Returned to anonymous callers unless explicit_auth_errors is on.
ADD_COMMENT_FAILED = "Failed to add comment"


@strawberry.type
class Mutation:
    @strawberry.mutation
    def login(self, info: Info, email: str, password: str) -> Optional[AuthPayloadType]:
        store = info.context.store
        settings = info.context.settings

        user = store.find_user_by_credentials(
            email,
            password,
            case_insensitive=settings.case_insensitive_login,
        )
        if user is None:
            logger.warning(f"Failed login for {email!r}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return AuthPayloadType(
            token=issue_token(user.id, settings),
            user=UserType.from_model(user),
        )

    @strawberry.mutation
    def add_comment(self, info: Info, post_id: int, text: str) -> Optional[CommentType]:
        """Create a comment as the viewer. The author always comes from the credential."""
        settings = info.context.settings
        viewer = info.context.user

        if viewer is None:
            if settings.explicit_auth_errors:
                raise AuthenticationError()
            raise PostboardError(ADD_COMMENT_FAILED)

        if not text:
            raise ValidationError("Comment text is required")
        if settings.strict_comment_validation and not text.strip():
            raise ValidationError("Comment text is required")

        store = info.context.store
        if store.find_post_by_id(post_id) is None:
            # Stored anyway; it just never shows up under a post.
            logger.warning(f"Comment for unknown post {post_id} from user {viewer.id}")

        comment = store.add_comment(post_id=post_id, user_id=viewer.id, text=text)
        return CommentType.from_model(comment)
