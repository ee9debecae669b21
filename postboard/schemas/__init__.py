from postboard.schemas.auth import AuthPayloadOut, TokenClaims, UserView
from postboard.schemas.board import AuthorOut, CommentOut, PostOut

__all__ = [
    "AuthPayloadOut",
    "AuthorOut",
    "CommentOut",
    "PostOut",
    "TokenClaims",
    "UserView",
]
