from postboard.models.user import User
from postboard.models.post import Post
from postboard.models.comment import Comment

__all__ = ["User", "Post", "Comment"]
