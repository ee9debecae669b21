"""
In-memory entity store for users, posts and comments.

Every lookup is a linear scan over plain lists; there are no indices.
Each read is recorded in ``accesses`` so callers can observe how many
times the backing data was hit during a request.
"""
import logging
import threading
from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timezone

from postboard.models import Comment, Post, User

logger = logging.getLogger(__name__)


class EntityStore:
    """Owns the users/posts/comments collections and the comment id counter."""

    def __init__(
        self,
        users: Iterable[User] = (),
        posts: Iterable[Post] = (),
    ):
        self.users: list[User] = list(users)
        self.posts: list[Post] = list(posts)
        self.comments: list[Comment] = []
        self.accesses: Counter[str] = Counter()
        self._next_comment_id = 1
        self._write_lock = threading.Lock()

    # ---------- stats ----------

    def _record(self, operation: str) -> None:
        self.accesses[operation] += 1

    @property
    def access_count(self) -> int:
        return sum(self.accesses.values())

    def reset_stats(self) -> None:
        self.accesses.clear()

    # ---------- users ----------

    def find_user_by_credentials(
        self,
        email: str,
        password: str,
        case_insensitive: bool = False,
    ) -> User | None:
        """Match email and password.

        By default the email comparison is exact, so ``John@Example.com``
        does not match the stored ``john@example.com``. Pass
        ``case_insensitive=True`` for the corrected lookup.
        """
        self._record("find_user_by_credentials")
        if case_insensitive:
            wanted = email.casefold()
            return next(
                (u for u in self.users if u.email.casefold() == wanted and u.password == password),
                None,
            )
        return next((u for u in self.users if u.email == email and u.password == password), None)

    def find_user_by_id(self, user_id: int) -> User | None:
        self._record("find_user_by_id")
        return next((u for u in self.users if u.id == user_id), None)

    def users_by_ids(self, user_ids: Iterable[int]) -> dict[int, User]:
        """One pass over users for a whole set of ids."""
        self._record("users_by_ids")
        wanted = set(user_ids)
        return {u.id: u for u in self.users if u.id in wanted}

    # ---------- posts ----------

    def all_posts(self) -> list[Post]:
        self._record("all_posts")
        return list(self.posts)

    def find_post_by_id(self, post_id: int) -> Post | None:
        self._record("find_post_by_id")
        return next((p for p in self.posts if p.id == post_id), None)

    # ---------- comments ----------

    def comments_for_post(self, post_id: int) -> list[Comment]:
        self._record("comments_for_post")
        return [c for c in self.comments if c.post_id == post_id]

    def comment_count_for_post(self, post_id: int) -> int:
        # Separate scan; does not reuse comments_for_post.
        self._record("comment_count_for_post")
        return sum(1 for c in self.comments if c.post_id == post_id)

    def comments_for_posts(self, post_ids: Iterable[int]) -> dict[int, list[Comment]]:
        """Group comments for a set of posts in one pass, keeping insertion order."""
        self._record("comments_for_posts")
        grouped: dict[int, list[Comment]] = {post_id: [] for post_id in post_ids}
        for c in self.comments:
            if c.post_id in grouped:
                grouped[c.post_id].append(c)
        return grouped

    def comment_counts_for_posts(self, post_ids: Iterable[int]) -> dict[int, int]:
        self._record("comment_counts_for_posts")
        counts = {post_id: 0 for post_id in post_ids}
        for c in self.comments:
            if c.post_id in counts:
                counts[c.post_id] += 1
        return counts

    def add_comment(self, post_id: int, user_id: int, text: str) -> Comment:
        """Append a comment. ``post_id`` is stored as given, even if no such post exists."""
        with self._write_lock:
            comment = Comment(
                id=self._next_comment_id,
                text=text,
                post_id=post_id,
                user_id=user_id,
                created_at=datetime.now(timezone.utc),
            )
            self._next_comment_id += 1
            self.comments.append(comment)
        logger.info(f"Comment {comment.id} added to post {post_id} by user {user_id}")
        return comment
