"""Comment record, created only through the addComment mutation."""
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Comment:
    id: int
    text: str
    post_id: int  # not checked against existing posts
    user_id: int
    created_at: datetime

    def created_at_iso(self) -> str:
        """ISO-8601 UTC with millisecond precision and a trailing Z."""
        return self.created_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
