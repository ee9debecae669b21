"""
HTTP client for the Postboard GraphQL API.

Issues the same documents as the web frontend, keeps the login token,
and can poll the post list for refreshed data.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from typing import Any, Optional

import httpx

from postboard.core.config import Settings, get_settings
from postboard.core.errors import GraphQLClientError
from postboard.schemas import AuthPayloadOut, CommentOut, PostOut, UserView

logger = logging.getLogger(__name__)

LOGIN_MUTATION = """
mutation Login($email: String!, $password: String!) {
  login(email: $email, password: $password) {
    token
    user { id email name }
  }
}
"""

GET_POSTS = """
query GetPosts {
  posts {
    id
    title
    content
    author { name email }
    commentCount
    comments {
      id
      text
      createdAt
      author { name email }
    }
  }
}
"""

ADD_COMMENT = """
mutation AddComment($postId: Int!, $text: String!) {
  addComment(postId: $postId, text: $text) {
    id
    text
    author { name }
    createdAt
  }
}
"""

GET_ME = """
query GetMe {
  me { id email name }
}
"""


class PostboardClient:
    """Thin GraphQL client. Pass ``http`` to reuse an existing ``httpx.Client``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
        token: Optional[str] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.api_base_url).rstrip("/")
        self.endpoint = self.settings.graphql_path
        self.token = token
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=self.base_url,
            timeout=self.settings.client_timeout,
        )

    def __enter__(self) -> PostboardClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # ---------- transport ----------

    def _headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def execute(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """POST one GraphQL document; return ``data`` or raise ``GraphQLClientError``."""
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = self._http.post(self.endpoint, json=payload, headers=self._headers())
        response.raise_for_status()
        body = response.json()

        errors = body.get("errors")
        if errors:
            raise GraphQLClientError([e.get("message", "") for e in errors])
        return body.get("data") or {}

    # ---------- operations ----------

    def login(self, email: str, password: str) -> AuthPayloadOut:
        data = self.execute(LOGIN_MUTATION, {"email": email, "password": password})
        payload = AuthPayloadOut.model_validate(data["login"])
        self.token = payload.token
        logger.info(f"Logged in as {payload.user.email}")
        return payload

    def logout(self) -> None:
        self.token = None

    def me(self) -> Optional[UserView]:
        """Current user. A token the server no longer accepts is discarded."""
        data = self.execute(GET_ME)
        if data.get("me") is None:
            if self.token:
                logger.info("Stored token rejected by server, discarding it")
            self.token = None
            return None
        return UserView.model_validate(data["me"])

    def posts(self) -> list[PostOut]:
        data = self.execute(GET_POSTS)
        return [PostOut.model_validate(p) for p in data["posts"]]

    def add_comment(self, post_id: int, text: str) -> CommentOut:
        data = self.execute(ADD_COMMENT, {"postId": post_id, "text": text})
        return CommentOut.model_validate(data["addComment"])

    def poll_posts(
        self,
        interval: Optional[float] = None,
        max_polls: Optional[int] = None,
    ) -> Iterator[list[PostOut]]:
        """Yield the post list every ``interval`` seconds (forever unless ``max_polls``)."""
        interval = self.settings.client_poll_interval if interval is None else interval
        polls = 0
        while max_polls is None or polls < max_polls:
            if polls:
                time.sleep(interval)
            yield self.posts()
            polls += 1
