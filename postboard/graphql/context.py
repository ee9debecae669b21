"""GraphQL context: carries the viewer, store and relation loader into resolvers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from fastapi import Request
from strawberry.fastapi import BaseContext

from postboard.core.config import Settings
from postboard.core.security import verify_token
from postboard.db.store import EntityStore
from postboard.graphql.loaders import RelationLoader, make_relation_loader
from postboard.schemas.auth import UserView

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Authenticated:
    user: UserView


@dataclass(frozen=True)
class Anonymous:
    pass


Viewer = Union[Authenticated, Anonymous]


def resolve_viewer(
    authorization: str | None,
    store: EntityStore,
    settings: Settings,
) -> Viewer:
    """Derive the viewer from an ``Authorization`` header value.

    Any failure (missing header, wrong scheme, bad signature, expired token,
    unknown user) yields ``Anonymous()``. This function never raises.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return Anonymous()

    token = authorization[len(BEARER_PREFIX):].strip()
    user_id = verify_token(token, settings)
    if user_id is None:
        logger.debug("Invalid credential, continuing as anonymous")
        return Anonymous()

    user = store.find_user_by_id(user_id)
    if user is None:
        logger.debug(f"Credential for unknown user {user_id}, continuing as anonymous")
        return Anonymous()

    return Authenticated(user=UserView.model_validate(user))


class GraphQLContext(BaseContext):
    """Context passed to every GraphQL resolver."""

    def __init__(
        self,
        viewer: Viewer,
        store: EntityStore,
        settings: Settings,
        loader: RelationLoader,
    ) -> None:
        super().__init__()
        self.viewer = viewer
        self.store = store
        self.settings = settings
        self.loader = loader

    @property
    def user(self) -> UserView | None:
        return self.viewer.user if isinstance(self.viewer, Authenticated) else None


async def get_context(request: Request) -> GraphQLContext:
    """Context factory passed to the strawberry router."""
    store: EntityStore = request.app.state.store
    settings: Settings = request.app.state.settings
    viewer = resolve_viewer(request.headers.get("authorization"), store, settings)
    return GraphQLContext(
        viewer=viewer,
        store=store,
        settings=settings,
        loader=make_relation_loader(store, settings),
    )
