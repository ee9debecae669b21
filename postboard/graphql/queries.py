"""Query resolvers."""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from postboard.graphql.types import PostType, UserType


@strawberry.type
class Query:
    @strawberry.field
    def posts(self, info: Info) -> List[PostType]:
        """All posts in insertion order; no viewer restriction."""
        return [PostType.from_model(p) for p in info.context.store.all_posts()]

    @strawberry.field
    def me(self, info: Info) -> Optional[UserType]:
        """The authenticated viewer, or null when anonymous."""
        user = info.context.user
        return UserType.from_view(user) if user else None
