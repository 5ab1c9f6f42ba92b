"""Update resolvers combining registry metadata with the update policy."""

from depbump.resolvers.base import BaseUpdateResolver
from depbump.resolvers.update import UpdateResolver, collect_updates

__all__ = [
    "BaseUpdateResolver",
    "UpdateResolver",
    "collect_updates",
]
