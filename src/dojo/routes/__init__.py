from dojo.routes.index import build_index_router
from dojo.routes.warrior import build_warrior_router

__all__ = ["build_index_router", "build_warrior_router"]
