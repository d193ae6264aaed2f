__all__ = ["external_index_router", "internal_index_router", "user_router"]

from .external_index import router as external_index_router
from .internal_index import router as internal_index_router
from .user import router as user_router
