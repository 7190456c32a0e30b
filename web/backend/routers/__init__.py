"""API route handlers."""

from .users import router as users_router
from .matches import router as matches_router
from .sessions import router as sessions_router
from .reviews import router as reviews_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .rewards import router as rewards_router
