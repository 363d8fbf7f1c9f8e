from .auth_controller import router as auth_router
from .profile_controller import router as profile_router
from .post_controller import router as post_router
from .health_controller import router as health_router

__all__ = ["auth_router", "profile_router", "post_router", "health_router"]
