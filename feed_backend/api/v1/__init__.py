from .auth_controller import router as auth_router
from .feed_controller import router as feed_router
from .realtime_controller import router as realtime_router


__all__ = ["auth_router", "feed_router", "realtime_router"]
