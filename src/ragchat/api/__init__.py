from ragchat.api.chat import build_chat_router
from ragchat.api.health import build_health_router

__all__ = [
    "build_chat_router",
    "build_health_router",
]
