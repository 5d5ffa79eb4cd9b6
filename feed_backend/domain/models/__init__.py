from .user import User
from .post import Post
from .auth_context import AuthContext
from .post_event import PostEvent

__all__ = ["User", "Post", "AuthContext", "PostEvent"]
