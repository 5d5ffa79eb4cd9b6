from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthContext:
    """
    Outcome of soft authentication for one inbound call.

    An anonymous context is a normal value, not an error: use cases decide
    whether the operation needs an identity.
    """
    is_auth: bool
    user_id: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls(is_auth=False)

    @classmethod
    def authenticated(cls, user_id: str, email: Optional[str] = None) -> "AuthContext":
        return cls(is_auth=True, user_id=user_id, email=email)
