from dataclasses import dataclass, field
from typing import List, Optional

from ..constants.user_fields import UserFields


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    status: str = UserFields.DEFAULT_STATUS
    posts: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
