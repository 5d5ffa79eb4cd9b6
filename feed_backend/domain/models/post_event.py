from dataclasses import dataclass
from typing import Any, Dict

from ..constants.post_fields import PostActions


@dataclass(frozen=True)
class PostEvent:
    """Realtime notification of a post lifecycle change"""
    action: str
    # Serialized post for create/update, post id for delete
    post: Any

    def __post_init__(self) -> None:
        if self.action not in PostActions.ALL:
            raise ValueError(f"Unknown post event action: {self.action}")

    def to_payload(self) -> Dict[str, Any]:
        return {"action": self.action, "post": self.post}
