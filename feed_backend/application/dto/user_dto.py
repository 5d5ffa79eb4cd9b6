from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str
    status: str


class UserStatusResponse(BaseModel):
    """DTO for the current user's status"""
    status: str


class UserStatusUpdateRequest(BaseModel):
    """DTO for changing the current user's status"""
    status: str
