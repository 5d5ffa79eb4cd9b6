from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request (validated by the use case)"""
    email: str
    name: str
    password: str


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: str
    password: str


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str
    user_id: str
    token_type: str = "bearer"
