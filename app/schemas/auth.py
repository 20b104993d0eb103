from pydantic import BaseModel, Field


class Credentials(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    access_token: str = Field(serialization_alias="accessToken")
