from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class RegisterRequest(BaseModel):
    # champs optionnels ici : la présence est vérifiée par user_service
    username: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = Field(None, alias="fullName")
    mobile_number: Optional[str] = Field(None, alias="mobileNumber")
    password: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""

class MessageResponse(BaseModel):
    message: str

class LoginResponse(BaseModel):
    message: str
    id: int = Field(serialization_alias="_id")
    username: str
    token: str
