# app/models/users.py

from typing import Optional

from pydantic import BaseModel, Field


class UserOut(BaseModel):
    id: int
    name: str
    email: str


class UserCreate(BaseModel):
    name: str = Field(..., description="User name", examples=["John Doe"])
    email: str = Field(..., description="User email", examples=["test@test.pl"])


class UserPatch(BaseModel):
    name: Optional[str] = Field(default=None, description="User name", examples=["John Doe"])
    email: Optional[str] = Field(default=None, description="User email", examples=["test@test.pl"])
