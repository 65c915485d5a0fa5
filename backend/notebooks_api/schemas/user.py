"""
Notebooks API — User Schemas
=============================

What:  Pydantic models for the user endpoints' request bodies and error body.
Who:   Built by UserController after its own required-field check, then
       handed to the injected UserService.

Why the controller checks fields itself:
    A missing field must produce 400 `{"msg": "missing <field> value"}`
    naming the first absent field. FastAPI's automatic body validation would
    answer 422 with its own error format, so bodies are read as raw JSON and
    these models are only constructed from already-checked values.
"""

from pydantic import BaseModel, ConfigDict, Field


class CreateUserDTO(BaseModel):
    """
    What:  Account creation payload.
    Who:   POST /users.

    `full_name` travels as `fullName` on the wire.
    """
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(description="Contact address, unique per user")
    full_name: str = Field(alias="fullName", description="Display name")
    password: str = Field(description="Plain password; hashed by the service")
    username: str = Field(description="Unique handle")


class UserLoginDTO(BaseModel):
    """Login payload for POST /users/login. `login` is a username or email."""
    login: str
    password: str


class MessageResponse(BaseModel):
    """Error body shared by every endpoint: `{"msg": "..."}`."""
    msg: str
