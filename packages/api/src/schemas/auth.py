# This project was developed with assistance from AI tools.
"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict


class UserContext(BaseModel):
    """Injected by the auth dependency into every authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
