"""Authentication-related Pydantic schemas."""
from pydantic import BaseModel, ConfigDict


class SessionIdentity(BaseModel):
    """
    Authenticated caller, resolved from the session cookie.

    Passed explicitly into the workflows that need it rather than read
    from request state.
    """
    model_config = ConfigDict(frozen=True)

    username: str
    is_admin: bool = False
