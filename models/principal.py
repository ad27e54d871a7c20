from pydantic import BaseModel


class PrincipalDTO(BaseModel):
    """Authenticated caller as stored in the session registry."""
    id: int
    email: str | None = None
    bid: int | None = None
