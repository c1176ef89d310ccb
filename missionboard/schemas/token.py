# missionboard/schemas/token.py
from pydantic import BaseModel, Field
from typing import Optional


class TokenPayload(BaseModel):
    sub: str  # "sub" is the standard claim for subject (user ID)
    # Parses 'orgId' from the token into 'org_id'
    org_id: Optional[str] = Field(default=None, alias="orgId")
    role: Optional[str] = None
    exp: int  # Standard claim for expiration time

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
