from jose import jwt
from missionboard.core.config import settings
from missionboard.schemas.token import TokenPayload


def get_user_authentication_headers(
    org_id: str, user_id: str = "user_test", role: str = "ADMIN", exp: int = 9999999999
) -> dict[str, str]:
    """
    Generates a signed JWT and authentication headers for a test user.
    """
    payload = TokenPayload(sub=user_id, org_id=org_id, role=role, exp=exp)
    token = jwt.encode(
        payload.model_dump(by_alias=True), settings.JWT_SECRET, algorithm="HS256"
    )
    return {"Authorization": f"Bearer {token}"}
