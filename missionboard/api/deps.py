# missionboard/api/deps.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from missionboard.core.config import settings
from missionboard.constants.statuses import MemberRole
from missionboard.crud import crud_organization
from missionboard.db.session import get_db
from missionboard.middleware.error_handler import AuthorizationError, NotFoundError
from missionboard.models.organization import Organization
from missionboard.schemas.token import TokenPayload

# Tokens are issued by the upstream identity provider; `tokenUrl` only
# feeds the OpenAPI docs.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")


def get_current_user(token: str = Depends(oauth2_scheme)) -> TokenPayload:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
        token_data = TokenPayload(**payload)
    except (JWTError, ValueError):
        # Catches any error from jose or Pydantic validation
        raise credentials_exception

    return token_data


def check_org_access(org_id: str, current_user: TokenPayload) -> None:
    if current_user.org_id != org_id:
        raise AuthorizationError("Not authorized")


def require_admin(current_user: TokenPayload) -> None:
    if current_user.role != MemberRole.ADMIN.value:
        raise AuthorizationError("Admin role required")


def get_current_organization(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(get_current_user),
) -> Organization:
    """
    Resolves the organization in the path, which must be the caller's own.
    Used by routes that create rows pointing at the organization.
    """
    check_org_access(orgId, current_user)
    organization = crud_organization.organization.get(db, id=orgId)
    if organization is None:
        raise NotFoundError("Organization not found")
    return organization
