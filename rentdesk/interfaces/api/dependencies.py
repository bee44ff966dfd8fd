"""FastAPI dependency utilities."""

from collections.abc import Callable
from hashlib import sha256

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import Role, User
from rentdesk.infrastructure.database import get_db
from rentdesk.infrastructure.notifications import Broadcaster
from rentdesk.infrastructure.repositories import UserRepository
from rentdesk.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

# Which roles may use each back-office capability.
CAPABILITIES: dict[str, frozenset[Role]] = {
    "cars:write": frozenset({Role.ADMIN, Role.EMPLOYEE}),
    "promotions:admin": frozenset({Role.ADMIN}),
    "content:write": frozenset({Role.ADMIN, Role.EMPLOYEE}),
    "activity:read": frozenset({Role.ADMIN}),
}


def password_signature(user: User) -> str:
    """Fingerprint embedded in tokens so password or status changes revoke them."""

    return sha256(f"{user.password}:{int(user.is_active)}".encode()).hexdigest()


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    email = payload.get("sub")
    signature = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature, str):
        raise _credentials_error()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _credentials_error("User not found")
    if signature != password_signature(user):
        raise _credentials_error()
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def require_capability(capability: str) -> Callable[..., User]:
    """Build a dependency that only lets roles holding ``capability`` through."""

    allowed = CAPABILITIES[capability]

    def _dependency(current_user: User = Depends(get_current_active_user)) -> User:
        if current_user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized",
            )
        return current_user

    return _dependency


def get_broadcaster(request: Request) -> Broadcaster:
    """Return the realtime broadcaster created at application startup."""

    return request.app.state.broadcaster


def get_notifier(
    db: Session = Depends(get_db),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> OperationalNotifier:
    """Return a notifier bound to the request session and the app broadcaster."""

    return OperationalNotifier(db, broadcaster)
