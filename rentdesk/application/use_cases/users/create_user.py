"""Use case for creating back-office and customer accounts."""

from sqlalchemy.orm import Session

from rentdesk.domain.entities import Role, User
from rentdesk.infrastructure.repositories import UserRepository
from rentdesk.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    email: str,
    password: str,
    first_name: str,
    last_name: str = "",
    role: Role = Role.CUSTOMER,
) -> User:
    """Create a new user with a hashed password."""

    repository = UserRepository(session)
    normalized_email = email.strip().lower()
    if not normalized_email:
        raise ValueError("Email is required")
    if repository.get_by_email(normalized_email) is not None:
        raise ValueError("A user with this email already exists")

    entity = User(
        id=None,
        role=role,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        email=normalized_email,
        password=get_password_hash(password),
        is_active=True,
        created_at=None,
    )
    return repository.create(entity)
