"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from gitusers.domain.model import User, UserDetails
from gitusers.domain.value import AccountReference, Namespace, UserName


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        name=UserName(row["name"]),
        namespace=Namespace(row["namespace"]),
        labels=dict(row.get("labels") or {}),
        spec=UserDetails(
            login=row.get("login") or "",
            name=row.get("display_name") or "",
            email=row.get("email") or "",
            url=row.get("url") or "",
            avatar_url=row.get("avatar_url") or "",
            accounts=[AccountReference(**a) for a in row.get("accounts") or []],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "namespace": user.namespace,
        "name": user.name,
        "labels": dict(user.labels),
        "login": user.spec.login,
        "display_name": user.spec.name,
        "email": user.spec.email,
        "url": user.spec.url,
        "avatar_url": user.spec.avatar_url,
        "accounts": [a.model_dump() for a in user.spec.accounts],
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
