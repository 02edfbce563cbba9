"""Merging of partial git identities."""

from typing import Optional

from gitusers.domain.value import GitUser

_FIELDS = ("avatar_url", "url", "name", "login", "email")


def merge_git_users(
    primary: Optional[GitUser], secondary: Optional[GitUser]
) -> GitUser:
    """Merge two git users field by field.

    Each field takes the primary's value when it is non-empty and the
    secondary's value otherwise. Callers pass freshly fetched provider data
    as the primary and the observed fragment as the secondary.

    Args:
        primary: Preferred source of values
        secondary: Fallback source of values

    Returns:
        Merged git user
    """
    if primary is None and secondary is None:
        return GitUser()
    if primary is None:
        return secondary
    if secondary is None:
        return primary
    return GitUser(
        **{
            field: getattr(primary, field) or getattr(secondary, field)
            for field in _FIELDS
        }
    )
