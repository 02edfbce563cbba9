"""User resolution routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from gitusers.application.usecase.user import (
    BackfillAuthorEmailUseCase,
    GetUserUseCase,
    ResolveGitUserUseCase,
)
from gitusers.application.usecase.user.backfill_author_email import (
    BackfillAuthorEmailRequest,
)
from gitusers.application.usecase.user.get_user import GetUserRequest
from gitusers.application.usecase.user.resolve_git_user import ResolveGitUserRequest
from gitusers.application.usecase.user.response import UserResponse
from gitusers.domain.value import GitCommit, GitPullRequest

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class BackfillEmailAPIRequest(BaseModel):
    """API request for backfilling a pull request author's email."""

    pull_request: GitPullRequest | None = None
    commits: list[GitCommit] = Field(default_factory=list)


@router.post("/resolve", response_model=UserResponse)
async def resolve_git_user(
    request: ResolveGitUserRequest,
    resolve_git_user_use_case: FromDishka[ResolveGitUserUseCase],
) -> UserResponse:
    """Resolve an observed git identity to a user.

    Example:
        POST /users/resolve

        Request:
        {"login": "alice", "email": null}

        Response:
        {
            "name": "alice",
            "namespace": "jx",
            "labels": {},
            "login": "alice",
            "display_name": "Alice",
            "email": "alice@co.io",
            "accounts": [{"provider": "gitusers.io/git-github-userid", "id": "alice"}],
            ...
        }
    """
    return await resolve_git_user_use_case.execute(request)


@router.get("/{name}", response_model=UserResponse)
async def get_user(
    name: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user by record name.

    Raises:
        HTTPException: If user not found
    """
    user = await get_user_use_case.execute(GetUserRequest(name=name))
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{name}' not found",
        )
    return user


@router.post("/{name}/backfill-email", response_model=UserResponse)
async def backfill_email(
    name: str,
    request: BackfillEmailAPIRequest,
    backfill_author_email_use_case: FromDishka[BackfillAuthorEmailUseCase],
) -> UserResponse:
    """Complete a pull request author's email from the pull request's commits."""
    return await backfill_author_email_use_case.execute(
        BackfillAuthorEmailRequest(
            user_name=name,
            pull_request=request.pull_request,
            commits=request.commits,
        )
    )
