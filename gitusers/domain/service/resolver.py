"""Git user resolution domain service.

Resolves partial git identities (login, name, email, avatar) observed on a
git provider into exactly one user record, creating the record only when
nothing in the store matches.

The lookup is a cascade of independent stages. Each stage either hits a
single user, misses, or raises AmbiguousIdentityError when it finds more
than one candidate:

1. Label lookup - users labelled ``<provider key>=<login>`` (indexed).
2. Account scan - users linking the login as an account reference. A hit
   gets the missing label written back.
3. Email match - users whose email equals the provider's email for the
   login. A hit gets the account reference and label added.
4. Creation - a new user from the provider data merged with the fragment.

Every call performs at most one store write. Nothing is retried and
concurrent resolutions of the same unseen login may both create a user.
"""

from typing import Iterable, Optional

import logfire

from gitusers.domain.error import AmbiguousIdentityError, InvalidInputError
from gitusers.domain.model.user import User, UserDetails
from gitusers.domain.repository.user import UserRepository
from gitusers.domain.service.base import Service
from gitusers.domain.service.conversion import (
    add_account_reference,
    git_user_to_user,
    with_label,
)
from gitusers.domain.service.git_provider import GitProviderClient, UserInfoFound
from gitusers.domain.service.merge import merge_git_users
from gitusers.domain.value import GitSignature, GitUser, provider_key
from gitusers.domain.value.common import ValueObject


class Hit(ValueObject):
    """A stage matched exactly one user."""

    user: User


class Miss(ValueObject):
    """A stage matched nothing; resolution moves on to the next stage."""

    pass


StageResult = Hit | Miss


class GitUserResolver(Service):
    """Domain service resolving git users to user records."""

    def __init__(
        self,
        user_repository: UserRepository,
        git_provider: GitProviderClient,
        label_prefix: str,
    ) -> None:
        """Initialize git user resolver.

        Args:
            user_repository: Identity store for the target namespace
            git_provider: Client for the git provider the logins belong to
            label_prefix: Prefix of the provider key labels
        """
        self.user_repository = user_repository
        self.git_provider = git_provider
        self.label_prefix = label_prefix

    @property
    def provider_key(self) -> str:
        """Label and account provider key for the configured git provider."""
        return provider_key(self.git_provider.kind, self.label_prefix)

    async def resolve(self, git_user: Optional[GitUser]) -> User:
        """Resolve a git user to exactly one user record.

        Args:
            git_user: Identity fragment observed on the git provider

        Returns:
            The matching or newly created user

        Raises:
            InvalidInputError: If the fragment is missing or empty
            AmbiguousIdentityError: If a stage matches more than one user
            StoreUnavailableError: If the identity store fails
            ProviderLookupFailedError: If the git provider cannot be queried
        """
        if git_user is None or git_user.is_empty:
            raise InvalidInputError("git user cannot be empty")

        with logfire.span(
            "git_user_resolver.resolve",
            login=git_user.login,
            provider_key=self.provider_key,
        ):
            if git_user.login:
                result = await self.find_by_label(git_user.login)
                if isinstance(result, Hit):
                    return result.user

            # No index for the remaining stages
            users = await self.user_repository.list()

            if git_user.login:
                result = await self.find_by_account(git_user.login, users)
                if isinstance(result, Hit):
                    return result.user

            remote = await self.lookup_remote(git_user)
            if remote is not None:
                result = await self.find_by_email(git_user, remote, users)
                if isinstance(result, Hit):
                    return result.user

            return await self.create(git_user, remote, users)

    async def resolve_signature(self, signature: GitSignature) -> User:
        """Resolve a commit signature (name and email, no login) to a user."""
        return await self.resolve(GitUser(name=signature.name, email=signature.email))

    async def resolve_all(self, git_users: Iterable[GitUser]) -> list[UserDetails]:
        """Resolve git users in order, stopping at the first failure.

        Returns:
            Details of the resolved users, in input order
        """
        details = []
        for git_user in git_users:
            user = await self.resolve(git_user)
            details.append(user.spec)
        return details

    async def find_by_label(self, login: str) -> StageResult:
        """Stage 1: look the login up through the provider key label."""
        selector = {self.provider_key: login}
        with logfire.span("git_user_resolver.find_by_label", login=login):
            users = await self.user_repository.list(selector)
            if len(users) > 1:
                raise self._ambiguous("label", f"{self.provider_key}={login}", users)
            if users:
                logfire.info(
                    "User found by label", user=users[0].name, login=login
                )
                return Hit(user=users[0])
            return Miss()

    async def find_by_account(self, login: str, users: list[User]) -> StageResult:
        """Stage 2: scan account references, writing the label back on a hit."""
        key = self.provider_key
        with logfire.span("git_user_resolver.find_by_account", login=login):
            possibles = [u for u in users if u.has_account(key, login)]
            if len(possibles) > 1:
                raise self._ambiguous("account", f"{key}/{login}", possibles)
            if not possibles:
                return Miss()

            found = await self.user_repository.update(
                with_label(possibles[0], key, login)
            )
            logfire.info(
                "Added label to user", label=key, login=login, user=found.name
            )
            return Hit(user=found)

    async def lookup_remote(self, git_user: GitUser) -> Optional[GitUser]:
        """Stage 3 input: fetch the provider's view of the login.

        A fragment without a login cannot be looked up and stands in for the
        provider's view itself.

        Returns:
            The provider's git user, or None if the provider does not know it
        """
        if not git_user.login:
            return git_user

        info = await self.git_provider.user_info(git_user.login)
        if isinstance(info, UserInfoFound):
            return info.user
        logfire.warn(
            "Unable to find user on git provider",
            login=git_user.login,
            kind=self.git_provider.kind,
        )
        return None

    async def find_by_email(
        self, git_user: GitUser, remote: GitUser, users: list[User]
    ) -> StageResult:
        """Stage 3: match on the provider's email, linking the account on a hit."""
        key = self.provider_key
        if not remote.email:
            return Miss()

        with logfire.span("git_user_resolver.find_by_email", email=remote.email):
            possibles = [u for u in users if u.spec.email == remote.email]
            if len(possibles) > 1:
                raise self._ambiguous("email", remote.email, possibles)
            if not possibles:
                return Miss()

            found = possibles[0]
            if not git_user.login:
                # Nothing to link
                return Hit(user=found)

            found = add_account_reference(found, key, remote.login or git_user.login)
            found = await self.user_repository.update(
                with_label(found, key, git_user.login)
            )
            logfire.info(
                "Associated user with git provider login as emails match",
                user=found.name,
                email=found.spec.email,
                login=git_user.login,
                label=key,
            )
            return Hit(user=found)

    async def create(
        self,
        git_user: GitUser,
        remote: Optional[GitUser],
        users: Iterable[User] = (),
    ) -> User:
        """Stage 4: create a user from the best information available.

        The new record is named after the merged login or email, skipping
        names already used by ``users``.
        """
        merged = merge_git_users(remote, git_user)
        user = git_user_to_user(
            self.user_repository.namespace,
            merged,
            self.provider_key,
            taken={u.name for u in users},
        )
        with logfire.span("git_user_resolver.create", user=user.name):
            created = await self.user_repository.create(user)
            logfire.info(
                "Created user for git user",
                user=created.name,
                login=merged.login,
                email=merged.email,
            )
            return created

    def _ambiguous(
        self, stage: str, key: str, users: list[User]
    ) -> AmbiguousIdentityError:
        names = [u.name for u in users]
        logfire.error(
            "More than one user matches git user", stage=stage, key=key, users=names
        )
        return AmbiguousIdentityError(stage, key, names)
