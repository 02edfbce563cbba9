"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidInputError(ValidationError):
    """Raised when a resolution is requested without a usable fragment."""

    pass


class AmbiguousIdentityError(DomainError):
    """Raised when more than one user record matches a git identity.

    Never resolved automatically: the conflicting records need to be
    merged or relabelled by an operator.
    """

    def __init__(self, stage: str, key: str, candidates: list[str]):
        self.stage = stage
        self.key = key
        self.candidates = candidates
        super().__init__(
            f"more than one user found by {stage} for {key}, found {candidates}"
        )


class StoreUnavailableError(DomainError):
    """Raised when the identity store fails a list, get, update or create."""

    pass


class UserConflictError(StoreUnavailableError):
    """Raised when creating a user whose name is already taken."""

    def __init__(self, name: str, namespace: str):
        self.name = name
        self.namespace = namespace
        super().__init__(f"user {name} already exists in namespace {namespace}")


class ProviderLookupFailedError(DomainError):
    """Raised when the git provider cannot be reached or answers with an error.

    A user that does not exist on the provider is not an error.
    """

    def __init__(self, kind: str, login: str, reason: str):
        self.kind = kind
        self.login = login
        super().__init__(f"failed to look up {login} on {kind}: {reason}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
