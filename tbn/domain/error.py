"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with an existing unique value."""

    def __init__(self, resource: str, field: str, value: str):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} with {field} '{value}' already exists")


class AuthenticationError(DomainError):
    """Raised when credentials are rejected."""

    pass


class UpstreamError(DomainError):
    """Base error for failures of third-party services we depend on."""

    pass


class BroadcastFetchError(UpstreamError):
    """The TBN on-air page could not be downloaded."""

    pass


class BroadcastParseError(UpstreamError):
    """The TBN on-air page was downloaded but could not be parsed."""

    pass
