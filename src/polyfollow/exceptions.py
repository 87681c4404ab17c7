"""Exception hierarchy for polyfollow."""


class PolyFollowError(Exception):
    """Base exception for all polyfollow errors."""

    pass


class GeometryError(PolyFollowError):
    """Errors in geometric input records."""

    pass


class TurnError(GeometryError):
    """A turn record that cannot be traversed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DeserializationError(PolyFollowError):
    """Error rebuilding a domain object from its dictionary form."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Failed to deserialize {kind}: {reason}")


class FollowError(PolyFollowError):
    """Error in the arguments of a follow request."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Follow request rejected: {reason}")
