"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class EmptyNameError(DomainError):
    """Raised when a record would be added or edited with a blank name."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Cannot store {kind} record with an empty name")


class DuplicateSlugError(DomainError):
    """Raised when a slug is already held by another live record."""

    def __init__(self, kind: str, slug: str, holder_id: str):
        self.kind = kind
        self.slug = slug
        self.holder_id = holder_id
        super().__init__(f"Slug '{slug}' already used by {kind} record {holder_id}")
