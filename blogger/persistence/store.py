"""Store owning one table per entity kind under a single storage root."""

from pathlib import Path

import logfire

from blogger.config import StorageSettings
from blogger.domain.model import Author, Post, Tag
from blogger.persistence.table import Table


class Store:
    """Aggregate of the posts, tags and authors tables.

    Layout under the root directory:

        <root>/posts/<id>
        <root>/tags/<id>
        <root>/authors/<id>

    `load` and `save` visit tables in that order and stop at the first
    failure, which propagates to the caller. Tables visited before the
    failure keep their results.
    """

    def __init__(
        self,
        root: Path,
        *,
        atomic_writes: bool = True,
        indent: int | None = 2,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize store with empty tables.

        Args:
            root: Storage root directory
            atomic_writes: Write each record to a temp file and rename it
            indent: JSON indentation for record files
            encoding: Text encoding for record files
        """
        self.root = Path(root)
        options = {
            "atomic_writes": atomic_writes,
            "indent": indent,
            "encoding": encoding,
        }
        self.posts: Table[Post] = Table(Post, self.root / Post.kind, **options)
        self.tags: Table[Tag] = Table(Tag, self.root / Tag.kind, **options)
        self.authors: Table[Author] = Table(Author, self.root / Author.kind, **options)

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "Store":
        """Build a store from storage settings."""
        return cls(
            settings.root,
            atomic_writes=settings.atomic_writes,
            indent=settings.indent,
            encoding=settings.encoding,
        )

    @property
    def tables(self) -> tuple[Table, ...]:
        """Tables in load/save order."""
        return (self.posts, self.tags, self.authors)

    def bootstrap(self) -> None:
        """Create every table directory that does not exist yet."""
        for table in self.tables:
            table.bootstrap()

    def load(self) -> None:
        """Bootstrap, then load every table.

        Raises:
            StorageError: From the first table that fails
        """
        with logfire.span("store.load", root=str(self.root)):
            self.bootstrap()
            for table in self.tables:
                table.load()

    def save(self) -> None:
        """Bootstrap, then save every table.

        Raises:
            StorageError: From the first table that fails
        """
        with logfire.span("store.save", root=str(self.root)):
            self.bootstrap()
            for table in self.tables:
                table.save()
