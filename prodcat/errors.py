"""Exceptions raised by the catalogue."""


class CatalogueError(Exception):
    """Base class for catalogue failures."""


class BadBatch(CatalogueError):
    """A batch contained product ids already present in the catalogue."""

    def __init__(self, clashing_ids: list[str]):
        self.clashing_ids = clashing_ids
        super().__init__(f"Bad Batch: product ids already in catalogue: {', '.join(clashing_ids)}")


class BadSearch(CatalogueError):
    """Search criteria of a type the catalogue does not understand."""
