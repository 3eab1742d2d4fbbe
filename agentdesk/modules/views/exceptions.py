"""Exceptions raised while shaping table views."""


class ViewError(Exception):
    """Base class for view shaping errors."""


class UnknownSortKeyError(ViewError):
    def __init__(self, table: str, key: str) -> None:
        super().__init__(f"Unknown sort key for {table}: {key}")
        self.table = table
        self.key = key
