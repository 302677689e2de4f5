"""Context engine errors."""


class ContextEngineError(Exception):
    """Base error for the context engine."""


class TableNotFoundError(ContextEngineError):
    """Requested table was never registered."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Table {table} not found")


class TableAlreadyRegisteredError(ContextEngineError):
    """A table with this name is already registered."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Table {table} is already registered")
