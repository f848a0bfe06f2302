"""Domain-specific exceptions — framework-independent."""


class PersistenceError(Exception):
    """Raised when the record store fails (connectivity, constraint violation).

    The message stays generic; the underlying driver error is chained as
    ``__cause__`` and logged where it is caught.
    """

    def __init__(self, entity_type: str, operation: str):
        self.entity_type = entity_type
        self.operation = operation
        super().__init__(f"Failed to {operation} {entity_type}")
