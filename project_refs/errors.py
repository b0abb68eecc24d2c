class PreconditionFailedError(Exception):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Required value not present: {name}")


class OperationCancelledError(Exception):
    """Cancellation was requested before the operation started."""

    pass


class ItemNotFoundError(Exception):
    def __init__(self, item_specification: str) -> None:
        self.item_specification = item_specification
        super().__init__(f"No reference item matches {item_specification!r}")


class StoreFailureError(Exception):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
