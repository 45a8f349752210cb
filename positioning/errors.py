"""Exceptions raised while collecting and resolving relative positions."""


class PositioningError(Exception):
    """Base class for all positioning errors."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message


class FocusUndefinedError(PositioningError):
    """Raised when before()/after() is called before any element() call."""


class UnknownElementError(PositioningError):
    """Raised when a constraint references an element id that was never registered.

    Attributes:
        element_id: The identifier that could not be resolved
    """

    def __init__(self, element_id: str):
        super().__init__(f"Element not found with id: {element_id}")
        self.element_id = element_id


class CycleDetectedError(PositioningError):
    """Raised when the accumulated constraints cannot form a total order.

    A cycle means some elements must each come before the other, so no
    linear order satisfies every edge.

    Attributes:
        unsorted: Ids of the nodes that could not be placed
        cycle: One concrete cycle path, first id repeated at the end
    """

    def __init__(
        self,
        message: str,
        unsorted: list[str] | None = None,
        cycle: list[str] | None = None,
    ):
        super().__init__(message)
        self.unsorted = list(unsorted or [])
        self.cycle = list(cycle or [])
