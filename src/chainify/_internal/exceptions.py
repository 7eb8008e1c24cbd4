class BaseChainifyError(Exception):
    pass


class ContinuationReusedError(BaseChainifyError):
    """Raised by strict controllers when a unit calls `next` twice."""

    def __init__(self, position: int) -> None:
        self.position: int = position
        msg = (
            f"The continuation given to the unit at position {position} "
            "was called more than once. Strict controllers allow a single "
            "call to `next` per unit invocation."
        )
        super().__init__(msg)
