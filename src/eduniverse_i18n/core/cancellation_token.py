"""Cancellation token handed to each armed translation request."""


class CancellationToken:
    """
    One-way flag marking a pending request as superseded or torn down.

    The transport offers no real cancellation, so the token is checked at the
    point where a result would be applied.
    """

    def __init__(self, label: str = ""):
        self.label = label
        self._cancelled = False

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "live"
        return f"CancellationToken({self.label!r}, {state})"
