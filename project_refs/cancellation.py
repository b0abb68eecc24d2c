from __future__ import annotations

from dataclasses import dataclass

from project_refs.errors import OperationCancelledError


@dataclass
class CancellationToken:
    """Cooperative cancellation signal, only checked at operation entry points.

    >>> token = CancellationToken()
    >>> token.is_cancellation_requested
    False
    >>> token.cancel()
    >>> token.is_cancellation_requested
    True
    """

    _cancelled: bool = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def throw_if_cancellation_requested(self) -> None:
        if self._cancelled:
            raise OperationCancelledError()


def ensure_token(cancellation: CancellationToken | None) -> CancellationToken:
    return CancellationToken() if cancellation is None else cancellation
