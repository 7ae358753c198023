"""Errors raised by peer discovery providers."""

from __future__ import annotations


class PeerDiscoveryError(Exception):
    """
    A discovery provider failed to produce candidate peers.

    Callers treat this as non-fatal and fall through to the next provider.
    Running out of candidates is not an error and never raises this.

    Attributes:
        cause: The lower-level failure that was wrapped, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"
