"""Dataclasses for lookup requests, rank entries, and lookup outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LookupMode(str, Enum):
    """What the user typed in: a wallet address or a peer ID."""

    ADDRESS = "eoa"
    PEER_ID = "peer"


class FailureKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    RESOLUTION_FAILED = "resolution_failed"
    NO_PEERS_FOUND = "no_peers_found"
    API_ERROR = "api_error"
    NETWORK_ERROR = "network_error"


@dataclass
class LookupRequest:
    """A single user-triggered lookup."""

    mode: LookupMode
    raw_input: str


@dataclass(frozen=True)
class RankEntry:
    """One peer's standing as reported by the gswarm API."""

    peer_id: str
    eoa: str | None = None
    rank: int | None = None
    total_wins: int | None = None
    total_rewards: int | float | None = None
    last_seen: str | None = None  # ISO-8601, as delivered


@dataclass(frozen=True)
class StatsSummary:
    """Swarm-wide node counts."""

    total_nodes: int | None = None
    ranked_nodes: int | None = None


@dataclass(frozen=True)
class LookupResult:
    """Peer IDs that were queried plus what the API returned for them."""

    peer_ids: tuple[str, ...]
    ranks: tuple[RankEntry, ...] = ()
    stats: StatsSummary = field(default_factory=StatsSummary)


@dataclass(frozen=True)
class LookupFailure:
    """Why a lookup stopped. status/body are only set for API errors."""

    kind: FailureKind
    message: str
    status: int | None = None
    body: str | None = None


@dataclass(frozen=True)
class LookupOutcome:
    """Either a result or a failure, never both."""

    result: LookupResult | None = None
    error: LookupFailure | None = None

    def __post_init__(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("LookupOutcome needs exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: LookupResult) -> LookupOutcome:
        return cls(result=result)

    @classmethod
    def failure(
        cls,
        kind: FailureKind,
        message: str,
        status: int | None = None,
        body: str | None = None,
    ) -> LookupOutcome:
        return cls(error=LookupFailure(kind=kind, message=message, status=status, body=body))
