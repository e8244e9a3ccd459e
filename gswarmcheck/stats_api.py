"""gswarm ranking API client and response shaping.

The API answers ``POST /api/user/data`` with ``{"ranks": [...], "stats":
{...}}``. Every field is treated as optional: missing keys fall back to empty
or None rather than raising.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from .config import CLIENT_TAG, STATS_API_URL, USER_AGENT
from .models import RankEntry, StatsSummary

logger = logging.getLogger(__name__)

_SESSION: requests.Session | None = None


class StatsAPIError(Exception):
    """The stats endpoint answered, but not with a usable body."""

    def __init__(self, status: int, body: str, reason: str = "gswarm API error"):
        self.status = status
        self.body = body
        super().__init__(f"{reason}: {status} {body}")


def _get_session() -> requests.Session:
    global _SESSION
    if _SESSION is None:
        _SESSION = requests.Session()
        _SESSION.headers.update({
            "User-Agent": USER_AGENT,
            "X-Requested-By": CLIENT_TAG,
        })
    return _SESSION


def parse_rank(raw: dict[str, Any]) -> RankEntry:
    """Build a RankEntry from one item of the API's ``ranks`` array."""
    return RankEntry(
        peer_id=raw.get("peerId") or "",
        eoa=raw.get("eoa"),
        rank=raw.get("rank"),
        total_wins=raw.get("totalWins"),
        total_rewards=raw.get("totalRewards"),
        last_seen=raw.get("lastSeen"),
    )


def parse_stats(raw: dict[str, Any] | None) -> StatsSummary:
    raw = raw or {}
    return StatsSummary(
        total_nodes=raw.get("totalNodes"),
        ranked_nodes=raw.get("rankedNodes"),
    )


def parse_response(data: dict[str, Any]) -> tuple[list[RankEntry], StatsSummary]:
    """Split a decoded response body into rank entries and a stats summary.

    Non-object items inside ``ranks`` are skipped, and a ``ranks`` value that
    is not a list counts as empty.
    """
    raw_ranks = data.get("ranks")
    if not isinstance(raw_ranks, list):
        raw_ranks = []
    ranks = [parse_rank(r) for r in raw_ranks if isinstance(r, dict)]
    stats = data.get("stats")
    return ranks, parse_stats(stats if isinstance(stats, dict) else None)


def fetch_stats(peer_ids: list[str]) -> tuple[list[RankEntry], StatsSummary]:
    """POST *peer_ids* to the stats endpoint and shape the answer.

    Raises StatsAPIError on a non-2xx status or an undecodable body.
    Transport failures surface as requests.RequestException.
    """
    session = _get_session()
    logger.debug("POST %s for %d peer id(s)", STATS_API_URL, len(peer_ids))
    # json= sets Content-Type: application/json
    resp = session.post(STATS_API_URL, json={"peerIds": list(peer_ids)})

    if not 200 <= resp.status_code < 300:
        raise StatsAPIError(resp.status_code, resp.text)

    try:
        data = resp.json()
    except ValueError:
        raise StatsAPIError(
            resp.status_code, resp.text, reason="gswarm API returned invalid JSON"
        ) from None

    if not isinstance(data, dict):
        raise StatsAPIError(
            resp.status_code, resp.text, reason="gswarm API returned unexpected body"
        )

    return parse_response(data)
