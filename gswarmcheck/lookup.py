"""Lookup engine — wire address resolution with the gswarm stats API."""

from __future__ import annotations

import logging

import requests

from .address import checksum_address, is_valid_address, normalize_input
from .chain import get_peer_ids
from .models import (
    FailureKind,
    LookupMode,
    LookupOutcome,
    LookupRequest,
    LookupResult,
)
from .stats_api import StatsAPIError, fetch_stats

logger = logging.getLogger(__name__)


def resolve_and_fetch(request: LookupRequest) -> LookupOutcome:
    """Resolve the request to peer IDs, then fetch their ranks and stats.

    EOA input goes through the on-chain registry first; peer-ID input is
    queried directly. The contract read always finishes before the stats
    call starts. Nothing is retried: every failure comes back as a
    LookupOutcome carrying a LookupFailure.
    """
    value = normalize_input(request.raw_input)
    if not value:
        return LookupOutcome.failure(
            FailureKind.INVALID_INPUT, "Enter an EOA or Peer ID first."
        )

    if request.mode == LookupMode.ADDRESS:
        if not is_valid_address(value):
            return LookupOutcome.failure(
                FailureKind.INVALID_INPUT, "Invalid EOA address format."
            )
        address = checksum_address(value)

        try:
            peer_ids = get_peer_ids(address)
        except Exception as exc:  # provider, transport or contract revert
            logger.debug("contract call failed for %s", address, exc_info=True)
            return LookupOutcome.failure(
                FailureKind.RESOLUTION_FAILED,
                f"Contract call failed: {str(exc) or type(exc).__name__}",
            )
        logger.info("%s resolved to %d peer id(s)", address, len(peer_ids))
    else:
        peer_ids = [value]

    if not peer_ids:
        return LookupOutcome.failure(
            FailureKind.NO_PEERS_FOUND, "No peer IDs found for the provided input."
        )

    try:
        ranks, stats = fetch_stats(peer_ids)
    except StatsAPIError as exc:
        return LookupOutcome.failure(
            FailureKind.API_ERROR, str(exc), status=exc.status, body=exc.body
        )
    except requests.RequestException as exc:
        logger.debug("stats request failed", exc_info=True)
        return LookupOutcome.failure(
            FailureKind.NETWORK_ERROR, str(exc) or type(exc).__name__
        )

    return LookupOutcome.success(
        LookupResult(peer_ids=tuple(peer_ids), ranks=tuple(ranks), stats=stats)
    )
