"""Read-only calls against the Gensyn peer registry contract."""

from __future__ import annotations

import logging

from web3 import Web3

from .config import CONTRACT_ADDRESS, PEER_ID_ABI, RPC_URL

logger = logging.getLogger(__name__)

_CONTRACT = None


def _get_contract():
    global _CONTRACT
    if _CONTRACT is None:
        w3 = Web3(Web3.HTTPProvider(RPC_URL))
        _CONTRACT = w3.eth.contract(
            address=Web3.to_checksum_address(CONTRACT_ADDRESS),
            abi=PEER_ID_ABI,
        )
    return _CONTRACT


def get_peer_ids(address: str) -> list[str]:
    """Return the peer IDs registered to a checksummed *address*.

    The contract takes a list of addresses and answers with one list of peer
    IDs per address; we always send one and read the first answer. Empty
    strings are dropped. Transport and execution errors propagate.
    """
    contract = _get_contract()
    logger.debug("getPeerId([%s]) via %s", address, RPC_URL)
    raw = contract.functions.getPeerId([address]).call()

    if not raw:
        return []
    return [peer_id for peer_id in raw[0] if peer_id]
