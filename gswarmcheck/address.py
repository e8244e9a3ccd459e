"""Input cleanup and EOA address validation."""

from __future__ import annotations

from web3 import Web3


def normalize_input(text: str | None) -> str:
    """Strip surrounding whitespace; None becomes an empty string."""
    return (text or "").strip()


def is_valid_address(text: str) -> bool:
    """True for a 20-byte hex address.

    All-lowercase and all-uppercase forms are accepted as-is. Mixed case must
    match the EIP-55 checksum, so a single flipped letter is rejected.
    """
    if not Web3.is_address(text):
        return False
    hex_part = text[2:] if text[:2] in ("0x", "0X") else text
    if hex_part.lower() != hex_part and hex_part.upper() != hex_part:
        return Web3.is_checksum_address("0x" + hex_part)
    return True


def checksum_address(text: str) -> str:
    """Return the EIP-55 checksummed form of a valid address.

    Raises ValueError if *text* is not an address.
    """
    if not is_valid_address(text):
        raise ValueError(f"Invalid EOA address: {text!r}")
    return Web3.to_checksum_address(text)
