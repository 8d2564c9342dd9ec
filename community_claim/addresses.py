"""
Per-chain deployment addresses.

Each chain has a file addresses/<chainId>.json such as

    {"ZORA_TOKEN": "0x...", "ZORA_TOKEN_COMMUNITY_CLAIM": "0x..."}

The directory defaults to $COMMUNITY_CLAIM_ADDRESSES_DIR, then ./addresses.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from .eip712_config import (
    ADDRESSES_DIR_ENV,
    DEFAULT_ADDRESSES_DIR,
    DEFAULT_DEPLOYMENT,
    DEPLOYMENT_KEYS,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class AddressNotFound(LookupError):
    """No address is recorded for a deployment on a chain."""


def get_addresses_dir(addresses_dir: Optional[PathLike] = None) -> Path:
    if addresses_dir is None:
        addresses_dir = os.environ.get(ADDRESSES_DIR_ENV, DEFAULT_ADDRESSES_DIR)
    return Path(addresses_dir)


def load_chain_addresses(addresses_dir: Optional[PathLike] = None) -> Dict[int, Dict[str, str]]:
    """Read every <chainId>.json file into {chain_id: addresses}"""
    addresses_dir = get_addresses_dir(addresses_dir)
    chain_addresses = {}

    for path in sorted(addresses_dir.glob("*.json")):
        try:
            chain_id = int(path.stem)
        except ValueError:
            logger.debug("Skipping %s: file name is not a chain id", path)
            continue

        if chain_id in chain_addresses:
            raise ValueError(f"Duplicate address file for chain {chain_id}: {path}")

        with open(path, "r") as f:
            chain_addresses[chain_id] = json.load(f)

    logger.debug("Loaded addresses for chains %s from %s", sorted(chain_addresses), addresses_dir)
    return chain_addresses


def build_deployments(chain_addresses: Dict[int, Dict[str, str]]) -> Dict[str, Dict[int, str]]:
    """Map each deployment name to {chain_id: address}, skipping missing entries"""
    deployments = {name: {} for name in DEPLOYMENT_KEYS}

    for chain_id, addresses in chain_addresses.items():
        for name, key in DEPLOYMENT_KEYS.items():
            if addresses.get(key):
                deployments[name][chain_id] = addresses[key]

    return deployments


def resolve_claim_contract(
    chain_id: int,
    addresses_dir: Optional[PathLike] = None,
    deployment: str = DEFAULT_DEPLOYMENT,
) -> str:
    """Address of the verifying contract for chain_id"""
    if deployment not in DEPLOYMENT_KEYS:
        raise ValueError(f"Unknown deployment: {deployment}")

    deployments = build_deployments(load_chain_addresses(addresses_dir))
    try:
        return deployments[deployment][chain_id]
    except KeyError:
        raise AddressNotFound(f"No {deployment} address for chain {chain_id}") from None
