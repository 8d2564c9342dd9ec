#!/usr/bin/env python3
"""
Compute the domain separator for a deployed ZoraTokenCommunityClaim contract
"""

import argparse

from community_claim.addresses import resolve_claim_contract
from community_claim.eip712_config import DOMAIN_NAME, DOMAIN_VERSION
from community_claim.eip712_helpers import get_domain_separator


def main():
    parser = argparse.ArgumentParser(description="Compute the EIP712 domain separator for the claim contract")
    parser.add_argument("--chain-id", type=int, default=8453, help="Chain id (default: Base)")
    parser.add_argument("--claim-contract", help="Contract address (default: read from the address files)")
    parser.add_argument("--addresses-dir", help="Directory of <chainId>.json address files")
    args = parser.parse_args()

    contract_address = args.claim_contract or resolve_claim_contract(args.chain_id, args.addresses_dir)

    print(f"Computing domain separator for {DOMAIN_NAME} v{DOMAIN_VERSION}...")
    print(f"Contract address: {contract_address}")
    print(f"Chain ID: {args.chain_id}")

    domain_separator = get_domain_separator(args.chain_id, contract_address)

    print(f"\nDomain Separator: 0x{domain_separator.hex()}")


if __name__ == "__main__":
    main()
