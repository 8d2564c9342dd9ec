#!/usr/bin/env python3
"""
Script to compute EIP712 type hashes for the ZoraTokenCommunityClaim contract
"""

from community_claim.eip712_config import CLAIM_WITH_SIGNATURE, SET_ALLOCATIONS
from community_claim.eip712_helpers import encode_type, get_domain_type_hash, get_type_hash


def main():
    print("EIP712 Type Hashes:")
    print("=" * 50)

    print(f'DOMAIN_TYPE_HASH = "0x{get_domain_type_hash().hex()}"')
    for primary_type in (CLAIM_WITH_SIGNATURE, SET_ALLOCATIONS):
        print(f"# {encode_type(primary_type)}")
        print(f'{primary_type.upper()}_TYPE_HASH = "0x{get_type_hash(primary_type).hex()}"')

    print("\nCompare these values with the contract's type hash constants")


if __name__ == "__main__":
    main()
