#!/usr/bin/env python3
"""
Print EIP712 typed data for the Zora token community claim contract

Usage:
    community-claim-typed-data permit --user 0x... --claim-to 0x... --deadline 1893456000 --chain-id 8453 [--claim-contract 0x...]
    community-claim-typed-data set-allocations --packed-data 0x... [--packed-data 0x...] --nonce 0x... --chain-id 8453

When --claim-contract is omitted the address is read from <addresses-dir>/<chainId>.json.
"""

import argparse
import json
import sys

from .addresses import AddressNotFound, resolve_claim_contract
from .eip712_config import DEFAULT_DEPLOYMENT, DEPLOYMENT_KEYS
from .eip712_helpers import hash_typed_data
from .typed_data import permit_claim_typed_data, set_allocations_typed_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build EIP712 typed data for the community claim contract")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--chain-id", type=int, required=True, help="Chain the signature is valid on")
    common.add_argument("--claim-contract", help="Verifying contract address (skips address file lookup)")
    common.add_argument("--addresses-dir", help="Directory of <chainId>.json address files")
    common.add_argument("--deployment", default=DEFAULT_DEPLOYMENT, choices=sorted(DEPLOYMENT_KEYS),
                        help="Deployment to look up in the address files")
    common.add_argument("--digest", action="store_true", help="Also print the EIP712 digest")

    permit = subparsers.add_parser("permit", parents=[common], help="ClaimWithSignature typed data")
    permit.add_argument("--user", required=True, help="Token owner granting the permission")
    permit.add_argument("--claim-to", required=True, help="Address allowed to claim")
    permit.add_argument("--deadline", type=int, required=True, help="Unix timestamp after which the permit is void")

    allocations = subparsers.add_parser("set-allocations", parents=[common], help="SetAllocations typed data")
    allocations.add_argument("--packed-data", action="append", default=[],
                             help="32-byte packed allocation (repeat, order is kept)")
    allocations.add_argument("--nonce", required=True, help="32-byte nonce")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        claim_contract = args.claim_contract
        if claim_contract is None:
            claim_contract = resolve_claim_contract(args.chain_id, args.addresses_dir, args.deployment)

        if args.command == "permit":
            message = {"user": args.user, "claimTo": args.claim_to, "deadline": args.deadline}
            typed_data = permit_claim_typed_data(message, args.chain_id, claim_contract)
        else:
            message = {"packedData": args.packed_data, "nonce": args.nonce}
            typed_data = set_allocations_typed_data(message, args.chain_id, claim_contract)
    # ValueError covers malformed input, unreadable JSON and duplicate address files
    except (ValueError, AddressNotFound, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    output = {"typedData": typed_data}
    if args.digest:
        output["digest"] = "0x" + hash_typed_data(typed_data).hex()

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
