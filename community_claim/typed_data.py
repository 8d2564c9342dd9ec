"""
EIP712 typed data for the Zora token community claim contract.

Two documents are supported:
- ClaimWithSignature: a user permits claimTo to claim on their behalf until deadline
- SetAllocations: the admin sets packed allocation data under a one-time nonce

The returned dicts have the standard typed data shape (types, primaryType,
message, domain) and can be passed to any EIP712 signer unchanged.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Union

from .eip712_config import (
    CLAIM_WITH_SIGNATURE,
    DOMAIN_NAME,
    DOMAIN_VERSION,
    SCHEMAS,
    SET_ALLOCATIONS,
)
from .validation import (
    validate_address,
    validate_bytes32,
    validate_bytes32_array,
    validate_chain_id,
    validate_message_fields,
    validate_uint256,
)

Bytes32 = Union[bytes, str]


def get_types(primary_type: str) -> Dict[str, List[Dict[str, str]]]:
    """Fresh copy of the frozen schema for primary_type."""
    return {
        primary_type: [{"name": name, "type": type_} for name, type_ in SCHEMAS[primary_type]],
    }


def get_domain(chain_id: int, claim_contract: str) -> Dict[str, Any]:
    validate_chain_id(chain_id)
    validate_address(claim_contract, "claimContract")
    return {
        "chainId": chain_id,
        "name": DOMAIN_NAME,
        "version": DOMAIN_VERSION,
        "verifyingContract": claim_contract,
    }


def _copy_message(message: Mapping[str, Any]) -> Dict[str, Any]:
    # lists are copied so later changes by the caller don't reach the document
    return {key: list(value) if isinstance(value, list) else value for key, value in message.items()}


def _typed_data(primary_type: str, message: Mapping[str, Any], chain_id: int, claim_contract: str) -> Dict[str, Any]:
    return {
        "types": get_types(primary_type),
        "message": _copy_message(message),
        "primaryType": primary_type,
        "domain": get_domain(chain_id, claim_contract),
    }


def permit_claim_typed_data(message: Mapping[str, Any], chain_id: int, claim_contract: str) -> Dict[str, Any]:
    """
    Typed data for ClaimWithSignature(address user,address claimTo,uint256 deadline).

    message must hold exactly user, claimTo and deadline; the values are
    copied into the document as given.
    """
    validate_message_fields(message, ("user", "claimTo", "deadline"), CLAIM_WITH_SIGNATURE)
    validate_address(message["user"], "user")
    validate_address(message["claimTo"], "claimTo")
    validate_uint256(message["deadline"], "deadline")
    return _typed_data(CLAIM_WITH_SIGNATURE, message, chain_id, claim_contract)


def set_allocations_typed_data(message: Mapping[str, Any], chain_id: int, claim_contract: str) -> Dict[str, Any]:
    """
    Typed data for SetAllocations(bytes32[] packedData,bytes32 nonce).

    packedData order is preserved. Whether the nonce was already used is
    checked by the contract, not here.
    """
    validate_message_fields(message, ("packedData", "nonce"), SET_ALLOCATIONS)
    validate_bytes32_array(message["packedData"], "packedData")
    validate_bytes32(message["nonce"], "nonce")
    return _typed_data(SET_ALLOCATIONS, message, chain_id, claim_contract)


@dataclass(frozen=True)
class ClaimPermitRequest:
    user: str
    claim_to: str
    deadline: int
    chain_id: int
    claim_contract: str

    def message(self) -> Dict[str, Any]:
        return {"user": self.user, "claimTo": self.claim_to, "deadline": self.deadline}

    def typed_data(self) -> Dict[str, Any]:
        return permit_claim_typed_data(self.message(), self.chain_id, self.claim_contract)


@dataclass(frozen=True)
class SetAllocationsRequest:
    packed_data: Sequence[Bytes32]
    nonce: Bytes32
    chain_id: int
    claim_contract: str

    def message(self) -> Dict[str, Any]:
        return {"packedData": self.packed_data, "nonce": self.nonce}

    def typed_data(self) -> Dict[str, Any]:
        return set_allocations_typed_data(self.message(), self.chain_id, self.claim_contract)


TypedDataRequest = Union[ClaimPermitRequest, SetAllocationsRequest]


def build_typed_data(request: TypedDataRequest) -> Dict[str, Any]:
    """Build the document for one of the supported requests."""
    if isinstance(request, ClaimPermitRequest):
        return request.typed_data()
    elif isinstance(request, SetAllocationsRequest):
        return request.typed_data()
    else:
        raise TypeError(f"Unsupported typed data request: {type(request).__name__}")
