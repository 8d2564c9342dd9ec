"""
EIP712 Helper Functions for the community claim typed data
This module computes the type hashes, domain separator, struct hash and final
digest of the documents built in typed_data, matching what the contract
computes on chain. It never signs.
"""

import logging
from typing import Any, Dict, List

from eth_abi import encode
from eth_account.messages import SignableMessage, encode_typed_data
from eth_utils import keccak, to_bytes, to_checksum_address

from .eip712_config import DOMAIN_NAME, DOMAIN_VERSION, EIP712_DOMAIN_FIELDS, SCHEMAS
from .validation import (
    validate_address,
    validate_bytes32,
    validate_bytes32_array,
    validate_chain_id,
    validate_message_fields,
    validate_uint256,
)

logger = logging.getLogger(__name__)


def _encode_fields(name: str, fields) -> str:
    return f"{name}(" + ",".join(f"{type_} {field}" for field, type_ in fields) + ")"


def _schema(primary_type: str):
    try:
        return SCHEMAS[primary_type]
    except KeyError:
        raise ValueError(f"Unsupported primary type: {primary_type}") from None


def encode_type(primary_type: str) -> str:
    """e.g. ClaimWithSignature(address user,address claimTo,uint256 deadline)"""
    return _encode_fields(primary_type, _schema(primary_type))


def get_type_hash(primary_type: str) -> bytes:
    return keccak(text=encode_type(primary_type))


def get_domain_type_hash() -> bytes:
    return keccak(text=_encode_fields("EIP712Domain", EIP712_DOMAIN_FIELDS))


def get_domain_separator(chain_id: int, verifying_contract: str) -> bytes:
    """Compute the EIP712 domain separator for a claim contract deployment"""
    return keccak(encode(
        ["bytes32", "bytes32", "bytes32", "uint256", "address"],
        [
            get_domain_type_hash(),
            keccak(text=DOMAIN_NAME),
            keccak(text=DOMAIN_VERSION),
            validate_chain_id(chain_id),
            to_checksum_address(validate_address(verifying_contract, "verifyingContract")),
        ],
    ))


def _to_bytes32(value) -> bytes:
    if isinstance(value, bytes):
        return value
    return to_bytes(hexstr=value)


def _encode_value(type_: str, field: str, value: Any):
    """Map a message value to (abi type, abi value) for abi.encode of the struct"""
    if type_ == "address":
        return "address", to_checksum_address(validate_address(value, field))
    if type_ == "uint256":
        return "uint256", validate_uint256(value, field)
    if type_ == "bytes32":
        return "bytes32", _to_bytes32(validate_bytes32(value, field))
    if type_ == "bytes32[]":
        # Arrays are encoded as keccak256 of their concatenated elements
        validate_bytes32_array(value, field)
        return "bytes32", keccak(b"".join(_to_bytes32(item) for item in value))
    raise ValueError(f"Unsupported field type: {type_}")


def get_struct_hash(typed_data: Dict[str, Any]) -> bytes:
    """keccak256(abi.encode(typeHash, field values...)) for the document's primary type"""
    primary_type = typed_data["primaryType"]
    message = typed_data["message"]
    schema = _schema(primary_type)
    validate_message_fields(message, [field for field, _ in schema], primary_type)

    abi_types: List[str] = ["bytes32"]
    abi_values: List[Any] = [get_type_hash(primary_type)]
    for field, type_ in schema:
        abi_type, abi_value = _encode_value(type_, field, message[field])
        abi_types.append(abi_type)
        abi_values.append(abi_value)

    return keccak(encode(abi_types, abi_values))


def get_eip712_digest(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """Compute the EIP712 digest"""
    return keccak(b"\x19\x01" + domain_separator + struct_hash)


def hash_typed_data(typed_data: Dict[str, Any]) -> bytes:
    """The digest a wallet signs for this document"""
    domain = typed_data["domain"]
    domain_separator = get_domain_separator(domain["chainId"], domain["verifyingContract"])
    struct_hash = get_struct_hash(typed_data)
    digest = get_eip712_digest(domain_separator, struct_hash)
    logger.debug(
        "%s digest: domain_separator=0x%s struct_hash=0x%s digest=0x%s",
        typed_data["primaryType"], domain_separator.hex(), struct_hash.hex(), digest.hex(),
    )
    return digest


def to_signable_message(typed_data: Dict[str, Any]) -> SignableMessage:
    """
    Wrap a document as an eth_account SignableMessage for an external signer.

    bytes32 values given as hex strings are passed to eth_account as raw
    bytes; the document itself is left untouched.
    """
    primary_type = typed_data["primaryType"]
    # fails on malformed values before anything reaches eth_account
    get_struct_hash(typed_data)
    domain = typed_data["domain"]
    get_domain_separator(domain["chainId"], domain["verifyingContract"])

    message = dict(typed_data["message"])
    for field, type_ in _schema(primary_type):
        if type_ == "bytes32":
            message[field] = _to_bytes32(message[field])
        elif type_ == "bytes32[]":
            message[field] = [_to_bytes32(item) for item in message[field]]

    return encode_typed_data(full_message={
        "types": typed_data["types"],
        "primaryType": primary_type,
        "domain": typed_data["domain"],
        "message": message,
    })
