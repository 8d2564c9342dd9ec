"""
Structural checks for typed data inputs.

Values are never coerced. A value that would need padding, truncation or
conversion to fit its EIP712 type is rejected.
"""

from typing import Any, Iterable, Mapping

from eth_utils import (
    is_0x_prefixed,
    is_address,
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex,
)

from .eip712_config import UINT256_MAX


class InvalidTypedDataInput(ValueError):
    """Raised when a message field, chain id or contract address is malformed."""


def validate_address(value: Any, field: str) -> str:
    if not isinstance(value, str) or not is_0x_prefixed(value) or not is_address(value):
        raise InvalidTypedDataInput(f"{field} must be a 20-byte hex address, got {value!r}")
    # is_address does not check EIP-55 on every eth-utils release
    if is_checksum_formatted_address(value) and not is_checksum_address(value):
        raise InvalidTypedDataInput(f"{field} has an invalid EIP-55 checksum: {value}")
    return value


def validate_uint256(value: Any, field: str) -> int:
    # bool is an int subclass but never a valid uint256 value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTypedDataInput(f"{field} must be an integer, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise InvalidTypedDataInput(f"{field} is out of uint256 range: {value}")
    return value


def validate_chain_id(value: Any) -> int:
    validate_uint256(value, "chainId")
    if value == 0:
        raise InvalidTypedDataInput("chainId must be a positive integer")
    return value


def validate_bytes32(value: Any, field: str):
    """Accept 32 raw bytes or a 0x-prefixed string of 64 hex digits."""
    if isinstance(value, bytes):
        if len(value) != 32:
            raise InvalidTypedDataInput(f"{field} must be 32 bytes, got {len(value)}")
        return value
    if isinstance(value, str) and is_0x_prefixed(value) and is_hex(value):
        if len(value) != 66:
            raise InvalidTypedDataInput(
                f"{field} must be 32 bytes (66 hex characters with 0x), got {len(value)} characters"
            )
        return value
    raise InvalidTypedDataInput(f"{field} must be 32 bytes or a 0x-prefixed hex string, got {value!r}")


def validate_bytes32_array(value: Any, field: str):
    if not isinstance(value, (list, tuple)):
        raise InvalidTypedDataInput(f"{field} must be a list of 32-byte values, got {type(value).__name__}")
    for i, item in enumerate(value):
        validate_bytes32(item, f"{field}[{i}]")
    return value


def validate_message_fields(message: Any, expected: Iterable[str], primary_type: str) -> None:
    """Message keys must be exactly the schema's field names."""
    if not isinstance(message, Mapping):
        raise InvalidTypedDataInput(f"{primary_type} message must be a mapping, got {type(message).__name__}")
    expected = set(expected)
    missing = expected - set(message)
    unexpected = set(message) - expected
    if missing:
        raise InvalidTypedDataInput(f"{primary_type} message is missing fields: {sorted(missing)}")
    if unexpected:
        raise InvalidTypedDataInput(f"{primary_type} message has unexpected fields: {sorted(unexpected)}")
