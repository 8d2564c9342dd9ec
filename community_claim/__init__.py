from .addresses import AddressNotFound, build_deployments, load_chain_addresses, resolve_claim_contract
from .eip712_helpers import get_domain_separator, get_struct_hash, hash_typed_data, to_signable_message
from .typed_data import (
    ClaimPermitRequest,
    SetAllocationsRequest,
    build_typed_data,
    permit_claim_typed_data,
    set_allocations_typed_data,
)
from .validation import InvalidTypedDataInput
