# EIP712 Configuration for the Zora token community claim
# These values must match the ZoraTokenCommunityClaim contract exactly

# Domain parameters
DOMAIN_NAME = "ZoraTokenCommunityClaim"
DOMAIN_VERSION = "1"

# Canonical EIP712Domain layout, in the order fields are hashed
EIP712_DOMAIN_FIELDS = (
    ("name", "string"),
    ("version", "string"),
    ("chainId", "uint256"),
    ("verifyingContract", "address"),
)

# Primary type names
CLAIM_WITH_SIGNATURE = "ClaimWithSignature"
SET_ALLOCATIONS = "SetAllocations"

# Struct layouts (matching the contract). Order is part of the type hash.
CLAIM_WITH_SIGNATURE_FIELDS = (
    ("user", "address"),
    ("claimTo", "address"),
    ("deadline", "uint256"),
)

SET_ALLOCATIONS_FIELDS = (
    ("packedData", "bytes32[]"),
    ("nonce", "bytes32"),
)

SCHEMAS = {
    CLAIM_WITH_SIGNATURE: CLAIM_WITH_SIGNATURE_FIELDS,
    SET_ALLOCATIONS: SET_ALLOCATIONS_FIELDS,
}

# Type strings from the contract:
#   ClaimWithSignature(address user,address claimTo,uint256 deadline)
#   SetAllocations(bytes32[] packedData,bytes32 nonce)
# and the domain:
#   EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)

# Deployment address files: addresses/<chainId>.json
ADDRESSES_DIR_ENV = "COMMUNITY_CLAIM_ADDRESSES_DIR"
DEFAULT_ADDRESSES_DIR = "addresses"

ZORA_TOKEN_KEY = "ZORA_TOKEN"
ZORA_TOKEN_COMMUNITY_CLAIM_KEY = "ZORA_TOKEN_COMMUNITY_CLAIM"
DEVELOPMENT_COMMUNITY_CLAIM_KEY = "DEVELOPMENT_COMMUNITY_CLAIM"

# Deployment name -> key in the per-chain address file
DEPLOYMENT_KEYS = {
    "ZoraTokenCommunityClaim": ZORA_TOKEN_COMMUNITY_CLAIM_KEY,
    "Zora": ZORA_TOKEN_KEY,
    "DevelopmentCommunityClaim": DEVELOPMENT_COMMUNITY_CLAIM_KEY,
}

DEFAULT_DEPLOYMENT = "ZoraTokenCommunityClaim"

UINT256_MAX = 2**256 - 1
