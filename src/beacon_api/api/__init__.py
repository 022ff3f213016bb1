"""
API server module for validator queries.

Provides HTTP endpoints for:
- /eth/v1/beacon/states/{state_id}/validators/{validator_id} - One validator
- /eth/v1/beacon/states/{state_id}/validator_balances - Balance listing
- /eth/v1/node/health - Health check endpoint

Also provides a client for the validator endpoints.
"""

from .client import BeaconApiClientError, fetch_validator, fetch_validator_balances
from .errors import (
    ApiError,
    BadRequest,
    InternalError,
    NotFound,
    ServiceUnavailable,
    TooManyValidatorIds,
    ValidatorNotFound,
)
from .identifiers import (
    IndexValidatorId,
    PubkeyValidatorId,
    RootStateId,
    SlotStateId,
    StateId,
    StateTag,
    ValidatorId,
    parse_state_id,
    parse_validator_id,
)
from .resolver import StateResolver
from .server import ApiServer, ApiServerConfig, create_app
from .validators import MAX_VALIDATOR_IDS, ValidatorQueryEngine

__all__ = [
    "ApiError",
    "ApiServer",
    "ApiServerConfig",
    "BadRequest",
    "BeaconApiClientError",
    "IndexValidatorId",
    "InternalError",
    "MAX_VALIDATOR_IDS",
    "NotFound",
    "PubkeyValidatorId",
    "RootStateId",
    "ServiceUnavailable",
    "SlotStateId",
    "StateId",
    "StateResolver",
    "StateTag",
    "TooManyValidatorIds",
    "ValidatorId",
    "ValidatorNotFound",
    "ValidatorQueryEngine",
    "create_app",
    "fetch_validator",
    "fetch_validator_balances",
    "parse_state_id",
    "parse_validator_id",
]
