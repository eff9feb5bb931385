"""Async client for the public ORCID API and its OAuth flow.

Validates ORCID iDs, fetches public records and works into typed models,
builds authorization URLs and exchanges authorization codes for tokens.
"""

__version__ = "0.1.0"

from orcidkit.client import OrcidClient
from orcidkit.environment import PRODUCTION, SANDBOX, ClientConfig, OrcidEnvironment
from orcidkit.errors import (
    DecodingError,
    EncodingError,
    ErrorKind,
    HTTPError,
    InvalidIdentifierError,
    InvalidURLError,
    OrcidError,
    TransportError,
)
from orcidkit.forms import encode_form
from orcidkit.identifier import OrcidID, parse_orcid_id
from orcidkit.models import OAuthToken, OrcidRecord, WorksResponse
from orcidkit.oauth import OAuthScope, build_authorize_url
from orcidkit.transport import (
    HTTPLoader,
    HttpxLoader,
    Request,
    RequestsLoader,
    Response,
    StubLoader,
    perform,
)

__all__ = [
    "__version__",
    # Client
    "OrcidClient",
    "ClientConfig",
    "OrcidEnvironment",
    "PRODUCTION",
    "SANDBOX",
    # Identifiers and encoding
    "OrcidID",
    "parse_orcid_id",
    "encode_form",
    # Models
    "OrcidRecord",
    "WorksResponse",
    "OAuthToken",
    # OAuth
    "OAuthScope",
    "build_authorize_url",
    # Transport
    "HTTPLoader",
    "HttpxLoader",
    "RequestsLoader",
    "StubLoader",
    "Request",
    "Response",
    "perform",
    # Errors
    "ErrorKind",
    "OrcidError",
    "InvalidIdentifierError",
    "InvalidURLError",
    "TransportError",
    "HTTPError",
    "DecodingError",
    "EncodingError",
]
