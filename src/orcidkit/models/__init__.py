"""Typed models for ORCID API responses.

Each model is a frozen dataclass with a ``from_dict`` constructor that maps
the upstream hyphenated keys (``given-names``, ``put-code``, ...) onto
attributes.
"""

from orcidkit.models.common import ExternalID, ExternalIDs, StringValue
from orcidkit.models.record import (
    ActivitiesSummary,
    Biography,
    Name,
    OrcidIdentifier,
    OrcidRecord,
    Person,
)
from orcidkit.models.token import OAuthToken
from orcidkit.models.works import (
    LastModifiedDate,
    PublicationDate,
    WorkGroup,
    WorksGroupContainer,
    WorkSummary,
    WorksResponse,
    WorkTitle,
)

__all__ = [
    "ActivitiesSummary",
    "Biography",
    "ExternalID",
    "ExternalIDs",
    "LastModifiedDate",
    "Name",
    "OAuthToken",
    "OrcidIdentifier",
    "OrcidRecord",
    "Person",
    "PublicationDate",
    "StringValue",
    "WorkGroup",
    "WorksGroupContainer",
    "WorkSummary",
    "WorksResponse",
    "WorkTitle",
]
