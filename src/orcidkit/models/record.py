"""Models for ``GET /{orcid}/record``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from orcidkit.models.common import StringValue, expect_object, get_model, get_str, string_value
from orcidkit.models.works import WorksGroupContainer


@dataclass(frozen=True)
class OrcidIdentifier:
    uri: Optional[str] = None
    path: Optional[str] = None
    host: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "OrcidIdentifier":
        data = expect_object(data, path)
        return cls(
            uri=get_str(data, "uri", path),
            path=get_str(data, "path", path),
            host=get_str(data, "host", path),
        )


@dataclass(frozen=True)
class Name:
    given_names: Optional[StringValue] = None
    family_name: Optional[StringValue] = None
    credit_name: Optional[StringValue] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "Name":
        data = expect_object(data, path)
        return cls(
            given_names=get_model(data, "given-names", path, StringValue.from_dict),
            family_name=get_model(data, "family-name", path, StringValue.from_dict),
            credit_name=get_model(data, "credit-name", path, StringValue.from_dict),
        )

    @property
    def display_name(self) -> Optional[str]:
        """Credit name if published, otherwise "given family"."""
        credit = string_value(self.credit_name)
        if credit:
            return credit
        parts = [p for p in (string_value(self.given_names), string_value(self.family_name)) if p]
        return " ".join(parts) or None


@dataclass(frozen=True)
class Biography:
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "Biography":
        data = expect_object(data, path)
        return cls(content=get_str(data, "content", path))


@dataclass(frozen=True)
class Person:
    name: Optional[Name] = None
    biography: Optional[Biography] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "Person":
        data = expect_object(data, path)
        return cls(
            name=get_model(data, "name", path, Name.from_dict),
            biography=get_model(data, "biography", path, Biography.from_dict),
        )


@dataclass(frozen=True)
class ActivitiesSummary:
    works: Optional[WorksGroupContainer] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "ActivitiesSummary":
        data = expect_object(data, path)
        return cls(works=get_model(data, "works", path, WorksGroupContainer.from_dict))


@dataclass(frozen=True)
class OrcidRecord:
    """Public ORCID record.

    Which sections are present depends on the researcher's visibility
    settings, so every attribute may be None.
    """

    orcid_identifier: Optional[OrcidIdentifier] = None
    person: Optional[Person] = None
    activities_summary: Optional[ActivitiesSummary] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "OrcidRecord":
        data = expect_object(data, path)
        return cls(
            orcid_identifier=get_model(data, "orcid-identifier", path, OrcidIdentifier.from_dict),
            person=get_model(data, "person", path, Person.from_dict),
            activities_summary=get_model(
                data, "activities-summary", path, ActivitiesSummary.from_dict
            ),
        )

    @property
    def orcid(self) -> Optional[str]:
        return self.orcid_identifier.path if self.orcid_identifier else None

    @property
    def display_name(self) -> Optional[str]:
        if self.person and self.person.name:
            return self.person.name.display_name
        return None
