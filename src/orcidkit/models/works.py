"""Models for ``GET /{orcid}/works``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from orcidkit.models.common import (
    ExternalIDs,
    StringValue,
    expect_object,
    get_int,
    get_list,
    get_model,
    string_value,
)


@dataclass(frozen=True)
class LastModifiedDate:
    """Milliseconds since the epoch."""

    value: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "LastModifiedDate":
        data = expect_object(data, path)
        return cls(value=get_int(data, "value", path))


@dataclass(frozen=True)
class WorkTitle:
    title: Optional[StringValue] = None
    subtitle: Optional[StringValue] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "WorkTitle":
        data = expect_object(data, path)
        return cls(
            title=get_model(data, "title", path, StringValue.from_dict),
            subtitle=get_model(data, "subtitle", path, StringValue.from_dict),
        )


@dataclass(frozen=True)
class PublicationDate:
    year: Optional[StringValue] = None
    month: Optional[StringValue] = None
    day: Optional[StringValue] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "PublicationDate":
        data = expect_object(data, path)
        return cls(
            year=get_model(data, "year", path, StringValue.from_dict),
            month=get_model(data, "month", path, StringValue.from_dict),
            day=get_model(data, "day", path, StringValue.from_dict),
        )


@dataclass(frozen=True)
class WorkSummary:
    put_code: Optional[int] = None
    title: Optional[WorkTitle] = None
    publication_date: Optional[PublicationDate] = None
    external_ids: Optional[ExternalIDs] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "WorkSummary":
        data = expect_object(data, path)
        return cls(
            put_code=get_int(data, "put-code", path),
            title=get_model(data, "title", path, WorkTitle.from_dict),
            publication_date=get_model(data, "publication-date", path, PublicationDate.from_dict),
            external_ids=get_model(data, "external-ids", path, ExternalIDs.from_dict),
        )

    @property
    def title_text(self) -> Optional[str]:
        return string_value(self.title.title) if self.title else None

    @property
    def year(self) -> Optional[str]:
        return string_value(self.publication_date.year) if self.publication_date else None


@dataclass(frozen=True)
class WorkGroup:
    work_summary: Optional[list[WorkSummary]] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "WorkGroup":
        data = expect_object(data, path)
        return cls(work_summary=get_list(data, "work-summary", path, WorkSummary.from_dict))


@dataclass(frozen=True)
class WorksResponse:
    """Public works summary for one ORCID iD."""

    last_modified_date: Optional[LastModifiedDate] = None
    group: Optional[list[WorkGroup]] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "WorksResponse":
        data = expect_object(data, path)
        return cls(
            last_modified_date=get_model(
                data, "last-modified-date", path, LastModifiedDate.from_dict
            ),
            group=get_list(data, "group", path, WorkGroup.from_dict),
        )

    @property
    def summaries(self) -> list[WorkSummary]:
        """All work summaries across groups, in response order."""
        return [
            summary
            for group in self.group or []
            for summary in group.work_summary or []
        ]


@dataclass(frozen=True)
class WorksGroupContainer:
    """The ``works`` block nested inside a record's activities summary."""

    group: Optional[list[WorkGroup]] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "WorksGroupContainer":
        data = expect_object(data, path)
        return cls(group=get_list(data, "group", path, WorkGroup.from_dict))
