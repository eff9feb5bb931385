"""Tests for decoding ORCID JSON into the typed models."""
import json

import pytest

from orcidkit import DecodingError, OAuthToken, OrcidRecord, WorksResponse
from orcidkit.models import ExternalID, ExternalIDs, Name, StringValue, WorkSummary


class TestOrcidRecord:
    def test_decodes_fixture(self, record_bytes):
        """Test decoding the record fixture."""
        record = OrcidRecord.from_dict(json.loads(record_bytes))

        assert record.orcid == "0000-0002-1825-0097"
        assert record.orcid_identifier.host == "orcid.org"
        assert record.person.name.family_name.value == "Carberry"
        assert record.person.name.credit_name is None
        assert record.person.biography.content.startswith("Josiah Carberry")
        assert record.display_name == "Test Carberry"

    def test_nested_works_are_decoded(self, record_bytes):
        """Test works nested in the activities summary."""
        record = OrcidRecord.from_dict(json.loads(record_bytes))

        groups = record.activities_summary.works.group
        summary = groups[0].work_summary[0]
        assert summary.put_code == 1250170
        assert summary.year == "2012"
        assert summary.publication_date.day is None

    def test_unknown_keys_are_ignored(self):
        """Test unknown keys are ignored."""
        record = OrcidRecord.from_dict({"history": {"claimed": True}, "path": "/x"})
        assert record == OrcidRecord()

    def test_explicit_nulls_are_absent(self):
        """Test explicit nulls decode as absent."""
        record = OrcidRecord.from_dict(
            {"orcid-identifier": None, "person": None, "activities-summary": None}
        )
        assert record == OrcidRecord()
        assert record.orcid is None
        assert record.display_name is None

    def test_top_level_must_be_object(self):
        """Test the root must be an object."""
        with pytest.raises(DecodingError, match=r"\$: expected object, got array"):
            OrcidRecord.from_dict([])

    def test_wrong_leaf_type_names_path(self):
        """Test errors name the full field path."""
        payload = {"person": {"name": {"given-names": {"value": 42}}}}

        with pytest.raises(DecodingError) as exc_info:
            OrcidRecord.from_dict(payload)

        assert exc_info.value.description == (
            "$.person.name.given-names.value: expected string, got number"
        )


class TestName:
    def test_credit_name_wins(self):
        """Test credit name is preferred."""
        name = Name(
            given_names=StringValue("Josiah"),
            family_name=StringValue("Carberry"),
            credit_name=StringValue("J. S. Carberry"),
        )
        assert name.display_name == "J. S. Carberry"

    def test_given_name_only(self):
        """Test display name with only given names."""
        assert Name(given_names=StringValue("Josiah")).display_name == "Josiah"

    def test_nothing_public(self):
        """Test display name when nothing is public."""
        assert Name().display_name is None


class TestWorksResponse:
    def test_decodes_fixture(self, works_bytes):
        """Test decoding the works fixture."""
        works = WorksResponse.from_dict(json.loads(works_bytes))

        assert works.last_modified_date.value == 1719412931001
        summary = works.summaries[0]
        assert summary.put_code == 1250170
        assert summary.title_text == "Example Work"
        assert summary.title.subtitle.value == "A demonstration"
        assert summary.external_ids.find("doi") == "10.5555/12345678"

    def test_summaries_flatten_groups_in_order(self):
        """Test summaries keep group order."""
        works = WorksResponse.from_dict(
            {
                "group": [
                    {"work-summary": [{"put-code": 1}, {"put-code": 2}]},
                    {"work-summary": None},
                    {"work-summary": [{"put-code": 3}]},
                ]
            }
        )
        assert [s.put_code for s in works.summaries] == [1, 2, 3]

    def test_empty_response(self):
        """Test an empty works response."""
        works = WorksResponse.from_dict({})
        assert works.group is None
        assert works.summaries == []

    def test_group_must_be_array(self):
        """Test group must be an array."""
        with pytest.raises(DecodingError, match=r"\$\.group: expected array, got object"):
            WorksResponse.from_dict({"group": {}})

    def test_bad_item_reports_index(self):
        """Test list errors include the item index."""
        payload = {"group": [{"work-summary": [{"put-code": 1}, {"put-code": "2"}]}]}

        with pytest.raises(DecodingError, match=r"\$\.group\[0\]\.work-summary\[1\]\.put-code"):
            WorksResponse.from_dict(payload)

    def test_boolean_is_not_an_integer(self):
        """Test booleans are rejected for integer fields."""
        with pytest.raises(DecodingError, match="expected integer, got boolean"):
            WorkSummary.from_dict({"put-code": True})

    def test_whole_number_float_is_an_integer(self):
        """Test whole-number floats decode as integers."""
        assert WorkSummary.from_dict({"put-code": 12.0}).put_code == 12

    def test_fractional_float_is_not_an_integer(self):
        """Test fractional numbers are rejected for integer fields."""
        with pytest.raises(DecodingError, match=r"\$\.put-code: expected integer, got number"):
            WorkSummary.from_dict({"put-code": 12.5})


class TestExternalIDs:
    def test_find_returns_first_match(self):
        """Test find returns the first matching type."""
        ids = ExternalIDs(
            external_ids=[
                ExternalID("eid", "2-s2.0-1"),
                ExternalID("doi", "10.1/a"),
                ExternalID("doi", "10.1/b"),
            ]
        )
        assert ids.find("doi") == "10.1/a"

    def test_find_missing(self):
        """Test find with no identifiers."""
        assert ExternalIDs().find("doi") is None


class TestOAuthToken:
    def test_decodes_full_payload(self):
        """Test decoding a full token payload."""
        token = OAuthToken.from_dict(
            {
                "access_token": "abc",
                "token_type": "bearer",
                "refresh_token": "def",
                "expires_in": 3599,
                "scope": "/read-limited",
                "name": "Sofia Garcia",
                "orcid": "0000-0001-2345-6789",
            }
        )
        assert token.access_token == "abc"
        assert token.expires_in == 3599
        assert token.orcid == "0000-0001-2345-6789"

    def test_only_access_token_required(self):
        """Test only access_token is required."""
        token = OAuthToken.from_dict({"access_token": "abc"})
        assert token == OAuthToken(access_token="abc")

    @pytest.mark.parametrize("payload", [{}, {"access_token": None}])
    def test_missing_access_token(self, payload):
        """Test absent or null access_token is rejected."""
        with pytest.raises(DecodingError, match=r"\$\.access_token"):
            OAuthToken.from_dict(payload)

    def test_empty_access_token_is_kept(self):
        """Test an empty access_token is decoded as given."""
        assert OAuthToken.from_dict({"access_token": ""}).access_token == ""

    def test_expires_in_must_be_integer(self):
        """Test expires_in must be an integer."""
        with pytest.raises(DecodingError, match=r"\$\.expires_in"):
            OAuthToken.from_dict({"access_token": "abc", "expires_in": "3599"})

    def test_repr_hides_secrets(self):
        """Test repr does not show tokens."""
        token = OAuthToken(access_token="secret-access", refresh_token="secret-refresh", name="Sofia")

        text = repr(token)

        assert "secret-access" not in text
        assert "secret-refresh" not in text
        assert "Sofia" in text
