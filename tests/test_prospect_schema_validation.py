from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.schemas.prospect import ProspectCreate, ProspectFilter, ProspectUpdate

_VALID_PROSPECT_KWARGS = {
    "first_name": "John",
    "last_name": "Doe",
    "email": "john@x.com",
}


def _prospect(**overrides) -> ProspectCreate:
    return ProspectCreate(**{**_VALID_PROSPECT_KWARGS, **overrides})


class TestCreateDefaults:
    def test_status_and_priority_default(self):
        prospect = _prospect()
        assert prospect.status == "new"
        assert prospect.priority == "medium"

    def test_optional_fields_default_to_none(self):
        dumped = _prospect().model_dump()
        for field in ("phone", "company", "position", "estimated_value", "notes"):
            assert dumped[field] is None

    def test_empty_string_is_kept_distinct_from_none(self):
        assert _prospect(company="").company == ""

    def test_enum_values_are_plain_strings(self):
        dumped = _prospect(status="closed_won", priority="urgent").model_dump()
        assert dumped["status"] == "closed_won"
        assert type(dumped["status"]) is str
        assert type(dumped["priority"]) is str


class TestCreateRejectsInvalidInput:
    @pytest.mark.parametrize("missing", ["first_name", "last_name", "email"])
    def test_missing_required_field_raises(self, missing):
        kwargs = dict(_VALID_PROSPECT_KWARGS)
        del kwargs[missing]
        with pytest.raises(ValidationError):
            ProspectCreate(**kwargs)

    @pytest.mark.parametrize("name_field", ["first_name", "last_name"])
    def test_empty_name_raises(self, name_field):
        with pytest.raises(ValidationError):
            _prospect(**{name_field: ""})

    @pytest.mark.parametrize(
        "email", ["not-an-email", "john@", "@x.com", "john@localhost", "john x@x.com"]
    )
    def test_malformed_email_raises(self, email):
        with pytest.raises(ValidationError):
            _prospect(email=email)

    @pytest.mark.parametrize("value", [0, -5, -0.01])
    def test_non_positive_estimated_value_raises(self, value):
        with pytest.raises(ValidationError):
            _prospect(estimated_value=value)

    def test_positive_estimated_value_passes(self):
        assert _prospect(estimated_value="0.01").estimated_value == Decimal("0.01")

    @pytest.mark.parametrize("value", ["0.001", "1234.567"])
    def test_estimated_value_with_more_than_two_decimals_raises(self, value):
        with pytest.raises(ValidationError):
            _prospect(estimated_value=value)

    @pytest.mark.parametrize("value", ["10000000000000", "1e14"])
    def test_estimated_value_wider_than_column_raises(self, value):
        with pytest.raises(ValidationError):
            _prospect(estimated_value=value)

    def test_largest_storable_estimated_value_passes(self):
        value = _prospect(estimated_value="9999999999999.99").estimated_value
        assert value == Decimal("9999999999999.99")

    def test_estimated_value_serializes_as_json_number(self):
        dumped = _prospect(estimated_value="1500.50").model_dump(mode="json")
        assert dumped["estimated_value"] == 1500.5

    @pytest.mark.parametrize("email", ["John@X.COM", "Jane.Doe@Example.Org"])
    def test_email_is_kept_exactly_as_sent(self, email):
        assert _prospect(email=email).email == email

    def test_email_on_test_domain_passes(self):
        assert _prospect(email="john@acme.test").email == "john@acme.test"

    def test_unknown_status_is_rejected_not_coerced(self):
        with pytest.raises(ValidationError):
            _prospect(status="won")

    def test_unknown_priority_is_rejected(self):
        with pytest.raises(ValidationError):
            _prospect(priority="critical")


class TestUpdatePresenceSemantics:
    """Absent and explicit-null fields must stay distinguishable."""

    def test_absent_fields_are_not_in_changes(self):
        update = ProspectUpdate(first_name="Jane")
        assert update.changes() == {"first_name": "Jane"}

    def test_explicit_null_is_in_changes(self):
        update = ProspectUpdate.model_validate({"company": None})
        assert update.changes() == {"company": None}

    def test_empty_body_has_no_changes(self):
        assert ProspectUpdate().changes() == {}

    def test_immutable_fields_are_excluded_from_changes(self):
        update = ProspectUpdate.model_validate({"id": 3, "notes": "x"})
        assert update.changes() == {"notes": "x"}

    @pytest.mark.parametrize(
        "field", ["first_name", "last_name", "email", "status", "priority"]
    )
    def test_null_for_required_column_raises(self, field):
        with pytest.raises(ValidationError, match="cannot be set to null"):
            ProspectUpdate.model_validate({field: None})

    def test_update_reapplies_create_rules(self):
        with pytest.raises(ValidationError):
            ProspectUpdate(email="broken")
        with pytest.raises(ValidationError):
            ProspectUpdate(estimated_value=0)
        with pytest.raises(ValidationError):
            ProspectUpdate(status="archived")

    def test_email_is_kept_exactly_as_sent(self):
        update = ProspectUpdate(email="Jane@Example.ORG")
        assert update.changes() == {"email": "Jane@Example.ORG"}

    def test_over_precise_estimated_value_raises(self):
        with pytest.raises(ValidationError):
            ProspectUpdate(estimated_value="0.001")

    def test_estimated_value_can_be_cleared(self):
        update = ProspectUpdate.model_validate({"estimated_value": None})
        assert update.changes() == {"estimated_value": None}


class TestFilterSchema:
    def test_all_predicates_optional(self):
        filters = ProspectFilter()
        assert filters.status is None and filters.search is None

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            ProspectFilter(status="open")
