"""Tests for the contract extraction schema."""

import pytest
from pydantic import ValidationError

from app.schemas.domain import ContractExtraction, describe_fields, extraction_json_schema

WIRE_NAMES = [
    "signingParties",
    "startDate",
    "endDate",
    "duration",
    "penalties",
    "contractPurpose",
    "keyClauses",
]
LIST_FIELDS = {"signingParties", "penalties", "keyClauses"}


class TestDescribeFields:
    """Tests for the field rows rendered into the instruction."""

    def test_names_in_declaration_order(self):
        assert [spec.name for spec in describe_fields()] == WIRE_NAMES

    def test_kinds(self):
        kinds = {spec.name: spec.kind for spec in describe_fields()}
        for name in WIRE_NAMES:
            expected = "list of strings" if name in LIST_FIELDS else "string"
            assert kinds[name] == expected

    def test_every_field_has_description(self):
        for spec in describe_fields():
            assert spec.description

    def test_empty_default_policy_stated(self):
        for spec in describe_fields():
            if spec.is_list:
                assert "empty list" in spec.description
            else:
                assert "empty string" in spec.description

    def test_english_policy_stated_for_every_field(self):
        for spec in describe_fields():
            assert "English" in spec.description, spec.name

    def test_date_fields_require_english(self):
        descriptions = {spec.name: spec.description for spec in describe_fields()}
        for name in ("startDate", "endDate"):
            assert "Always written in English" in descriptions[name]

    def test_party_names_kept_as_written(self):
        descriptions = {spec.name: spec.description for spec in describe_fields()}
        assert "kept as written" in descriptions["signingParties"]


class TestJsonSchema:
    """Tests for the JSON Schema handed to the provider."""

    def test_all_fields_required(self):
        schema = extraction_json_schema()
        assert sorted(schema["required"]) == sorted(WIRE_NAMES)

    def test_no_additional_properties(self):
        assert extraction_json_schema()["additionalProperties"] is False

    def test_property_types(self):
        properties = extraction_json_schema()["properties"]
        assert list(properties) == WIRE_NAMES
        for name, prop in properties.items():
            if name in LIST_FIELDS:
                assert prop["type"] == "array"
                assert prop["items"] == {"type": "string"}
            else:
                assert prop["type"] == "string"

    def test_descriptions_match_field_rows(self):
        properties = extraction_json_schema()["properties"]
        for spec in describe_fields():
            assert properties[spec.name]["description"] == spec.description


class TestContractExtractionValidation:
    """Tests for strict validation of model output."""

    def test_valid_record(self, valid_record):
        result = ContractExtraction.model_validate(valid_record)
        assert result.signing_parties == ("Acme Corp", "Beta LLC")
        assert result.start_date == "Jan 1 2024"
        assert result.duration == "two years"

    def test_dump_uses_wire_names(self, valid_record):
        result = ContractExtraction.model_validate(valid_record)
        assert result.model_dump(mode="json", by_alias=True) == valid_record

    def test_missing_field_rejected(self, valid_record):
        del valid_record["keyClauses"]
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_null_field_rejected(self, valid_record):
        valid_record["endDate"] = None
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_string_for_list_rejected(self, valid_record):
        valid_record["penalties"] = "5% penalty"
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_list_for_string_rejected(self, valid_record):
        valid_record["duration"] = ["two years"]
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_number_not_coerced_to_string(self, valid_record):
        valid_record["duration"] = 2
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_non_string_list_item_rejected(self, valid_record):
        valid_record["signingParties"] = ["Acme Corp", 42]
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_unknown_field_rejected(self, valid_record):
        valid_record["confidence"] = 0.9
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(valid_record)

    def test_record_is_frozen(self, valid_record):
        result = ContractExtraction.model_validate(valid_record)
        with pytest.raises(ValidationError):
            result.duration = "three years"

    def test_snake_case_keys_rejected(self, valid_record):
        snake_record = {
            "signing_parties": valid_record["signingParties"],
            "start_date": valid_record["startDate"],
            "end_date": valid_record["endDate"],
            "duration": valid_record["duration"],
            "penalties": valid_record["penalties"],
            "contract_purpose": valid_record["contractPurpose"],
            "key_clauses": valid_record["keyClauses"],
        }
        with pytest.raises(ValidationError):
            ContractExtraction.model_validate(snake_record)

    def test_list_fields_are_immutable(self, valid_record):
        result = ContractExtraction.model_validate(valid_record)
        for value in (result.signing_parties, result.penalties, result.key_clauses):
            assert isinstance(value, tuple)
        with pytest.raises(AttributeError):
            result.penalties.append("10% penalty")
        assert result.penalties == ("5% penalty on late payments",)

    def test_validated_record_detached_from_input(self, valid_record):
        result = ContractExtraction.model_validate(valid_record)
        valid_record["keyClauses"].append("Injected clause")
        assert "Injected clause" not in result.key_clauses

    def test_tuple_input_accepted(self, valid_record):
        valid_record["penalties"] = tuple(valid_record["penalties"])
        result = ContractExtraction.model_validate(valid_record)
        assert result.penalties == ("5% penalty on late payments",)


class TestEmptyRecord:
    """Tests for the all-empty record."""

    def test_empty_record_is_fully_populated(self):
        dumped = ContractExtraction.empty().model_dump(mode="json", by_alias=True)
        assert list(dumped) == WIRE_NAMES
        for name, value in dumped.items():
            assert value == ([] if name in LIST_FIELDS else "")
