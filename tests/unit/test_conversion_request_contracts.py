"""
Tests for JSON Schema Contract Validators and request conversion

Комплексное тестирование:
- Валидность самой схемы conversion_request
- Валидация правильных запросов
- Детекция нарушений required полей, типов и constraints
- convert_request / convert_batch поверх Converter
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from anybase.converter import BatchItemResult, ConverterConfig, convert_batch, convert_request
from anybase.core.contracts import (
    ConversionRequestValidator,
    SchemaLoader,
    validate_conversion_request,
)
from anybase.core.domain import BIN, DEC, HEX, OCT
from anybase.core.errors import InputTooLong, InvalidDigit, InvalidTable


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный conversion_request для тестирования."""
    return {
        "schema_version": "1",
        "request_id": "req-001",
        "input": "ff",
        "src_table": HEX,
        "dst_table": OCT,
    }


@pytest.fixture
def minimal_request():
    """Только обязательные поля."""
    return {"input": "1010", "src_table": BIN, "dst_table": DEC}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    def test_load_schema(self):
        loader = SchemaLoader()
        schema = loader.load_schema("conversion_request")
        assert schema["title"] == "conversion_request"
        assert set(schema["required"]) == {"input", "src_table", "dst_table"}

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("conversion_request") is loader.load_schema("conversion_request")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "not-a-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATOR
# =============================================================================


class TestConversionRequestValidator:
    """Тесты валидации conversion_request"""

    def test_valid(self, valid_request):
        ConversionRequestValidator().validate(valid_request)
        validate_conversion_request(valid_request)

    def test_minimal_valid(self, minimal_request):
        assert ConversionRequestValidator().is_valid(minimal_request)

    @pytest.mark.parametrize("field", ["input", "src_table", "dst_table"])
    def test_required_field_missing(self, minimal_request, field):
        del minimal_request[field]
        with pytest.raises(ValidationError, match=field):
            validate_conversion_request(minimal_request)

    def test_wrong_type(self, minimal_request):
        minimal_request["input"] = 1010
        with pytest.raises(ValidationError):
            validate_conversion_request(minimal_request)

    def test_empty_table_rejected_by_schema(self, minimal_request):
        minimal_request["dst_table"] = ""
        assert not ConversionRequestValidator().is_valid(minimal_request)

    def test_empty_input_allowed(self, minimal_request):
        minimal_request["input"] = ""
        assert ConversionRequestValidator().is_valid(minimal_request)

    def test_additional_property_rejected(self, minimal_request):
        minimal_request["fraction"] = "0.5"
        assert not ConversionRequestValidator().is_valid(minimal_request)

    def test_wrong_schema_version(self, valid_request):
        valid_request["schema_version"] = "2"
        assert not ConversionRequestValidator().is_valid(valid_request)

    def test_iter_errors_reports_all(self):
        errors = list(ConversionRequestValidator().iter_errors({"input": 5}))
        # type error + два отсутствующих поля
        assert len(errors) == 3

    def test_non_ascii_tables(self):
        request = {"input": "你好", "src_table": "你好世界", "dst_table": "⠀⠁"}
        assert ConversionRequestValidator().is_valid(request)


# =============================================================================
# CONVERT REQUEST
# =============================================================================


class TestConvertRequest:
    """Тесты convert_request"""

    def test_convert(self, valid_request):
        assert convert_request(valid_request) == "377"

    def test_schema_violation_propagates(self):
        with pytest.raises(ValidationError):
            convert_request({"input": "ff"})

    def test_duplicate_table(self, minimal_request):
        minimal_request["src_table"] = "011"
        with pytest.raises(InvalidTable):
            convert_request(minimal_request)

    def test_invalid_digit(self, minimal_request):
        minimal_request["input"] = "102"
        with pytest.raises(InvalidDigit):
            convert_request(minimal_request)

    def test_config_applied(self, minimal_request):
        with pytest.raises(InputTooLong):
            convert_request(minimal_request, ConverterConfig(max_input_length=2))


# =============================================================================
# CONVERT BATCH
# =============================================================================


class TestConvertBatch:
    """Тесты convert_batch"""

    def test_all_ok(self):
        requests = [
            {"input": "ff", "src_table": HEX, "dst_table": OCT},
            {"input": "377", "src_table": OCT, "dst_table": HEX},
            {"input": "0000", "src_table": HEX, "dst_table": OCT},
        ]
        results = convert_batch(requests)
        assert [r.output for r in results] == ["377", "ff", "0"]
        assert all(r.ok for r in results)
        assert [r.index for r in results] == [0, 1, 2]

    def test_failures_recorded_per_item(self):
        requests = [
            {"input": "10", "src_table": DEC, "dst_table": BIN, "request_id": 1},
            {"input": "1x", "src_table": DEC, "dst_table": BIN, "request_id": 2},
            {"input": "1", "src_table": DEC, "dst_table": "00", "request_id": 3},
            {"input": "11", "src_table": DEC, "dst_table": BIN, "request_id": 4},
        ]
        results = convert_batch(requests)

        assert isinstance(results[0], BatchItemResult)
        assert results[0].output == "1010"
        assert results[0].request_id == 1

        assert not results[1].ok
        assert results[1].output is None
        assert isinstance(results[1].error, InvalidDigit)
        assert results[1].error.position == 1

        assert isinstance(results[2].error, InvalidTable)

        assert results[3].output == "1011"

    def test_schema_violation_aborts(self):
        requests = [
            {"input": "10", "src_table": DEC, "dst_table": BIN},
            {"input": "10", "src_table": DEC},
        ]
        with pytest.raises(ValidationError):
            convert_batch(requests)

    def test_empty_batch(self):
        assert convert_batch([]) == []

    def test_generator_input(self):
        requests = ({"input": str(i), "src_table": DEC, "dst_table": BIN} for i in range(4))
        assert [r.output for r in convert_batch(requests)] == ["0", "1", "10", "11"]
