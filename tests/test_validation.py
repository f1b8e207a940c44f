"""Tests for validation utilities."""

from json_format.types import ErrorType, ValidationError, ValidationResult
from json_format.utils.validation import ValidationUtils


class TestValidationUtils:
    """Tests for ValidationUtils class."""
    
    def test_validate_valid_json(self):
        result = ValidationUtils.validate_json_string('{"a": [1, 2, {"b": null}]}')
        
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
    
    def test_validate_scalar_root(self):
        """Any JSON value is accepted at the root."""
        assert ValidationUtils.validate_json_string('"text"').is_valid
        assert ValidationUtils.validate_json_string("3.5").is_valid
    
    def test_validate_empty_string(self):
        result = ValidationUtils.validate_json_string("  \n ")
        
        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message
    
    def test_validate_invalid_syntax(self):
        result = ValidationUtils.validate_json_string('{"a": 1 "b": 2}')
        
        assert not result.is_valid
        assert result.errors[0].message.startswith("Invalid JSON syntax")
        assert result.errors[0].location == "line 1, column 9"
    
    def test_validate_non_finite_constants(self):
        for text in ("NaN", "[1, Infinity]", '{"a": -Infinity}'):
            result = ValidationUtils.validate_json_string(text)
            
            assert not result.is_valid
            assert result.errors[0].type == ErrorType.SYNTAX
            assert "is not valid JSON" in result.errors[0].message
    
    def test_validate_non_string_input(self):
        result = ValidationUtils.validate_json_string(None)
        
        assert not result.is_valid
        assert "NoneType" in result.errors[0].message
    
    def test_validate_bytes(self):
        assert ValidationUtils.validate_json_string(b"[1]").is_valid
    
    def test_deep_nesting_warning(self):
        text = "[" * 25 + "]" * 25
        result = ValidationUtils.validate_json_string(text)
        
        assert result.is_valid
        assert len(result.warnings) == 1
        assert "Deep nesting detected" in result.warnings[0]
    
    def test_calculate_max_depth(self):
        assert ValidationUtils.calculate_max_depth(1) == 0
        assert ValidationUtils.calculate_max_depth([]) == 0
        assert ValidationUtils.calculate_max_depth({"a": {"b": {"c": 1}}}) == 3
        assert ValidationUtils.calculate_max_depth({"a": [1], "b": [[[["x"]]]]}) == 5
    
    def test_error_messages(self):
        result = ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(type=ErrorType.SYNTAX, message="Bad token", location="line 1, column 3"),
                ValidationError(type=ErrorType.SYNTAX, message="No location"),
            ],
            warnings=[]
        )
        
        assert ValidationUtils.error_messages(result) == [
            "Bad token (line 1, column 3)",
            "No location",
        ]
