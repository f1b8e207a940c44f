"""Validation utilities for JSON text."""

import json
from typing import Any, List, Union
from ..types import ValidationResult, ValidationError, ErrorType


MAX_RECOMMENDED_DEPTH = 20


def reject_constant(name: str):
    """Refuse the NaN, Infinity and -Infinity extensions of the json module."""
    raise ValueError(f"{name} is not valid JSON")


class ValidationUtils:
    """Utility class for validating JSON input."""
    
    @staticmethod
    def validate_json_string(json_string: Union[str, bytes]) -> ValidationResult:
        """
        Validate JSON string syntax and structure.
        
        Args:
            json_string: JSON string to validate
            
        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        
        if not isinstance(json_string, (str, bytes, bytearray)):
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"JSON input must be str or bytes, got {type(json_string).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        
        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        
        try:
            data = json.loads(json_string, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except (ValueError, RecursionError) as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON input: {e}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        
        max_depth = ValidationUtils.calculate_max_depth(data)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). This may impact performance.")
        
        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
    
    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth
        
        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth
        for child in children:
            max_child_depth = max(
                max_child_depth,
                ValidationUtils.calculate_max_depth(child, current_depth + 1)
            )
        
        return max_child_depth
    
    @staticmethod
    def error_messages(result: ValidationResult) -> List[str]:
        """Format validation errors as human-readable lines."""
        lines = []
        for error in result.errors:
            if error.location:
                lines.append(f"{error.message} ({error.location})")
            else:
                lines.append(error.message)
        return lines
