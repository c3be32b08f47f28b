"""Value validation against declared option types."""

from ghosttyconf.validation.values import check_option_value, validate_value

__all__ = [
    "check_option_value",
    "validate_value",
]
