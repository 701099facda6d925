"""Built-in validators, registered in the validator table under their rule names."""

from fast_permit.core.validator_table import ValidatorTable

from .foreign_key_validator import ForeignKeyValidator
from .format_validator import FormatValidator
from .inclusion_validator import ExclusionValidator, InclusionValidator
from .length_validator import LengthValidator
from .number_validator import NumberValidator

BUILTIN_VALIDATORS = {
    "validate_length": LengthValidator,
    "validate_number": NumberValidator,
    "validate_format": FormatValidator,
    "validate_inclusion": InclusionValidator,
    "validate_exclusion": ExclusionValidator,
    "foreign_key_constraint": ForeignKeyValidator,
}

for _name, _validator in BUILTIN_VALIDATORS.items():
    if _name not in ValidatorTable():
        ValidatorTable().register(_name, _validator)

__all__ = [
    "BUILTIN_VALIDATORS",
    "ForeignKeyValidator",
    "FormatValidator",
    "ExclusionValidator",
    "InclusionValidator",
    "LengthValidator",
    "NumberValidator",
]
