"""Swagger format attribute exports."""

from .format_models import FormatAttribute, FormatViolation
from .numeric_formats import check_double, check_float, check_int32, check_int64
from .string_formats import check_base64, check_date

FORMAT_ATTRIBUTES = {
    attribute.name: attribute
    for attribute in (
        FormatAttribute(name="int32", instance_type="integer", check=check_int32),
        FormatAttribute(name="int64", instance_type="integer", check=check_int64),
        FormatAttribute(name="float", instance_type="number", check=check_float),
        FormatAttribute(name="double", instance_type="number", check=check_double),
        FormatAttribute(name="byte", instance_type="string", check=check_base64),
        FormatAttribute(name="date", instance_type="string", check=check_date),
    )
}

__all__ = [
    "FORMAT_ATTRIBUTES",
    "FormatAttribute",
    "FormatViolation",
    "check_base64",
    "check_date",
    "check_double",
    "check_float",
    "check_int32",
    "check_int64",
]
