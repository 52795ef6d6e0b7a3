"""Swagger 2.0 dialect built on jsonschema's Draft 4 keyword set.

The dialect differs from plain Draft 4 in five ways:

* Swagger format attributes (int32, int64, float, double, byte, date) take
  precedence over the Draft 4 format checker. Their failures carry a severity,
  and warning-level failures never make ``anyOf``/``oneOf``/``not`` branches or
  shallow-mode container checks fail.
* Swagger metadata keywords (``example``, ``xml``, ...) are known keywords
  that never yield errors, and the meta-schema checks their value types.
* Container keywords are evaluated before child-descending ones, each group
  in keyword-name order, so reports are deterministic.
* A failing ``required`` reports every missing property in one error.
* The shallow validator skips the children of a container whose own keywords
  already failed; the deep validator always descends.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from jsonschema import Draft4Validator, FormatChecker, ValidationError, validators
from referencing import Registry

from swagger_schema_validator.format_attributes import FORMAT_ATTRIBUTES, FormatViolation
from swagger_schema_validator.swagger_keywords import (
    SWAGGER_KEYWORDS,
    annotation_keyword,
    swagger_meta_schema,
)
from swagger_schema_validator.validation_reporting.report_models import Severity

KeywordFunction = Callable[[Any, Any, Any, Mapping[str, Any]], Iterable[ValidationError] | None]

_DRAFT4_KEYWORDS: Mapping[str, KeywordFunction] = Draft4Validator.VALIDATORS
# Keywords that validate child instances (object members, array elements).
_CHILD_KEYWORDS = frozenset({"items", "patternProperties", "properties"})
# Keywords that validate children only when their value is a schema, not a boolean.
_CHILD_SCHEMA_KEYWORDS = frozenset({"additionalItems", "additionalProperties"})
_BRANCH_KEYWORDS = ("anyOf", "not", "oneOf")


class FormatViolationError(ValidationError):
    """Engine error carrying a Swagger format violation and its severity."""

    def __init__(self, violation: FormatViolation) -> None:
        super().__init__(violation.message)
        self.violation = violation


class MissingPropertiesError(ValidationError):
    """Engine error listing every required property absent from one object."""

    def __init__(self, required: Sequence[str], missing: Sequence[str]) -> None:
        names = ", ".join(repr(name) for name in missing)
        super().__init__(f"object has missing required properties ({names})")
        self.required = list(required)
        self.missing = list(missing)


class SwaggerFormatChecker(FormatChecker):
    """Draft 4 format checker that also decides whether fidelity warnings are reported."""

    def __init__(self, reports_warnings: bool = True) -> None:
        super().__init__(formats=())
        self.checkers = dict(Draft4Validator.FORMAT_CHECKER.checkers)
        self.reports_warnings = reports_warnings


@dataclass(frozen=True)
class SwaggerDialect:
    """Engine configuration: validator classes for both deep-check modes plus the meta-schema."""

    deep_validator: Any
    shallow_validator: Any
    meta_schema: Mapping[str, Any]

    @classmethod
    def create(cls) -> SwaggerDialect:
        """Build a fresh dialect."""
        meta_schema = swagger_meta_schema()
        keywords: dict[str, KeywordFunction] = dict(_DRAFT4_KEYWORDS)
        keywords["format"] = _swagger_format
        keywords["required"] = _missing_required_properties
        for name in _BRANCH_KEYWORDS:
            keywords[name] = _branches_without_warnings(_DRAFT4_KEYWORDS[name])
        for descriptor in SWAGGER_KEYWORDS:
            keywords[descriptor.name] = annotation_keyword

        shallow_keywords = dict(keywords)
        for name in _CHILD_KEYWORDS | _CHILD_SCHEMA_KEYWORDS:
            shallow_keywords[name] = _children_of_valid_containers(name, keywords[name])

        return cls(
            deep_validator=_create_validator_class(meta_schema, keywords),
            shallow_validator=_create_validator_class(meta_schema, shallow_keywords),
            meta_schema=meta_schema,
        )

    def syntax_errors(self, schema: Any) -> list[ValidationError]:
        """Return meta-schema violations of one schema, in evaluation order."""
        return list(Draft4Validator(self.meta_schema).iter_errors(schema))

    def new_session(self, schema: Any, registry: Registry, *, deep_check: bool) -> Any:
        """Create a single-use engine validator for one validation run."""
        validator_class = self.deep_validator if deep_check else self.shallow_validator
        return validator_class(schema, registry=registry, format_checker=SwaggerFormatChecker())


def ordered_keywords(schema: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """Keywords applicable to a schema; ``$ref`` hides its siblings.

    Keywords on the container itself come first, child-descending keywords
    last, each group sorted by name.
    """
    if "$ref" in schema:
        return [("$ref", schema["$ref"])]
    return sorted(
        schema.items(), key=lambda item: (_descends_into_children(*item), item[0])
    )


def _create_validator_class(
    meta_schema: Mapping[str, Any], keywords: Mapping[str, KeywordFunction]
) -> Any:
    return validators.create(
        meta_schema=meta_schema,
        validators=keywords,
        type_checker=Draft4Validator.TYPE_CHECKER,
        format_checker=Draft4Validator.FORMAT_CHECKER,
        id_of=Draft4Validator.ID_OF,
        applicable_validators=ordered_keywords,
    )


def _swagger_format(
    validator: Any, format_name: Any, instance: Any, schema: Mapping[str, Any]
) -> Iterator[ValidationError]:
    attribute = FORMAT_ATTRIBUTES.get(format_name)
    if attribute is None:
        yield from _DRAFT4_KEYWORDS["format"](validator, format_name, instance, schema) or ()
        return
    if not validator.is_type(instance, attribute.instance_type):
        return
    violation = attribute.check(instance)
    if violation is None:
        return
    if violation.severity is Severity.WARNING and not _reports_warnings(validator):
        return
    yield FormatViolationError(violation)


def _missing_required_properties(
    validator: Any, required: Any, instance: Any, schema: Mapping[str, Any]
) -> Iterator[ValidationError]:
    del schema
    if not validator.is_type(instance, "object"):
        return
    missing = [name for name in required if name not in instance]
    if missing:
        yield MissingPropertiesError(required, missing)


def _reports_warnings(validator: Any) -> bool:
    return getattr(validator.format_checker, "reports_warnings", True)


def _without_warnings(validator: Any) -> Any:
    if not _reports_warnings(validator):
        return validator
    return validator.evolve(format_checker=SwaggerFormatChecker(reports_warnings=False))


def _branches_without_warnings(keyword: KeywordFunction) -> KeywordFunction:
    def evaluate(
        validator: Any, value: Any, instance: Any, schema: Mapping[str, Any]
    ) -> Iterable[ValidationError] | None:
        return keyword(_without_warnings(validator), value, instance, schema)

    return evaluate


def _descends_into_children(keyword: str, value: Any) -> bool:
    if keyword in _CHILD_KEYWORDS:
        return True
    return keyword in _CHILD_SCHEMA_KEYWORDS and isinstance(value, Mapping)


def _container_is_invalid(validator: Any, instance: Any, schema: Mapping[str, Any]) -> bool:
    quiet = _without_warnings(validator)
    for keyword, value in ordered_keywords(schema):
        if _descends_into_children(keyword, value):
            continue
        check = quiet.VALIDATORS.get(keyword)
        if check is None:
            continue
        for _ in check(quiet, value, instance, schema) or ():
            return True
    return False


def _children_of_valid_containers(name: str, keyword: KeywordFunction) -> KeywordFunction:
    def evaluate(
        validator: Any, value: Any, instance: Any, schema: Mapping[str, Any]
    ) -> Iterator[ValidationError]:
        if _descends_into_children(name, value) and _container_is_invalid(
            validator, instance, schema
        ):
            return
        yield from keyword(validator, value, instance, schema) or ()

    return evaluate
