"""Declarative field definitions and conditional constraint resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from .constraints import ALWAYS_PASS, Constraint

Record = Mapping[str, Any]
Predicate = Callable[[Record], bool]


class SchemaResolutionError(ValueError):
    """Raised when a schema references fields it does not define."""

    def __init__(self, errors: list[str]):
        super().__init__("Schema resolution failed")
        self.errors = errors

    def __str__(self) -> str:
        return f"Schema resolution failed: {self.errors}"


@dataclass(frozen=True, slots=True)
class FieldPredicate:
    """True when ``record[field]`` equals one of ``values``."""

    field: str
    values: tuple[Any, ...]

    @property
    def depends_on(self) -> tuple[str, ...]:
        return (self.field,)

    def __call__(self, record: Record) -> bool:
        return record.get(self.field) in self.values


def field_in(field_name: str, *values: Any) -> FieldPredicate:
    return FieldPredicate(field=field_name, values=tuple(values))


@dataclass(frozen=True, slots=True)
class ConditionalRule:
    """Override applied to a field when ``predicate`` holds for the record."""

    predicate: Predicate
    override: Constraint
    depends_on: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.depends_on:
            derived = tuple(getattr(self.predicate, "depends_on", ()))
            object.__setattr__(self, "depends_on", derived)

    def matches(self, record: Record) -> bool:
        return bool(self.predicate(record))


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """One form field with its base and conditional constraints."""

    name: str
    base_rule: Constraint = ALWAYS_PASS
    conditional_rules: tuple[ConditionalRule, ...] = ()
    label: str | None = None


class SchemaModel:
    """Ordered set of field definitions.

    Construction validates that every conditional rule only depends on
    fields the schema itself defines.
    """

    def __init__(self, fields: Iterable[FieldDefinition]) -> None:
        self._fields: dict[str, FieldDefinition] = {}
        errors: list[str] = []
        for definition in fields:
            if definition.name in self._fields:
                errors.append(f"duplicate field '{definition.name}'")
                continue
            self._fields[definition.name] = definition

        for definition in self._fields.values():
            for index, rule in enumerate(definition.conditional_rules):
                for dependency in rule.depends_on:
                    if dependency not in self._fields:
                        errors.append(
                            f"field '{definition.name}' rule {index}: "
                            f"unknown dependency '{dependency}'"
                        )
        if errors:
            raise SchemaResolutionError(errors)

    def field_names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def field(self, name: str) -> FieldDefinition:
        try:
            return self._fields[name]
        except KeyError as exc:
            raise KeyError(f"Unknown field: {name!r}") from exc

    def resolve_constraint(self, field_name: str, record: Record) -> Constraint:
        """Return the effective constraint for ``field_name``.

        The last conditional rule whose predicate holds wins; otherwise the
        base rule applies.
        """
        definition = self.field(field_name)
        effective = definition.base_rule
        for rule in definition.conditional_rules:
            if rule.matches(record):
                effective = rule.override
        return effective

    def is_relevant(self, field_name: str, record: Record) -> bool:
        return not self.resolve_constraint(field_name, record).is_noop

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)


__all__ = [
    "ConditionalRule",
    "FieldDefinition",
    "FieldPredicate",
    "Predicate",
    "Record",
    "SchemaModel",
    "SchemaResolutionError",
    "field_in",
]
