"""Data Shaper — projects entities down to the fields a client asked for.

Invariants:
    - The identity field is always present and always first
    - No fields requested (None/blank) → every registered field, in declared order
    - Requested fields appear in request order, duplicates collapsed
    - Field names match case-insensitively; output keys use canonical names
    - An unregistered field name raises UnknownShapeFieldError — never silently dropped

Design Decisions:
    - Explicit registry (name → accessor) built once at import instead of runtime
      attribute enumeration: shaping is a lookup and "unknown field" is a registry miss
"""

from operator import attrgetter
from typing import Any, Callable, Generic, Iterable, TypeVar

from company_api.core.errors import UnknownShapeFieldError

T = TypeVar("T")

ShapedEntity = dict[str, Any]


class FieldRegistry(Generic[T]):
    """Canonical field names and accessors for one entity type."""

    def __init__(self, id_field: str, accessors: dict[str, Callable[[T], Any]]):
        if id_field not in accessors:
            raise ValueError(f"id field '{id_field}' must be registered")
        self.id_field = id_field
        self._accessors = dict(accessors)
        self._by_lower = {name.lower(): name for name in accessors}

    @property
    def field_names(self) -> list[str]:
        return list(self._accessors)

    def resolve(self, fields: str | None) -> list[str]:
        """Canonical names to emit for a comma-separated field list."""
        requested = [f.strip() for f in (fields or "").split(",") if f.strip()]
        if not requested:
            return self.field_names
        resolved = [self.id_field]
        for name in requested:
            canonical = self._by_lower.get(name.lower())
            if canonical is None:
                raise UnknownShapeFieldError(name)
            if canonical not in resolved:
                resolved.append(canonical)
        return resolved

    def shape(self, entity: T, fields: str | None = None) -> ShapedEntity:
        return self._project(entity, self.resolve(fields))

    def shape_many(
        self, entities: Iterable[T], fields: str | None = None,
    ) -> list[ShapedEntity]:
        names = self.resolve(fields)
        return [self._project(entity, names) for entity in entities]

    def _project(self, entity: T, names: list[str]) -> ShapedEntity:
        return {name: self._accessors[name](entity) for name in names}


COMPANY_FIELDS = FieldRegistry("id", {
    "id": attrgetter("id"),
    "name": attrgetter("name"),
    "fullAddress": attrgetter("full_address"),
})

EMPLOYEE_FIELDS = FieldRegistry("id", {
    "id": attrgetter("id"),
    "name": attrgetter("name"),
    "age": attrgetter("age"),
    "position": attrgetter("position"),
})
