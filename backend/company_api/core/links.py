"""Hypermedia Links — turns shaped employees into a bare list or a linked envelope.

Invariants:
    - Linked output: {"value": [entity + "links"], "links": [collection self]}
    - Plain output: bare list of shaped entities, no "links" key anywhere
    - Every linked entity has a self link keyed by its id
    - No IO: URLs come from the injected url_for(route_name, **path_params)

Design Decisions:
    - The linked/plain decision is made once per request (LinkParameters.linked)
      from the Accept header, not per entity
    - Link as a pydantic model: serializes to {"href", "rel", "method"} as-is
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence
from uuid import UUID

from pydantic import BaseModel

from company_api.core.data_shaper import (
    EMPLOYEE_FIELDS, FieldRegistry, ShapedEntity,
)
from company_api.core.domain_types import HttpMethod

UrlFor = Callable[..., str]


class Link(BaseModel):
    href: str
    rel: str
    method: str


class LinkCollectionWrapper(BaseModel):
    value: list[dict[str, Any]]
    links: list[Link] = []


@dataclass(frozen=True)
class LinkParameters:
    """Per-request negotiation result plus the host's route URL builder."""
    linked: bool
    url_for: UrlFor


@dataclass
class LinkResponse:
    has_links: bool
    shaped_entities: list[ShapedEntity] = field(default_factory=list)
    linked_entities: LinkCollectionWrapper | None = None

    def body(self) -> list[ShapedEntity] | dict[str, Any]:
        """Response body: the linked envelope when links were requested."""
        if self.has_links and self.linked_entities is not None:
            return self.linked_entities.model_dump()
        return self.shaped_entities


class EmployeeLinks:
    """Builds employee collection responses, with links when negotiated."""

    def __init__(self, registry: FieldRegistry = EMPLOYEE_FIELDS):
        self._registry = registry

    def try_generate_links(
        self,
        employees: Sequence[Any],
        fields: str | None,
        company_id: UUID,
        link_parameters: LinkParameters,
    ) -> LinkResponse:
        shaped = self._registry.shape_many(employees, fields)
        if not link_parameters.linked:
            return LinkResponse(has_links=False, shaped_entities=shaped)
        return LinkResponse(
            has_links=True,
            linked_entities=self._linked_collection(
                shaped, company_id, link_parameters.url_for,
            ),
        )

    def _linked_collection(
        self, shaped: list[ShapedEntity], company_id: UUID, url_for: UrlFor,
    ) -> LinkCollectionWrapper:
        value = []
        for entity in shaped:
            links = self._entity_links(
                url_for, company_id, entity[self._registry.id_field],
            )
            value.append({**entity, "links": [link.model_dump() for link in links]})
        return LinkCollectionWrapper(
            value=value,
            links=[
                Link(
                    href=url_for(
                        "get_employees_for_company", company_id=str(company_id),
                    ),
                    rel="self",
                    method=HttpMethod.GET.value,
                ),
            ],
        )

    @staticmethod
    def _entity_links(
        url_for: UrlFor, company_id: UUID, employee_id: UUID,
    ) -> list[Link]:
        params = {"company_id": str(company_id), "id": str(employee_id)}
        return [
            Link(
                href=url_for("get_employee_for_company", **params),
                rel="self", method=HttpMethod.GET.value,
            ),
            Link(
                href=url_for("delete_employee_for_company", **params),
                rel="delete_employee", method=HttpMethod.DELETE.value,
            ),
            Link(
                href=url_for("update_employee_for_company", **params),
                rel="update_employee", method=HttpMethod.PUT.value,
            ),
        ]
