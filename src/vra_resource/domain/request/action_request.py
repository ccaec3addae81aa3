"""Wire payload for resource action requests."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ActionPayloadModel(BaseModel):
    """Base for payload sections serialized with the platform's field names."""

    model_config = ConfigDict(populate_by_name=True)


class EntityRef(ActionPayloadModel):
    id: Any = None


class PayloadOrganization(ActionPayloadModel):
    tenant_ref: Any = Field(None, alias="tenantRef")
    tenant_label: Any = Field(None, alias="tenantLabel")
    subtenant_ref: Any = Field(None, alias="subtenantRef")
    subtenant_label: Any = Field(None, alias="subtenantLabel")


class RequestData(ActionPayloadModel):
    entries: list[dict[str, Any]] = Field(default_factory=list)


class ActionRequestPayload(ActionPayloadModel):
    """
    Body of POST /catalog-service/api/consumer/requests for a resource action.

    Field names and the constant values of ``@type`` and ``state`` are fixed by
    the platform; serialize with :meth:`to_json`.
    """

    type: Literal["ResourceActionRequest"] = Field("ResourceActionRequest", alias="@type")
    resource_ref: EntityRef = Field(alias="resourceRef")
    resource_action_ref: EntityRef = Field(alias="resourceActionRef")
    organization: PayloadOrganization = Field(default_factory=PayloadOrganization)
    state: Literal["SUBMITTED"] = "SUBMITTED"
    request_number: int = Field(0, alias="requestNumber")
    request_data: RequestData = Field(default_factory=RequestData, alias="requestData")

    @classmethod
    def for_action(
        cls,
        resource_id: Any,
        action_id: Any,
        tenant_ref: Any = None,
        tenant_label: Any = None,
        subtenant_ref: Any = None,
        subtenant_label: Any = None,
    ) -> "ActionRequestPayload":
        """Build the payload for invoking *action_id* against *resource_id*."""
        return cls(
            resource_ref=EntityRef(id=resource_id),
            resource_action_ref=EntityRef(id=action_id),
            organization=PayloadOrganization(
                tenant_ref=tenant_ref,
                tenant_label=tenant_label,
                subtenant_ref=subtenant_ref,
                subtenant_label=subtenant_label,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
