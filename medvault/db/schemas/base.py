"""
Shared schema configuration and the partial-update value type.

Wire names are camelCase; snake_case names are accepted on input as well.
"""
import uuid
from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Patch(CamelModel):
    """Partial update body.

    A field left out of the request is "unchanged"; a field sent as ``null``
    is "clear this value". ``changes()`` returns only the fields the caller
    actually sent, so the two cases never collapse into one. Fields named in
    ``required_fields`` back NOT NULL columns and refuse ``null``.
    """

    required_fields: ClassVar[FrozenSet[str]] = frozenset()
    patch_exclude: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _reject_clearing_required(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name in cls.required_fields:
            raise ValueError("value is required and cannot be cleared")
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude=set(self.patch_exclude))


class RecordPatch(Patch):
    """Partial update of one owned record, addressed by ``id``."""

    patch_exclude: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: uuid.UUID


class OwnedRecord(CamelModel):
    id: uuid.UUID
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
