import uuid
import datetime as dt

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from .base import CamelModel, Patch


class MedicalProfileUpdate(Patch):
    date_of_birth: dt.date | None = None
    gender: str | None = None
    blood_group: str | None = None
    phone: str | None = None


class MedicalProfile(CamelModel):
    id: uuid.UUID
    email: str
    display_name: str | None = None
    date_of_birth: dt.date | None = None
    gender: str | None = None
    blood_group: str | None = None
    phone: str | None = None
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
