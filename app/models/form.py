"""
Form template models.

A FormType is reference data: seeded at startup and never mutated.
Fields are a tagged union on `type` so renderers and validators can
handle every field kind explicitly.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Annotated, List, Literal, Union

from app.models.alert import FormResponseMap


class _BaseField(BaseModel):
    name: str = Field(..., min_length=1)
    label: str
    required: bool = False


class TextField(_BaseField):
    type: Literal["text"] = "text"


class TextareaField(_BaseField):
    type: Literal["textarea"] = "textarea"


class SelectField(_BaseField):
    type: Literal["select"] = "select"
    options: List[str] = Field(..., min_length=1)


class CheckboxField(_BaseField):
    type: Literal["checkbox"] = "checkbox"


FormField = Annotated[
    Union[TextField, TextareaField, SelectField, CheckboxField],
    Field(discriminator="type"),
]


class FormType(BaseModel):
    """Template of follow-up questions an administrator can attach to an alert."""
    id: str
    name: str
    description: str = ""
    fields_json: List[FormField] = Field(default_factory=list)

    @field_validator("fields_json")
    @classmethod
    def field_names_unique(cls, fields):
        names = [f.name for f in fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field names: {duplicates}")
        return fields


class FormSendRequest(BaseModel):
    """Body of POST /api/forms/{form_type_id}/send."""
    alert_id: str = Field(..., min_length=1)


class FormResponseSubmit(BaseModel):
    """Body of POST /api/form-responses."""
    alert_id: str = Field(..., min_length=1)
    response: FormResponseMap = Field(default_factory=dict)
