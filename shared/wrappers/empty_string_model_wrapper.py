import re
from typing import Any, ClassVar, Tuple
from uuid import UUID
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively convert empty strings to None, clean invisible chars, and handle nested models."""

    # 1️⃣ Handle Pydantic models
    if isinstance(value, BaseModel):
        data = value.model_dump()
        cleaned = deep_clean(data)
        return type(value)(**cleaned)

    # 2️⃣ Handle dictionaries
    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    # 3️⃣ Handle lists
    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    # 4️⃣ Handle strings
    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    # 5️⃣ If the value is UUID but empty string passed somehow
    if isinstance(value, UUID):
        return value  # valid UUID stays UUID

    # Default return
    return value


class EmptyStringModel(BaseModel):
    """Base for every request/response schema.

    Fields are snake_case in Python and camelCase on the wire. A blank string
    sent by the front-end counts as "not set": the key is dropped before
    validation, so ``model_dump(exclude_unset=True)`` on an update payload only
    carries what the caller really filled in. An explicit ``null`` is kept and
    clears the stored value, except on fields listed in ``non_nullable``,
    which back NOT NULL columns and are refused.
    """

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if not isinstance(values, dict):
            return values

        cleaned = {}
        for key, raw in values.items():
            value = deep_clean(raw)
            if isinstance(raw, str) and value is None:
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="after")
    def reject_cleared_required(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                field = type(self).model_fields[name]
                raise ValueError(f"{field.alias or name} cannot be null")
        return self
