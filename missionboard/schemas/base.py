# missionboard/schemas/base.py
from typing import ClassVar
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """
    Base for every request/response schema.

    Attributes are snake_case in Python and camelCase on the wire; either
    spelling is accepted on input. Enum fields hold their plain string value.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        validate_default=True,
    )


class PartialUpdate(APIModel):
    """
    Base for PATCH bodies. Omitted fields are left alone; fields listed in
    `required_fields` may be omitted but not sent as null.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self
