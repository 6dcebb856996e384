from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _SchemaBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    description: str | None = None

    def to_json_schema(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class StringSchema(_SchemaBase):
    type: Literal["string"] = "string"


class NumberSchema(_SchemaBase):
    type: Literal["number"] = "number"


class BooleanSchema(_SchemaBase):
    type: Literal["boolean"] = "boolean"


class ArraySchema(_SchemaBase):
    type: Literal["array"] = "array"
    items: "SchemaNode"


class ObjectSchema(_SchemaBase):
    type: Literal["object"] = "object"
    properties: dict[str, "SchemaNode"] = Field(default_factory=dict)
    required: list[str] | None = None
    additional_properties: bool | None = Field(default=None, alias="additionalProperties")

    @model_validator(mode="after")
    def _check_required_fields_declared(self) -> "ObjectSchema":
        undeclared = [name for name in self.required or [] if name not in self.properties]
        if undeclared:
            raise ValueError(f"required fields not declared in properties: {', '.join(undeclared)}")
        return self


SchemaNode = Annotated[
    Union[StringSchema, NumberSchema, BooleanSchema, ArraySchema, ObjectSchema],
    Field(discriminator="type"),
]

ArraySchema.model_rebuild()
ObjectSchema.model_rebuild()


class CapabilityDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str
    input_schema: ObjectSchema
    read_only: bool = False
    destructive: bool = False
