"""Typed views of the records nested in gateway responses."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_default(value: Any, default: Any) -> Any:
    return default if value is None else value


class ActionParameter(BaseModel):
    """Describes one parameter an action accepts or returns."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(alias="Name")
    data_type: Optional[int] = Field(default=None, alias="DataType")
    max_length: Optional[int] = Field(default=None, alias="MaxLength")
    required: bool = Field(default=False, alias="Required")
    description: Optional[str] = Field(default=None, alias="Description")
    group: Optional[str] = Field(default=None, alias="Group")

    @field_validator("required", mode="before")
    @classmethod
    def _null_required(cls, value: Any) -> Any:
        return _none_to_default(value, False)


class Action(BaseModel):
    """
    A named follow-up instruction returned by the gateway.

    Unknown keys are kept (``model_extra``) so newer gateway fields do not
    break decoding. Null metadata falls back to the field default.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(alias="Name")
    type: Optional[str] = Field(default=None, alias="Type")
    description: Optional[str] = Field(default=None, alias="Description")
    default: bool = Field(default=False, alias="Default")
    request_parameters: list[ActionParameter] = Field(default_factory=list, alias="RequestParameters")
    response_parameters: list[ActionParameter] = Field(default_factory=list, alias="ResponseParameters")

    @field_validator("default", mode="before")
    @classmethod
    def _null_default(cls, value: Any) -> Any:
        return _none_to_default(value, False)

    @field_validator("request_parameters", "response_parameters", mode="before")
    @classmethod
    def _null_parameters(cls, value: Any) -> Any:
        return _none_to_default(value, [])
