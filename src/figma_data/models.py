"""Figma Data - Models.

Immutable snapshots of design-system data as returned by the Figma API.
JSON keys are camelCase, attributes are snake_case.
"""
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class FigmaModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Color(FigmaModel):
    r: float = Field(ge=0, le=1)
    g: float = Field(ge=0, le=1)
    b: float = Field(ge=0, le=1)
    a: Optional[float] = Field(default=None, ge=0, le=1)


class DocumentationLink(FigmaModel):
    uri: str


class Component(FigmaModel):
    key: str
    name: str
    description: Optional[str] = None
    component_set_id: Optional[str] = None
    documentation_links: Optional[list[DocumentationLink]] = None
    remote: Optional[bool] = None
    thumbnail_url: Optional[str] = None


ResolvedType = Literal["BOOLEAN", "FLOAT", "STRING", "COLOR"]

VariableScope = Literal[
    "ALL_FILLS",
    "FRAME_FILL",
    "SHAPE_FILL",
    "TEXT_FILL",
    "ALL_STROKES",
    "FRAME_STROKE",
    "RECTANGLE_STROKE",
    "ELLIPSE_STROKE",
    "VECTOR_STROKE",
    "LINE_STROKE",
    "TEXT_STROKE",
    "TEXT_CONTENT",
    "CORNER_RADIUS",
    "WIDTH_HEIGHT",
    "GAP",
]

VariableValue = Union[str, bool, float, Color]


class Variable(FigmaModel):
    key: str
    name: str
    description: Optional[str] = None
    variable_collection_id: str
    # Not cross-checked against values_by_mode
    resolved_type: ResolvedType
    values_by_mode: dict[str, VariableValue]
    remote: Optional[bool] = None
    hidden_from_publishing: Optional[bool] = None
    scopes: Optional[list[VariableScope]] = None
    code_syntax: Optional[dict[str, str]] = None


class VariableGroup(FigmaModel):
    key: str
    name: str
    description: Optional[str] = None
    variables: list[Variable]
    remote: Optional[bool] = None
    hidden_from_publishing: Optional[bool] = None


class Style(FigmaModel):
    key: str
    name: str
    description: Optional[str] = None
    style_type: Literal["FILL", "TEXT", "EFFECT", "GRID"]
    remote: Optional[bool] = None
    thumbnail_url: Optional[str] = None


class Node(FigmaModel):
    id: str
    name: str
    type: str
    visible: Optional[bool] = None
    children: Optional[list["Node"]] = None


class FigmaFile(FigmaModel):
    document: Node
    name: str
    last_modified: str
    version: str
    components: dict[str, Component] = Field(default_factory=dict)
    styles: dict[str, Style] = Field(default_factory=dict)
    thumbnail_url: Optional[str] = None
    role: Optional[str] = None
    editor_type: Optional[str] = None
    link_access: Optional[str] = None


class FigmaErrorBody(FigmaModel):
    """Error payload Figma sends alongside a failing status."""
    err: str
    status: Optional[int] = None


# Response envelopes. Collections arrive keyed by id or as a plain list;
# a missing or null key means an empty collection.

def _as_list(collection: Union[dict, list]) -> list:
    if isinstance(collection, dict):
        return list(collection.values())
    return list(collection)


class Envelope(FigmaModel):
    @field_validator("*", mode="before")
    @classmethod
    def _null_is_empty(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ComponentsMeta(Envelope):
    components: Union[dict[str, Component], list[Component]] = Field(default_factory=list)


class ComponentsResponse(Envelope):
    meta: ComponentsMeta = Field(default_factory=ComponentsMeta)

    def items(self) -> list[Component]:
        return _as_list(self.meta.components)


class VariablesMeta(Envelope):
    variables: Union[dict[str, VariableGroup], list[VariableGroup]] = Field(default_factory=list)


class VariablesResponse(Envelope):
    meta: VariablesMeta = Field(default_factory=VariablesMeta)

    def items(self) -> list[VariableGroup]:
        return _as_list(self.meta.variables)


class StylesMeta(Envelope):
    styles: Union[dict[str, Style], list[Style]] = Field(default_factory=list)


class StylesResponse(Envelope):
    meta: StylesMeta = Field(default_factory=StylesMeta)

    def items(self) -> list[Style]:
        return _as_list(self.meta.styles)


class ImagesResponse(Envelope):
    # null for nodes Figma could not render
    images: dict[str, Optional[str]] = Field(default_factory=dict)
