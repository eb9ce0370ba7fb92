#!/usr/bin/env python3
"""
UI description tree for FunRec tool responses.

Nodes are immutable pydantic models tagged by a ``type`` field
(card, map, table, alert, form) and are composed by plain construction:

    Card(title="Results", children=(Alert(variant="info", message="..."),))

``to_dict()`` produces the JSON-ready description sent to callers.
"""

from typing import Annotated, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class UINode(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_dict(self):
        return self.model_dump(mode="json", exclude_none=True)


class Alert(UINode):
    type: Literal["alert"] = "alert"
    variant: Literal["info", "success", "warning", "error"] = "info"
    title: Optional[str] = None
    message: str


class MapMarker(UINode):
    latitude: float
    longitude: float
    title: str
    description: str = ""
    text: str = ""


class MapView(UINode):
    type: Literal["map"] = "map"
    latitude: float
    longitude: float
    zoom: int = 10
    style: Optional[str] = None
    markers: Tuple[MapMarker, ...] = ()


class TableColumn(UINode):
    key: str
    header: str
    type: str = "string"


class Table(UINode):
    type: Literal["table"] = "table"
    columns: Tuple[TableColumn, ...]
    rows: Tuple[Dict, ...] = ()


class FormField(UINode):
    name: str
    label: str
    type: str = "text"
    required: bool = True
    placeholder: Optional[str] = None


class Form(UINode):
    type: Literal["form"] = "form"
    title: Optional[str] = None
    fields: Tuple[FormField, ...]
    submit_tool: str
    submit_label: str = "Submit"


class Card(UINode):
    type: Literal["card"] = "card"
    title: str
    content: Optional[str] = None
    render_mode: Optional[Literal["inline", "page"]] = None
    children: Tuple["UIChild", ...] = ()


UIChild = Annotated[
    Union[Alert, MapView, Table, Form, Card], Field(discriminator="type")
]

Card.model_rebuild()
