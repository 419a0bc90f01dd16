"""Tool catalog DTOs."""
from __future__ import annotations
from typing import Any
from pydantic import BaseModel


class ToolRead(BaseModel):
    id: str
    name: str
    description: str
    input_schema: dict[str, Any]
    output_schema: dict[str, Any]


class ToolList(BaseModel):
    items: list[ToolRead]
    total: int
