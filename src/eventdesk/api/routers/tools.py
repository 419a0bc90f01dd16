"""Tool catalog and invocation endpoints."""
from typing import Any
from fastapi import APIRouter, Body, Depends
from eventdesk.api.deps import get_tool_registry
from eventdesk.api.schemas.tools import ToolList, ToolRead
from eventdesk.domain.exceptions import NotFoundError
from eventdesk.tools.registry import Tool, ToolRegistry

router = APIRouter(prefix="/tools", tags=["tools"])


def _lookup(registry: ToolRegistry, tool_id: str) -> Tool:
    if tool_id not in registry:
        raise NotFoundError(f"Tool {tool_id} not found")
    return registry.get(tool_id)


@router.get("", response_model=ToolList)
def list_tools(registry: ToolRegistry = Depends(get_tool_registry)) -> ToolList:
    items = [ToolRead(**tool.describe()) for tool in registry.list()]
    return ToolList(items=items, total=len(items))


@router.get("/{tool_id}", response_model=ToolRead)
def get_tool(tool_id: str, registry: ToolRegistry = Depends(get_tool_registry)) -> ToolRead:
    return ToolRead(**_lookup(registry, tool_id).describe())


@router.post("/{tool_id}")
def invoke_tool(
    tool_id: str,
    inputs: Any = Body(...),
    registry: ToolRegistry = Depends(get_tool_registry),
) -> dict[str, Any]:
    result = _lookup(registry, tool_id).invoke(inputs)
    return result.model_dump(mode="json", by_alias=True)
