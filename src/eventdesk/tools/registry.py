"""Schema-checked tools and the registry that serves them.

A ``Tool`` pairs a callable with an input and an output model.  Every call
validates the inputs before ``fn`` runs and validates whatever ``fn`` returns
before handing it back.  Nothing raised by ``fn`` itself is caught here.
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import pydantic
from pydantic import BaseModel

from eventdesk.domain.exceptions import Stage, ValidationError

logger = logging.getLogger(__name__)


def validate_payload(model: type[BaseModel], data: Any, stage: Stage) -> BaseModel:
    """Validate *data* against *model*, raising the domain ``ValidationError``.

    Raw payloads are matched by alias only, so a snake_case key is an unknown
    key here even though Python code may construct the models by field name.
    """
    try:
        if isinstance(data, model):
            return model.model_validate(data)
        return model.model_validate(data, by_alias=True, by_name=False)
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise ValidationError(
            f"{model.__name__} {stage} failed validation ({exc.error_count()} error(s))",
            stage=stage,
            errors=[dict(e) for e in errors],
        ) from exc


@dataclass(frozen=True)
class Tool:
    id: str
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    fn: Callable[[Any], Any]

    def invoke(self, inputs: Mapping[str, Any] | BaseModel) -> BaseModel:
        """Run the tool synchronously."""
        parsed = self._parse_inputs(inputs)
        result = self.fn(parsed)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise TypeError(f"Tool {self.id} returned an awaitable; use ainvoke()")
        return validate_payload(self.output_model, result, "output")

    async def ainvoke(self, inputs: Mapping[str, Any] | BaseModel) -> BaseModel:
        """Run the tool, awaiting ``fn`` when it is asynchronous."""
        parsed = self._parse_inputs(inputs)
        result = self.fn(parsed)
        if inspect.isawaitable(result):
            result = await result
        return validate_payload(self.output_model, result, "output")

    def describe(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_model.model_json_schema(by_alias=True),
            "output_schema": self.output_model.model_json_schema(by_alias=True),
        }

    def _parse_inputs(self, inputs: Mapping[str, Any] | BaseModel) -> BaseModel:
        if isinstance(inputs, BaseModel) and not isinstance(inputs, self.input_model):
            inputs = inputs.model_dump(by_alias=True)
        parsed = validate_payload(self.input_model, inputs, "input")
        logger.debug("Invoking tool %s with %s", self.id, parsed.model_dump(by_alias=True))
        return parsed


class ToolRegistry:
    """Tools keyed by id, kept in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> Tool:
        if tool.id in self._tools:
            raise ValueError(f"Tool already registered: {tool.id}")
        self._tools[tool.id] = tool
        return tool

    def get(self, tool_id: str) -> Tool:
        try:
            return self._tools[tool_id]
        except KeyError:
            raise KeyError(f"Unknown tool: {tool_id}") from None

    def list(self) -> list[Tool]:
        return list(self._tools.values())

    def ids(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools

    def __len__(self) -> int:
        return len(self._tools)
