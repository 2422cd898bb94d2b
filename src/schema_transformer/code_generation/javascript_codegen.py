"""JavaScript rendering of transformation paths."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass

from schema_transformer.schema_management.shape_models import Ground
from schema_transformer.transform_search.transform_ops import (
    CastGround,
    DropProperty,
    EnterArray,
    EnterProperty,
    ExtractProperty,
    Leave,
    TransformOp,
    WrapProperty,
)


class CodegenError(Exception):
    """Raised when an operation sequence cannot be rendered."""


@dataclass(frozen=True)
class _Frame:
    focus: str
    item_name: str | None = None


class JavaScriptCodegen:  # pylint: disable=too-few-public-methods
    """Render operations as a JavaScript function mutating and returning its argument."""

    def __init__(self, argument_name: str = "input", function_name: str | None = None) -> None:
        self.argument_name = argument_name
        self.function_name = function_name

    def generate(self, ops: Iterable[TransformOp]) -> str:
        frames = [_Frame(focus=self.argument_name)]
        statements: list[str] = []
        array_depth = 0

        for op in ops:
            focus = frames[-1].focus
            if isinstance(op, CastGround):
                expression = _cast_expression(op.source, op.target, focus)
                if expression is not None:
                    statements.append(f"{focus} = {expression};")
            elif isinstance(op, DropProperty):
                statements.append(f"delete {focus}[{_key(op.name)}];")
            elif isinstance(op, ExtractProperty):
                statements.append(f"{focus} = {focus}[{_key(op.name)}];")
            elif isinstance(op, WrapProperty):
                statements.append(f"{focus} = {{{_key(op.name)}: {focus}}};")
            elif isinstance(op, EnterProperty):
                frames.append(_Frame(focus=f"{focus}[{_key(op.name)}]"))
            elif isinstance(op, EnterArray):
                item_name = f"item{array_depth}"
                array_depth += 1
                statements.append(f"{focus} = {focus}.map(function({item_name}) {{")
                frames.append(_Frame(focus=item_name, item_name=item_name))
            elif isinstance(op, Leave):
                if len(frames) == 1:
                    raise CodegenError("Leave operation without a matching enter operation.")
                frame = frames.pop()
                if frame.item_name is not None:
                    array_depth -= 1
                    statements.append(f"return {frame.item_name}; }});")
            else:
                raise CodegenError(f"Unsupported transformation operation: {op!r}")

        if len(frames) != 1:
            raise CodegenError("Transformation path leaves enter operations unclosed.")

        header = f"function {self.function_name}" if self.function_name else "function"
        body = " ".join([*statements, f"return {self.argument_name};"])
        return f"{header}({self.argument_name}) {{ {body} }}"


def generate_javascript(
    ops: Iterable[TransformOp], *, argument_name: str = "input", function_name: str | None = None
) -> str:
    """Render operations with a one-off ``JavaScriptCodegen``."""
    return JavaScriptCodegen(argument_name=argument_name, function_name=function_name).generate(ops)


def _key(name: str) -> str:
    return json.dumps(name)


def _cast_expression(source: Ground, target: Ground, value: str) -> str | None:
    if source is target:
        return None
    if target is Ground.STRING:
        return f"String({value})"
    if target is Ground.BOOLEAN:
        return f"Boolean({value})"
    if target is Ground.NULL:
        return "null"
    if source is Ground.STRING:
        return f"parseInt({value})"
    if target is Ground.INTEGER:
        if source is Ground.NUMBER:
            return f"Math.trunc({value})"
        return f"Math.trunc(Number({value}))"
    if source is Ground.INTEGER:
        return None
    return f"Number({value})"
