"""
Tag declaration and compilation.

Rules are attached to fields with a small tag language::

    @dataclass
    class Signup:
        name: Annotated[NullString, Rules("required,gt=10")]
        role: str = field(default="", metadata={"validate": "omitempty,oneof=admin user"})

* ``,`` separates rules, applied in order.
* ``name=param`` passes a parameter to a rule.
* ``|`` joins alternatives: ``alpha|numeric`` passes if either passes.
* ``omitempty``, only as the first rule, skips the rest when the value is
  absent or zero.
* ``-`` on its own excludes the field, including nested traversal.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from ..primitives.exceptions import RuleDefinitionError

if TYPE_CHECKING:
    from .rules import Rule, RuleRegistry

logger = logging.getLogger("nullable_validation.tags")

SKIP_TAG = "-"
OMITEMPTY = "omitempty"


@dataclass(frozen=True)
class Rules:
    """``Annotated`` marker carrying a tag string."""

    tag: str


@dataclass(frozen=True)
class RuleCall:
    rule: Rule
    name: str
    param: str = ""

    @property
    def text(self) -> str:
        return f"{self.name}={self.param}" if self.param else self.name


@dataclass(frozen=True)
class RuleGroup:
    """One comma-separated segment; several calls when joined with ``|``."""

    calls: tuple[RuleCall, ...]

    @property
    def tag(self) -> str:
        return "|".join(call.name for call in self.calls)

    @property
    def param(self) -> str:
        return self.calls[0].param if len(self.calls) == 1 else ""


@dataclass(frozen=True)
class CompiledTag:
    raw: str
    groups: tuple[RuleGroup, ...]
    omitempty: bool = False


def _parse_call(segment: str, raw: str, registry: RuleRegistry) -> RuleCall:
    name, _, param = segment.partition("=")
    name = name.strip()
    if not name:
        raise RuleDefinitionError(f"Empty rule name in tag {raw!r}", tag=raw)
    if name == OMITEMPTY:
        raise RuleDefinitionError(
            f"'{OMITEMPTY}' cannot be part of an alternative in tag {raw!r}", tag=raw
        )
    rule = registry.resolve(name, tag=raw)
    rule.validate_param(param)
    return RuleCall(rule=rule, name=name, param=param)


def parse_tag(raw: str, registry: RuleRegistry) -> CompiledTag:
    """Compile *raw* against *registry*.

    Raises:
        UnknownRuleError: a rule name is not registered.
        RuleDefinitionError: the tag is malformed.
    """
    groups: list[RuleGroup] = []
    omitempty = False
    if raw.strip() == "":
        return CompiledTag(raw=raw, groups=())
    for position, segment in enumerate(raw.split(",")):
        segment = segment.strip()
        if not segment:
            raise RuleDefinitionError(f"Empty rule in tag {raw!r}", tag=raw)
        if segment == OMITEMPTY:
            if position != 0:
                raise RuleDefinitionError(
                    f"'{OMITEMPTY}' must be the first rule in tag {raw!r}", tag=raw
                )
            omitempty = True
            continue
        calls = tuple(_parse_call(part, raw, registry) for part in segment.split("|"))
        groups.append(RuleGroup(calls=calls))
    return CompiledTag(raw=raw, groups=tuple(groups), omitempty=omitempty)


# -- field discovery ---------------------------------------------------------


def _join(tags: list[str]) -> str | None:
    return ",".join(tags) if tags else None


def _tag_from_metadata(metadata: Any) -> str | None:
    return _join([m.tag for m in metadata if isinstance(m, Rules)])


def _tag_from_annotation(annotation: Any) -> str | None:
    if get_origin(annotation) is not Annotated:
        return None
    return _tag_from_metadata(get_args(annotation)[1:])


def _resolve_hints(cls: type[Any]) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except NameError as exc:
        unresolved = [
            f.name
            for f in dataclasses.fields(cls)
            if isinstance(f.type, str) and "Rules(" in f.type
        ]
        if unresolved:
            raise RuleDefinitionError(
                f"Cannot resolve annotations of {cls.__name__} "
                f"(fields {', '.join(unresolved)}): {exc}"
            ) from exc
        logger.debug("Unresolved annotations on %s: %s", cls.__name__, exc)
        return {}


def struct_fields(cls: type[Any], tag_name: str) -> list[tuple[str, str | None]]:
    """Return ``(field_name, raw_tag)`` pairs in declaration order."""
    if issubclass(cls, BaseModel):
        pairs: list[tuple[str, str | None]] = []
        for name, info in cls.model_fields.items():
            extra = info.json_schema_extra
            tag = extra.get(tag_name) if isinstance(extra, dict) else None
            if not isinstance(tag, str):
                tag = _tag_from_metadata(info.metadata)
            pairs.append((name, tag))
        return pairs

    hints = _resolve_hints(cls)
    pairs = []
    for f in dataclasses.fields(cls):
        tag = f.metadata.get(tag_name)
        if tag is None:
            tag = _tag_from_annotation(hints.get(f.name, f.type))
        pairs.append((f.name, tag))
    return pairs


def is_struct(value: Any) -> bool:
    """True for dataclass instances and pydantic model instances."""
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)
