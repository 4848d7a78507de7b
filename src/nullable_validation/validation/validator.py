"""Validator — tag-driven struct validation with extraction hooks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import HookRegistrationError, InvalidValidationError
from .result import FieldError, ValidationResult
from .rules import build_default_registry, is_zero
from .tags import SKIP_TAG, CompiledTag, is_struct, parse_tag, struct_fields

if TYPE_CHECKING:
    from collections.abc import Callable

    from .hooks import ExtractionHook
    from .tags import RuleCall, RuleGroup

logger = logging.getLogger("nullable_validation.validator")


@dataclass(frozen=True)
class _FieldPlan:
    name: str
    tag: CompiledTag | None = None
    skip: bool = False


class Validator:
    """Validates dataclass instances and pydantic models against field tags.

    Values whose type has a registered extraction hook are replaced by the
    hook's result before any rule runs; ``None`` from a hook means the field
    is absent. Every failing field is reported, in declaration order, with
    nested structs traversed recursively.

    Usage::

        validator = Validator(required_struct_enabled=True)
        validator.register_custom_type_func(validate_valuer, NullString, NullInt64)
        result = validator.validate(signup)
    """

    def __init__(
        self,
        *,
        required_struct_enabled: bool = False,
        tag_name: str = "validate",
    ) -> None:
        self.required_struct_enabled = required_struct_enabled
        self._tag_name = tag_name
        self._rules = build_default_registry()
        self._type_hooks: dict[type[Any], ExtractionHook] = {}
        self._plans: dict[type[Any], tuple[_FieldPlan, ...]] = {}

    @property
    def tag_name(self) -> str:
        """Metadata key that holds field tags; fixed for the validator's lifetime."""
        return self._tag_name

    # ── Registration ─────────────────────────────────────────────

    def register_custom_type_func(
        self, hook: ExtractionHook, *types: type[Any]
    ) -> None:
        """Route values of each of *types* through *hook*.

        Registering a type again replaces its previous hook.
        """
        if not callable(hook):
            raise HookRegistrationError(f"Extraction hook must be callable, got {hook!r}")
        if not types:
            raise HookRegistrationError("register_custom_type_func needs at least one type")
        for type_ in types:
            if not isinstance(type_, type):
                msg = f"Expected a type, got {type_!r}"
                raise HookRegistrationError(msg)
            existing = self._type_hooks.get(type_)
            if existing is not None and existing is not hook:
                logger.debug("Replacing extraction hook for %s", type_.__name__)
            self._type_hooks[type_] = hook
            logger.debug(
                "Registered extraction hook %s -> %s",
                type_.__name__,
                getattr(hook, "__name__", repr(hook)),
            )

    def register_rule(self, name: str, func: Callable[[Any, str], bool]) -> None:
        """Add or replace rule *name*; ``func(value, param)`` returns pass/fail."""
        self._rules.register_func(name, func)
        self._plans.clear()
        logger.debug("Registered validation rule %s", name)

    def hook_for(self, type_: type[Any]) -> ExtractionHook | None:
        """Return the hook for *type_*, checking its base classes too."""
        for candidate in type_.__mro__:
            hook = self._type_hooks.get(candidate)
            if hook is not None:
                return hook
        return None

    # ── Validation ───────────────────────────────────────────────

    def validate(self, instance: Any) -> ValidationResult:
        """Validate every tagged field of *instance*.

        Raises:
            InvalidValidationError: *instance* is not a dataclass instance
                or pydantic model.
        """
        if not is_struct(instance):
            raise InvalidValidationError(instance)
        result = ValidationResult.success()
        self._validate_struct(
            instance, type(instance).__name__, result, frozenset({id(instance)})
        )
        if not result.is_valid:
            logger.debug(
                "Validation of %s failed with %d error(s)",
                type(instance).__name__,
                len(result.field_errors),
            )
        return result

    def check(self, instance: Any) -> None:
        """Like :meth:`validate`, but raise ``ValidationError`` on failure."""
        self.validate(instance).raise_for_errors()

    def validate_value(self, value: Any, tag: str) -> ValidationResult:
        """Apply *tag* to a single value; extraction hooks still apply."""
        result = ValidationResult.success()
        self._apply_tag(
            self._extract(value), parse_tag(tag, self._rules), "", "", result
        )
        return result

    # ── Internals ────────────────────────────────────────────────

    def _plan_for(self, cls: type[Any]) -> tuple[_FieldPlan, ...]:
        plan = self._plans.get(cls)
        if plan is not None:
            return plan
        fields: list[_FieldPlan] = []
        for name, raw in struct_fields(cls, self._tag_name):
            if raw is None:
                fields.append(_FieldPlan(name))
            elif raw.strip() == SKIP_TAG:
                fields.append(_FieldPlan(name, skip=True))
            else:
                fields.append(_FieldPlan(name, tag=parse_tag(raw, self._rules)))
        plan = tuple(fields)
        self._plans[cls] = plan
        logger.debug(
            "Compiled validation plan for %s (%d tagged field(s))",
            cls.__name__,
            sum(1 for f in plan if f.tag is not None),
        )
        return plan

    def _extract(self, value: Any) -> Any:
        hook = self.hook_for(type(value))
        if hook is None:
            return value
        return hook(value)

    def _validate_struct(
        self,
        instance: Any,
        namespace: str,
        result: ValidationResult,
        ancestors: frozenset[int],
    ) -> None:
        for plan in self._plan_for(type(instance)):
            if plan.skip:
                continue
            value = self._extract(getattr(instance, plan.name, None))
            field_ns = f"{namespace}.{plan.name}"

            if not is_struct(value):
                if plan.tag is not None:
                    self._apply_tag(value, plan.tag, field_ns, plan.name, result)
                continue

            if plan.tag is not None and self.required_struct_enabled:
                if not self._apply_tag(value, plan.tag, field_ns, plan.name, result):
                    continue
            if id(value) not in ancestors:
                self._validate_struct(value, field_ns, result, ancestors | {id(value)})

    def _apply_tag(
        self,
        value: Any,
        tag: CompiledTag,
        namespace: str,
        field_name: str,
        result: ValidationResult,
    ) -> bool:
        if tag.omitempty and is_zero(value):
            return True
        for group in tag.groups:
            if not self._group_passes(group, value):
                result.add_error(
                    FieldError(
                        namespace=namespace,
                        field=field_name,
                        tag=group.tag,
                        param=group.param,
                        value=value,
                    )
                )
                return False
        return True

    def _group_passes(self, group: RuleGroup, value: Any) -> bool:
        return any(self._call_passes(call, value) for call in group.calls)

    @staticmethod
    def _call_passes(call: RuleCall, value: Any) -> bool:
        # Absent values fail every rule.
        if value is None:
            return False
        return call.rule.check(value, call.param)
