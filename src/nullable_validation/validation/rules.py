"""
Validation rules and the registry that resolves tag names to them.

Each rule is an isolated class with a single ``check`` method, looked up by
name when a tag is compiled. New rules are added by subclassing
:class:`Rule` and calling ``register()``, or by handing a plain function to
``register_func()``.

Comparison rules measure *length* for strings, bytes and containers and the
*value* itself for numbers, so ``gt=10`` on ``"hello"`` compares ``5 > 10``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import RuleDefinitionError, UnknownRuleError

if TYPE_CHECKING:
    from collections.abc import Callable

RESERVED_RULES = frozenset({"omitempty", "required"})

_ALPHA_RE = re.compile(r"[a-zA-Z]+")
_ALPHANUM_RE = re.compile(r"[a-zA-Z0-9]+")
_NUMERIC_RE = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")
_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
_RULE_NAME_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


def is_zero(value: Any) -> bool:
    """True for ``None`` and the zero value of the value's kind."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, Decimal)):
        return value == 0
    if isinstance(value, (str, bytes, Sized)):
        return len(value) == 0
    return False


# -- parameter coercion ------------------------------------------------------


def _parse_int(rule: str, param: str) -> int:
    try:
        return int(param)
    except ValueError:
        raise RuleDefinitionError(
            f"Rule '{rule}' expects an integer parameter, got {param!r}",
            tag=f"{rule}={param}",
        ) from None


def _parse_number(rule: str, param: str, like: Any) -> Any:
    if isinstance(like, int):
        return _parse_int(rule, param)
    try:
        if isinstance(like, Decimal):
            return Decimal(param)
        return float(param)
    except (ValueError, InvalidOperation):
        raise RuleDefinitionError(
            f"Rule '{rule}' expects a numeric parameter, got {param!r}",
            tag=f"{rule}={param}",
        ) from None


def _parse_bool(rule: str, param: str) -> bool:
    lowered = param.strip().lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise RuleDefinitionError(
        f"Rule '{rule}' expects a boolean parameter, got {param!r}",
        tag=f"{rule}={param}",
    )


def _require_param(rule: str, param: str) -> None:
    if param == "":
        raise RuleDefinitionError(f"Rule '{rule}' requires a parameter", tag=rule)


def _require_number_param(rule: str, param: str) -> None:
    try:
        Decimal(param)
    except InvalidOperation:
        raise RuleDefinitionError(
            f"Rule '{rule}' expects a numeric parameter, got {param!r}",
            tag=f"{rule}={param}",
        ) from None


def _forbid_param(rule: str, param: str) -> None:
    if param != "":
        raise RuleDefinitionError(
            f"Rule '{rule}' takes no parameter, got {param!r}",
            tag=f"{rule}={param}",
        )


def measure(rule: str, value: Any, param: str) -> tuple[Any, Any]:
    """Return ``(actual, bound)`` for an ordering comparison.

    Dates and datetimes ignore *param* and compare against "now".
    """
    if isinstance(value, bool):
        raise RuleDefinitionError(f"Rule '{rule}' cannot be applied to bool", tag=rule)
    if isinstance(value, datetime):
        now = datetime.now(value.tzinfo) if value.tzinfo else datetime.now()
        return value, now
    if isinstance(value, date):
        return value, date.today()
    _require_param(rule, param)
    if isinstance(value, (int, float, Decimal)):
        return value, _parse_number(rule, param, value)
    if isinstance(value, (str, bytes, Sized)):
        return len(value), _parse_int(rule, param)
    raise RuleDefinitionError(
        f"Rule '{rule}' cannot be applied to {type(value).__name__}", tag=rule
    )


def _coerce_like(rule: str, value: Any, param: str) -> tuple[Any, Any]:
    """Return ``(actual, expected)`` for an equality comparison."""
    if isinstance(value, bool):
        return value, _parse_bool(rule, param)
    if isinstance(value, (int, float, Decimal)):
        return value, _parse_number(rule, param, value)
    if isinstance(value, str):
        return value, param
    if isinstance(value, (bytes, Sized)):
        return len(value), _parse_int(rule, param)
    raise RuleDefinitionError(
        f"Rule '{rule}' cannot be applied to {type(value).__name__}", tag=rule
    )


def _require_str(rule: str, value: Any) -> str:
    if not isinstance(value, str):
        raise RuleDefinitionError(
            f"Rule '{rule}' only applies to str, got {type(value).__name__}",
            tag=rule,
        )
    return value


# -- rule strategies ---------------------------------------------------------


class Rule(ABC):
    """
    Strategy interface for a single validation rule.

    ``check`` is only called with a present value; the validator fails
    absent values on every rule except ``required`` itself.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The tag name this rule answers to."""
        ...

    @abstractmethod
    def check(self, value: Any, param: str) -> bool:
        """
        Evaluate the rule against a concrete value.

        Args:
            value: The (unwrapped) field value.
            param: The text after ``=`` in the tag, or ``""``.

        Returns:
            True if the value satisfies the rule.
        """
        ...

    def validate_param(self, param: str) -> None:
        """Reject a malformed *param* when the tag is compiled.

        Raises:
            RuleDefinitionError: *param* can never be valid for this rule.
        """


class _OrderingRule(Rule):
    """Comparison rules; an empty param is allowed for dates (compare to now)."""

    def validate_param(self, param: str) -> None:
        if param:
            _require_number_param(self.name, param)


class RequiredRule(Rule):
    @property
    def name(self) -> str:
        return "required"

    def validate_param(self, param: str) -> None:
        _forbid_param(self.name, param)

    def check(self, value: Any, _param: str) -> bool:
        return not is_zero(value)


class GreaterThanRule(_OrderingRule):
    @property
    def name(self) -> str:
        return "gt"

    def check(self, value: Any, param: str) -> bool:
        actual, bound = measure(self.name, value, param)
        return bool(actual > bound)


class GreaterEqualRule(_OrderingRule):
    def __init__(self, name: str = "gte") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def check(self, value: Any, param: str) -> bool:
        actual, bound = measure(self.name, value, param)
        return bool(actual >= bound)


class LessThanRule(_OrderingRule):
    @property
    def name(self) -> str:
        return "lt"

    def check(self, value: Any, param: str) -> bool:
        actual, bound = measure(self.name, value, param)
        return bool(actual < bound)


class LessEqualRule(_OrderingRule):
    def __init__(self, name: str = "lte") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def check(self, value: Any, param: str) -> bool:
        actual, bound = measure(self.name, value, param)
        return bool(actual <= bound)


class LengthRule(Rule):
    @property
    def name(self) -> str:
        return "len"

    def validate_param(self, param: str) -> None:
        _require_param(self.name, param)
        _require_number_param(self.name, param)

    def check(self, value: Any, param: str) -> bool:
        _require_param(self.name, param)
        if isinstance(value, (str, bytes, Sized)):
            return len(value) == _parse_int(self.name, param)
        actual, expected = _coerce_like(self.name, value, param)
        return bool(actual == expected)


class EqualRule(Rule):
    @property
    def name(self) -> str:
        return "eq"

    def check(self, value: Any, param: str) -> bool:
        actual, expected = _coerce_like(self.name, value, param)
        return bool(actual == expected)


class NotEqualRule(Rule):
    @property
    def name(self) -> str:
        return "ne"

    def check(self, value: Any, param: str) -> bool:
        actual, expected = _coerce_like(self.name, value, param)
        return bool(actual != expected)


class OneOfRule(Rule):
    """Value must be one of the space-separated choices in *param*."""

    @property
    def name(self) -> str:
        return "oneof"

    def validate_param(self, param: str) -> None:
        _require_param(self.name, param)

    def check(self, value: Any, param: str) -> bool:
        _require_param(self.name, param)
        choices = param.split()
        if isinstance(value, str):
            return value in choices
        if isinstance(value, int) and not isinstance(value, bool):
            return value in [_parse_int(self.name, c) for c in choices]
        raise RuleDefinitionError(
            f"Rule 'oneof' cannot be applied to {type(value).__name__}",
            tag=f"oneof={param}",
        )


class PatternRule(Rule):
    """String must fully match a regular expression."""

    def __init__(self, name: str, pattern: re.Pattern[str]) -> None:
        self._name = name
        self._pattern = pattern

    @property
    def name(self) -> str:
        return self._name

    def validate_param(self, param: str) -> None:
        _forbid_param(self.name, param)

    def check(self, value: Any, _param: str) -> bool:
        return self._pattern.fullmatch(_require_str(self.name, value)) is not None


class FuncRule(Rule):
    """Adapter that turns ``func(value, param) -> bool`` into a rule."""

    def __init__(self, name: str, func: Callable[[Any, str], bool]) -> None:
        self._name = name
        self._func = func

    @property
    def name(self) -> str:
        return self._name

    def check(self, value: Any, param: str) -> bool:
        return bool(self._func(value, param))


# -- registry ----------------------------------------------------------------


class RuleRegistry:
    """
    Registry of :class:`Rule` instances keyed by tag name.

    Usage::

        registry = RuleRegistry()
        registry.register(GreaterThanRule())

        ok = registry.check("gt", "hello world", "10")
    """

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    # -- registration --------------------------------------------------------

    def register(self, rule: Rule) -> None:
        """Register a rule strategy instance, replacing any rule of that name."""
        self._rules[rule.name] = rule

    def register_all(self, *rules: Rule) -> None:
        for rule in rules:
            self.register(rule)

    def register_func(self, name: str, func: Callable[[Any, str], bool]) -> None:
        """Register a plain ``func(value, param) -> bool`` as rule *name*."""
        if not name or not _RULE_NAME_RE.fullmatch(name):
            raise RuleDefinitionError(f"Invalid rule name: {name!r}", tag=name)
        if name in RESERVED_RULES:
            raise RuleDefinitionError(
                f"Rule name '{name}' is reserved and cannot be replaced", tag=name
            )
        self.register(FuncRule(name, func))

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def has(self, name: str) -> bool:
        return name in self._rules

    def resolve(self, name: str, tag: str | None = None) -> Rule:
        """Return the rule or raise :class:`UnknownRuleError`."""
        rule = self.get(name)
        if rule is None:
            raise UnknownRuleError(name, [*self._rules, "omitempty"], tag=tag)
        return rule

    @property
    def supported_rules(self) -> set[str]:
        return set(self._rules.keys())

    # -- evaluation shortcut -------------------------------------------------

    def check(self, name: str, value: Any, param: str = "") -> bool:
        return self.resolve(name).check(value, param)


def build_default_registry() -> RuleRegistry:
    """Registry pre-loaded with every built-in rule."""
    registry = RuleRegistry()
    registry.register_all(
        RequiredRule(),
        GreaterThanRule(),
        GreaterEqualRule(),
        GreaterEqualRule("min"),
        LessThanRule(),
        LessEqualRule(),
        LessEqualRule("max"),
        LengthRule(),
        EqualRule(),
        NotEqualRule(),
        OneOfRule(),
        PatternRule("alpha", _ALPHA_RE),
        PatternRule("alphanum", _ALPHANUM_RE),
        PatternRule("numeric", _NUMERIC_RE),
        PatternRule("email", _EMAIL_RE),
    )
    return registry
