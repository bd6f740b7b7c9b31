"""
Field Rules

Validation rules are data: each Rule names a field, a predicate the value
must satisfy, and the messages to report. run_rules() evaluates a rule
table against a flat mapping of field values and returns every violation,
not just the first.

Rule Semantics:
===============
- A value of None or "" is absent.
- An absent value violates the rule only when required_message is set.
- A present value violates the rule when the predicate returns False.
- Secret values are reported as "***", both in the message and in
  FieldError.value.

Usage:
======
    errors = run_rules(USER_RULES, {"username": "", "name": "Alice"})
    # [FieldError(field="username", value="", message="a unique username is required")]

    errors = run_rules(PASSPORT_RULES, {"type": "local", "password": "x" * 80}, prefix="passports.0.")
    # [FieldError(field="passports.0.password", value="***", message="*** is not a valid password!")]
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional

from chatterbox.shared.core.exceptions import FieldError
from chatterbox.shared.models.enums import PassportType


REDACTED = "***"


@dataclass(frozen=True)
class Rule:
    """A single (field, predicate, message) validation rule."""

    field: str
    predicate: Callable[[Any], bool]
    message: str
    required_message: Optional[str] = None
    secret: bool = False

    def check(self, value: Any, prefix: str = "") -> Optional[FieldError]:
        """Return the violation for value, or None when the rule holds."""
        shown = REDACTED if self.secret and value else value
        if value is None or value == "":
            if self.required_message:
                return FieldError(prefix + self.field, shown, self.required_message)
            return None
        if self.predicate(value):
            return None
        return FieldError(prefix + self.field, shown, self.message.format(value=shown))


def run_rules(
    rules: Iterable[Rule],
    values: Mapping[str, Any],
    prefix: str = "",
) -> list[FieldError]:
    """
    Evaluate every rule and collect the violations.

    Args:
        rules: Rule table
        values: Field name → value
        prefix: Prepended to field names in the reported errors

    Returns:
        One FieldError per violated rule, in table order
    """
    errors = []
    for rule in rules:
        error = rule.check(values.get(rule.field), prefix)
        if error is not None:
            errors.append(error)
    return errors


def _length_between(low: int, high: int) -> Callable[[Any], bool]:
    """Predicate for low <= len(value) < high."""
    return lambda value: isinstance(value, str) and low <= len(value) < high


def _bcrypt_input(value: Any) -> bool:
    # bcrypt ignores everything past 72 bytes
    return isinstance(value, str) and len(value) < 64 and len(value.encode("utf-8")) <= 72


def _one_of(choices: Iterable[str]) -> Callable[[Any], bool]:
    allowed = frozenset(choices)
    return lambda value: value in allowed


# ═══════════════════════════════════════════════════════════════════════════════
# RULE TABLES
# ═══════════════════════════════════════════════════════════════════════════════

USER_RULES: tuple[Rule, ...] = (
    Rule(
        "username",
        _length_between(1, 32),
        "{value} is not a valid username!",
        required_message="a unique username is required",
    ),
    Rule(
        "name",
        _length_between(1, 64),
        "{value} is not a valid name!",
    ),
)

PASSPORT_RULES: tuple[Rule, ...] = (
    Rule(
        "type",
        _one_of(PassportType.values()),
        "`{value}` is not a valid passport type",
        required_message="a passport type is required",
    ),
    Rule(
        "password",
        _bcrypt_input,
        "{value} is not a valid password!",
        secret=True,
    ),
)

MESSAGE_RULES: tuple[Rule, ...] = (
    Rule(
        "creator.id",
        lambda value: True,
        "{value} is not a valid creator id!",
        required_message="a creator id is required",
    ),
    Rule(
        "creator.name",
        _length_between(1, 256),
        "{value} is not a valid name!",
        required_message="a creator name is required",
    ),
    Rule(
        "text",
        _length_between(1, 256),
        "{value} is not a valid text!",
        required_message="a text is required",
    ),
    Rule("geo.country_name", _length_between(0, 256), "{value} is not a valid country!"),
    Rule("geo.region_name", _length_between(0, 256), "{value} is not a valid region!"),
    Rule("geo.city", _length_between(0, 256), "{value} is not a valid city!"),
    Rule("geo.time_zone", _length_between(0, 256), "{value} is not a valid timezone!"),
)
