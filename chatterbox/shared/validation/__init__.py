"""
Validation Package

Field rules and the pre-persistence pipelines for users and messages.

Contents:
=========
- rules: Rule tables (USER_RULES, PASSPORT_RULES, MESSAGE_RULES) and run_rules()
- pipeline: validate_user(), validate_and_prepare(), validate_and_prepare_async()
- messages: validate_message()

Usage:
======
    from chatterbox.shared.validation import validate_and_prepare

    validate_and_prepare(user, hasher)
"""

from chatterbox.shared.validation.rules import (
    Rule,
    run_rules,
    USER_RULES,
    PASSPORT_RULES,
    MESSAGE_RULES,
)
from chatterbox.shared.validation.pipeline import (
    validate_user,
    validate_and_prepare,
    validate_and_prepare_async,
)
from chatterbox.shared.validation.messages import validate_message

__all__ = [
    "Rule",
    "run_rules",
    "USER_RULES",
    "PASSPORT_RULES",
    "MESSAGE_RULES",
    "validate_user",
    "validate_and_prepare",
    "validate_and_prepare_async",
    "validate_message",
]
