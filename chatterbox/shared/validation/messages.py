"""
Message validation.

Trims the text and geo fields of a message and checks them against
MESSAGE_RULES before the message is written.
"""

from chatterbox.shared.core.exceptions import ValidationError
from chatterbox.shared.models.message import GEO_FIELDS, Message
from chatterbox.shared.validation.rules import MESSAGE_RULES, run_rules


def validate_message(message: Message) -> Message:
    """
    Normalize and validate a message in place.

    Raises:
        ValidationError: Listing every violated field
    """
    if isinstance(message.text, str):
        message.text = message.text.strip()
    for field in GEO_FIELDS:
        value = getattr(message, f"geo_{field}")
        if isinstance(value, str):
            setattr(message, f"geo_{field}", value.strip() or None)
    if not message.creator_avatar_url:
        message.creator_avatar_url = None

    values = {
        "creator.id": message.creator_id,
        "creator.name": message.creator_name,
        "text": message.text,
    }
    values.update({f"geo.{field}": value for field, value in message.geo.items()})

    errors = run_rules(MESSAGE_RULES, values)
    if errors:
        fields = ", ".join(error.field for error in errors)
        raise ValidationError(message=f"Message validation failed: {fields}", errors=errors)
    return message
