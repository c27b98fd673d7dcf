"""Django signal receivers for purchase form changes."""

import logging

from django.dispatch import receiver

from tickets.domain import FormState, field_changed

logger = logging.getLogger(__name__)

# Values of these fields are personal data and stay out of the logs.
REDACTED_FIELDS = frozenset({"email"})


@receiver(field_changed, sender=FormState)
def log_field_change(sender, instance, field, new_value, old_value, **kwargs):
    """Log each change to a stored form field."""
    if field in REDACTED_FIELDS:
        logger.debug("Form field %s changed", field)
        return
    logger.debug("Form field %s changed: %r -> %r", field, old_value, new_value)
