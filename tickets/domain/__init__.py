from tickets.domain.models import FormState
from tickets.domain.signals import field_changed
from tickets.domain.value_objects import TicketType

__all__ = [
    "FormState",
    "TicketType",
    "field_changed",
]
