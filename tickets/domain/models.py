"""Domain model for the ticket purchase form.

FormState is the single in-memory record behind the form. Stored fields are
plain dataclass fields; full_name and ticket_description are derived on read.
Assigning a stored field to a new value sends field_changed and then runs the
field's watcher, synchronously, before the assignment returns.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from tickets.conf import get_vip_upgrade_phrases
from tickets.domain.signals import field_changed
from tickets.domain.value_objects import TicketType

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(eq=False)
class FormState:
    """Mutable state of a single ticket purchase form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    ticket_quantity: int = 1
    ticket_type: TicketType = TicketType.GENERAL
    referrals: list[str] = field(default_factory=list)
    special_requests: str = ""
    purchase_agreement_signed: bool = False

    # stored field name -> method called as (new_value, old_value)
    WATCHERS: ClassVar[dict[str, str]] = {
        "special_requests": "on_special_requests_changed",
    }

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self.__dataclass_fields__:
            super().__setattr__(name, value)
            return

        old_value = self.__dict__.get(name, _UNSET)
        super().__setattr__(name, value)
        if old_value is _UNSET or old_value == value:
            return

        responses = field_changed.send_robust(
            sender=type(self),
            instance=self,
            field=name,
            new_value=value,
            old_value=old_value,
        )
        for receiver, result in responses:
            if isinstance(result, Exception):
                logger.error("Receiver %r failed for field %s", receiver, name, exc_info=result)
        watcher = self.WATCHERS.get(name)
        if watcher is not None:
            getattr(self, watcher)(value, old_value)

    @property
    def full_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name or self.last_name

    @full_name.setter
    def full_name(self, new_value: str) -> None:
        # Three or more tokens match neither branch and leave the names as-is.
        names = new_value.split(" ")
        if len(names) == 2:
            self.first_name, self.last_name = names
        elif len(names) <= 1:
            self.first_name = names[0] if names else ""
            self.last_name = ""

    @property
    def ticket_description(self) -> str:
        kind = TicketType.GENERAL.label
        if self.ticket_type == TicketType.VIP:
            kind = TicketType.VIP.label
        unit = "ticket" if self.ticket_quantity == 1 else "tickets"
        return f"{self.ticket_quantity} {kind} {unit}"

    def on_special_requests_changed(self, new_value: str, old_value: str) -> None:
        """Upgrade to VIP when the requests ask for a meet and greet."""
        requests = new_value.lower()
        if any(phrase in requests for phrase in get_vip_upgrade_phrases()):
            if self.ticket_type != TicketType.VIP:
                logger.info("Special requests mention a meet and greet, upgrading to VIP")
            self.ticket_type = TicketType.VIP

    def reset(self) -> None:
        """Restore every stored field to its default value."""
        defaults = type(self)()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))
        logger.info("Purchase form reset to defaults")
