"""Domain primitives for the purchase form."""

from django.db import models


class TicketType(models.TextChoices):
    """Kinds of ticket offered on the purchase form."""

    GENERAL = "general", "General Admission"
    VIP = "vip", "VIP"
