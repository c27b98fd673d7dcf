from django.apps import AppConfig


class TicketsConfig(AppConfig):
    name = "tickets"
    verbose_name = "Ticket purchase form"

    def ready(self) -> None:
        from tickets import signals  # noqa: F401
