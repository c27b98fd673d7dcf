"""Pytest configuration and shared fixtures."""

import pytest

from tickets.domain import FormState, field_changed
from tickets.services import PurchaseFormService


@pytest.fixture
def form_state() -> FormState:
    return FormState()


@pytest.fixture
def service(form_state: FormState) -> PurchaseFormService:
    return PurchaseFormService(form_state)


@pytest.fixture
def field_changes():
    """Collect (field, new_value, old_value) for every field_changed signal."""
    changes = []

    def record(sender, instance, field, new_value, old_value, **kwargs):
        changes.append((field, new_value, old_value))

    field_changed.connect(record, sender=FormState, weak=False)
    yield changes
    field_changed.disconnect(record, sender=FormState)
