"""Purchase form service - applies validated input to form state.

Services:
- Validate input through the serializer
- Map validation failures to domain errors
- Apply changes so watchers run in field declaration order
"""

import logging
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from tickets.domain import FormState
from tickets.domain.errors import InvalidFormInputError, UnknownFieldError
from tickets.handlers import PurchaseFormSerializer

logger = logging.getLogger(__name__)


class PurchaseFormService:
    """Service for purchase form operations."""

    def __init__(self, state: FormState) -> None:
        self._state = state

    @property
    def state(self) -> FormState:
        return self._state

    def snapshot(self) -> dict[str, Any]:
        """Return stored and derived values of the form."""
        return dict(PurchaseFormSerializer(self._state).data)

    def update(self, data: Mapping[str, Any]) -> FormState:
        """Validate and apply a partial update.

        Stored fields are applied in declaration order, full_name last.

        Raises:
            UnknownFieldError: If a key is not a writable form field.
            InvalidFormInputError: If any value fails validation.
        """
        serializer = PurchaseFormSerializer(data=data, partial=True)
        writable = {name for name, f in serializer.fields.items() if not f.read_only}
        unknown = [name for name in data if name not in writable]
        if unknown:
            raise UnknownFieldError(unknown)

        if not serializer.is_valid():
            logger.info("Rejected purchase form input for fields: %s", sorted(serializer.errors))
            raise InvalidFormInputError(serializer.errors)

        values = serializer.validated_data
        for f in fields(self._state):
            if f.name in values:
                setattr(self._state, f.name, values[f.name])
        if "full_name" in values:
            self._state.full_name = values["full_name"]
        return self._state

    def reset(self) -> FormState:
        """Restore the form to its defaults."""
        self._state.reset()
        return self._state
