"""Signals sent by domain objects.

field_changed is sent with: instance, field, new_value, old_value.
"""

from django.dispatch import Signal

field_changed = Signal()
