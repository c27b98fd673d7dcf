"""Serializers for validating form input and rendering form state.

This is the input surface in front of FormState: quantities below one and
unknown ticket types are rejected here, never by the domain object.
"""

from rest_framework import serializers

from tickets.domain import TicketType


class PurchaseFormSerializer(serializers.Serializer):
    """Serializer for the FormState domain model."""

    first_name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    last_name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    email = serializers.EmailField(allow_blank=True)
    ticket_quantity = serializers.IntegerField(min_value=1)
    ticket_type = serializers.ChoiceField(choices=TicketType.choices)
    referrals = serializers.ListField(child=serializers.CharField(), allow_empty=True)
    special_requests = serializers.CharField(allow_blank=True, trim_whitespace=False)
    purchase_agreement_signed = serializers.BooleanField()
    full_name = serializers.CharField(allow_blank=True, trim_whitespace=False, required=False)
    ticket_description = serializers.CharField(read_only=True)

    def validate_ticket_type(self, value: str) -> TicketType:
        return TicketType(value)
