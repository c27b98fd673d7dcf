from tickets.handlers.serializers import PurchaseFormSerializer

__all__ = ["PurchaseFormSerializer"]
