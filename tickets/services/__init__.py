from tickets.services.purchase_form_service import PurchaseFormService

__all__ = ["PurchaseFormService"]
