from payments.services.key_service import KeyService
from payments.services.order_service import OrderService

__all__ = ["KeyService", "OrderService"]
