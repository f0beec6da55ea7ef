from payments.stores.interfaces import OrderStore, PaymentKeyStore
from payments.stores.memory_store import InMemoryOrderStore, InMemoryPaymentKeyStore

__all__ = [
    "OrderStore",
    "PaymentKeyStore",
    "InMemoryOrderStore",
    "InMemoryPaymentKeyStore",
]
