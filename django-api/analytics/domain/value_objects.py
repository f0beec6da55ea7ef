"""Funnel vocabulary."""

from enum import Enum

TICKET_SELECT = "ticket_select"


class ClickAction(Enum):
    """Click actions with a per-event counter.

    Values are the action names the storefront sends.
    """

    TICKET_LIST = "ingressos"
    INFO = "info"
    LOCATION = "local"
    POINT_OF_SALE = "pdv"
    CHECKOUT = "checkout"

    @classmethod
    def counted(cls, action: str | None) -> "ClickAction | None":
        try:
            return cls(action)
        except ValueError:
            return None


class ConversionStatus(Enum):
    STARTED = "started"
    COMPLETED = "completed"
