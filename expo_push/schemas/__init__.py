from .message import ExpoMessage
from .push_ticket import PushReceipt, PushTicket, PushTicketDetails

__all__ = [
    "ExpoMessage",
    "PushReceipt",
    "PushTicket",
    "PushTicketDetails",
]
