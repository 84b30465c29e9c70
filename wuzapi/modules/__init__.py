from .admin import AdminModule
from .chat import ChatModule
from .group import GroupModule
from .newsletter import NewsletterModule
from .session import SessionModule
from .user import UserModule
from .webhook import WebhookModule

__all__ = [
    "AdminModule",
    "ChatModule",
    "GroupModule",
    "NewsletterModule",
    "SessionModule",
    "UserModule",
    "WebhookModule",
]
