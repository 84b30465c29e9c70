"""wuzapi - Python client for the WuzAPI WhatsApp REST API."""

from .auth import AuthHeader, resolve_auth
from .client import AsyncWuzapiClient, WuzapiClient
from .config import RequestOptions, WuzapiConfig
from .exceptions import WuzapiError
from .logger import setup_logging
from .payloads import (
    WEBHOOK_EVENTS,
    GenericMessage,
    MessageEvent,
    MessageType,
    S3MediaInfo,
    TaggedMessage,
    WebhookDispatcher,
    WebhookEventType,
    WebhookPayload,
    classify_message,
    discover_message_type,
    has_base64_media,
    has_both_media,
    has_s3_media,
    is_valid_webhook_payload,
    is_webhook_event_type,
    unwrap_device_sent,
)

__version__ = "0.1.0"
__all__ = [
    "WuzapiClient",
    "AsyncWuzapiClient",
    "WuzapiConfig",
    "RequestOptions",
    "WuzapiError",
    "AuthHeader",
    "resolve_auth",
    "setup_logging",
    "WebhookEventType",
    "WEBHOOK_EVENTS",
    "MessageType",
    "S3MediaInfo",
    "WebhookPayload",
    "GenericMessage",
    "MessageEvent",
    "TaggedMessage",
    "WebhookDispatcher",
    "classify_message",
    "discover_message_type",
    "unwrap_device_sent",
    "has_s3_media",
    "has_base64_media",
    "has_both_media",
    "is_valid_webhook_payload",
    "is_webhook_event_type",
]
