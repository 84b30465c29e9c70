"""
Webhook payloads posted by the WuzAPI server.

The server wraps every event in ``{"event", "type", "token", "state"?}`` and may
attach received media inline (``base64`` + ``mimeType`` + ``fileName``), as an
object-storage reference (``s3``), or both. ``Message`` events carry a flat
message object where at most one content field is set; ``discover_message_type``
turns that into a ``MessageType`` tag.

None of the classification helpers raise: unknown or malformed input maps to
``MessageType.UNKNOWN`` or ``False``.

Usage:
    @dispatcher.on(WebhookEventType.MESSAGE)
    def on_message(payload):
        event = MessageEvent.model_validate(payload["event"])
        if event.message_type is MessageType.IMAGE and has_s3_media(payload):
            fetch(payload["s3"]["url"])
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .logger import webhook_logger


class WebhookEventType(str, Enum):
    """Event names the server can post (and that ``session.connect`` subscribes to)."""

    MESSAGE = "Message"
    UNDECRYPTABLE_MESSAGE = "UndecryptableMessage"
    RECEIPT = "Receipt"
    READ_RECEIPT = "ReadReceipt"
    MEDIA_RETRY = "MediaRetry"
    GROUP_INFO = "GroupInfo"
    JOINED_GROUP = "JoinedGroup"
    PICTURE = "Picture"
    BLOCKLIST_CHANGE = "BlocklistChange"
    BLOCKLIST = "Blocklist"
    CONNECTED = "Connected"
    DISCONNECTED = "Disconnected"
    CONNECT_FAILURE = "ConnectFailure"
    KEEP_ALIVE_RESTORED = "KeepAliveRestored"
    KEEP_ALIVE_TIMEOUT = "KeepAliveTimeout"
    LOGGED_OUT = "LoggedOut"
    CLIENT_OUTDATED = "ClientOutdated"
    TEMPORARY_BAN = "TemporaryBan"
    STREAM_ERROR = "StreamError"
    STREAM_REPLACED = "StreamReplaced"
    PAIR_SUCCESS = "PairSuccess"
    PAIR_ERROR = "PairError"
    QR = "QR"
    QR_SCANNED_WITHOUT_MULTIDEVICE = "QRScannedWithoutMultidevice"
    PRIVACY_SETTINGS = "PrivacySettings"
    PUSH_NAME_SETTING = "PushNameSetting"
    USER_ABOUT = "UserAbout"
    APP_STATE = "AppState"
    APP_STATE_SYNC_COMPLETE = "AppStateSyncComplete"
    HISTORY_SYNC = "HistorySync"
    OFFLINE_SYNC_COMPLETED = "OfflineSyncCompleted"
    OFFLINE_SYNC_PREVIEW = "OfflineSyncPreview"
    CALL_OFFER = "CallOffer"
    CALL_ACCEPT = "CallAccept"
    CALL_TERMINATE = "CallTerminate"
    CALL_OFFER_NOTICE = "CallOfferNotice"
    CALL_RELAY_LATENCY = "CallRelayLatency"
    PRESENCE = "Presence"
    CHAT_PRESENCE = "ChatPresence"
    IDENTITY_CHANGE = "IdentityChange"
    CAT_REFRESH_ERROR = "CATRefreshError"
    NEWSLETTER_JOIN = "NewsletterJoin"
    NEWSLETTER_LEAVE = "NewsletterLeave"
    NEWSLETTER_MUTE_CHANGE = "NewsletterMuteChange"
    NEWSLETTER_LIVE_UPDATE = "NewsletterLiveUpdate"
    FB_MESSAGE = "FBMessage"
    ALL = "All"


WEBHOOK_EVENTS = [e.value for e in WebhookEventType]


class MessageType(str, Enum):
    """Content kind of a message; values are the wire field names."""

    TEXT = "conversation"
    EXTENDED_TEXT = "extendedTextMessage"
    IMAGE = "imageMessage"
    VIDEO = "videoMessage"
    AUDIO = "audioMessage"
    DOCUMENT = "documentMessage"
    CONTACT = "contactMessage"
    POLL_CREATION = "pollCreationMessageV3"
    LOCATION = "locationMessage"
    STICKER = "stickerMessage"
    REACTION = "reactionMessage"
    EDITED = "editedMessage"
    PROTOCOL = "protocolMessage"
    DEVICE_SENT = "deviceSentMessage"
    UNKNOWN = "unknown"


# First populated field wins when a malformed message sets more than one.
MESSAGE_TYPE_ORDER = (
    MessageType.TEXT,
    MessageType.EXTENDED_TEXT,
    MessageType.IMAGE,
    MessageType.VIDEO,
    MessageType.AUDIO,
    MessageType.DOCUMENT,
    MessageType.CONTACT,
    MessageType.LOCATION,
    MessageType.STICKER,
    MessageType.REACTION,
    MessageType.POLL_CREATION,
    MessageType.EDITED,
    MessageType.PROTOCOL,
    MessageType.DEVICE_SENT,
)


class S3MediaInfo(BaseModel):
    """Object-storage location of media received with an event."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    url: str
    key: str
    bucket: str
    size: int
    mime_type: str = Field(..., alias="mimeType")
    file_name: str = Field(..., alias="fileName")


class WebhookPayload(BaseModel):
    """Envelope of every webhook POST. ``type`` says how to read ``event``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    event: Any
    type: str
    token: str
    state: Optional[str] = None
    s3: Optional[S3MediaInfo] = None
    base64: Optional[str] = None
    mime_type: Optional[str] = Field(None, alias="mimeType")
    file_name: Optional[str] = Field(None, alias="fileName")
    qr_code_base64: Optional[str] = Field(None, alias="qrCodeBase64")

    @property
    def has_s3_media(self) -> bool:
        return has_s3_media(self)

    @property
    def has_base64_media(self) -> bool:
        return has_base64_media(self)

    def is_event(self, event_type: Union[WebhookEventType, str]) -> bool:
        return is_webhook_event_type(self, event_type)


class GenericMessage(BaseModel):
    """Flat message object: at most one content field is populated."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    message_context_info: Optional[Dict[str, Any]] = Field(None, alias="messageContextInfo")
    conversation: Optional[str] = None
    extended_text_message: Optional[Dict[str, Any]] = Field(None, alias="extendedTextMessage")
    image_message: Optional[Dict[str, Any]] = Field(None, alias="imageMessage")
    video_message: Optional[Dict[str, Any]] = Field(None, alias="videoMessage")
    audio_message: Optional[Dict[str, Any]] = Field(None, alias="audioMessage")
    document_message: Optional[Dict[str, Any]] = Field(None, alias="documentMessage")
    contact_message: Optional[Dict[str, Any]] = Field(None, alias="contactMessage")
    poll_creation_message_v3: Optional[Dict[str, Any]] = Field(None, alias="pollCreationMessageV3")
    location_message: Optional[Dict[str, Any]] = Field(None, alias="locationMessage")
    sticker_message: Optional[Dict[str, Any]] = Field(None, alias="stickerMessage")
    reaction_message: Optional[Dict[str, Any]] = Field(None, alias="reactionMessage")
    edited_message: Optional[Dict[str, Any]] = Field(None, alias="editedMessage")
    protocol_message: Optional[Dict[str, Any]] = Field(None, alias="protocolMessage")
    device_sent_message: Optional[Dict[str, Any]] = Field(None, alias="deviceSentMessage")

    @property
    def message_type(self) -> MessageType:
        return discover_message_type(self)


class MessageEvent(BaseModel):
    """``event`` body of a ``Message`` webhook."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    info: Dict[str, Any] = Field(default_factory=dict, alias="Info")
    message: GenericMessage = Field(default_factory=GenericMessage, alias="Message")
    raw_message: Optional[GenericMessage] = Field(None, alias="RawMessage")
    is_edit: bool = Field(False, alias="IsEdit")
    is_ephemeral: bool = Field(False, alias="IsEphemeral")
    is_view_once: bool = Field(False, alias="IsViewOnce")
    is_document_with_caption: bool = Field(False, alias="IsDocumentWithCaption")

    @property
    def message_type(self) -> MessageType:
        return discover_message_type(self.message)

    @property
    def chat(self) -> Optional[str]:
        return self.info.get("Chat")

    @property
    def sender(self) -> Optional[str]:
        return self.info.get("Sender")

    @property
    def is_from_me(self) -> bool:
        return bool(self.info.get("IsFromMe"))


@dataclass(frozen=True)
class TaggedMessage:
    """A message projected onto its content kind and that field's value."""

    type: MessageType
    content: Any = None

    @property
    def is_unknown(self) -> bool:
        return self.type is MessageType.UNKNOWN


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, exclude_none=True).get(key)
    return None


def classify_message(message: Any) -> TaggedMessage:
    """Project a flat message onto ``TaggedMessage(type, content)``.

    Accepts the raw mapping or a ``GenericMessage``. A field counts as populated
    when present and not ``None``; fields are checked in ``MESSAGE_TYPE_ORDER``.
    """
    if isinstance(message, BaseModel):
        message = message.model_dump(by_alias=True, exclude_none=True)
    if not isinstance(message, Mapping):
        return TaggedMessage(MessageType.UNKNOWN)
    for message_type in MESSAGE_TYPE_ORDER:
        content = message.get(message_type.value)
        if content is not None:
            return TaggedMessage(message_type, content)
    return TaggedMessage(MessageType.UNKNOWN)


def discover_message_type(message: Any) -> MessageType:
    """Return the content kind of a message, ``MessageType.UNKNOWN`` if none is set."""
    return classify_message(message).type


def unwrap_device_sent(message: Any) -> Optional[Dict[str, Any]]:
    """Inner message of a ``deviceSentMessage`` (sent from another of our devices)."""
    device_sent = _field(message, MessageType.DEVICE_SENT.value)
    if not isinstance(device_sent, Mapping):
        return None
    inner = device_sent.get("message")
    return dict(inner) if isinstance(inner, Mapping) else None


def has_s3_media(payload: Any) -> bool:
    """True if the payload references media in object storage."""
    if isinstance(payload, Mapping):
        return bool(payload.get("s3"))
    return bool(getattr(payload, "s3", None))


def has_base64_media(payload: Any) -> bool:
    """True if the payload carries media inline as base64."""
    if isinstance(payload, Mapping):
        return bool(payload.get("base64"))
    return bool(getattr(payload, "base64", None))


def has_both_media(payload: Any) -> bool:
    return has_s3_media(payload) and has_base64_media(payload)


def is_valid_webhook_payload(payload: Any) -> bool:
    """Ingress guard: a mapping with ``event``, ``type`` and ``token`` keys (values unchecked)."""
    if isinstance(payload, WebhookPayload):
        return True
    return isinstance(payload, Mapping) and all(k in payload for k in ("event", "type", "token"))


def is_webhook_event_type(payload: Any, event_type: Union[WebhookEventType, str]) -> bool:
    expected = event_type.value if isinstance(event_type, WebhookEventType) else event_type
    if isinstance(payload, Mapping):
        return payload.get("type") == expected
    return getattr(payload, "type", None) == expected


Handler = Callable[[Any], Any]


class WebhookDispatcher:
    """Route webhook payloads to handlers registered per event type.

    Handlers registered for ``WebhookEventType.ALL`` see every valid payload.
    Payloads failing ``is_valid_webhook_payload`` are logged and skipped.
    Exceptions raised by handlers propagate to the caller.

    Usage:
        dispatcher = WebhookDispatcher()

        @dispatcher.on(WebhookEventType.MESSAGE)
        def on_message(payload):
            ...

        dispatcher.dispatch(request_json)
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def on(self, event_type: Union[WebhookEventType, str]) -> Callable[[Handler], Handler]:
        def decorator(handler: Handler) -> Handler:
            self.add_handler(event_type, handler)
            return handler

        return decorator

    def add_handler(self, event_type: Union[WebhookEventType, str], handler: Handler) -> None:
        key = event_type.value if isinstance(event_type, WebhookEventType) else event_type
        self._handlers[key].append(handler)

    def handlers_for(self, event_type: str) -> List[Handler]:
        handlers = list(self._handlers.get(event_type, []))
        if event_type != WebhookEventType.ALL.value:
            handlers.extend(self._handlers.get(WebhookEventType.ALL.value, []))
        return handlers

    def _route(self, payload: Any) -> List[Handler]:
        if not is_valid_webhook_payload(payload):
            webhook_logger.warning("Ignoring invalid webhook payload: %r", payload)
            return []
        event_type = payload["type"] if isinstance(payload, Mapping) else payload.type
        if not isinstance(event_type, str):
            webhook_logger.warning("Ignoring webhook payload with non-string type: %r", event_type)
            return []
        handlers = self.handlers_for(event_type)
        if not handlers:
            webhook_logger.debug("No handler for webhook event '%s'", event_type)
        return handlers

    def dispatch(self, payload: Any) -> int:
        """Call the matching sync handlers. Returns how many ran."""
        handlers = self._route(payload)
        for handler in handlers:
            result = handler(payload)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(f"Handler {handler!r} is async; use adispatch()")
        return len(handlers)

    async def adispatch(self, payload: Any) -> int:
        """Call the matching handlers, awaiting async ones. Returns how many ran."""
        handlers = self._route(payload)
        for handler in handlers:
            result = handler(payload)
            if inspect.isawaitable(result):
                await result
        return len(handlers)
