"""Declared shapes of WuzAPI request and response bodies.

These are ``TypedDict`` declarations only. Responses are returned exactly as the
server sent them; nothing here is validated at runtime.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict


# Common

class ContextInfo(TypedDict, total=False):
    StanzaId: str
    Participant: str


class S3Config(TypedDict, total=False):
    enabled: bool
    endpoint: str
    region: str
    bucket: str
    accessKey: str
    secretKey: str
    pathStyle: bool
    publicURL: str
    mediaDelivery: str  # "base64" | "s3" | "both"
    retentionDays: int


class ProxyConfig(TypedDict):
    enabled: bool
    proxyURL: str


class DetailsResponse(TypedDict):
    Details: str


# Session

class ConnectResponse(TypedDict):
    details: str
    events: str
    jid: str
    webhook: str


class StatusResponse(TypedDict):
    Connected: bool
    LoggedIn: bool


class QRCodeResponse(TypedDict):
    QRCode: str


class S3TestResponse(TypedDict):
    Details: str
    Bucket: str
    Region: str


# Chat

class SendMessageResponse(TypedDict):
    Details: str
    Id: str
    Timestamp: str


class TemplateButton(TypedDict, total=False):
    DisplayText: str
    Type: str  # "quickreply" | "url" | "call"
    Url: str
    PhoneNumber: str


class ButtonText(TypedDict):
    DisplayText: str


class Button(TypedDict):
    ButtonId: str
    ButtonText: ButtonText
    Type: int


class ListRow(TypedDict, total=False):
    Title: str
    Desc: str
    RowId: str


class ListSection(TypedDict):
    Title: str
    Rows: List[ListRow]


class DownloadMediaResponse(TypedDict, total=False):
    Mimetype: str
    Data: str


# Group

class GroupParticipant(TypedDict):
    IsAdmin: bool
    IsSuperAdmin: bool
    JID: str


class GroupInfo(TypedDict, total=False):
    AnnounceVersionID: str
    DisappearingTimer: int
    GroupCreated: str
    IsAnnounce: bool
    IsEphemeral: bool
    IsLocked: bool
    JID: str
    Name: str
    NameSetAt: str
    NameSetBy: str
    OwnerJID: str
    ParticipantVersionID: str
    Participants: List[GroupParticipant]
    Topic: str
    TopicID: str
    TopicSetAt: str
    TopicSetBy: str


class GroupListResponse(TypedDict):
    Groups: List[GroupInfo]


class GroupInviteLinkResponse(TypedDict):
    InviteLink: str


class GroupPhotoResponse(TypedDict):
    Details: str
    PictureID: str


class GroupJoinResponse(TypedDict):
    GroupJID: str
    Details: str


class GroupInviteInfoResponse(TypedDict, total=False):
    GroupJID: str
    Name: str
    Description: str
    Subject: str
    Owner: str
    Creation: str
    ParticipantsCount: int


class ParticipantUpdate(TypedDict):
    JID: str
    Status: str
    Code: int


class GroupUpdateParticipantsResponse(TypedDict):
    Updates: List[ParticipantUpdate]


# User

class UserInfo(TypedDict):
    Devices: List[str]
    PictureID: str
    Status: str
    VerifiedName: Optional[Dict[str, Any]]


class UserInfoResponse(TypedDict):
    Users: Dict[str, UserInfo]


class UserCheck(TypedDict):
    IsInWhatsapp: bool
    JID: str
    Query: str
    VerifiedName: str


class UserCheckResponse(TypedDict):
    Users: List[UserCheck]


class UserAvatarResponse(TypedDict):
    URL: str
    ID: str
    Type: str
    DirectPath: str


class Contact(TypedDict):
    BusinessName: str
    FirstName: str
    Found: bool
    FullName: str
    PushName: str


ContactsResponse = Dict[str, Contact]


# Admin

class User(TypedDict, total=False):
    id: str
    name: str
    token: str
    webhook: str
    jid: str
    qrcode: str
    connected: bool
    loggedIn: bool
    expiration: int
    events: str
    proxy_url: str


class CreateUserResponse(TypedDict, total=False):
    id: str
    name: str
    token: str
    webhook: str
    events: str
    proxy_config: Dict[str, Any]
    s3_config: Dict[str, Any]


# Webhook

class SetWebhookResponse(TypedDict):
    WebhookURL: str
    Events: List[str]


class GetWebhookResponse(TypedDict):
    subscribe: List[str]
    webhook: str


class UpdateWebhookResponse(TypedDict):
    WebhookURL: str
    Events: List[str]
    active: bool


# Newsletter

class Newsletter(TypedDict, total=False):
    ID: str
    Name: str
    Description: str
    ThreadJID: str
    InviteCode: str
    CreationTime: int
    Handle: str
    State: str
    ViewerMetadata: Dict[str, str]


class NewsletterListResponse(TypedDict):
    Newsletters: List[Newsletter]
