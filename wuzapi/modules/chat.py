from __future__ import annotations

from typing import List, Optional

from ..models import (
    Button,
    ContextInfo,
    DownloadMediaResponse,
    ListSection,
    SendMessageResponse,
    TemplateButton,
)
from .base import Module, compact

PRESENCE_STATES = ("composing", "paused")
MEDIA_KINDS = ("image", "video", "audio", "document")


class ChatModule(Module):
    """Sending messages and acting on chats.

    Media arguments are base64 data URLs (``data:image/jpeg;base64,...``), the
    format the server expects.

    Usage:
        wa.chat.send_text("5491155554444", "Hello!")
        wa.chat.send_image("5491155554444", "data:image/jpeg;base64,...", caption="Look")
        wa.chat.send_text("5491155554444", "Quoted", context_info={"StanzaId": msg_id, "Participant": jid})
    """

    def send_text(
        self,
        phone: str,
        body: str,
        *,
        id: Optional[str] = None,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send a text message.

        Args:
            phone: Recipient phone number or JID.
            body: Message text.
            id: Optional client-chosen message ID.
            context_info: Reply context (``StanzaId`` and ``Participant`` of the quoted message).
        """
        payload = compact(Phone=phone, Body=body, Id=id, ContextInfo=context_info)
        return self._post("/chat/send/text", payload, token)

    def send_template(
        self,
        phone: str,
        content: str,
        buttons: List[TemplateButton],
        *,
        footer: Optional[str] = None,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send a template message with quick-reply, url or call buttons."""
        payload = compact(
            Phone=phone, Content=content, Footer=footer, Buttons=list(buttons), ContextInfo=context_info
        )
        return self._post("/chat/send/template", payload, token)

    def send_audio(
        self,
        phone: str,
        audio: str,
        *,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send an audio message (``data:audio/ogg;base64,...``)."""
        payload = compact(Phone=phone, Audio=audio, ContextInfo=context_info)
        return self._post("/chat/send/audio", payload, token)

    def send_image(
        self,
        phone: str,
        image: str,
        *,
        caption: Optional[str] = None,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        payload = compact(Phone=phone, Image=image, Caption=caption, ContextInfo=context_info)
        return self._post("/chat/send/image", payload, token)

    def send_document(
        self,
        phone: str,
        document: str,
        file_name: str,
        *,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        payload = compact(Phone=phone, Document=document, FileName=file_name, ContextInfo=context_info)
        return self._post("/chat/send/document", payload, token)

    def send_video(
        self,
        phone: str,
        video: str,
        *,
        caption: Optional[str] = None,
        jpeg_thumbnail: Optional[str] = None,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        payload = compact(
            Phone=phone,
            Video=video,
            Caption=caption,
            JpegThumbnail=jpeg_thumbnail,
            ContextInfo=context_info,
        )
        return self._post("/chat/send/video", payload, token)

    def send_sticker(
        self,
        phone: str,
        sticker: str,
        *,
        png_thumbnail: Optional[str] = None,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send a sticker (``data:image/webp;base64,...``)."""
        payload = compact(Phone=phone, Sticker=sticker, PngThumbnail=png_thumbnail, ContextInfo=context_info)
        return self._post("/chat/send/sticker", payload, token)

    def send_location(
        self,
        phone: str,
        latitude: float,
        longitude: float,
        *,
        name: Optional[str] = None,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        payload = compact(
            Phone=phone, Latitude=latitude, Longitude=longitude, Name=name, ContextInfo=context_info
        )
        return self._post("/chat/send/location", payload, token)

    def send_contact(
        self,
        phone: str,
        name: str,
        vcard: str,
        *,
        context_info: Optional[ContextInfo] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        payload = compact(Phone=phone, Name=name, Vcard=vcard, ContextInfo=context_info)
        return self._post("/chat/send/contact", payload, token)

    def send_buttons(
        self,
        phone: str,
        body: str,
        buttons: List[Button],
        *,
        footer: Optional[str] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send a message with reply buttons.

        Each button is ``{"ButtonId": ..., "ButtonText": {"DisplayText": ...}, "Type": 1}``.
        """
        payload = compact(Phone=phone, Body=body, Footer=footer, Buttons=list(buttons))
        return self._post("/chat/send/buttons", payload, token)

    def send_list(
        self,
        phone: str,
        button_text: str,
        description: str,
        top_text: str,
        sections: List[ListSection],
        *,
        footer: Optional[str] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send a list menu.

        Args:
            button_text: Label of the button that opens the list.
            description: Text shown above the button.
            top_text: List title.
            sections: ``[{"Title": ..., "Rows": [{"Title": ..., "Desc": ..., "RowId": ...}]}]``.
        """
        payload = compact(
            Phone=phone,
            ButtonText=button_text,
            Desc=description,
            TopText=top_text,
            Sections=list(sections),
            FooterText=footer,
        )
        return self._post("/chat/send/list", payload, token)

    def send_poll(
        self,
        group: str,
        header: str,
        options: List[str],
        *,
        id: Optional[str] = None,
        token: Optional[str] = None,
    ) -> SendMessageResponse:
        """Send a poll to a group JID."""
        if len(options) < 2:
            raise ValueError("A poll needs at least two options")
        payload = compact(Group=group, Header=header, Options=list(options), Id=id)
        return self._post("/chat/send/poll", payload, token)

    def edit_message(
        self, phone: str, id: str, body: str, *, token: Optional[str] = None
    ) -> SendMessageResponse:
        """Replace the text of a previously sent message."""
        return self._post("/chat/send/edit", {"Phone": phone, "Id": id, "Body": body}, token)

    def delete_message(
        self, phone: str, id: str, *, remote: Optional[bool] = None, token: Optional[str] = None
    ) -> SendMessageResponse:
        """Revoke a sent message. ``remote=True`` deletes it for everyone."""
        payload = compact(Phone=phone, Id=id, Remote=remote)
        return self._post("/chat/delete", payload, token)

    def send_presence(
        self,
        phone: str,
        state: str,
        *,
        media: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        """Send a chat presence indication (typing indicator).

        Args:
            state: ``"composing"`` or ``"paused"``.
            media: ``"audio"`` to show "recording audio" instead of "typing".
        """
        if state not in PRESENCE_STATES:
            raise ValueError(f"state must be one of {PRESENCE_STATES}")
        return self._post("/chat/presence", compact(Phone=phone, State=state, Media=media), token)

    def mark_read(
        self,
        ids: List[str],
        chat: str,
        *,
        sender: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        payload = compact(Id=list(ids), Chat=chat, Sender=sender)
        return self._post("/chat/markread", payload, token)

    def react(self, phone: str, body: str, id: str, *, token: Optional[str] = None) -> SendMessageResponse:
        """React to a message. ``body`` is the emoji; an empty string removes the reaction."""
        return self._post("/chat/react", {"Phone": phone, "Body": body, "Id": id}, token)

    def download_media(
        self,
        kind: str,
        *,
        url: str,
        media_key: str,
        mimetype: str,
        file_sha256: str,
        file_length: int,
        file_enc_sha256: Optional[str] = None,
        token: Optional[str] = None,
    ) -> DownloadMediaResponse:
        """Download and decrypt media referenced by a received message.

        The arguments map to the ``URL``, ``mediaKey``, ``mimetype``,
        ``fileSHA256``, ``fileLength`` and ``fileEncSHA256`` fields of the
        webhook's media message.
        """
        if kind not in MEDIA_KINDS:
            raise ValueError(f"kind must be one of {MEDIA_KINDS}")
        payload = compact(
            Url=url,
            MediaKey=media_key,
            Mimetype=mimetype,
            FileSHA256=file_sha256,
            FileLength=file_length,
            FileEncSHA256=file_enc_sha256,
        )
        return self._post(f"/chat/download{kind}", payload, token)

    def download_image(self, **kwargs) -> DownloadMediaResponse:
        return self.download_media("image", **kwargs)

    def download_video(self, **kwargs) -> DownloadMediaResponse:
        return self.download_media("video", **kwargs)

    def download_audio(self, **kwargs) -> DownloadMediaResponse:
        return self.download_media("audio", **kwargs)

    def download_document(self, **kwargs) -> DownloadMediaResponse:
        return self.download_media("document", **kwargs)
