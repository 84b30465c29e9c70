from __future__ import annotations

from typing import List, Optional

from ..models import (
    DetailsResponse,
    GroupInfo,
    GroupInviteInfoResponse,
    GroupInviteLinkResponse,
    GroupJoinResponse,
    GroupListResponse,
    GroupPhotoResponse,
    GroupUpdateParticipantsResponse,
)
from .base import Module

EPHEMERAL_DURATIONS = ("24h", "7d", "90d", "off")
PARTICIPANT_ACTIONS = ("add", "remove", "promote", "demote")


class GroupModule(Module):
    """Group administration. Groups are addressed by JID (``...@g.us``)."""

    def list(self, *, token: Optional[str] = None) -> GroupListResponse:
        """List all subscribed groups."""
        return self._get("/group/list", token)

    def get_invite_link(self, group_jid: str, *, token: Optional[str] = None) -> GroupInviteLinkResponse:
        return self._post("/group/invitelink", {"GroupJID": group_jid}, token)

    def get_info(self, group_jid: str, *, token: Optional[str] = None) -> GroupInfo:
        return self._post("/group/info", {"GroupJID": group_jid}, token)

    def set_photo(self, group_jid: str, image: str, *, token: Optional[str] = None) -> GroupPhotoResponse:
        """Change the group photo. ``image`` is a base64 JPEG data URL."""
        return self._post("/group/photo", {"GroupJID": group_jid, "Image": image}, token)

    def remove_photo(self, group_jid: str, *, token: Optional[str] = None) -> DetailsResponse:
        return self._post("/group/photo/remove", {"GroupJID": group_jid}, token)

    def set_name(self, group_jid: str, name: str, *, token: Optional[str] = None) -> DetailsResponse:
        return self._post("/group/name", {"GroupJID": group_jid, "Name": name}, token)

    def set_topic(self, group_jid: str, topic: str, *, token: Optional[str] = None) -> DetailsResponse:
        """Set the group description."""
        return self._post("/group/topic", {"GroupJID": group_jid, "Topic": topic}, token)

    def create(self, name: str, participants: List[str], *, token: Optional[str] = None) -> GroupInfo:
        """Create a group with the given participant phone numbers."""
        body = {"Name": name, "Participants": list(participants)}
        return self._post("/group/create", body, token)

    def set_locked(self, group_jid: str, locked: bool, *, token: Optional[str] = None) -> DetailsResponse:
        """Restrict editing of group info to admins."""
        return self._post("/group/locked", {"GroupJID": group_jid, "Locked": locked}, token)

    def set_announce(self, group_jid: str, announce: bool, *, token: Optional[str] = None) -> DetailsResponse:
        """Toggle announcement mode (only admins can send messages)."""
        return self._post("/group/announce", {"GroupJID": group_jid, "Announce": announce}, token)

    def set_ephemeral(self, group_jid: str, duration: str, *, token: Optional[str] = None) -> DetailsResponse:
        """Set the disappearing messages timer: ``"24h"``, ``"7d"``, ``"90d"`` or ``"off"``."""
        if duration not in EPHEMERAL_DURATIONS:
            raise ValueError(f"duration must be one of {EPHEMERAL_DURATIONS}")
        return self._post("/group/ephemeral", {"GroupJID": group_jid, "Duration": duration}, token)

    def leave(self, group_jid: str, *, token: Optional[str] = None) -> DetailsResponse:
        return self._post("/group/leave", {"GroupJID": group_jid}, token)

    def join(self, code: str, *, token: Optional[str] = None) -> GroupJoinResponse:
        """Join a group using the code from an invite link."""
        return self._post("/group/join", {"Code": code}, token)

    def get_invite_info(self, code: str, *, token: Optional[str] = None) -> GroupInviteInfoResponse:
        """Look up a group from an invite code without joining it."""
        return self._post("/group/inviteinfo", {"Code": code}, token)

    def update_participants(
        self,
        group_jid: str,
        action: str,
        participants: List[str],
        *,
        token: Optional[str] = None,
    ) -> GroupUpdateParticipantsResponse:
        """Add, remove, promote or demote group participants."""
        if action not in PARTICIPANT_ACTIONS:
            raise ValueError(f"action must be one of {PARTICIPANT_ACTIONS}")
        body = {"GroupJID": group_jid, "Action": action, "Participants": list(participants)}
        return self._post("/group/updateparticipants", body, token)
