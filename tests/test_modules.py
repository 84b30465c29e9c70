"""
Endpoint wiring: each method hits the right path with the right body.
"""

import pytest

from wuzapi import WuzapiError

from .conftest import envelope


def sent(spy):
    return spy.last.method, spy.last.url.path, spy.last_json()


class TestSession:
    def test_connect(self, client, spy):
        client.session.connect(["Message", "ReadReceipt"])
        assert sent(spy) == (
            "POST",
            "/session/connect",
            {"Subscribe": ["Message", "ReadReceipt"], "Immediate": False},
        )

    @pytest.mark.parametrize(
        "call, method, path",
        [
            (lambda wa: wa.session.disconnect(), "POST", "/session/disconnect"),
            (lambda wa: wa.session.logout(), "POST", "/session/logout"),
            (lambda wa: wa.session.get_status(), "GET", "/session/status"),
            (lambda wa: wa.session.get_qr_code(), "GET", "/session/qr"),
            (lambda wa: wa.session.get_s3_config(), "GET", "/session/s3/config"),
            (lambda wa: wa.session.test_s3(), "POST", "/session/s3/test"),
            (lambda wa: wa.session.delete_s3_config(), "DELETE", "/session/s3/config"),
            (lambda wa: wa.session.request_history(), "GET", "/session/history"),
        ],
    )
    def test_bodyless_calls(self, client, spy, call, method, path):
        call(client)
        assert sent(spy) == (method, path, None)

    def test_pair_phone(self, client, spy):
        client.session.pair_phone("5491155554444")
        assert sent(spy) == ("POST", "/session/pairphone", {"Phone": "5491155554444"})

    def test_set_proxy(self, client, spy):
        client.session.set_proxy("socks5://proxy:1080")
        assert sent(spy) == (
            "POST",
            "/session/proxy",
            {"proxy_url": "socks5://proxy:1080", "enable": True},
        )

    def test_configure_s3(self, client, spy):
        client.session.configure_s3(
            endpoint="https://s3.amazonaws.com",
            region="us-east-1",
            bucket="media",
            access_key="AK",
            secret_key="SK",
            media_delivery="both",
        )
        method, path, body = sent(spy)
        assert (method, path) == ("POST", "/session/s3/config")
        assert body["accessKey"] == "AK"
        assert body["mediaDelivery"] == "both"
        assert body["retentionDays"] == 30
        assert "publicURL" not in body

    def test_configure_s3_rejects_unknown_delivery(self, client, spy):
        with pytest.raises(ValueError):
            client.session.configure_s3(
                endpoint="e", region="r", bucket="b", access_key="a", secret_key="s", media_delivery="ftp"
            )
        assert spy.requests == []


class TestChat:
    def test_send_text_with_reply_context(self, client, spy):
        client.chat.send_text("1", "hi", id="ABC", context_info={"StanzaId": "X", "Participant": "2@s.whatsapp.net"})
        assert sent(spy) == (
            "POST",
            "/chat/send/text",
            {
                "Phone": "1",
                "Body": "hi",
                "Id": "ABC",
                "ContextInfo": {"StanzaId": "X", "Participant": "2@s.whatsapp.net"},
            },
        )

    def test_send_image(self, client, spy):
        client.chat.send_image("1", "data:image/jpeg;base64,AAA", caption="look")
        assert sent(spy) == (
            "POST",
            "/chat/send/image",
            {"Phone": "1", "Image": "data:image/jpeg;base64,AAA", "Caption": "look"},
        )

    def test_send_document(self, client, spy):
        client.chat.send_document("1", "data:application/pdf;base64,AAA", "report.pdf")
        assert sent(spy)[2] == {"Phone": "1", "Document": "data:application/pdf;base64,AAA", "FileName": "report.pdf"}

    def test_send_location(self, client, spy):
        client.chat.send_location("1", -34.6, -58.4, name="Obelisco")
        assert sent(spy) == (
            "POST",
            "/chat/send/location",
            {"Phone": "1", "Latitude": -34.6, "Longitude": -58.4, "Name": "Obelisco"},
        )

    def test_send_buttons(self, client, spy):
        buttons = [{"ButtonId": "help", "ButtonText": {"DisplayText": "Help"}, "Type": 1}]
        client.chat.send_buttons("1", "Choose", buttons, footer="bot")
        assert sent(spy) == (
            "POST",
            "/chat/send/buttons",
            {"Phone": "1", "Body": "Choose", "Footer": "bot", "Buttons": buttons},
        )

    def test_send_list(self, client, spy):
        sections = [{"Title": "Support", "Rows": [{"Title": "Tech", "Desc": "help", "RowId": "1"}]}]
        client.chat.send_list("1", "View", "Pick one", "Menu", sections)
        assert sent(spy) == (
            "POST",
            "/chat/send/list",
            {"Phone": "1", "ButtonText": "View", "Desc": "Pick one", "TopText": "Menu", "Sections": sections},
        )

    def test_send_poll_needs_two_options(self, client, spy):
        with pytest.raises(ValueError):
            client.chat.send_poll("123@g.us", "Lunch?", ["pizza"])
        assert spy.requests == []

        client.chat.send_poll("123@g.us", "Lunch?", ["pizza", "sushi"])
        assert sent(spy) == (
            "POST",
            "/chat/send/poll",
            {"Group": "123@g.us", "Header": "Lunch?", "Options": ["pizza", "sushi"]},
        )

    def test_edit_and_delete(self, client, spy):
        client.chat.edit_message("1", "MSG", "edited")
        assert sent(spy) == ("POST", "/chat/send/edit", {"Phone": "1", "Id": "MSG", "Body": "edited"})

        client.chat.delete_message("1", "MSG", remote=True)
        assert sent(spy) == ("POST", "/chat/delete", {"Phone": "1", "Id": "MSG", "Remote": True})

    def test_presence(self, client, spy):
        client.chat.send_presence("1", "composing")
        assert sent(spy) == ("POST", "/chat/presence", {"Phone": "1", "State": "composing"})

        with pytest.raises(ValueError):
            client.chat.send_presence("1", "typing")

    def test_mark_read(self, client, spy):
        client.chat.mark_read(["A", "B"], "1@s.whatsapp.net")
        assert sent(spy) == ("POST", "/chat/markread", {"Id": ["A", "B"], "Chat": "1@s.whatsapp.net"})

    def test_react(self, client, spy):
        client.chat.react("1", "👍", "MSG")
        assert sent(spy) == ("POST", "/chat/react", {"Phone": "1", "Body": "👍", "Id": "MSG"})

    @pytest.mark.parametrize("kind", ["image", "video", "audio", "document"])
    def test_download_media(self, client, spy, kind):
        spy.reply(envelope({"Mimetype": "image/jpeg", "Data": "data:image/jpeg;base64,AAA"}))
        download = getattr(client.chat, f"download_{kind}")

        result = download(url="https://mmg", media_key="K", mimetype="image/jpeg", file_sha256="S", file_length=10)

        assert result["Mimetype"] == "image/jpeg"
        assert sent(spy) == (
            "POST",
            f"/chat/download{kind}",
            {"Url": "https://mmg", "MediaKey": "K", "Mimetype": "image/jpeg", "FileSHA256": "S", "FileLength": 10},
        )

    def test_download_rejects_unknown_kind(self, client):
        with pytest.raises(ValueError):
            client.chat.download_media("gif", url="u", media_key="k", mimetype="m", file_sha256="s", file_length=1)


class TestGroup:
    def test_list(self, client, spy):
        spy.reply(envelope({"Groups": []}))
        assert client.group.list() == {"Groups": []}
        assert sent(spy) == ("GET", "/group/list", None)

    @pytest.mark.parametrize(
        "call, path, body",
        [
            (lambda wa: wa.group.get_invite_link("g@g.us"), "/group/invitelink", {"GroupJID": "g@g.us"}),
            (lambda wa: wa.group.get_info("g@g.us"), "/group/info", {"GroupJID": "g@g.us"}),
            (lambda wa: wa.group.set_name("g@g.us", "New"), "/group/name", {"GroupJID": "g@g.us", "Name": "New"}),
            (lambda wa: wa.group.set_topic("g@g.us", "Rules"), "/group/topic", {"GroupJID": "g@g.us", "Topic": "Rules"}),
            (lambda wa: wa.group.set_locked("g@g.us", True), "/group/locked", {"GroupJID": "g@g.us", "Locked": True}),
            (
                lambda wa: wa.group.set_announce("g@g.us", True),
                "/group/announce",
                {"GroupJID": "g@g.us", "Announce": True},
            ),
            (lambda wa: wa.group.remove_photo("g@g.us"), "/group/photo/remove", {"GroupJID": "g@g.us"}),
            (lambda wa: wa.group.leave("g@g.us"), "/group/leave", {"GroupJID": "g@g.us"}),
            (lambda wa: wa.group.join("CODE"), "/group/join", {"Code": "CODE"}),
            (lambda wa: wa.group.get_invite_info("CODE"), "/group/inviteinfo", {"Code": "CODE"}),
            (
                lambda wa: wa.group.create("Team", ["1", "2"]),
                "/group/create",
                {"Name": "Team", "Participants": ["1", "2"]},
            ),
        ],
    )
    def test_posts(self, client, spy, call, path, body):
        call(client)
        assert sent(spy) == ("POST", path, body)

    def test_set_ephemeral(self, client, spy):
        client.group.set_ephemeral("g@g.us", "7d")
        assert sent(spy) == ("POST", "/group/ephemeral", {"GroupJID": "g@g.us", "Duration": "7d"})

    def test_set_ephemeral_rejects_unknown_duration(self, client, spy):
        with pytest.raises(ValueError):
            client.group.set_ephemeral("g@g.us", "1y")
        assert spy.requests == []

    def test_update_participants(self, client, spy):
        client.group.update_participants("g@g.us", "promote", ["1"])
        assert sent(spy) == (
            "POST",
            "/group/updateparticipants",
            {"GroupJID": "g@g.us", "Action": "promote", "Participants": ["1"]},
        )

    def test_update_participants_rejects_unknown_action(self, client, spy):
        with pytest.raises(ValueError):
            client.group.update_participants("g@g.us", "ban", ["1"])
        assert spy.requests == []


class TestUser:
    def test_info_and_check(self, client, spy):
        client.user.get_info(["1", "2"])
        assert sent(spy) == ("POST", "/user/info", {"Phone": ["1", "2"]})

        client.user.check(["1"])
        assert sent(spy) == ("POST", "/user/check", {"Phone": ["1"]})

    def test_avatar(self, client, spy):
        client.user.get_avatar("1", preview=False)
        assert sent(spy) == ("POST", "/user/avatar", {"Phone": "1", "Preview": False})

    def test_contacts(self, client, spy):
        client.user.get_contacts()
        assert sent(spy) == ("GET", "/user/contacts", None)


class TestAdmin:
    def test_list_get_delete(self, client, spy):
        spy.reply(envelope([{"id": "1", "name": "a"}]))
        assert client.admin.list_users() == [{"id": "1", "name": "a"}]
        assert sent(spy) == ("GET", "/admin/users", None)

        client.admin.get_user(7)
        assert sent(spy) == ("GET", "/admin/users/7", None)

        client.admin.delete_user(7)
        assert sent(spy) == ("DELETE", "/admin/users/7", None)

    def test_add_user_keeps_admin_token_separate(self, client, spy):
        client.admin.add_user("Bot", "user-token", events="Message", token="admin-token")
        assert spy.last.headers["Token"] == "admin-token"
        assert sent(spy) == ("POST", "/admin/users", {"name": "Bot", "token": "user-token", "events": "Message"})

    def test_server_error_is_forwarded(self, client, spy):
        spy.reply({"code": 409, "error": "user already exists", "success": False}, status=409)
        with pytest.raises(WuzapiError) as exc_info:
            client.admin.add_user("Bot", "user-token")
        assert exc_info.value.code == 409


class TestWebhook:
    def test_set_and_get(self, client, spy):
        client.webhook.set_webhook("https://me/hook", ["Message"])
        assert sent(spy) == ("POST", "/webhook", {"webhook": "https://me/hook", "events": ["Message"]})

        client.webhook.set_webhook("https://me/hook")
        assert sent(spy) == ("POST", "/webhook", {"webhook": "https://me/hook"})

        client.webhook.get_webhook()
        assert sent(spy) == ("GET", "/webhook", None)

    def test_update(self, client, spy):
        client.webhook.update_webhook("https://me/new", active=True)
        assert sent(spy) == ("PUT", "/webhook", {"webhook": "https://me/new", "Active": True})


class TestNewsletter:
    def test_list(self, client, spy):
        client.newsletter.list(token="abc")
        assert sent(spy) == ("GET", "/newsletter/list", None)
        assert spy.last.headers["Token"] == "abc"
