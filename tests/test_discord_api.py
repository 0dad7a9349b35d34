"""
Slash command registration tests.
"""

from unittest.mock import MagicMock, patch

import requests

from pricebot.commands import COMMANDS
from pricebot.services import discord_api
from pricebot.services.discord_api import commands_url, register_commands

API = "https://discord.com/api/v10"


def configured(guild_id=None):
    return patch.multiple(
        discord_api,
        DISCORD_API_URL=API,
        DISCORD_API_TIMEOUT=10.0,
        DISCORD_BOT_TOKEN="bot-token",
        DISCORD_CLIENT_ID="1234",
        DISCORD_GUILD_ID=guild_id,
    )


def ok_response():
    response = MagicMock()
    response.ok = True
    response.status_code = 200
    return response


class TestCommandsUrl:

    def test_global(self):
        with configured():
            assert commands_url("1234") == f"{API}/applications/1234/commands"

    def test_guild(self):
        with configured():
            assert (
                commands_url("1234", "999")
                == f"{API}/applications/1234/guilds/999/commands"
            )


class TestRegisterCommands:

    def test_global_registration(self):
        with configured(), patch.object(
            discord_api.requests, "put", return_value=ok_response()
        ) as put:
            assert register_commands()

        put.assert_called_once()
        args, kwargs = put.call_args
        assert args[0] == f"{API}/applications/1234/commands"
        assert kwargs["headers"]["Authorization"] == "Bot bot-token"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["json"] == COMMANDS

    def test_guild_registration(self):
        with configured(guild_id="999"), patch.object(
            discord_api.requests, "put", return_value=ok_response()
        ) as put:
            assert register_commands()

        assert put.call_args[0][0] == f"{API}/applications/1234/guilds/999/commands"

    def test_repeat_registration_sends_same_payload(self):
        with configured(), patch.object(
            discord_api.requests, "put", return_value=ok_response()
        ) as put:
            assert register_commands()
            assert register_commands()

        first, second = put.call_args_list
        assert first == second

    def test_error_status_returns_false(self):
        response = MagicMock()
        response.ok = False
        response.status_code = 401
        response.text = '{"message": "401: Unauthorized"}'

        with configured(), patch.object(
            discord_api.requests, "put", return_value=response
        ):
            assert register_commands() is False

    def test_request_exception_returns_false(self):
        with configured(), patch.object(
            discord_api.requests,
            "put",
            side_effect=requests.ConnectionError("unreachable"),
        ):
            assert register_commands() is False

    def test_request_has_timeout(self):
        with configured(), patch.object(
            discord_api.requests, "put", return_value=ok_response()
        ) as put:
            assert register_commands()

        assert put.call_args[1]["timeout"] == 10.0

    def test_timeout_returns_false(self):
        with configured(), patch.object(
            discord_api.requests, "put", side_effect=requests.Timeout("slow")
        ):
            assert register_commands() is False

    def test_missing_credentials_skips_request(self):
        with patch.multiple(
            discord_api, DISCORD_BOT_TOKEN=None, DISCORD_CLIENT_ID=None
        ), patch.object(discord_api.requests, "put") as put:
            assert register_commands() is False

        put.assert_not_called()
