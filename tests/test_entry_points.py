# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #

from types import SimpleNamespace
from unittest.mock import Mock

import discord
import pytest

import bot as bot_entry
import run as run_entry
from services.config import config_service
from services.config.config_service import load_config
from services.exceptions import BotConnectionError


@pytest.fixture
def clean_config_env(monkeypatch, sample_env):
    monkeypatch.setenv("PYTHONIOENCODING", "utf-8")
    for key, value in sample_env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setattr(config_service, "_config_service_instance", None)
    return monkeypatch


@pytest.fixture
def fake_bot(monkeypatch):
    """Replace runtime construction so ``run_bot`` drives a mock client."""
    client = Mock()
    runtime = SimpleNamespace(logger=Mock())
    monkeypatch.setattr(bot_entry, "build_runtime", lambda config: runtime)
    monkeypatch.setattr(bot_entry, "create_bot", lambda rt: client)
    monkeypatch.setattr(bot_entry, "register_event_handlers", lambda client, rt: None)
    return client


def test_missing_token_exits_with_code_1(clean_config_env):
    clean_config_env.delenv("DISCORD_BOT_TOKEN")

    with pytest.raises(SystemExit) as exc_info:
        bot_entry.load_configuration_or_exit()

    assert exc_info.value.code == 1


def test_main_without_config_exits_on_invalid_channel(clean_config_env):
    clean_config_env.setenv("DISCORD_CHANNEL_ID", "not-a-snowflake")

    with pytest.raises(SystemExit) as exc_info:
        bot_entry.main()

    assert exc_info.value.code == 1


def test_load_configuration_returns_config(clean_config_env):
    config = bot_entry.load_configuration_or_exit()

    assert config.channel_id == 987654321


def test_run_bot_passes_token_to_client(fake_bot, sample_env):
    config = load_config(sample_env)

    bot_entry.run_bot(config)

    fake_bot.run.assert_called_once_with("test-token-abcd")


def test_login_failure_exits_with_code_1(fake_bot, sample_env):
    fake_bot.run.side_effect = discord.LoginFailure("Improper token has been passed.")

    with pytest.raises(SystemExit) as exc_info:
        bot_entry.main(load_config(sample_env))

    assert exc_info.value.code == 1


def test_missing_privileged_intent_becomes_connection_error(fake_bot, sample_env):
    fake_bot.run.side_effect = discord.PrivilegedIntentsRequired(None)

    with pytest.raises(BotConnectionError) as exc_info:
        bot_entry.run_bot(load_config(sample_env))

    assert "Message Content intent" in exc_info.value.message


def test_web_server_bind_failure_is_logged_not_raised(monkeypatch):
    serve = Mock(side_effect=OSError("Address already in use"))
    monkeypatch.setattr(run_entry, "serve", serve)
    monkeypatch.setattr(run_entry, "create_app", Mock())

    run_entry.start_web_server(3000)

    serve.assert_called_once()
    assert serve.call_args.kwargs["port"] == 3000


def test_run_main_exits_when_bot_crashes(monkeypatch, sample_env):
    monkeypatch.setattr(run_entry, "load_configuration_or_exit", lambda: load_config(sample_env))
    monkeypatch.setattr(run_entry, "start_web_server", Mock())
    monkeypatch.setattr(run_entry.time, "sleep", lambda seconds: None)
    monkeypatch.setattr(run_entry, "run_bot", Mock(side_effect=RuntimeError("gateway closed")))

    with pytest.raises(SystemExit) as exc_info:
        run_entry.main()

    assert exc_info.value.code == 1
