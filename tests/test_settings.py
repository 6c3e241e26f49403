# -*- coding: utf-8 -*-
# cython: language_level=3
# BSD 3-Clause License
#
# Copyright (c) 2020-2022, Faster Speeding
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice, this
#   list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of the copyright holder nor the names of its
#   contributors may be used to endorse or promote products derived from
#   this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

# pyright: reportUnknownMemberType=none
# pyright: reportPrivateUsage=none
# This leads to too many false-positives around mocks.

from unittest import mock

import hikari
import pytest

from kotoba import settings


class TestInMemorySettingsProvider:
    @pytest.mark.asyncio()
    async def test_get_when_unset(self):
        provider = settings.InMemorySettingsProvider()

        assert await provider.get(None, "prefix") is None
        assert await provider.get(123, "prefix", "!") == "!"

    @pytest.mark.asyncio()
    async def test_set_and_get(self):
        provider = settings.InMemorySettingsProvider()

        assert await provider.set(123, "prefix", "?") == "?"
        assert await provider.get(hikari.Snowflake(123), "prefix") == "?"
        assert await provider.get(None, "prefix") is None
        assert await provider.get(321, "prefix") is None

    @pytest.mark.asyncio()
    async def test_scope_accepts_guild_object(self):
        provider = settings.InMemorySettingsProvider()
        guild = mock.Mock(hikari.PartialGuild)
        guild.__int__ = mock.Mock(return_value=5432)

        await provider.set(guild, "logChannel", 123)

        assert await provider.get(5432, "logChannel") == 123

    @pytest.mark.asyncio()
    async def test_remove(self):
        provider = settings.InMemorySettingsProvider()
        await provider.set(None, "prefix", "?")

        assert await provider.remove(None, "prefix") == "?"
        assert await provider.remove(None, "prefix") is None
        assert await provider.remove(999, "prefix") is None
        assert await provider.get(None, "prefix") is None

    @pytest.mark.asyncio()
    async def test_clear(self):
        provider = settings.InMemorySettingsProvider()
        await provider.set(123, "prefix", "?")
        await provider.set(123, "logChannel", 4)
        await provider.set(None, "prefix", "$")

        await provider.clear(123)

        assert await provider.get(123, "prefix") is None
        assert await provider.get(123, "logChannel") is None
        assert await provider.get(None, "prefix") == "$"

    @pytest.mark.asyncio()
    async def test_destroy(self):
        provider = settings.InMemorySettingsProvider()
        await provider.set(123, "prefix", "?")

        await provider.destroy()

        assert await provider.get(123, "prefix") is None


class TestSettingsHelper:
    def test_scope_property(self):
        assert settings.SettingsHelper(mock.Mock(), 123).scope == 123
        assert settings.SettingsHelper(mock.Mock()).scope is None

    @pytest.mark.asyncio()
    async def test_get(self):
        provider = mock.AsyncMock(settings.AbstractSettingsProvider)
        helper = settings.SettingsHelper(provider, 123)

        result = await helper.get("prefix", "!")

        assert result is provider.get.return_value
        provider.get.assert_awaited_once_with(123, "prefix", "!")

    @pytest.mark.asyncio()
    async def test_set(self):
        provider = mock.AsyncMock(settings.AbstractSettingsProvider)
        helper = settings.SettingsHelper(provider, 123)

        assert await helper.set("prefix", "?") == "?"

        provider.set.assert_awaited_once_with(123, "prefix", "?")

    @pytest.mark.asyncio()
    async def test_remove(self):
        provider = mock.AsyncMock(settings.AbstractSettingsProvider)
        helper = settings.SettingsHelper(provider)

        result = await helper.remove("prefix")

        assert result is provider.remove.return_value
        provider.remove.assert_awaited_once_with(None, "prefix")

    @pytest.mark.asyncio()
    async def test_clear(self):
        provider = mock.AsyncMock(settings.AbstractSettingsProvider)
        helper = settings.SettingsHelper(provider, 42)

        await helper.clear()

        provider.clear.assert_awaited_once_with(42)
