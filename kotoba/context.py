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
"""Standard implementation of a message command call's context."""
from __future__ import annotations

__all__: list[str] = ["MessageContext"]

import asyncio
import logging
import typing

import hikari

from . import abc as kotoba

if typing.TYPE_CHECKING:
    from collections import abc as collections

    from typing_extensions import Self


_LOGGER = logging.getLogger("hikari.kotoba.context")


class MessageContext(kotoba.Context):
    """Standard implementation of a command context as used within Kotoba."""

    __slots__ = ("_client", "_command", "_content", "_final", "_message", "_triggering_name", "_triggering_prefix")

    def __init__(
        self,
        client: kotoba.Client,
        message: hikari.Message,
        /,
        *,
        content: str = "",
        triggering_name: str = "",
        triggering_prefix: str = "",
    ) -> None:
        """Initialise a message command context.

        Parameters
        ----------
        client
            The client this context is for.
        message
            The message that triggered the command.
        content
            The content of the message (minus any matched prefix and name).
        triggering_name
            The name of the command that triggered this context.
        triggering_prefix
            The prefix that triggered this context.
        """
        self._client = client
        self._command: typing.Optional[kotoba.Command] = None
        self._content = content
        self._final = False
        self._message = message
        self._triggering_name = triggering_name
        self._triggering_prefix = triggering_prefix

    def __repr__(self) -> str:
        return f"MessageContext <{self._message!r}, {self._command!r}>"

    @property
    def author(self) -> hikari.User:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._message.author

    @property
    def cache(self) -> typing.Optional[hikari.api.Cache]:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._client.cache

    @property
    def channel_id(self) -> hikari.Snowflake:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._message.channel_id

    @property
    def client(self) -> kotoba.Client:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._client

    @property
    def command(self) -> typing.Optional[kotoba.Command]:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._command

    @property
    def content(self) -> str:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._content

    @property
    def events(self) -> typing.Optional[hikari.api.EventManager]:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._client.events

    @property
    def guild_id(self) -> typing.Optional[hikari.Snowflake]:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._message.guild_id

    @property
    def locale(self) -> str:
        # <<inherited docstring from kotoba.abc.Context>>.
        if self._message.guild_id is not None and self._client.cache:
            guild = self._client.cache.get_guild(self._message.guild_id)
            if guild and guild.preferred_locale:
                return guild.preferred_locale

        return self._client.default_locale

    @property
    def member(self) -> typing.Optional[hikari.Member]:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._message.member

    @property
    def message(self) -> hikari.Message:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._message

    @property
    def rest(self) -> hikari.api.RESTClient:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._client.rest

    @property
    def triggering_name(self) -> str:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._triggering_name

    @property
    def triggering_prefix(self) -> str:
        # <<inherited docstring from kotoba.abc.Context>>.
        return self._triggering_prefix

    def _assert_not_final(self) -> None:
        if self._final:
            raise TypeError("Cannot modify a finalised context")

    def finalise(self) -> Self:
        """Finalise the context, dis-allowing any further modifications.

        Returns
        -------
        Self
            The context itself to enable chained calls.
        """
        self._final = True
        return self

    def set_command(self, command: typing.Optional[kotoba.Command], /) -> Self:
        """Set the command for this context.

        Parameters
        ----------
        command
            The command this context is for.

        Returns
        -------
        Self
            The context itself to enable chained calls.

        Raises
        ------
        TypeError
            If the context has been finalised.
        """
        self._assert_not_final()
        self._command = command
        return self

    def set_content(self, content: str, /) -> Self:
        """Set the content this context's arguments are collected from.

        Raises
        ------
        TypeError
            If the context has been finalised.
        """
        self._assert_not_final()
        self._content = content
        return self

    def set_triggering_name(self, name: str, /) -> Self:
        """Set the command name this context was triggered with.

        Raises
        ------
        TypeError
            If the context has been finalised.
        """
        self._assert_not_final()
        self._triggering_name = name
        return self

    async def call_with_async_di(
        self, callback: collections.Callable[..., typing.Any], *args: typing.Any
    ) -> typing.Any:
        # <<inherited docstring from kotoba.abc.Context>>.
        return await self._client.injector.call_with_async_di(callback, *args)

    async def delete_message(self, message: hikari.PartialMessage, /) -> bool:
        # <<inherited docstring from kotoba.abc.Context>>.
        try:
            await message.delete()

        except (hikari.ForbiddenError, hikari.NotFoundError) as exc:
            _LOGGER.debug("Failed to delete message %s in %s: %s", message.id, message.channel_id, exc)
            return False

        return True

    async def edit_message(self, message: hikari.PartialMessage, content: str, /) -> hikari.Message:
        # <<inherited docstring from kotoba.abc.Context>>.
        return await message.edit(content=content)

    async def respond(
        self,
        content: hikari.UndefinedOr[typing.Any] = hikari.UNDEFINED,
        *,
        embed: hikari.UndefinedOr[hikari.Embed] = hikari.UNDEFINED,
        reply: bool = False,
    ) -> hikari.Message:
        # <<inherited docstring from kotoba.abc.Context>>.
        return await self._message.respond(content=content, embed=embed, reply=reply)

    async def wait_for_reply(self, *, timeout: typing.Optional[float]) -> typing.Optional[hikari.Message]:
        # <<inherited docstring from kotoba.abc.Context>>.
        if self._client.events is None:
            raise RuntimeError("Cannot wait for replies without an event manager")

        author_id = self._message.author.id
        channel_id = self._message.channel_id
        try:
            event = await self._client.events.wait_for(
                hikari.MessageCreateEvent,
                timeout=timeout,
                predicate=lambda event: event.author_id == author_id and event.channel_id == channel_id,
            )

        except asyncio.TimeoutError:
            return None

        return event.message
