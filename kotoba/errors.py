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
"""The errors raised within and by Kotoba."""
from __future__ import annotations

__all__: list[str] = [
    "CommandError",
    "ConfigurationError",
    "HaltExecution",
    "KotobaError",
    "MissingDependencyError",
]

import typing

import alluka
import hikari

if typing.TYPE_CHECKING:
    from . import abc as kotoba


class KotobaError(Exception):
    """The base class for all errors raised by Kotoba."""


class HaltExecution(KotobaError):
    """Error raised by a command callback to end execution early and silently."""


MissingDependencyError = alluka.MissingDependencyError
"""Type alias of [alluka.MissingDependencyError][]."""


class ConfigurationError(KotobaError, ValueError):
    """Error raised when a command or argument is declared with invalid configuration.

    These are raised synchronously while commands are being declared and
    registered (usually during startup) and are never raised while handling
    a message.
    """

    message: str
    """String message for this error."""

    field: typing.Optional[str]
    """Name of the configuration field which was invalid, if applicable."""

    def __init__(self, message: str, field: typing.Optional[str] = None, /) -> None:
        """Initialise a configuration error.

        Parameters
        ----------
        message
            String message for this error.
        field
            Name of the field which caused this error, should be [None][]
            if not applicable.
        """
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return self.message


class CommandError(KotobaError):
    """An error which is sent as a response to the command call."""

    content: hikari.UndefinedOr[str]
    """The response error message's content."""

    embed: hikari.UndefinedOr[hikari.Embed]
    """The response's embed, if set."""

    def __init__(
        self,
        content: hikari.UndefinedOr[typing.Any] = hikari.UNDEFINED,
        *,
        embed: hikari.UndefinedOr[hikari.Embed] = hikari.UNDEFINED,
    ) -> None:
        """Initialise a command error.

        Parameters
        ----------
        content
            If provided, the message content to respond with.
        embed
            If provided, an embed to respond with.

        Raises
        ------
        ValueError
            If neither `content` nor `embed` is provided.
        """
        if content is hikari.UNDEFINED and embed is hikari.UNDEFINED:
            raise ValueError("Either content or embed must be provided")

        super().__init__(content)
        self.content = content
        self.embed = embed

    def __str__(self) -> str:
        return str(self.content) if self.content is not hikari.UNDEFINED else ""

    async def send(self, ctx: kotoba.Context, /) -> hikari.Message:
        """Send this error as a command response.

        Parameters
        ----------
        ctx
            The command call context to respond to.

        Returns
        -------
        hikari.messages.Message
            The sent response message.
        """
        return await ctx.respond(content=self.content, embed=self.embed)
