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
"""Interactive argument collection for Hikari message commands.

Examples
--------
A Kotoba client can be quickly initialised from a Hikari gateway bot through
[kotoba.Client.from_gateway_bot][kotoba.clients.Client.from_gateway_bot]:

```py
bot = hikari.GatewayBot("BOT_TOKEN")

# Unless event_managed=False is passed here this client will be opened and
# closed based on the gateway's startup and stopping events.
client = kotoba.Client.from_gateway_bot(bot, prefix="!", owner_ids=[OWNER_ID])

# Arguments which weren't provided (or were invalid) are asked for
# interactively until the user answers with a valid value or cancels.
@client.with_command
@kotoba.with_argument("member", "Which member would you like to greet?", type="member")
@kotoba.with_argument("greeting", "What should they be greeted with?", type="string", max=100, default="Hello")
@kotoba.as_command("greet", description="Greets a member.", guild_only=True)
async def greet(ctx: kotoba.abc.Context, member: hikari.Member, greeting: str) -> None:
    await ctx.respond(f"{greeting}, {member.mention}!")

bot.run()
```
"""
from __future__ import annotations as _

__all__: list[str] = [
    "Argument",
    "ArgumentResult",
    "CancelReason",
    "Client",
    "CommandError",
    "Command",
    "ComputedDefault",
    "ConfigurationError",
    "HaltExecution",
    "InMemorySettingsProvider",
    "KotobaError",
    "LiteralDefault",
    "MessageContext",
    "MissingDependencyError",
    "TypeRegistry",
    "abc",
    "as_command",
    "context",
    "events",
    "localisation",
    "settings",
    "types",
    "with_argument",
]

from . import abc
from . import context
from . import events
from . import localisation
from . import settings
from . import types
from .arguments import Argument
from .arguments import ArgumentResult
from .arguments import CancelReason
from .arguments import ComputedDefault
from .arguments import LiteralDefault
from .clients import Client
from .commands import Command
from .commands import as_command
from .commands import with_argument
from .context import MessageContext
from .errors import CommandError
from .errors import ConfigurationError
from .errors import HaltExecution
from .errors import KotobaError
from .errors import MissingDependencyError
from .registries import TypeRegistry
from .settings import InMemorySettingsProvider
