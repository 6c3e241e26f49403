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
"""Kotoba's built-in commands."""
from __future__ import annotations

__all__: list[str] = ["load", "make_prefix_command"]

import functools
import logging
import operator
import typing

import hikari

from . import abc as kotoba
from . import commands
from . import errors
from . import localisation

if typing.TYPE_CHECKING:
    from . import clients


_LOGGER = logging.getLogger("hikari.kotoba.builtins")


async def _is_guild_admin(ctx: kotoba.Context, /) -> bool:
    if not ctx.member or ctx.guild_id is None:
        return False

    guild: typing.Optional[hikari.Guild] = ctx.cache.get_guild(ctx.guild_id) if ctx.cache else None
    if not guild:
        guild = await ctx.rest.fetch_guild(ctx.guild_id)

    if guild.owner_id == ctx.member.id:
        return True

    # The @everyone role shares its ID with the guild.
    roles = (guild.get_role(role_id) for role_id in (guild.id, *ctx.member.role_ids))
    permissions = functools.reduce(
        operator.or_, (role.permissions for role in roles if role), hikari.Permissions.NONE
    )
    return bool(permissions & hikari.Permissions.ADMINISTRATOR)


async def prefix_command(ctx: kotoba.Context, prefix: str) -> None:
    """Show or set the command prefix.

    With no value this shows the current prefix. Otherwise `default` resets
    the prefix, `none` removes it and anything else sets it; this is scoped to
    the guild when used in a guild and global (owners only) in DMs.
    """
    base_id = "commands.bot.prefix"
    if not prefix:
        current = await ctx.client.get_prefix(ctx.guild_id)
        if current:
            await ctx.respond(localisation.localise(ctx, f"{base_id}.currentprefix", prefix=current), reply=True)

        else:
            await ctx.respond(localisation.localise(ctx, f"{base_id}.noprefix"), reply=True)

        return

    if ctx.guild_id is not None:
        if not ctx.client.is_owner(ctx.author) and not await _is_guild_admin(ctx):
            raise errors.CommandError(localisation.localise(ctx, f"{base_id}.onlyadmin"))

        if not ctx.client.settings:
            raise errors.CommandError(localisation.localise(ctx, f"{base_id}.nosettings"))

    elif not ctx.client.is_owner(ctx.author):
        raise errors.CommandError(localisation.localise(ctx, f"{base_id}.isowner"))

    lowercase = prefix.lower()
    if lowercase == "default":
        if ctx.guild_id is not None:
            await ctx.client.set_guild_prefix(ctx.guild_id, None)

        else:
            ctx.client.set_prefix(None)
            if ctx.client.settings:
                await ctx.client.settings.remove(None, "prefix")

        if ctx.client.prefix:
            current = f"`{ctx.client.prefix}`"

        else:
            current = localisation.localise(ctx, f"{base_id}.noprefixset")

        response = localisation.localise(ctx, f"{base_id}.reset", current=current)

    else:
        new_prefix = "" if lowercase == "none" else prefix
        if ctx.guild_id is not None:
            await ctx.client.set_guild_prefix(ctx.guild_id, new_prefix)

        else:
            ctx.client.set_prefix(new_prefix)
            if ctx.client.settings:
                await ctx.client.settings.set(None, "prefix", new_prefix)

        if new_prefix:
            response = localisation.localise(ctx, f"{base_id}.prefixset", prefix=new_prefix)

        else:
            response = localisation.localise(ctx, f"{base_id}.prefixremoved")

    _LOGGER.info("Prefix for %s changed by %s", ctx.guild_id or "global scope", ctx.author.id)
    await ctx.respond(response, reply=True)


def make_prefix_command() -> commands.Command:
    """Build the built-in `prefix` command.

    Returns
    -------
    kotoba.commands.Command
        The built command.
    """
    return commands.Command(
        prefix_command,
        "prefix",
        description="Shows or sets the command prefix.",
        group="bot",
        format='[prefix/"default"/"none"]',
        examples=("prefix", "prefix -", "prefix omg!", "prefix default", "prefix none"),
    ).add_argument("prefix", "What would you like to set the bot's prefix to?", type="string", max=15, default="")


def load(client: clients.Client, /) -> None:
    """Register Kotoba's built-in commands with a client.

    Parameters
    ----------
    client
        The client to register the commands with.
    """
    client.add_command(make_prefix_command())
