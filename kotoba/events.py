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
"""Events dispatched by Kotoba on top of Hikari's own events."""
from __future__ import annotations

__all__: list[str] = [
    "MemberRoleAddEvent",
    "MemberRoleEvent",
    "MemberRoleRemoveEvent",
    "PrefixChangeEvent",
    "diff_member_roles",
]

import typing

import hikari

if typing.TYPE_CHECKING:
    from collections import abc as collections


class MemberRoleEvent(hikari.Event):
    """Base class of the events dispatched when a member's roles change."""

    __slots__ = ("_app", "_member", "_role_id")

    def __init__(self, app: hikari.RESTAware, member: hikari.Member, role_id: hikari.Snowflake, /) -> None:
        """Initialise a member role event.

        Parameters
        ----------
        app
            The client application that received the member update.
        member
            The member's state after the update.
        role_id
            ID of the role which changed.
        """
        self._app = app
        self._member = member
        self._role_id = role_id

    def __repr__(self) -> str:
        return f"{type(self).__name__} <{self._member.id}, {self._role_id}>"

    @property
    def app(self) -> hikari.RESTAware:
        # <<inherited docstring from hikari.events.base_events.Event>>.
        return self._app

    @property
    def guild_id(self) -> hikari.Snowflake:
        """ID of the guild the member is in."""
        return self._member.guild_id

    @property
    def member(self) -> hikari.Member:
        """The member's state after the update."""
        return self._member

    @property
    def role_id(self) -> hikari.Snowflake:
        """ID of the role which was added or removed."""
        return self._role_id

    @property
    def user_id(self) -> hikari.Snowflake:
        """ID of the member's user."""
        return self._member.id

    def get_role(self) -> typing.Optional[hikari.Role]:
        """Get the role from the cache.

        Returns
        -------
        hikari.guilds.Role | None
            The role if the app has a cache and it's cached, else [None][].
        """
        if isinstance(self._app, hikari.CacheAware):
            return self._app.cache.get_role(self._role_id)

        return None


class MemberRoleAddEvent(MemberRoleEvent):
    """Event dispatched when a role is added to a guild member."""

    __slots__ = ()


class MemberRoleRemoveEvent(MemberRoleEvent):
    """Event dispatched when a role is removed from a guild member."""

    __slots__ = ()


class PrefixChangeEvent(hikari.Event):
    """Event dispatched when a command prefix is changed through a Kotoba client."""

    __slots__ = ("_app", "_guild_id", "_new_prefix", "_old_prefix")

    def __init__(
        self,
        app: hikari.RESTAware,
        guild_id: typing.Optional[hikari.Snowflake],
        old_prefix: typing.Optional[str],
        new_prefix: typing.Optional[str],
        /,
    ) -> None:
        """Initialise a prefix change event.

        Parameters
        ----------
        app
            The client application the prefix was changed for.
        guild_id
            ID of the guild whose prefix changed.

            [None][] means the global prefix changed.
        old_prefix
            The previous prefix.
        new_prefix
            The new prefix.

            For a guild this is [None][] when its prefix was removed.
        """
        self._app = app
        self._guild_id = guild_id
        self._new_prefix = new_prefix
        self._old_prefix = old_prefix

    def __repr__(self) -> str:
        return f"PrefixChangeEvent <{self._guild_id}, {self._old_prefix!r} -> {self._new_prefix!r}>"

    @property
    def app(self) -> hikari.RESTAware:
        # <<inherited docstring from hikari.events.base_events.Event>>.
        return self._app

    @property
    def guild_id(self) -> typing.Optional[hikari.Snowflake]:
        """ID of the guild whose prefix changed, or [None][] for the global prefix."""
        return self._guild_id

    @property
    def new_prefix(self) -> typing.Optional[str]:
        """The new prefix."""
        return self._new_prefix

    @property
    def old_prefix(self) -> typing.Optional[str]:
        """The previous prefix."""
        return self._old_prefix


def diff_member_roles(event: hikari.MemberUpdateEvent, /) -> collections.Sequence[MemberRoleEvent]:
    """Build the role events a member update implies.

    Parameters
    ----------
    event
        The member update to diff.

    Returns
    -------
    collections.abc.Sequence[MemberRoleEvent]
        One [MemberRoleAddEvent][kotoba.events.MemberRoleAddEvent] per added
        role followed by one [MemberRoleRemoveEvent][kotoba.events.MemberRoleRemoveEvent]
        per removed role.

        This is always empty when the member's old state isn't known.
    """
    if event.old_member is None:
        return []

    old_ids = set(event.old_member.role_ids)
    new_ids = set(event.member.role_ids)
    results: list[MemberRoleEvent] = [
        MemberRoleAddEvent(event.app, event.member, role_id)
        for role_id in event.member.role_ids
        if role_id not in old_ids
    ]
    results.extend(
        MemberRoleRemoveEvent(event.app, event.member, role_id)
        for role_id in event.old_member.role_ids
        if role_id not in new_ids
    )
    return results
