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

from kotoba import events


def make_member(*role_ids: int) -> mock.Mock:
    return mock.Mock(
        hikari.Member,
        id=hikari.Snowflake(4321),
        guild_id=hikari.Snowflake(1234),
        role_ids=[hikari.Snowflake(role_id) for role_id in role_ids],
    )


class TestMemberRoleEvent:
    def test_properties(self):
        app = mock.Mock()
        member = make_member()

        event = events.MemberRoleAddEvent(app, member, hikari.Snowflake(777))

        assert event.app is app
        assert event.guild_id == 1234
        assert event.member is member
        assert event.role_id == 777
        assert event.user_id == 4321

    def test_get_role(self):
        app = mock.Mock(cache=mock.Mock())

        event = events.MemberRoleRemoveEvent(app, make_member(), hikari.Snowflake(777))

        assert event.get_role() is app.cache.get_role.return_value
        app.cache.get_role.assert_called_once_with(777)

    def test_get_role_when_not_cache_aware(self):
        app = mock.Mock(hikari.RESTAware)

        assert events.MemberRoleAddEvent(app, make_member(), hikari.Snowflake(777)).get_role() is None


class TestPrefixChangeEvent:
    def test_properties(self):
        app = mock.Mock()

        event = events.PrefixChangeEvent(app, hikari.Snowflake(1234), "!", "?")

        assert event.app is app
        assert event.guild_id == 1234
        assert event.old_prefix == "!"
        assert event.new_prefix == "?"
        assert repr(event) == "PrefixChangeEvent <1234, '!' -> '?'>"

    def test_for_global_prefix(self):
        event = events.PrefixChangeEvent(mock.Mock(), None, "!", "")

        assert event.guild_id is None
        assert event.new_prefix == ""


class TestDiffMemberRoles:
    def test(self):
        app = mock.Mock()
        event = mock.Mock(
            hikari.MemberUpdateEvent, app=app, old_member=make_member(1, 2, 3), member=make_member(3, 5, 4, 1)
        )

        results = events.diff_member_roles(event)

        assert [(type(result), result.role_id) for result in results] == [
            (events.MemberRoleAddEvent, 5),
            (events.MemberRoleAddEvent, 4),
            (events.MemberRoleRemoveEvent, 2),
        ]
        assert all(result.app is app for result in results)
        assert all(result.member is event.member for result in results)

    def test_when_roles_unchanged(self):
        event = mock.Mock(hikari.MemberUpdateEvent, old_member=make_member(1, 2), member=make_member(2, 1))

        assert events.diff_member_roles(event) == []

    def test_when_old_member_unknown(self):
        event = mock.Mock(hikari.MemberUpdateEvent, old_member=None, member=make_member(1, 2))

        assert events.diff_member_roles(event) == []
