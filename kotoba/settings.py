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
"""Interface and standard implementations of the settings provider."""
from __future__ import annotations

__all__: list[str] = ["AbstractSettingsProvider", "InMemorySettingsProvider", "ScopeT", "SettingsHelper"]

import abc
import typing

import hikari

if typing.TYPE_CHECKING:
    from . import abc as kotoba

_T = typing.TypeVar("_T")
ScopeT = typing.Optional[hikari.SnowflakeishOr[hikari.PartialGuild]]
"""Type hint of a settings scope: a guild or [None][] for the global scope."""


def _scope_id(scope: ScopeT, /) -> typing.Optional[hikari.Snowflake]:
    return None if scope is None else hikari.Snowflake(scope)


class AbstractSettingsProvider(abc.ABC):
    """Abstract interface of a per-guild and global settings store.

    Implementations are responsible for serialising their own writes.
    """

    __slots__ = ()

    async def init(self, client: kotoba.Client, /) -> None:
        """Initialise this provider for a client.

        This is called when the client opens (or immediately if it's already open).
        """

    async def destroy(self) -> None:
        """Release any resources this provider holds.

        This is called when the client closes.
        """

    @abc.abstractmethod
    async def get(self, scope: ScopeT, key: str, /, default: typing.Any = None) -> typing.Any:
        """Get a setting.

        Parameters
        ----------
        scope
            The guild to get the setting for or [None][] for global settings.
        key
            Name of the setting.
        default
            Value to return if the setting isn't set.

        Returns
        -------
        typing.Any
            The setting's value or `default`.
        """

    @abc.abstractmethod
    async def set(self, scope: ScopeT, key: str, value: typing.Any, /) -> typing.Any:
        """Set a setting.

        Returns
        -------
        typing.Any
            The value which was set.
        """

    @abc.abstractmethod
    async def remove(self, scope: ScopeT, key: str, /) -> typing.Any:
        """Remove a setting.

        Returns
        -------
        typing.Any
            The value which was removed or [None][] if it wasn't set.
        """

    @abc.abstractmethod
    async def clear(self, scope: ScopeT, /) -> None:
        """Remove every setting within a scope."""


class InMemorySettingsProvider(AbstractSettingsProvider):
    """Standard settings provider which keeps everything in memory.

    Settings do not persist between restarts.
    """

    __slots__ = ("_settings",)

    def __init__(self) -> None:
        self._settings: dict[typing.Optional[hikari.Snowflake], dict[str, typing.Any]] = {}

    async def destroy(self) -> None:
        # <<inherited docstring from AbstractSettingsProvider>>.
        self._settings.clear()

    async def get(self, scope: ScopeT, key: str, /, default: typing.Any = None) -> typing.Any:
        # <<inherited docstring from AbstractSettingsProvider>>.
        if (settings := self._settings.get(_scope_id(scope))) is not None:
            return settings.get(key, default)

        return default

    async def set(self, scope: ScopeT, key: str, value: typing.Any, /) -> typing.Any:
        # <<inherited docstring from AbstractSettingsProvider>>.
        self._settings.setdefault(_scope_id(scope), {})[key] = value
        return value

    async def remove(self, scope: ScopeT, key: str, /) -> typing.Any:
        # <<inherited docstring from AbstractSettingsProvider>>.
        if (settings := self._settings.get(_scope_id(scope))) is not None:
            return settings.pop(key, None)

        return None

    async def clear(self, scope: ScopeT, /) -> None:
        # <<inherited docstring from AbstractSettingsProvider>>.
        self._settings.pop(_scope_id(scope), None)


class SettingsHelper:
    """Shortcut for using a settings provider within a single scope."""

    __slots__ = ("_provider", "_scope")

    def __init__(self, provider: AbstractSettingsProvider, scope: ScopeT = None, /) -> None:
        """Initialise a settings helper.

        Parameters
        ----------
        provider
            The provider to use.
        scope
            The guild this helper is bound to or [None][] for global settings.
        """
        self._provider = provider
        self._scope = scope

    @property
    def scope(self) -> ScopeT:
        """The scope this helper is bound to."""
        return self._scope

    async def get(self, key: str, /, default: typing.Any = None) -> typing.Any:
        """Get a setting within this helper's scope."""
        return await self._provider.get(self._scope, key, default)

    async def set(self, key: str, value: _T, /) -> _T:
        """Set a setting within this helper's scope."""
        await self._provider.set(self._scope, key, value)
        return value

    async def remove(self, key: str, /) -> typing.Any:
        """Remove a setting within this helper's scope."""
        return await self._provider.remove(self._scope, key)

    async def clear(self) -> None:
        """Remove every setting within this helper's scope."""
        await self._provider.clear(self._scope)
