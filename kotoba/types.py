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
"""Standard argument types used to validate and parse raw argument values."""
from __future__ import annotations

__all__: list[str] = [
    "BaseArgumentType",
    "BooleanType",
    "ChannelType",
    "FloatType",
    "IntegerType",
    "MemberType",
    "RoleType",
    "StringType",
    "UnionType",
    "UserType",
    "parse_snowflake",
]

import abc
import asyncio
import logging
import math
import re
import typing

import hikari

from . import _internal
from . import abc as kotoba
from . import errors

if typing.TYPE_CHECKING:
    from collections import abc as collections

    from . import registries


_LOGGER = logging.getLogger("hikari.kotoba.types")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_SNOWFLAKE_PATTERN = re.compile(r"^<[@#&!]{0,2}(\d+)>$")
_NO_VALUES = frozenset(("false", "no", "n", "off", "disable", "disabled", "0", "-"))
_YES_VALUES = frozenset(("true", "yes", "y", "on", "enable", "enabled", "1", "+"))


def parse_snowflake(value: str, /) -> typing.Optional[hikari.Snowflake]:
    """Parse a snowflake from a raw ID or mention.

    Parameters
    ----------
    value
        The value to parse.

    Returns
    -------
    hikari.snowflakes.Snowflake | None
        The parsed snowflake or [None][] if no valid snowflake was found.
    """
    value = value.strip()
    if value.isdigit():
        result = hikari.Snowflake(value)

    elif match := _SNOWFLAKE_PATTERN.fullmatch(value):
        result = hikari.Snowflake(match.group(1))

    else:
        return None

    # Out of range snowflakes would only ever lead to a bad request.
    if hikari.Snowflake.min() <= result <= hikari.Snowflake.max():
        return result

    return None


def _check_one_of(value: str, argument: kotoba.Argument, /, *, case_sensitive: bool) -> bool:
    if argument.one_of is None:
        return True

    if case_sensitive:
        return value in argument.one_of

    value = value.lower()
    return any(option.lower() == value for option in argument.one_of)


class BaseArgumentType(kotoba.ArgumentType):
    """Base class for the standard argument types.

    This implements [kotoba.abc.ArgumentType.is_empty][] with structural
    emptiness and sets the type's ID through the constructor.
    """

    __slots__ = ("_id",)

    def __init__(self, id_: str, /) -> None:
        """Initialise an argument type.

        Parameters
        ----------
        id_
            Identifier to register the type under.
        """
        self._id = id_

    def __repr__(self) -> str:
        return f"{type(self).__name__} <{self._id}>"

    @property
    def id(self) -> str:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        return self._id

    async def is_empty(self, value: typing.Any, ctx: kotoba.Context, argument: kotoba.Argument, /) -> bool:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        return _internal.is_structurally_empty(value)


class StringType(BaseArgumentType):
    """Standard string argument type.

    `min` and `max` limit the value's length and `one_of` is case-insensitive.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("string")

    async def validate(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> kotoba.ValidationResult:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        if not _check_one_of(value, argument, case_sensitive=False):
            return f"Please enter one of the following options: {', '.join(argument.one_of or ())}"

        if argument.min is not None and len(value) < argument.min:
            return f"Please keep the {argument.label} above or exactly {argument.min} characters."

        if argument.max is not None and len(value) > argument.max:
            return f"Please keep the {argument.label} below or exactly {argument.max} characters."

        return True

    async def parse(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> str:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        return value


class _NumberType(BaseArgumentType):
    __slots__ = ()

    @abc.abstractmethod
    def _convert(self, value: str, /) -> typing.Optional[typing.Union[int, float]]:
        """Convert a raw value to a number, returning [None][] if it's invalid."""

    async def validate(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> kotoba.ValidationResult:
        result = self._convert(value)
        if result is None:
            return False

        if argument.one_of is not None and not any(self._convert(option) == result for option in argument.one_of):
            return f"Please enter one of the following options: {', '.join(argument.one_of)}"

        if argument.min is not None and result < argument.min:
            return f"Please enter a number above or exactly {argument.min}."

        if argument.max is not None and result > argument.max:
            return f"Please enter a number below or exactly {argument.max}."

        return True

    async def parse(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> typing.Union[int, float]:
        result = self._convert(value)
        if result is None:
            raise ValueError(f"Invalid {self._id} value {value!r}")

        return result


class IntegerType(_NumberType):
    """Standard integer argument type.

    `min` and `max` limit the value itself.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("integer")

    def _convert(self, value: str, /) -> typing.Optional[int]:
        value = value.strip()
        return int(value) if _INTEGER_PATTERN.fullmatch(value) else None


class FloatType(_NumberType):
    """Standard float argument type.

    `min` and `max` limit the value itself; NaN and infinity are never valid.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("float")

    def _convert(self, value: str, /) -> typing.Optional[float]:
        try:
            result = float(value)

        except ValueError:
            return None

        return result if math.isfinite(result) else None


class BooleanType(BaseArgumentType):
    """Standard boolean argument type which accepts "yes"/"no" style words."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("boolean")

    async def validate(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> kotoba.ValidationResult:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        value = value.strip().lower()
        return value in _YES_VALUES or value in _NO_VALUES

    async def parse(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> bool:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        value = value.strip().lower()
        if value in _YES_VALUES:
            return True

        if value in _NO_VALUES:
            return False

        raise ValueError(f"Invalid boolean value {value!r}")


_EntityT = typing.TypeVar("_EntityT")


class _EntityType(BaseArgumentType, typing.Generic[_EntityT]):
    """Base for types which resolve a mention or ID to a Discord entity."""

    __slots__ = ()

    _guild_only: typing.ClassVar[bool] = True

    @abc.abstractmethod
    async def _lookup(self, ctx: kotoba.Context, entity_id: hikari.Snowflake, /) -> typing.Optional[_EntityT]:
        """Look up the entity for an ID, returning [None][] if it can't be found."""

    async def _find(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> typing.Optional[_EntityT]:
        if self._guild_only and ctx.guild_id is None:
            return None

        if (entity_id := parse_snowflake(value)) is None:
            return None

        if not _check_one_of(str(entity_id), argument, case_sensitive=True):
            return None

        try:
            return await self._lookup(ctx, entity_id)

        except (hikari.NotFoundError, hikari.ForbiddenError) as exc:
            _LOGGER.debug("Failed to look up %s %s", self._id, entity_id, exc_info=exc)
            return None

    async def validate(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> kotoba.ValidationResult:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        return await self._find(value, ctx, argument) is not None

    async def parse(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> _EntityT:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        if (result := await self._find(value, ctx, argument)) is None:
            raise ValueError(f"Couldn't find {self._id} {value!r}")

        return result


class UserType(_EntityType[hikari.User]):
    """Standard user argument type which accepts mentions and IDs."""

    __slots__ = ()

    _guild_only = False

    def __init__(self) -> None:
        super().__init__("user")

    async def _lookup(self, ctx: kotoba.Context, entity_id: hikari.Snowflake, /) -> typing.Optional[hikari.User]:
        if ctx.cache and (user := ctx.cache.get_user(entity_id)):
            return user

        return await ctx.rest.fetch_user(entity_id)


class MemberType(_EntityType[hikari.Member]):
    """Standard guild member argument type which accepts mentions and IDs."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("member")

    async def _lookup(self, ctx: kotoba.Context, entity_id: hikari.Snowflake, /) -> typing.Optional[hikari.Member]:
        assert ctx.guild_id is not None
        if ctx.cache and (member := ctx.cache.get_member(ctx.guild_id, entity_id)):
            return member

        return await ctx.rest.fetch_member(ctx.guild_id, entity_id)


class RoleType(_EntityType[hikari.Role]):
    """Standard guild role argument type which accepts mentions and IDs."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("role")

    async def _lookup(self, ctx: kotoba.Context, entity_id: hikari.Snowflake, /) -> typing.Optional[hikari.Role]:
        assert ctx.guild_id is not None
        if ctx.cache and (role := ctx.cache.get_role(entity_id)):
            return role if role.guild_id == ctx.guild_id else None

        for role in await ctx.rest.fetch_roles(ctx.guild_id):
            if role.id == entity_id:
                return role

        return None


class ChannelType(_EntityType[hikari.GuildChannel]):
    """Standard argument type for the current guild's textable channels."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("channel")

    async def _lookup(
        self, ctx: kotoba.Context, entity_id: hikari.Snowflake, /
    ) -> typing.Optional[hikari.GuildChannel]:
        channel: typing.Optional[hikari.PartialChannel] = None
        if ctx.cache:
            channel = ctx.cache.get_guild_channel(entity_id)

        if channel is None:
            channel = await ctx.rest.fetch_channel(entity_id)

        if isinstance(channel, hikari.TextableGuildChannel) and channel.guild_id == ctx.guild_id:
            return channel

        return None


class UnionType(BaseArgumentType):
    """A type made up of several registered types tried in priority order.

    The ID of a union type is the IDs of its members separated by `|`
    (e.g. `"member|role"`).
    """

    __slots__ = ("_types",)

    def __init__(self, types: registries.TypeRegistry, id_: str, /) -> None:
        """Initialise a union type.

        Parameters
        ----------
        types
            The registry to look up the member types in.
        id_
            The union's ID.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If any of the member types aren't registered.
        """
        super().__init__(id_)
        self._types: list[kotoba.ArgumentType] = []
        for type_id in id_.split("|"):
            if (type_ := types.get(type_id)) is None:
                raise errors.ConfigurationError(f"Argument type {type_id!r} isn't registered", "type")

            self._types.append(type_)

    @property
    def types(self) -> collections.Sequence[kotoba.ArgumentType]:
        """Sequence of the types this union tries, in order of priority."""
        return self._types.copy()

    async def validate(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> kotoba.ValidationResult:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        results = await asyncio.gather(*(type_.validate(value, ctx, argument) for type_ in self._types))
        if any(result and not isinstance(result, str) for result in results):
            return True

        messages = [result for result in results if isinstance(result, str) and result]
        return "\n".join(messages) if messages else False

    async def parse(self, value: str, ctx: kotoba.Context, argument: kotoba.Argument, /) -> typing.Any:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        for type_ in self._types:
            result = await type_.validate(value, ctx, argument)
            if result and not isinstance(result, str):
                return await type_.parse(value, ctx, argument)

        raise ValueError(f"Couldn't parse {value!r} with any of the types in {self._id}")

    async def is_empty(self, value: typing.Any, ctx: kotoba.Context, argument: kotoba.Argument, /) -> bool:
        # <<inherited docstring from kotoba.abc.ArgumentType>>.
        for type_ in self._types:
            if not await type_.is_empty(value, ctx, argument):
                return False

        return True
