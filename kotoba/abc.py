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
"""Interfaces of the objects and clients used within Kotoba."""
from __future__ import annotations

__all__: list[str] = [
    "Argument",
    "ArgumentCallbackSig",
    "ArgumentType",
    "Client",
    "Command",
    "CommandCallbackSig",
    "Context",
    "ValidationResult",
]

import abc
import typing
from collections import abc as collections

import hikari

if typing.TYPE_CHECKING:
    import alluka
    from typing_extensions import Self

    from . import arguments
    from . import commands
    from . import localisation
    from . import registries
    from . import settings

_T = typing.TypeVar("_T")
_CoroT = collections.Coroutine[typing.Any, typing.Any, _T]


ValidationResult = typing.Union[bool, str]
"""Type hint of the result of validating a raw argument value.

[True][] means the value is valid, while [False][] or a string (which
explains why) mean that it isn't.
"""

ArgumentCallbackSig = typing.Union[collections.Callable[..., _CoroT[_T]], collections.Callable[..., _T]]
"""Type hint of a caller-supplied argument validator, parser or emptiness checker.

This may be synchronous or asynchronous, is called with three positional
arguments (the raw string value, the [kotoba.abc.Context][] and the
[kotoba.abc.Argument][]) and may use dependency injection.
"""

CommandCallbackSig = collections.Callable[..., _CoroT[None]]
"""Type hint of a command callback.

This must be asynchronous, is called with the [kotoba.abc.Context][] as its
first positional argument, receives the collected argument values as keyword
arguments and may use dependency injection.
"""


class ArgumentType(abc.ABC):
    """Interface of an argument type's validate/parse/is-empty capability."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def id(self) -> str:
        """Identifier this type is registered under."""

    @abc.abstractmethod
    async def validate(self, value: str, ctx: Context, argument: Argument, /) -> ValidationResult:
        """Check whether a raw value is valid for this type.

        Parameters
        ----------
        value
            The raw string value to check.
        ctx
            Context of the command call this value was provided for.
        argument
            The argument this value was provided for.

        Returns
        -------
        bool | str
            [True][] if the value is valid, otherwise [False][] or a string
            which explains why it isn't.
        """

    @abc.abstractmethod
    async def parse(self, value: str, ctx: Context, argument: Argument, /) -> typing.Any:
        """Parse a validated raw value into this type's value.

        Parameters
        ----------
        value
            The raw string value to parse.

            This will always have been validated already.
        ctx
            Context of the command call this value was provided for.
        argument
            The argument this value was provided for.

        Returns
        -------
        typing.Any
            The parsed value.
        """

    @abc.abstractmethod
    async def is_empty(self, value: typing.Any, ctx: Context, argument: Argument, /) -> bool:
        """Check whether a raw value should be considered empty for this type."""


class Argument(abc.ABC):
    """Interface of a command argument and its interactive collection protocol."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def key(self) -> str:
        """Identifier of this argument, unique within a command's arguments."""

    @property
    @abc.abstractmethod
    def label(self) -> str:
        """Name this argument is displayed as."""

    @property
    @abc.abstractmethod
    def prompt(self) -> str:
        """Question text shown when asking the user for a value."""

    @property
    @abc.abstractmethod
    def error(self) -> typing.Optional[str]:
        """Message which replaces any validation error message, if set."""

    @property
    @abc.abstractmethod
    def type(self) -> typing.Optional[ArgumentType]:
        """The type this argument uses, if set."""

    @property
    @abc.abstractmethod
    def min(self) -> typing.Optional[float]:
        """Minimum value or length (depending on the type), if set."""

    @property
    @abc.abstractmethod
    def max(self) -> typing.Optional[float]:
        """Maximum value or length (depending on the type), if set."""

    @property
    @abc.abstractmethod
    def default(self) -> typing.Optional[arguments.Default]:
        """The default for this argument.

        If this is [None][] then this argument is required.
        """

    @property
    @abc.abstractmethod
    def one_of(self) -> typing.Optional[collections.Sequence[str]]:
        """Sequence of the raw values this argument is limited to, if set."""

    @property
    @abc.abstractmethod
    def wait(self) -> float:
        """How many seconds to wait for each answer.

        `0` and `math.inf` mean wait forever.
        """

    @abc.abstractmethod
    async def validate(self, value: str, ctx: Context, /) -> ValidationResult:
        """Check whether a raw value is valid for this argument."""

    @abc.abstractmethod
    async def parse(self, value: str, ctx: Context, /) -> typing.Any:
        """Parse a validated raw value."""

    @abc.abstractmethod
    async def is_empty(self, value: typing.Optional[str], ctx: Context, /) -> bool:
        """Check whether a raw value is considered empty for this argument."""

    @abc.abstractmethod
    async def obtain(
        self,
        ctx: Context,
        value: typing.Optional[str] = None,
        /,
        *,
        prompt_limit: typing.Optional[float] = None,
    ) -> arguments.ArgumentResult:
        """Obtain this argument's value, prompting the user if necessary."""


class Command(abc.ABC):
    """Interface of a message command."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def aliases(self) -> collections.Sequence[str]:
        """Alternative names this command can be triggered by."""

    @property
    @abc.abstractmethod
    def arguments(self) -> collections.Sequence[Argument]:
        """Sequence of this command's arguments in the order they're obtained.

        This will be empty until the command has been bound to a type registry.
        """

    @property
    @abc.abstractmethod
    def callback(self) -> CommandCallbackSig:
        """The callback which is called when this command is executed."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Short description of what this command does."""

    @property
    @abc.abstractmethod
    def group(self) -> str:
        """Identifier of the group this command belongs to."""

    @property
    @abc.abstractmethod
    def is_guild_only(self) -> bool:
        """Whether this command may only be used within guilds."""

    @property
    @abc.abstractmethod
    def is_owner_only(self) -> bool:
        """Whether this command may only be used by the bot's owners."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The command's name."""

    @property
    @abc.abstractmethod
    def prompt_limit(self) -> typing.Optional[float]:
        """Maximum amount of times to prompt for each argument.

        [None][] means unlimited.
        """

    @abc.abstractmethod
    def bind_registry(self, types: registries.TypeRegistry, /) -> None:
        """Construct this command's arguments against a type registry."""

    @abc.abstractmethod
    async def collect_arguments(self, ctx: Context, content: str, /) -> commands.CollectedArguments:
        """Obtain all of this command's argument values for a call."""


class Context(abc.ABC):
    """Interface for the context of a message command call."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def author(self) -> hikari.User:
        """Object of the user who triggered this command."""

    @property
    @abc.abstractmethod
    def cache(self) -> typing.Optional[hikari.api.Cache]:
        """Hikari cache instance this context's client was initialised with."""

    @property
    @abc.abstractmethod
    def channel_id(self) -> hikari.Snowflake:
        """ID of the channel this command was triggered in."""

    @property
    @abc.abstractmethod
    def client(self) -> Client:
        """The client this context was spawned by."""

    @property
    @abc.abstractmethod
    def command(self) -> typing.Optional[Command]:
        """Object of the command this context is bound to.

        !!! note
            This will only be [None][] before this has been bound to a
            specific command but never during command execution.
        """

    @property
    @abc.abstractmethod
    def content(self) -> str:
        """String content of the message minus the prefix and command name."""

    @property
    @abc.abstractmethod
    def events(self) -> typing.Optional[hikari.api.EventManager]:
        """Object of the event manager this context's client was initialised with."""

    @property
    @abc.abstractmethod
    def guild_id(self) -> typing.Optional[hikari.Snowflake]:
        """ID of the guild this command was executed in.

        Will be [None][] for all DM command executions.
        """

    @property
    @abc.abstractmethod
    def locale(self) -> str:
        """The locale tag strings should be localised to for this context."""

    @property
    @abc.abstractmethod
    def member(self) -> typing.Optional[hikari.Member]:
        """Guild member object of this command's author.

        Will be [None][] for DM command executions.
        """

    @property
    @abc.abstractmethod
    def message(self) -> hikari.PartialMessage:
        """The message that triggered this command."""

    @property
    @abc.abstractmethod
    def rest(self) -> hikari.api.RESTClient:
        """Object of the Hikari REST client this context's client was initialised with."""

    @property
    @abc.abstractmethod
    def triggering_name(self) -> str:
        """Command name this execution was triggered with."""

    @property
    @abc.abstractmethod
    def triggering_prefix(self) -> str:
        """Prefix that triggered this context."""

    @abc.abstractmethod
    async def call_with_async_di(
        self, callback: collections.Callable[..., typing.Any], *args: typing.Any
    ) -> typing.Any:
        """Call a synchronous or asynchronous callback with dependency injection."""

    @abc.abstractmethod
    async def delete_message(self, message: hikari.PartialMessage, /) -> bool:
        """Try to delete a message, ignoring missing permissions.

        Returns
        -------
        bool
            Whether the message was deleted.
        """

    @abc.abstractmethod
    async def edit_message(self, message: hikari.PartialMessage, content: str, /) -> hikari.Message:
        """Edit one of the bot's messages in place."""

    @abc.abstractmethod
    async def respond(
        self,
        content: hikari.UndefinedOr[typing.Any] = hikari.UNDEFINED,
        *,
        embed: hikari.UndefinedOr[hikari.Embed] = hikari.UNDEFINED,
        reply: bool = False,
    ) -> hikari.Message:
        """Respond to this context in its channel."""

    @abc.abstractmethod
    async def wait_for_reply(self, *, timeout: typing.Optional[float]) -> typing.Optional[hikari.Message]:
        """Wait for the next message from this context's author in its channel.

        Parameters
        ----------
        timeout
            How many seconds to wait for.

            [None][] means wait forever.

        Returns
        -------
        hikari.messages.Message | None
            The reply, or [None][] if the timeout was reached first.
        """


class Client(abc.ABC):
    """Abstract interface of a Kotoba client."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def cache(self) -> typing.Optional[hikari.api.Cache]:
        """Hikari cache instance this client was initialised with."""

    @property
    @abc.abstractmethod
    def commands(self) -> registries.CommandRegistry:
        """Registry of the commands this client executes."""

    @property
    @abc.abstractmethod
    def dev_ids(self) -> collections.Collection[hikari.Snowflake]:
        """IDs of the users who develop this bot.

        The bot's owners are always treated as developers.
        """

    @property
    @abc.abstractmethod
    def default_locale(self) -> str:
        """Locale used when a guild's preferred locale isn't known."""

    @property
    @abc.abstractmethod
    def events(self) -> typing.Optional[hikari.api.EventManager]:
        """Object of the event manager this client was initialised with."""

    @property
    @abc.abstractmethod
    def injector(self) -> alluka.Client:
        """The dependency injection client used by this client."""

    @property
    @abc.abstractmethod
    def localiser(self) -> typing.Optional[localisation.AbstractLocaliser]:
        """The localiser prompts and replies are looked up with, if set."""

    @property
    @abc.abstractmethod
    def owner_ids(self) -> collections.Collection[hikari.Snowflake]:
        """IDs of the users who own this bot."""

    @property
    @abc.abstractmethod
    def owners(self) -> collections.Sequence[hikari.User]:
        """The bot's owners.

        This is only populated once the client has been opened and will be
        missing any owner which couldn't be fetched.
        """

    @property
    @abc.abstractmethod
    def prefix(self) -> str:
        """The global command prefix.

        An empty string means that only mentions work as a prefix.
        """

    @property
    @abc.abstractmethod
    def rest(self) -> hikari.api.RESTClient:
        """Object of the Hikari REST client this client was initialised with."""

    @property
    @abc.abstractmethod
    def settings(self) -> typing.Optional[settings.AbstractSettingsProvider]:
        """The settings provider this client is using, if set."""

    @property
    @abc.abstractmethod
    def types(self) -> registries.TypeRegistry:
        """Registry of the argument types available to this client's commands."""

    @abc.abstractmethod
    async def find_invocation(self, ctx: Context, content: str, /) -> typing.Optional[Command]:
        """Check whether some message content invokes a registered command.

        Parameters
        ----------
        ctx
            Context of the conversation the content was sent in.
        content
            The message content to check.

        Returns
        -------
        kotoba.abc.Command | None
            The command the content invokes, if any.
        """

    @abc.abstractmethod
    async def get_prefix(self, guild: typing.Optional[hikari.SnowflakeishOr[hikari.PartialGuild]], /) -> str:
        """Get the active command prefix for a guild (or DMs if [None][])."""

    @abc.abstractmethod
    def is_dev(self, user: hikari.SnowflakeishOr[hikari.PartialUser], /) -> bool:
        """Check whether a user is one of the bot's developers or owners."""

    @abc.abstractmethod
    def is_owner(self, user: hikari.SnowflakeishOr[hikari.PartialUser], /) -> bool:
        """Check whether a user is one of the bot's owners."""

    @abc.abstractmethod
    def set_prefix(self, prefix: typing.Optional[str], /) -> Self:
        """Set the global command prefix.

        Parameters
        ----------
        prefix
            The prefix to use.

            [None][] resets this to the prefix the client was initialised
            with and an empty string means that only mentions work as a prefix.

        Returns
        -------
        Self
            The client to enable chained calls.
        """

    @abc.abstractmethod
    async def set_guild_prefix(
        self, guild: hikari.SnowflakeishOr[hikari.PartialGuild], prefix: typing.Optional[str], /
    ) -> None:
        """Set a guild's command prefix.

        Parameters
        ----------
        guild
            The guild to set the prefix for.
        prefix
            The prefix to use.

            [None][] removes the guild's prefix so the global prefix is used.

        Raises
        ------
        RuntimeError
            If the client has no settings provider to store the prefix in.
        """
