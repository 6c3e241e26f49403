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
"""Standard Kotoba client implementation."""
from __future__ import annotations

__all__: list[str] = ["Client", "DEFAULT_PREFIX"]

import datetime
import logging
import typing
from collections import abc as collections

import alluka
import hikari

from . import abc as kotoba
from . import builtins
from . import context
from . import errors
from . import events as events_
from . import localisation
from . import registries
from . import settings as settings_

if typing.TYPE_CHECKING:
    import types

    from typing_extensions import Self

    _T = typing.TypeVar("_T")


_LOGGER: typing.Final[logging.Logger] = logging.getLogger("hikari.kotoba.clients")

DEFAULT_PREFIX: typing.Final[str] = "!"
"""The global command prefix used when none is set."""


class _Invocation(typing.NamedTuple):
    prefix: str
    name: str
    command: kotoba.Command
    content: str


def _try_unsubscribe(
    event_manager: hikari.api.EventManager,
    event_type: type[hikari.Event],
    callback: collections.Callable[..., collections.Coroutine[typing.Any, typing.Any, None]],
) -> None:
    try:
        event_manager.unsubscribe(event_type, callback)

    except (ValueError, LookupError):
        _LOGGER.debug("Listener %r for %s wasn't subscribed", callback, event_type.__name__)


class Client(kotoba.Client):
    """Standard implementation of a Kotoba client.

    This handles prefix matching, argument collection and command dispatch
    for message commands received through Hikari's event manager.
    """

    __slots__ = (
        "_app",
        "_cache",
        "_command_editable_duration",
        "_commands",
        "_default_locale",
        "_default_prefix",
        "_dev_ids",
        "_events",
        "_injector",
        "_invocations",
        "_is_alive",
        "_localiser",
        "_me_id",
        "_non_command_editable",
        "_owner_ids",
        "_owners",
        "_prefix",
        "_rest",
        "_settings",
        "_types",
    )

    def __init__(
        self,
        rest: hikari.api.RESTClient,
        *,
        app: typing.Optional[hikari.RESTAware] = None,
        cache: typing.Optional[hikari.api.Cache] = None,
        events: typing.Optional[hikari.api.EventManager] = None,
        event_managed: bool = False,
        injector: typing.Optional[alluka.Client] = None,
        prefix: typing.Optional[str] = DEFAULT_PREFIX,
        owner_ids: collections.Iterable[hikari.SnowflakeishOr[hikari.PartialUser]] = (),
        dev_ids: collections.Iterable[hikari.SnowflakeishOr[hikari.PartialUser]] = (),
        command_editable_duration: float = 30,
        non_command_editable: bool = True,
        default_locale: str = hikari.Locale.EN_US,
        localiser: typing.Optional[localisation.AbstractLocaliser] = None,
        settings: typing.Optional[settings_.AbstractSettingsProvider] = None,
        types: typing.Optional[registries.TypeRegistry] = None,
        load_builtins: bool = True,
    ) -> None:
        """Initialise a Kotoba client.

        !!! note
            For a quicker way to initiate this client around a standard bot aware
            client, see [kotoba.Client.from_gateway_bot][kotoba.clients.Client.from_gateway_bot].

        Parameters
        ----------
        rest
            The Hikari REST client this will use.
        app
            The client application this is running on.

            This is used as the app of the events this client dispatches and
            [kotoba.events.PrefixChangeEvent][] is only dispatched when it's set.
        cache
            The Hikari cache client this will use if applicable.
        events
            The Hikari event manager client this will use if applicable.

            This is necessary for command dispatch and argument prompts.
        event_managed
            Whether this client is managed by the event manager.

            An event managed client will be automatically started and closed based
            on Hikari's lifetime events.

            This can only be passed as [True][] if `events` is also provided.
        injector
            The alluka client this should use for dependency injection.

            If not provided then the client will initialise its own DI client.
        prefix
            The global command prefix.

            [None][] means the default prefix (`"!"`) and an empty string means
            that only mentions work as a prefix.

            This is also the prefix [Client.set_prefix][kotoba.clients.Client.set_prefix]
            resets to.
        owner_ids
            IDs of the users who own this bot.
        dev_ids
            IDs of the users who develop this bot.

            Owners are always treated as developers.
        command_editable_duration
            How many seconds after being sent a message can be edited to
            re-run a command.

            `0` disables command editing.
        non_command_editable
            Whether messages which didn't invoke a command can be edited into one.
        default_locale
            Locale used when a guild's preferred locale isn't known.
        localiser
            The localiser to look up prompts and replies with.
        settings
            The settings provider to use.
        types
            The argument type registry to use.

            If not provided then a registry with the standard types is created.
        load_builtins
            Whether to register Kotoba's built-in commands (e.g. `prefix`).

        Raises
        ------
        ValueError
            If `event_managed` is [True][] when `events` is [None][].
        """
        if _LOGGER.isEnabledFor(logging.INFO):
            _LOGGER.info(
                "%s initialised with the following components: %s",
                "Event-managed client" if event_managed else "Client",
                ", ".join(
                    name for name, value in [("cache", cache), ("event manager", events), ("rest", rest)] if value
                ),
            )

        if not events:
            _LOGGER.warning(
                "Client initiated without an event manager, command dispatch and prompts will be unavailable."
            )

        self._app = app
        self._cache = cache
        self._command_editable_duration = command_editable_duration
        self._types = types or registries.TypeRegistry().register_defaults()
        self._commands = registries.CommandRegistry(self._types)
        self._default_locale = default_locale
        self._default_prefix = DEFAULT_PREFIX if prefix is None else prefix
        self._dev_ids = frozenset(hikari.Snowflake(user) for user in dev_ids)
        self._events = events
        self._injector = injector or alluka.Client()
        self._invocations: dict[hikari.Snowflake, datetime.datetime] = {}
        self._is_alive = False
        self._localiser = localiser
        self._me_id: typing.Optional[hikari.Snowflake] = None
        self._non_command_editable = non_command_editable
        self._owner_ids = frozenset(hikari.Snowflake(user) for user in owner_ids)
        self._owners: list[hikari.User] = []
        self._prefix = self._default_prefix
        self._rest = rest
        self._settings = settings

        if event_managed:
            if not events:
                raise ValueError("Client cannot be event managed without an event manager")

            events.subscribe(hikari.StartingEvent, self._on_starting)
            events.subscribe(hikari.StoppingEvent, self._on_stopping)

        (
            self._set_type_dependency(kotoba.Client, self)
            ._set_type_dependency(Client, self)
            ._set_type_dependency(type(self), self)
            ._set_type_dependency(hikari.api.RESTClient, rest)
            ._set_type_dependency(registries.TypeRegistry, self._types)
            ._set_type_dependency(registries.CommandRegistry, self._commands)
            ._set_type_dependency(hikari.api.Cache, cache)
            ._set_type_dependency(hikari.api.EventManager, events)
            ._set_type_dependency(settings_.AbstractSettingsProvider, settings)
        )

        if load_builtins:
            builtins.load(self)

    def _set_type_dependency(self, type_: type[_T], value: typing.Optional[_T], /) -> Self:
        if value is not None:
            self._injector.set_type_dependency(type_, value)

        return self

    @classmethod
    def from_gateway_bot(
        cls,
        bot: hikari.GatewayBotAware,
        /,
        *,
        event_managed: bool = True,
        injector: typing.Optional[alluka.Client] = None,
        prefix: typing.Optional[str] = DEFAULT_PREFIX,
        owner_ids: collections.Iterable[hikari.SnowflakeishOr[hikari.PartialUser]] = (),
        dev_ids: collections.Iterable[hikari.SnowflakeishOr[hikari.PartialUser]] = (),
        command_editable_duration: float = 30,
        non_command_editable: bool = True,
        default_locale: str = hikari.Locale.EN_US,
        localiser: typing.Optional[localisation.AbstractLocaliser] = None,
        settings: typing.Optional[settings_.AbstractSettingsProvider] = None,
        load_builtins: bool = True,
    ) -> Client:
        """Build a [kotoba.Client][kotoba.clients.Client] from a [hikari.traits.GatewayBotAware][] instance.

        Parameters
        ----------
        bot
            The bot client to build from.

            This will be used to infer the relevant Hikari clients to use.
        event_managed
            Whether this client is managed by the event manager.

            An event managed client will be automatically started and closed
            based on Hikari's lifetime events.

        See [Client.__init__][kotoba.clients.Client.__init__] for the other parameters.
        """
        client = cls(
            rest=bot.rest,
            app=bot,
            cache=bot.cache,
            events=bot.event_manager,
            event_managed=event_managed,
            injector=injector,
            prefix=prefix,
            owner_ids=owner_ids,
            dev_ids=dev_ids,
            command_editable_duration=command_editable_duration,
            non_command_editable=non_command_editable,
            default_locale=default_locale,
            localiser=localiser,
            settings=settings,
            load_builtins=load_builtins,
        )
        return client._set_type_dependency(hikari.GatewayBotAware, bot)

    async def __aenter__(self) -> Client:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: typing.Optional[type[BaseException]],
        exc: typing.Optional[BaseException],
        exc_traceback: typing.Optional[types.TracebackType],
    ) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"KotobaClient <{len(self._commands)} commands, {self._prefix!r}>"

    @property
    def cache(self) -> typing.Optional[hikari.api.Cache]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._cache

    @property
    def command_editable_duration(self) -> float:
        """How many seconds after being sent a message can be edited to re-run a command."""
        return self._command_editable_duration

    @property
    def commands(self) -> registries.CommandRegistry:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._commands

    @property
    def default_locale(self) -> str:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._default_locale

    @property
    def dev_ids(self) -> collections.Collection[hikari.Snowflake]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._dev_ids

    @property
    def events(self) -> typing.Optional[hikari.api.EventManager]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._events

    @property
    def injector(self) -> alluka.Client:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._injector

    @property
    def is_alive(self) -> bool:
        """Whether this client is open."""
        return self._is_alive

    @property
    def localiser(self) -> typing.Optional[localisation.AbstractLocaliser]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._localiser

    @property
    def non_command_editable(self) -> bool:
        """Whether messages which didn't invoke a command can be edited into one."""
        return self._non_command_editable

    @property
    def owner_ids(self) -> collections.Collection[hikari.Snowflake]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._owner_ids

    @property
    def owners(self) -> collections.Sequence[hikari.User]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._owners.copy()

    @property
    def prefix(self) -> str:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._prefix

    @property
    def rest(self) -> hikari.api.RESTClient:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._rest

    @property
    def settings(self) -> typing.Optional[settings_.AbstractSettingsProvider]:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._settings

    @property
    def types(self) -> registries.TypeRegistry:
        # <<inherited docstring from kotoba.abc.Client>>.
        return self._types

    async def _on_starting(self, _: hikari.StartingEvent, /) -> None:
        await self.open()

    async def _on_stopping(self, _: hikari.StoppingEvent, /) -> None:
        await self.close()

    def add_command(self, command: kotoba.Command, /) -> Self:
        """Register a command with this client.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If the command's name or one of its aliases is already taken or
            if any of its arguments are invalid.
        """
        self._commands.register(command)
        return self

    def remove_command(self, command: kotoba.Command, /) -> Self:
        """Unregister a command from this client.

        Raises
        ------
        ValueError
            If the command isn't registered.
        """
        self._commands.unregister(command)
        return self

    def with_command(self, command: kotoba.Command, /) -> kotoba.Command:
        """Register a command through a decorator call.

        Examples
        --------
        ```py
        @client.with_command
        @kotoba.as_command("ping")
        async def ping(ctx: kotoba.abc.Context) -> None:
            await ctx.respond("Pong!")
        ```
        """
        self.add_command(command)
        return command

    def _dispatch_prefix_change(
        self,
        guild_id: typing.Optional[hikari.Snowflake],
        old_prefix: typing.Optional[str],
        new_prefix: typing.Optional[str],
        /,
    ) -> None:
        if self._events and self._app and self._is_alive:
            self._events.dispatch(events_.PrefixChangeEvent(self._app, guild_id, old_prefix, new_prefix))

    def set_prefix(self, prefix: typing.Optional[str], /) -> Self:
        # <<inherited docstring from kotoba.abc.Client>>.
        old_prefix = self._prefix
        self._prefix = self._default_prefix if prefix is None else prefix
        _LOGGER.info("Global command prefix set to %r", self._prefix)
        self._dispatch_prefix_change(None, old_prefix, self._prefix)
        return self

    async def set_guild_prefix(
        self, guild: hikari.SnowflakeishOr[hikari.PartialGuild], prefix: typing.Optional[str], /
    ) -> None:
        # <<inherited docstring from kotoba.abc.Client>>.
        if not self._settings:
            raise RuntimeError("Cannot set a guild prefix without a settings provider")

        guild_id = hikari.Snowflake(guild)
        if prefix is None:
            old_prefix = await self._settings.remove(guild_id, "prefix")

        else:
            old_prefix = await self._settings.get(guild_id, "prefix")
            await self._settings.set(guild_id, "prefix", prefix)

        _LOGGER.info("Command prefix for guild %s set to %r", guild_id, prefix)
        self._dispatch_prefix_change(guild_id, old_prefix, prefix)

    async def set_settings_provider(self, provider: typing.Optional[settings_.AbstractSettingsProvider], /) -> Self:
        """Set the settings provider this client uses.

        If the client is already open then the provider is initialised now,
        otherwise it's initialised when the client opens. Any previous
        provider is destroyed if it was initialised.

        Parameters
        ----------
        provider
            The provider to use, or [None][] to remove the current provider.

        Returns
        -------
        Self
            The client to enable chained calls.
        """
        if self._settings and self._is_alive:
            await self._settings.destroy()

        self._settings = provider
        if provider:
            self._injector.set_type_dependency(settings_.AbstractSettingsProvider, provider)

        elif self._injector.get_type_dependency(settings_.AbstractSettingsProvider, default=None) is not None:
            self._injector.remove_type_dependency(settings_.AbstractSettingsProvider)

        if provider and self._is_alive:
            await self._init_settings(provider)

        elif provider:
            _LOGGER.debug("Settings provider set to %r, will initialise once open", provider)

        return self

    async def _init_settings(self, provider: settings_.AbstractSettingsProvider, /) -> None:
        _LOGGER.debug("Initialising settings provider %r", provider)
        await provider.init(self)
        if (prefix := await provider.get(None, "prefix")) is not None:
            self._prefix = prefix

        _LOGGER.info("Settings provider %r finished initialisation", provider)

    def is_dev(self, user: hikari.SnowflakeishOr[hikari.PartialUser], /) -> bool:
        # <<inherited docstring from kotoba.abc.Client>>.
        user_id = hikari.Snowflake(user)
        return user_id in self._dev_ids or user_id in self._owner_ids

    def is_owner(self, user: hikari.SnowflakeishOr[hikari.PartialUser], /) -> bool:
        # <<inherited docstring from kotoba.abc.Client>>.
        return hikari.Snowflake(user) in self._owner_ids

    async def get_prefix(self, guild: typing.Optional[hikari.SnowflakeishOr[hikari.PartialGuild]], /) -> str:
        # <<inherited docstring from kotoba.abc.Client>>.
        if guild is not None and self._settings:
            guild_prefix = await self._settings.get(guild, "prefix")
            if guild_prefix is not None:
                return guild_prefix

        return self._prefix

    async def _match_prefix(self, content: str, guild_id: typing.Optional[hikari.Snowflake], /) -> typing.Optional[str]:
        prefixes: list[str] = []
        if prefix := await self.get_prefix(guild_id):
            prefixes.append(prefix)

        if self._me_id is None and self._cache and (me := self._cache.get_me()):
            self._me_id = me.id

        if self._me_id is not None:
            prefixes.extend((f"<@{self._me_id}>", f"<@!{self._me_id}>"))

        for prefix in prefixes:
            if content.startswith(prefix):
                return prefix

        # Commands in DMs don't need a prefix.
        if guild_id is None:
            return ""

        return None

    async def _match_invocation(
        self, content: str, guild_id: typing.Optional[hikari.Snowflake], /
    ) -> typing.Optional[_Invocation]:
        content = content.lstrip()
        if (prefix := await self._match_prefix(content, guild_id)) is None:
            return None

        parts = content[len(prefix) :].split(maxsplit=1)
        if not parts or not (command := self._commands.get(parts[0])):
            return None

        return _Invocation(prefix, parts[0], command, parts[1] if len(parts) > 1 else "")

    async def find_invocation(self, ctx: kotoba.Context, content: str, /) -> typing.Optional[kotoba.Command]:
        # <<inherited docstring from kotoba.abc.Client>>.
        if invocation := await self._match_invocation(content, ctx.guild_id):
            return invocation.command

        return None

    async def close(self) -> None:
        """Close the client.

        This unsubscribes the client's listeners and destroys its settings
        provider. Closing a client which isn't open does nothing.
        """
        if not self._is_alive:
            _LOGGER.debug("Client is already closed")
            return

        self._is_alive = False
        if self._events:
            _try_unsubscribe(self._events, hikari.MessageCreateEvent, self.on_message_create_event)
            _try_unsubscribe(self._events, hikari.MessageUpdateEvent, self.on_message_update_event)
            _try_unsubscribe(self._events, hikari.MemberUpdateEvent, self.on_member_update_event)

        if self._settings:
            await self._settings.destroy()

        self._invocations.clear()
        _LOGGER.info("Client closed")

    async def open(self) -> None:
        """Start the client.

        This fetches the bot's own user and its owners, subscribes the
        client's listeners and initialises its settings provider. Opening a
        client which is already open does nothing.

        Owners which can't be fetched are logged and left out of
        [Client.owners][kotoba.clients.Client.owners].
        """
        if self._is_alive:
            _LOGGER.debug("Client is already open")
            return

        user: typing.Optional[hikari.OwnUser] = self._cache.get_me() if self._cache else None
        if not user:
            user = await self._rest.fetch_my_user()

        self._me_id = user.id
        await self._fetch_owners()
        self._is_alive = True
        if self._events:
            self._events.subscribe(hikari.MessageCreateEvent, self.on_message_create_event)
            self._events.subscribe(hikari.MessageUpdateEvent, self.on_message_update_event)
            self._events.subscribe(hikari.MemberUpdateEvent, self.on_member_update_event)

        if self._settings:
            await self._init_settings(self._settings)

        _LOGGER.info("Client opened with %s commands", len(self._commands))

    async def _fetch_owners(self) -> None:
        owners: list[hikari.User] = []
        for owner_id in sorted(self._owner_ids):
            owner = self._cache.get_user(owner_id) if self._cache else None
            if not owner:
                try:
                    owner = await self._rest.fetch_user(owner_id)

                except hikari.HTTPError as exc:
                    _LOGGER.warning("Unable to fetch owner %s: %s", owner_id, exc)
                    continue

            owners.append(owner)

        self._owners = owners

    def _track_invocation(self, message: hikari.PartialMessage, /) -> None:
        now = datetime.datetime.now(tz=datetime.timezone.utc)
        limit = datetime.timedelta(seconds=self._command_editable_duration)
        for message_id, created_at in list(self._invocations.items()):
            if now - created_at > limit:
                del self._invocations[message_id]

        if self._command_editable_duration > 0:
            self._invocations[message.id] = message.created_at

    async def execute(self, message: hikari.PartialMessage, /, *, content: typing.Optional[str] = None) -> bool:
        """Execute the command a message invokes, if any.

        Parameters
        ----------
        message
            The message to execute.
        content
            The message's content, defaults to `message.content`.

        Returns
        -------
        bool
            Whether the message invoked a command.
        """
        content = message.content if content is None else content
        if not isinstance(content, str):
            return False

        if not (invocation := await self._match_invocation(content, message.guild_id)):
            return False

        self._track_invocation(message)
        command = invocation.command
        ctx = context.MessageContext(
            self,
            typing.cast("hikari.Message", message),
            content=invocation.content,
            triggering_name=invocation.name,
            triggering_prefix=invocation.prefix,
        ).set_command(command)
        _LOGGER.debug("Executing command %r for message %s", command.name, message.id)

        if command.is_guild_only and ctx.guild_id is None:
            await ctx.respond(localisation.localise(ctx, "general.commando.guildonly", command=command.name))
            return True

        if command.is_owner_only and not self.is_owner(ctx.author):
            await ctx.respond(localisation.localise(ctx, "general.commando.owneronly", command=command.name))
            return True

        try:
            collected = await command.collect_arguments(ctx, invocation.content)
            if collected.cancelled:
                await ctx.respond(localisation.localise(ctx, f"general.commando.cancelled.{collected.cancelled.value}"))
                return True

            ctx.finalise()
            await self._injector.call_with_async_di(command.callback, ctx, **collected.values)

        except errors.HaltExecution:
            pass

        except errors.CommandError as exc:
            await exc.send(ctx)

        except Exception as exc:
            _LOGGER.error("Command %r raised an unexpected exception", command.name, exc_info=exc)
            await ctx.respond(localisation.localise(ctx, "general.commando.error", command=command.name))

        return True

    async def on_message_create_event(self, event: hikari.MessageCreateEvent, /) -> None:
        """Execute a message command based on a gateway event.

        Parameters
        ----------
        event
            The event to handle.
        """
        if event.message.content is None or event.message.author.is_bot:
            return

        await self.execute(event.message)

    async def on_message_update_event(self, event: hikari.MessageUpdateEvent, /) -> None:
        """Re-execute a message command based on an edit.

        Only messages sent within the last `command_editable_duration`
        seconds are re-executed and messages which didn't invoke a command
        are only executed if `non_command_editable` is enabled.

        Parameters
        ----------
        event
            The event to handle.
        """
        message = event.message
        if not isinstance(message.content, str) or not message.author or message.author.is_bot:
            return

        age = datetime.datetime.now(tz=datetime.timezone.utc) - message.created_at
        if age.total_seconds() > self._command_editable_duration:
            return

        if not self._non_command_editable and message.id not in self._invocations:
            return

        await self.execute(message)

    async def on_member_update_event(self, event: hikari.MemberUpdateEvent, /) -> None:
        """Dispatch role add and remove events based on a member update.

        Parameters
        ----------
        event
            The event to handle.
        """
        if not self._events:
            return

        for role_event in events_.diff_member_roles(event):
            self._events.dispatch(role_event)

    async def get_or_create_role(
        self, guild: hikari.SnowflakeishOr[hikari.PartialGuild], name: str, /, **options: typing.Any
    ) -> hikari.Role:
        """Get a role Kotoba manages for a guild, creating it if necessary.

        The role's ID is stored through the settings provider under the key
        `role<name>`.

        Parameters
        ----------
        guild
            The guild to get the role in.
        name
            Name of the role.
        **options
            Other options to pass to [hikari.api.rest.RESTClient.create_role][]
            if the role has to be created.

        Returns
        -------
        hikari.guilds.Role
            The found or created role.

        Raises
        ------
        RuntimeError
            If the client has no settings provider.
        """
        if not self._settings:
            raise RuntimeError("Cannot manage roles without a settings provider")

        guild_id = hikari.Snowflake(guild)
        key = f"role{name}"
        if (role_id := await self._settings.get(guild_id, key)) is not None:
            role_id = hikari.Snowflake(role_id)
            if self._cache and (role := self._cache.get_role(role_id)):
                return role

            for role in await self._rest.fetch_roles(guild_id):
                if role.id == role_id:
                    return role

            _LOGGER.debug("Stored %r role %s no longer exists in %s", name, role_id, guild_id)

        role = await self._rest.create_role(guild_id, name=name, **options)
        await self._settings.set(guild_id, key, int(role.id))
        _LOGGER.info("Created %r role %s in %s", name, role.id, guild_id)
        return role

    async def log(
        self, guild: hikari.SnowflakeishOr[hikari.PartialGuild], content: typing.Any, /, **options: typing.Any
    ) -> typing.Optional[hikari.Message]:
        """Send a message to a guild's configured log channel.

        The channel's ID is read through the settings provider from the key
        `logChannel`.

        Parameters
        ----------
        guild
            The guild to log to.
        content
            The message content to send.
        **options
            Other options to pass to [hikari.api.rest.RESTClient.create_message][].

        Returns
        -------
        hikari.messages.Message | None
            The sent message, or [None][] if the guild has no log channel or
            the channel couldn't be sent to.
        """
        if not self._settings:
            return None

        if (channel_id := await self._settings.get(guild, "logChannel")) is None:
            return None

        try:
            return await self._rest.create_message(channel_id, content, **options)

        except (hikari.ForbiddenError, hikari.NotFoundError) as exc:
            _LOGGER.debug("Failed to log to channel %s: %s", channel_id, exc)
            return None
