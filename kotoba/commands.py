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
"""Standard implementation of a message command and its declaration decorators."""
from __future__ import annotations

__all__: list[str] = ["CollectedArguments", "Command", "as_command", "with_argument"]

import dataclasses
import logging
import typing
from collections import abc as collections

import hikari

from . import _internal
from . import abc as kotoba
from . import arguments as arguments_
from . import errors

if typing.TYPE_CHECKING:
    from typing_extensions import Self

    from . import registries


_LOGGER = logging.getLogger("hikari.kotoba.commands")


@dataclasses.dataclass(frozen=True)
class CollectedArguments:
    """Result of obtaining every argument of a command call."""

    values: collections.Mapping[str, typing.Any]
    """Mapping of argument keys to the obtained values.

    This will be incomplete when `cancelled` is set.
    """

    cancelled: typing.Optional[arguments_.CancelReason] = None
    """Why collection was cancelled, [None][] if every value was obtained."""

    prompts: collections.Sequence[hikari.Message] = ()
    """Every prompt message state across all the arguments."""

    answers: collections.Sequence[hikari.Message] = ()
    """Every answer received across all the arguments."""

    @property
    def is_cancelled(self) -> bool:
        """Whether collection was cancelled."""
        return self.cancelled is not None


class Command(kotoba.Command):
    """Standard implementation of a message command."""

    __slots__ = (
        "_aliases",
        "_arguments",
        "_callback",
        "_description",
        "_examples",
        "_format",
        "_group",
        "_is_guild_only",
        "_is_owner_only",
        "_name",
        "_prompt_limit",
        "_single_quotes",
        "_specs",
    )

    def __init__(
        self,
        callback: kotoba.CommandCallbackSig,
        name: str,
        /,
        *aliases: str,
        description: str = "",
        group: str = "util",
        format: typing.Optional[str] = None,
        examples: collections.Iterable[str] = (),
        guild_only: bool = False,
        owner_only: bool = False,
        prompt_limit: typing.Optional[float] = None,
        single_quotes: bool = True,
    ) -> None:
        """Initialise a message command.

        Parameters
        ----------
        callback
            Callback to execute when the command is invoked.

            This should be an asynchronous callback which takes the
            [kotoba.abc.Context][] as its first positional argument, the
            argument values as keyword arguments and may use dependency injection.
        name
            The command's name.
        *aliases
            Alternative names for the command.
        description
            Short description of what the command does.
        group
            ID of the group this command belongs to.
        format
            Usage format shown in help output.

            If left as [None][] then this is built from the argument labels.
        examples
            Example usages of the command.
        guild_only
            Whether the command may only be used within guilds.
        owner_only
            Whether the command may only be used by the bot's owners.
        prompt_limit
            Maximum amount of times to prompt for each argument.

            [None][] means unlimited.
        single_quotes
            Whether single quotes may be used to group words into one argument
            value alongside double quotes.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If the name, aliases, group or prompt limit are invalid.
        """
        if not isinstance(name, str) or not name or name != name.lower() or any(c.isspace() for c in name):
            raise errors.ConfigurationError("Command name must be a lowercase string without whitespace", "name")

        for alias in aliases:
            if not isinstance(alias, str) or not alias or any(c.isspace() for c in alias):
                raise errors.ConfigurationError("Command aliases must be strings without whitespace", "aliases")

        if not isinstance(group, str) or not group:
            raise errors.ConfigurationError("Command group must be a non-empty string", "group")

        if prompt_limit is not None and (not isinstance(prompt_limit, (int, float)) or prompt_limit < 0):
            raise errors.ConfigurationError("Command prompt_limit must be a non-negative number", "prompt_limit")

        self._aliases = tuple(alias.lower() for alias in aliases)
        self._arguments: list[kotoba.Argument] = []
        self._callback = callback
        self._description = description
        self._examples = tuple(examples)
        self._format = format
        self._group = group
        self._is_guild_only = guild_only
        self._is_owner_only = owner_only
        self._name = name
        self._prompt_limit = prompt_limit
        self._single_quotes = single_quotes
        self._specs: list[dict[str, typing.Any]] = []

    def __repr__(self) -> str:
        return f"Command <{self._name}: {len(self._specs)} arguments>"

    @property
    def aliases(self) -> collections.Sequence[str]:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._aliases

    @property
    def arguments(self) -> collections.Sequence[kotoba.Argument]:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._arguments.copy()

    @property
    def callback(self) -> kotoba.CommandCallbackSig:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._callback

    @property
    def description(self) -> str:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._description

    @property
    def examples(self) -> collections.Sequence[str]:
        """Example usages of this command."""
        return self._examples

    @property
    def format(self) -> str:
        """Usage format of this command's arguments."""
        if self._format is not None:
            return self._format

        parts: list[str] = []
        for spec in self._specs:
            label = spec.get("label") or spec["key"]
            parts.append(f"[{label}]" if "default" in spec else f"<{label}>")

        return " ".join(parts)

    @property
    def group(self) -> str:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._group

    @property
    def is_guild_only(self) -> bool:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._is_guild_only

    @property
    def is_owner_only(self) -> bool:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._is_owner_only

    @property
    def name(self) -> str:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._name

    @property
    def prompt_limit(self) -> typing.Optional[float]:
        # <<inherited docstring from kotoba.abc.Command>>.
        return self._prompt_limit

    @property
    def single_quotes(self) -> bool:
        """Whether single quotes may be used to group words into one argument value."""
        return self._single_quotes

    def add_argument(
        self, key: str, prompt: str, /, *, index: typing.Optional[int] = None, **options: typing.Any
    ) -> Self:
        """Add an argument to this command.

        The argument is only constructed once the command is bound to a type
        registry (i.e. registered with a client).

        Parameters
        ----------
        key
            Identifier of the argument, used to pass its value to the callback.
        prompt
            The question asked when the argument wasn't provided or was invalid.
        index
            Position to insert the argument at, appended if [None][].
        **options
            The other options to pass to [kotoba.arguments.Argument][].

        Returns
        -------
        Self
            The command object to enable chained calls.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If an argument with the same key was already added.
        """
        if any(spec["key"] == key for spec in self._specs):
            raise errors.ConfigurationError(f"Argument key {key!r} is already used by {self._name!r}", "key")

        spec = {"key": key, "prompt": prompt, **options}
        if index is None:
            self._specs.append(spec)

        else:
            self._specs.insert(index, spec)

        return self

    def bind_registry(self, types: registries.TypeRegistry, /) -> None:
        # <<inherited docstring from kotoba.abc.Command>>.
        self._arguments = [arguments_.Argument.from_mapping(types, spec) for spec in self._specs]

    async def collect_arguments(self, ctx: kotoba.Context, content: str, /) -> CollectedArguments:
        # <<inherited docstring from kotoba.abc.Command>>.
        if not self._arguments:
            return CollectedArguments({})

        if len(self._arguments) == 1:
            raw_values = [content.strip()]

        else:
            raw_values = _internal.split_arguments(
                content, len(self._arguments), allow_single_quote=self._single_quotes
            )

        values: dict[str, typing.Any] = {}
        prompts: list[hikari.Message] = []
        answers: list[hikari.Message] = []
        for position, argument in enumerate(self._arguments):
            raw = raw_values[position] if position < len(raw_values) else None
            result = await argument.obtain(ctx, raw, prompt_limit=self._prompt_limit)
            prompts.extend(result.prompts)
            answers.extend(result.answers)
            if result.cancelled:
                _LOGGER.debug(
                    "Collecting %r's arguments was cancelled at %r (%s)", self._name, argument.key, result.cancelled
                )
                return CollectedArguments(values, result.cancelled, prompts, answers)

            values[argument.key] = result.value

        return CollectedArguments(values, None, prompts, answers)


def as_command(
    name: str,
    /,
    *aliases: str,
    description: str = "",
    group: str = "util",
    format: typing.Optional[str] = None,
    examples: collections.Iterable[str] = (),
    guild_only: bool = False,
    owner_only: bool = False,
    prompt_limit: typing.Optional[float] = None,
    single_quotes: bool = True,
) -> collections.Callable[[kotoba.CommandCallbackSig], Command]:
    """Build a message command from a decorated callback.

    Parameters
    ----------
    name
        The command's name.
    *aliases
        Alternative names for the command.
    description
        Short description of what the command does.
    group
        ID of the group the command belongs to.
    format
        Usage format shown in help output.
    examples
        Example usages of the command.
    guild_only
        Whether the command may only be used within guilds.
    owner_only
        Whether the command may only be used by the bot's owners.
    prompt_limit
        Maximum amount of times to prompt for each argument.
    single_quotes
        Whether single quotes may be used to group words into one argument value.

    Returns
    -------
    collections.abc.Callable[[kotoba.abc.CommandCallbackSig], Command]
        The decorator callback used to make a [Command][kotoba.commands.Command].
    """

    def decorator(callback: kotoba.CommandCallbackSig, /) -> Command:
        return Command(
            callback,
            name,
            *aliases,
            description=description,
            group=group,
            format=format,
            examples=examples,
            guild_only=guild_only,
            owner_only=owner_only,
            prompt_limit=prompt_limit,
            single_quotes=single_quotes,
        )

    return decorator


def with_argument(key: str, prompt: str, /, **options: typing.Any) -> collections.Callable[[Command], Command]:
    """Add an argument to a message command through a decorator call.

    Decorators are applied bottom-up, so this inserts the argument before any
    added by decorators below it; arguments end up in the order they're
    declared in.

    Examples
    --------
    ```py
    @kotoba.with_argument("member", "Which member?", type="member")
    @kotoba.with_argument("reason", "Why?", type="string", default="")
    @kotoba.as_command("kick", guild_only=True)
    async def kick(ctx: kotoba.abc.Context, member: hikari.Member, reason: str) -> None:
        ...
    ```

    Parameters
    ----------
    key
        Identifier of the argument, used to pass its value to the callback.
    prompt
        The question asked when the argument wasn't provided or was invalid.
    **options
        The other options to pass to [kotoba.arguments.Argument][].

    Returns
    -------
    collections.abc.Callable[[Command], Command]
        Decorator callback which adds the argument to the command.
    """

    def decorator(command: Command, /) -> Command:
        return command.add_argument(key, prompt, index=0, **options)

    return decorator
