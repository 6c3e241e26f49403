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
"""Localisation of the strings Kotoba shows to users."""
from __future__ import annotations

__all__: list[str] = [
    "AbstractLocaliser",
    "AbstractLocalizer",
    "BasicLocaliser",
    "BasicLocalizer",
    "DEFAULT_STRINGS",
    "localise",
]

import abc
import typing

import hikari

if typing.TYPE_CHECKING:
    from collections import abc as collections

    from typing_extensions import Self

    from . import abc as kotoba


DEFAULT_STRINGS: collections.Mapping[str, str] = {
    "general.commando.invalidlabel": "You provided an invalid {label}. Please try again.",
    "general.commando.cancelcmd": "Respond with `cancel` to cancel the command.",
    "general.commando.autocancel": "The command will automatically be cancelled in {wait} seconds.",
    "general.commando.cancelled.user": "Cancelled command.",
    "general.commando.cancelled.time": "Cancelled command, you took too long to answer.",
    "general.commando.cancelled.promptLimit": "Cancelled command, too many invalid attempts.",
    "general.commando.guildonly": "The `{command}` command can only be used in servers.",
    "general.commando.owneronly": "The `{command}` command can only be used by the bot owner.",
    "general.commando.error": "An unexpected error occurred while running the `{command}` command.",
    "commands.bot.prefix.currentprefix": "The command prefix is `{prefix}`.",
    "commands.bot.prefix.noprefix": "There is no command prefix, mention the bot to run commands.",
    "commands.bot.prefix.onlyadmin": "Only administrators may change the command prefix.",
    "commands.bot.prefix.isowner": "Only the bot owner may change the global command prefix.",
    "commands.bot.prefix.nosettings": "Server prefixes can't be changed without a settings provider.",
    "commands.bot.prefix.reset": "Reset the command prefix to the default (currently {current}).",
    "commands.bot.prefix.noprefixset": "no prefix",
    "commands.bot.prefix.prefixset": "Set the command prefix to `{prefix}`.",
    "commands.bot.prefix.prefixremoved": "Removed the command prefix, mention the bot to run commands.",
}
"""Mapping of identifiers to the English strings used when no localisation is found."""


class AbstractLocaliser(abc.ABC):
    """Abstract class of a string localiser."""

    __slots__ = ()

    @abc.abstractmethod
    def localise(self, identifier: str, tag: str, /, **kwargs: typing.Any) -> typing.Optional[str]:
        """Localise a string with the given identifier and arguments.

        Parameters
        ----------
        identifier
            The dot separated identifier of the string to localise
            (e.g. `"general.commando.cancelcmd"` or
            `"commands.bot.prefix.args.prefix"`).
        tag
            The "IETF lang tag" to localise the string to.

            This should usually be a [hikari.Locale][hikari.locales.Locale].
        **kwargs
            Key-word arguments to pass to the string as format args.

        Returns
        -------
        str | None
            The localised string if found.
        """

    def localize(self, identifier: str, tag: str, /, **kwargs: typing.Any) -> typing.Optional[str]:
        """Alias for `AbstractLocaliser.localise`."""
        return self.localise(identifier, tag, **kwargs)


AbstractLocalizer = AbstractLocaliser
"""Alias of [AbstractLocaliser][kotoba.localisation.AbstractLocaliser]."""


class BasicLocaliser(AbstractLocaliser):
    """Standard implementation of `AbstractLocaliser` with only basic text mapping support."""

    __slots__ = ("_default_tag", "_tags")

    def __init__(self, *, default_tag: typing.Optional[str] = None) -> None:
        """Initialise a new `BasicLocaliser`.

        Parameters
        ----------
        default_tag
            Tag to fall back to when a string has no variant for the requested tag.
        """
        self._default_tag = _normalise_key(default_tag) if default_tag else None
        self._tags: dict[str, dict[str, str]] = {}

    def localise(self, identifier: str, tag: str, /, **kwargs: typing.Any) -> typing.Optional[str]:
        # <<inherited docstring from AbstractLocaliser>>.
        if not (tag_values := self._tags.get(identifier)):
            return None

        string = tag_values.get(tag) or (self._default_tag and tag_values.get(self._default_tag))
        if string:
            return string.format(**kwargs)

        return None

    def set_variants(
        self, identifier: str, variants: typing.Optional[collections.Mapping[str, str]] = None, /, **other_variants: str
    ) -> Self:
        """Set the variants for a localised string.

        Parameters
        ----------
        identifier
            Identifier of the string to set the localised variants for.
        variants
            Mapping of [hikari.Locale][hikari.locales.Locale]s to the
            localised values.
        **other_variants
            Localised values keyed by locale names (e.g. `EN_GB=...`).

        Returns
        -------
        Self
            The localiser object to enable chained calls.
        """
        all_variants = {_normalise_key(key): value for key, value in other_variants.items()}
        if variants:
            all_variants.update(variants)

        self._tags.setdefault(identifier, {}).update(all_variants)
        return self


BasicLocalizer = BasicLocaliser
"""Alias of [BasicLocaliser][kotoba.localisation.BasicLocaliser]."""


def _normalise_key(key: str, /) -> str:
    try:
        return hikari.Locale[key.upper()]

    except KeyError:
        return key


def localise(
    ctx: kotoba.Context, identifier: str, default: typing.Optional[str] = None, /, **kwargs: typing.Any
) -> str:
    """Localise a string for a command call's context.

    Parameters
    ----------
    ctx
        The context to localise the string for.
    identifier
        Identifier of the string.
    default
        The string to use if the client has no localiser or the localiser
        has no variant for this identifier.

        If left as [None][] then the English string from
        [DEFAULT_STRINGS][kotoba.localisation.DEFAULT_STRINGS] is used.
    **kwargs
        Key-word arguments to format the string with.

    Returns
    -------
    str
        The localised string.

    Raises
    ------
    KeyError
        If no localisation was found, `default` wasn't provided and the
        identifier isn't a built-in string.
    """
    if (localiser := ctx.client.localiser) and (result := localiser.localise(identifier, ctx.locale, **kwargs)):
        return result

    if default is None:
        default = DEFAULT_STRINGS[identifier]

    return default.format(**kwargs) if kwargs else default
