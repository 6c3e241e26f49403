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
"""Registries of the argument types and commands used by a client."""
from __future__ import annotations

__all__: list[str] = ["CommandRegistry", "TypeRegistry"]

import logging
import typing
from collections import abc as collections

from . import abc as kotoba
from . import errors
from . import types as types_

if typing.TYPE_CHECKING:
    from typing_extensions import Self


_LOGGER = logging.getLogger("hikari.kotoba.registries")


class TypeRegistry(collections.Collection[kotoba.ArgumentType]):
    """Registry of argument types keyed by their IDs."""

    __slots__ = ("_types",)

    def __init__(self) -> None:
        """Initialise an empty type registry.

        See [TypeRegistry.register_defaults][kotoba.registries.TypeRegistry.register_defaults]
        for registering the standard types.
        """
        self._types: dict[str, kotoba.ArgumentType] = {}

    def __contains__(self, value: object, /) -> bool:
        if isinstance(value, kotoba.ArgumentType):
            return self._types.get(value.id) is value

        return value in self._types

    def __iter__(self) -> collections.Iterator[kotoba.ArgumentType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def get(self, type_id: str, /) -> typing.Optional[kotoba.ArgumentType]:
        """Get a registered type.

        Parameters
        ----------
        type_id
            ID of the type to get.

        Returns
        -------
        kotoba.abc.ArgumentType | None
            The type if found, else [None][].
        """
        return self._types.get(type_id)

    def has(self, type_id: str, /) -> bool:
        """Check whether a type is registered under an ID."""
        return type_id in self._types

    def register(self, type_: kotoba.ArgumentType, /) -> Self:
        """Register an argument type.

        Parameters
        ----------
        type_
            The type to register.

        Returns
        -------
        Self
            The registry to enable chained calls.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If a type is already registered with the same ID.
        """
        if type_.id in self._types:
            raise errors.ConfigurationError(f"An argument type with the ID {type_.id!r} is already registered")

        self._types[type_.id] = type_
        _LOGGER.debug("Registered argument type %r", type_.id)
        return self

    def register_defaults(self) -> Self:
        """Register the standard argument types.

        These are `string`, `integer`, `float`, `boolean`, `user`, `member`,
        `role` and `channel`.

        Returns
        -------
        Self
            The registry to enable chained calls.
        """
        for type_ in (
            types_.StringType(),
            types_.IntegerType(),
            types_.FloatType(),
            types_.BooleanType(),
            types_.UserType(),
            types_.MemberType(),
            types_.RoleType(),
            types_.ChannelType(),
        ):
            self.register(type_)

        return self

    def resolve(self, type_id: str, /) -> kotoba.ArgumentType:
        """Resolve a type ID to a registered type.

        IDs made of several type IDs separated by `|` resolve to a
        [UnionType][kotoba.types.UnionType] which is then registered under
        that exact ID and reused by later lookups.

        Parameters
        ----------
        type_id
            The type ID to resolve.

        Returns
        -------
        kotoba.abc.ArgumentType
            The resolved type.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If the type (or one of the union's types) isn't registered.
        """
        if type_ := self._types.get(type_id):
            return type_

        if "|" not in type_id:
            raise errors.ConfigurationError(f"Argument type {type_id!r} isn't registered", "type")

        union = types_.UnionType(self, type_id)
        self.register(union)
        return union

    def unregister(self, type_id: str, /) -> Self:
        """Unregister an argument type.

        Raises
        ------
        KeyError
            If no type is registered with this ID.
        """
        del self._types[type_id]
        return self


class CommandRegistry(collections.Collection[kotoba.Command]):
    """Registry of the commands a client executes, keyed by name and alias."""

    __slots__ = ("_commands", "_names", "_types")

    def __init__(self, types: TypeRegistry, /) -> None:
        """Initialise a command registry.

        Parameters
        ----------
        types
            Registry of the argument types registered commands are bound to.
        """
        self._commands: list[kotoba.Command] = []
        self._names: dict[str, kotoba.Command] = {}
        self._types = types

    def __contains__(self, value: object, /) -> bool:
        return value in self._commands

    def __iter__(self) -> collections.Iterator[kotoba.Command]:
        return iter(self._commands.copy())

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def groups(self) -> collections.Mapping[str, collections.Sequence[kotoba.Command]]:
        """Mapping of group IDs to the commands within each group."""
        groups: dict[str, list[kotoba.Command]] = {}
        for command in self._commands:
            groups.setdefault(command.group, []).append(command)

        return groups

    def get(self, name: str, /) -> typing.Optional[kotoba.Command]:
        """Get a command by its name or one of its aliases.

        This is case-insensitive.
        """
        return self._names.get(name.lower())

    def register(self, command: kotoba.Command, /) -> Self:
        """Register a command.

        This binds the command to this registry's type registry, constructing
        its arguments.

        Parameters
        ----------
        command
            The command to register.

        Returns
        -------
        Self
            The registry to enable chained calls.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If the command's name or one of its aliases is already taken or
            if any of its arguments are invalid.
        """
        names = [command.name.lower(), *(alias.lower() for alias in command.aliases)]
        for name in names:
            if (found := self._names.get(name)) is not None:
                raise errors.ConfigurationError(
                    f"The name {name!r} is already registered by the {found.name!r} command", "name"
                )

        command.bind_registry(self._types)
        self._commands.append(command)
        self._names.update((name, command) for name in names)
        _LOGGER.debug("Registered command %r in group %r", command.name, command.group)
        return self

    def unregister(self, command: kotoba.Command, /) -> Self:
        """Unregister a command.

        Raises
        ------
        ValueError
            If the command isn't registered.
        """
        self._commands.remove(command)
        for name, found in list(self._names.items()):
            if found is command:
                del self._names[name]

        return self
