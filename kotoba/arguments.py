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
"""Command arguments and the interactive protocol used to obtain their values."""
from __future__ import annotations

__all__: list[str] = [
    "Argument",
    "ArgumentResult",
    "CANCEL_KEYWORD",
    "CancelReason",
    "ComputedDefault",
    "Default",
    "LiteralDefault",
    "UNDEFINED",
    "UndefinedT",
]

import dataclasses
import enum
import logging
import math
import typing
from collections import abc as collections

import hikari

from . import _internal
from . import abc as kotoba
from . import errors
from . import localisation

if typing.TYPE_CHECKING:
    from . import registries


_LOGGER = logging.getLogger("hikari.kotoba.arguments")

CANCEL_KEYWORD: typing.Final[str] = "cancel"
"""Reply which cancels the current argument prompt (case-insensitive)."""

_DEFAULT_WAIT: typing.Final[float] = 30
_INFO_FIELDS = frozenset(
    [
        "key",
        "label",
        "prompt",
        "error",
        "type",
        "min",
        "max",
        "default",
        "one_of",
        "validate",
        "parse",
        "is_empty",
        "wait",
    ]
)


class UndefinedT:
    """Singleton used to indicate an undefined value within argument logic."""

    __slots__ = ()
    __singleton: typing.Optional[UndefinedT] = None

    def __new__(cls) -> UndefinedT:
        if cls.__singleton is None:
            cls.__singleton = super().__new__(cls)
            assert isinstance(cls.__singleton, UndefinedT)

        return cls.__singleton

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> typing.Literal[False]:
        return False


UNDEFINED = UndefinedT()
"""A singleton used to represent an undefined value within argument logic."""


class CancelReason(str, enum.Enum):
    """The reasons an argument's collection can be cancelled for."""

    USER = "user"
    """The user replied with the cancel keyword or another command."""

    TIME = "time"
    """The user didn't reply within the argument's wait time."""

    PROMPT_LIMIT = "promptLimit"
    """The user was prompted the maximum amount of times without a valid answer."""


class LiteralDefault:
    """An argument default which is a plain value."""

    __slots__ = ("_value",)

    def __init__(self, value: typing.Any, /) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"LiteralDefault({self._value!r})"

    @property
    def value(self) -> typing.Any:
        """The default value."""
        return self._value

    async def resolve(self, ctx: kotoba.Context, argument: kotoba.Argument, /) -> typing.Any:
        """Resolve this default's value for a command call."""
        return self._value


class ComputedDefault:
    """An argument default which is computed for each command call.

    The callback is called with the [kotoba.abc.Context][] and
    [kotoba.abc.Argument][] as positional arguments, may be synchronous or
    asynchronous and may use dependency injection.
    """

    __slots__ = ("_callback",)

    def __init__(self, callback: kotoba.ArgumentCallbackSig[typing.Any], /) -> None:
        self._callback = callback

    def __repr__(self) -> str:
        return f"ComputedDefault({self._callback!r})"

    @property
    def callback(self) -> kotoba.ArgumentCallbackSig[typing.Any]:
        """The callback used to compute the default."""
        return self._callback

    async def resolve(self, ctx: kotoba.Context, argument: kotoba.Argument, /) -> typing.Any:
        """Resolve this default's value for a command call."""
        return await ctx.call_with_async_di(self._callback, ctx, argument)


Default = typing.Union[LiteralDefault, ComputedDefault]
"""Type hint of an argument's default."""


@dataclasses.dataclass(frozen=True)
class ArgumentResult:
    """Result of obtaining an argument's value."""

    value: typing.Any
    """The parsed value.

    This is always [None][] when `cancelled` is set.
    """

    cancelled: typing.Optional[CancelReason]
    """Why obtaining the value was cancelled.

    This is [None][] exactly when the value was obtained successfully.
    """

    prompts: collections.Sequence[hikari.Message] = ()
    """The prompt message's state for every round the user was prompted.

    Only one prompt message is ever created per call: every entry after the
    first is that same message after it was edited for the next round.
    """

    answers: collections.Sequence[hikari.Message] = ()
    """Every message the user sent in answer to a prompt."""

    @property
    def is_cancelled(self) -> bool:
        """Whether obtaining the value was cancelled."""
        return self.cancelled is not None


def _to_default(value: typing.Any, /) -> typing.Optional[Default]:
    if value is UNDEFINED:
        return None

    if isinstance(value, (LiteralDefault, ComputedDefault)):
        return value

    if callable(value):
        return ComputedDefault(value)

    return LiteralDefault(value)


def _is_number(value: typing.Any, /) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Argument(kotoba.Argument):
    """Standard implementation of a command argument.

    Arguments either use a type registered with the
    [TypeRegistry][kotoba.registries.TypeRegistry] or both a `validate` and
    `parse` callback; caller-supplied callbacks take precedence over the type's.
    """

    __slots__ = (
        "_default",
        "_empty_checker",
        "_error",
        "_key",
        "_label",
        "_max",
        "_min",
        "_one_of",
        "_parser",
        "_prompt",
        "_type",
        "_validator",
        "_wait",
    )

    def __init__(
        self,
        types: registries.TypeRegistry,
        key: str,
        prompt: str,
        /,
        *,
        label: typing.Optional[str] = None,
        error: typing.Optional[str] = None,
        type: typing.Optional[str] = None,
        min: typing.Optional[float] = None,
        max: typing.Optional[float] = None,
        default: typing.Any = UNDEFINED,
        one_of: typing.Optional[collections.Iterable[str]] = None,
        validate: typing.Optional[kotoba.ArgumentCallbackSig[kotoba.ValidationResult]] = None,
        parse: typing.Optional[kotoba.ArgumentCallbackSig[typing.Any]] = None,
        is_empty: typing.Optional[kotoba.ArgumentCallbackSig[bool]] = None,
        wait: float = _DEFAULT_WAIT,
    ) -> None:
        """Initialise an argument.

        Parameters
        ----------
        types
            The type registry to resolve `type` with.
        key
            Identifier of the argument, used to pass its value to the command callback.
        prompt
            The question asked when the argument wasn't provided or was invalid.
        label
            Name the argument is displayed as. Defaults to `key`.
        error
            Message which replaces any validation error message.
        type
            ID of the registered type to use.

            Several IDs separated by `|` make a union type where each type is
            tried in order (e.g. `"member|role"`).
        min
            Minimum value for numeric types or minimum length for strings.
        max
            Maximum value for numeric types or maximum length for strings.
        default
            Default value which makes the argument optional.

            Callables are treated as [ComputedDefault][kotoba.arguments.ComputedDefault]s;
            wrap a value in [LiteralDefault][kotoba.arguments.LiteralDefault] to
            use it as is. [None][] is a valid default.
        one_of
            Raw values the argument is limited to.
        validate
            Callback which overrides the type's validation.
        parse
            Callback which overrides the type's parsing.
        is_empty
            Callback which overrides the type's emptiness check.
        wait
            How many seconds to wait for each answer.

            `0` (or less) and `math.inf` mean wait forever.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If any of the provided configuration is invalid.
        """
        if types is None:
            raise errors.ConfigurationError("A type registry must be provided")

        if not isinstance(key, str) or not key:
            raise errors.ConfigurationError("Argument key must be a non-empty string", "key")

        if label is not None and not isinstance(label, str):
            raise errors.ConfigurationError("Argument label must be a string", "label")

        if not isinstance(prompt, str) or not prompt:
            raise errors.ConfigurationError("Argument prompt must be a non-empty string", "prompt")

        if error is not None and not isinstance(error, str):
            raise errors.ConfigurationError("Argument error must be a string", "error")

        if type is not None and not isinstance(type, str):
            raise errors.ConfigurationError("Argument type must be a string", "type")

        if type is None and validate is None:
            raise errors.ConfigurationError('Argument must have either "type" or "validate" specified', "type")

        for name, callback in (("validate", validate), ("parse", parse), ("is_empty", is_empty)):
            if callback is not None and not callable(callback):
                raise errors.ConfigurationError(f"Argument {name} must be callable", name)

        if type is None and (validate is None or parse is None):
            raise errors.ConfigurationError(
                "Argument must have both validate and parse since it doesn't have a type", "parse"
            )

        if not _is_number(wait) or math.isnan(wait):
            raise errors.ConfigurationError("Argument wait must be a number", "wait")

        for name, bound in (("min", min), ("max", max)):
            if bound is not None and not _is_number(bound):
                raise errors.ConfigurationError(f"Argument {name} must be a number", name)

        if one_of is not None:
            one_of = tuple(one_of)
            if not all(isinstance(option, str) for option in one_of):
                raise errors.ConfigurationError("Argument one_of must only contain strings", "one_of")

        self._default = _to_default(default)
        self._empty_checker = is_empty
        self._error = error
        self._key = key
        self._label = label or key
        self._max = max
        self._min = min
        self._one_of: typing.Optional[tuple[str, ...]] = one_of
        self._parser = parse
        self._prompt = prompt
        self._type = types.resolve(type) if type is not None else None
        self._validator = validate
        self._wait: float = wait

    @classmethod
    def from_mapping(cls, types: registries.TypeRegistry, info: collections.Mapping[str, typing.Any], /) -> Argument:
        """Build an argument from a mapping of its configuration.

        Parameters
        ----------
        types
            The type registry to resolve the argument's type with.
        info
            Mapping of the argument's configuration. This must contain `key`
            and `prompt` and may contain any of the keyword arguments accepted
            by [Argument][kotoba.arguments.Argument].

        Returns
        -------
        Argument
            The built argument.

        Raises
        ------
        kotoba.errors.ConfigurationError
            If `info` isn't a mapping, contains unknown fields or any of the
            configuration is invalid.
        """
        if not isinstance(info, collections.Mapping):
            raise errors.ConfigurationError("Argument info must be a mapping")

        if unknown := info.keys() - _INFO_FIELDS:
            raise errors.ConfigurationError(f"Unknown argument fields: {', '.join(sorted(unknown))}")

        options = dict(info)
        return cls(types, options.pop("key", None), options.pop("prompt", None), **options)

    def __repr__(self) -> str:
        return f"Argument <{self._key}>"

    @property
    def default(self) -> typing.Optional[Default]:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._default

    @property
    def error(self) -> typing.Optional[str]:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._error

    @property
    def key(self) -> str:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._key

    @property
    def label(self) -> str:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._label

    @property
    def max(self) -> typing.Optional[float]:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._max

    @property
    def min(self) -> typing.Optional[float]:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._min

    @property
    def one_of(self) -> typing.Optional[collections.Sequence[str]]:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._one_of

    @property
    def prompt(self) -> str:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._prompt

    @property
    def type(self) -> typing.Optional[kotoba.ArgumentType]:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._type

    @property
    def wait(self) -> float:
        # <<inherited docstring from kotoba.abc.Argument>>.
        return self._wait

    @property
    def timeout(self) -> typing.Optional[float]:
        """How many seconds each answer is waited for, [None][] meaning forever."""
        return self._wait if 0 < self._wait < math.inf else None

    async def validate(self, value: str, ctx: kotoba.Context, /) -> kotoba.ValidationResult:
        # <<inherited docstring from kotoba.abc.Argument>>.
        if self._validator:
            result = await ctx.call_with_async_di(self._validator, value, ctx, self)

        else:
            assert self._type is not None
            result = await self._type.validate(value, ctx, self)

        if not result or isinstance(result, str):
            return self._error or result

        return result

    async def parse(self, value: str, ctx: kotoba.Context, /) -> typing.Any:
        # <<inherited docstring from kotoba.abc.Argument>>.
        if self._parser:
            return await ctx.call_with_async_di(self._parser, value, ctx, self)

        assert self._type is not None
        return await self._type.parse(value, ctx, self)

    async def is_empty(self, value: typing.Optional[str], ctx: kotoba.Context, /) -> bool:
        # <<inherited docstring from kotoba.abc.Argument>>.
        if self._empty_checker:
            return bool(await ctx.call_with_async_di(self._empty_checker, value, ctx, self))

        if self._type:
            return await self._type.is_empty(value, ctx, self)

        return _internal.is_structurally_empty(value)

    def _render_prompt(
        self, ctx: kotoba.Context, valid: kotoba.ValidationResult, /, *, empty: bool, timeout: typing.Optional[float]
    ) -> str:
        prompt = self._prompt
        description: typing.Optional[str] = None
        if command := ctx.command:
            base_id = f"commands.{command.group}.{command.name}"
            description = localisation.localise(ctx, f"{base_id}.description", command.description)
            prompt = localisation.localise(ctx, f"{base_id}.args.{self._key}", self._prompt)

        lines: list[str] = []
        if description:
            lines.append(f"__{description}__\n")

        lines.append(f"**{prompt}**")
        # There's nothing to call invalid when the user hasn't provided anything yet.
        if not empty:
            if isinstance(valid, str) and valid:
                lines.append(valid)

            else:
                invalid_label = localisation.localise(ctx, "general.commando.invalidlabel", label=self._label)
                lines.append(f"\n__**{invalid_label}**__\n")

        footer = localisation.localise(ctx, "general.commando.cancelcmd")
        if timeout is not None:
            footer += " " + localisation.localise(ctx, "general.commando.autocancel", wait=f"{timeout:g}")

        lines.append(f"_{footer}_")
        return "\n".join(lines)

    async def obtain(
        self,
        ctx: kotoba.Context,
        value: typing.Optional[str] = None,
        /,
        *,
        prompt_limit: typing.Optional[float] = None,
    ) -> ArgumentResult:
        """Obtain this argument's value, prompting the user if necessary.

        The user is prompted in the context's channel until they provide a
        valid value, cancel, run out of time or the prompt limit is reached.
        Only one prompt message is sent per call and it's edited for every
        following round.

        Parameters
        ----------
        ctx
            Context of the command call to obtain the value for.
        value
            The value provided alongside the command call, if any.
        prompt_limit
            Maximum amount of times to prompt the user.

            [None][] and `math.inf` mean unlimited.

        Returns
        -------
        ArgumentResult
            The obtained value or the reason it couldn't be obtained, along
            with the prompts sent and answers received.

        Raises
        ------
        Exception
            Any error raised by a validator, parser or emptiness check is
            propagated as is.
        """
        empty = await self.is_empty(value, ctx)
        if empty and self._default is not None:
            return ArgumentResult(await self._default.resolve(ctx, self), None)

        timeout = self.timeout
        prompts: list[hikari.Message] = []
        answers: list[hikari.Message] = []
        valid: kotoba.ValidationResult = False if empty else await self.validate(typing.cast("str", value), ctx)

        while not valid or isinstance(valid, str):
            if prompt_limit is not None and len(prompts) >= prompt_limit:
                _LOGGER.debug("Prompt limit reached for argument %r", self._key)
                return ArgumentResult(None, CancelReason.PROMPT_LIMIT, prompts, answers)

            text = self._render_prompt(ctx, valid, empty=empty, timeout=timeout)
            if prompts:
                prompts.append(await ctx.edit_message(prompts[0], text))

            else:
                prompts.append(await ctx.respond(text, reply=True))

            answer = await ctx.wait_for_reply(timeout=timeout)
            if answer is None:
                return ArgumentResult(None, CancelReason.TIME, prompts, answers)

            answers.append(answer)
            value = answer.content or ""
            # A reply which invokes another command is kept for that command to reply to.
            if await ctx.client.find_invocation(ctx, value):
                return ArgumentResult(None, CancelReason.USER, prompts, answers)

            await ctx.delete_message(answer)
            if value.strip().lower() == CANCEL_KEYWORD:
                return ArgumentResult(None, CancelReason.USER, prompts, answers)

            empty = await self.is_empty(value, ctx)
            valid = False if empty else await self.validate(value, ctx)

        if prompts:
            await ctx.delete_message(prompts[0])

        return ArgumentResult(await self.parse(typing.cast("str", value), ctx), None, prompts, answers)
