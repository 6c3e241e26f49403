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

import math
import typing
from unittest import mock

import alluka
import pytest

import kotoba
from kotoba import arguments


def make_context(*replies: typing.Optional[str]) -> mock.Mock:
    ctx = mock.Mock(kotoba.abc.Context)
    ctx.command = None
    ctx.locale = "en-US"
    ctx.client = mock.Mock(localiser=None, find_invocation=mock.AsyncMock(return_value=None))
    ctx.call_with_async_di = alluka.Client().call_with_async_di
    ctx.respond = mock.AsyncMock(return_value=mock.Mock(name="prompt"))
    ctx.edit_message = mock.AsyncMock(side_effect=lambda message, content: message)
    ctx.delete_message = mock.AsyncMock(return_value=True)
    ctx.wait_for_reply = mock.AsyncMock(
        side_effect=[None if reply is None else mock.Mock(content=reply) for reply in replies]
    )
    return ctx


@pytest.fixture()
def types() -> kotoba.TypeRegistry:
    return kotoba.TypeRegistry().register_defaults()


class TestArgumentInit:
    def test_defaults(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "What's your name?", type="string")

        assert argument.key == "name"
        assert argument.label == "name"
        assert argument.prompt == "What's your name?"
        assert argument.error is None
        assert argument.type is types.get("string")
        assert argument.min is None
        assert argument.max is None
        assert argument.default is None
        assert argument.one_of is None
        assert argument.wait == 30
        assert argument.timeout == 30

    def test_with_label(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "What's your name?", type="string", label="your name")

        assert argument.label == "your name"

    def test_when_types_missing(self):
        with pytest.raises(kotoba.ConfigurationError, match="A type registry must be provided"):
            kotoba.Argument(None, "name", "What?", type="string")  # type: ignore

    @pytest.mark.parametrize("key", ["", 123, None])
    def test_when_key_invalid(self, types: kotoba.TypeRegistry, key: typing.Any):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, key, "What?", type="string")

        assert exc_info.value.field == "key"

    def test_when_label_not_string(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type="string", label=123)  # type: ignore

        assert exc_info.value.field == "label"

    @pytest.mark.parametrize("prompt", ["", 5, None])
    def test_when_prompt_invalid(self, types: kotoba.TypeRegistry, prompt: typing.Any):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", prompt, type="string")

        assert exc_info.value.field == "prompt"

    def test_when_error_not_string(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type="string", error=False)  # type: ignore

        assert exc_info.value.field == "error"

    def test_when_type_not_string(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type=42)  # type: ignore

        assert exc_info.value.field == "type"

    def test_when_type_not_registered(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError, match="Argument type 'emoji' isn't registered"):
            kotoba.Argument(types, "name", "What?", type="emoji")

    def test_when_union_member_not_registered(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError, match="Argument type 'emoji' isn't registered"):
            kotoba.Argument(types, "name", "What?", type="member|emoji")

        assert not types.has("member|emoji")

    def test_when_neither_type_nor_validate(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError, match='either "type" or "validate"'):
            kotoba.Argument(types, "name", "What?")

    @pytest.mark.parametrize("field", ["validate", "parse", "is_empty"])
    def test_when_callback_not_callable(self, types: kotoba.TypeRegistry, field: str):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type="string", **{field: "not callable"})

        assert exc_info.value.field == field

    def test_when_validate_without_parse_or_type(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError, match="both validate and parse"):
            kotoba.Argument(types, "name", "What?", validate=lambda value, ctx, argument: True)

    def test_with_validate_and_parse_without_type(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(
            types, "name", "What?", validate=lambda value, ctx, arg: True, parse=lambda value, ctx, arg: value
        )

        assert argument.type is None

    @pytest.mark.parametrize("wait", [math.nan, "30", True, None])
    def test_when_wait_invalid(self, types: kotoba.TypeRegistry, wait: typing.Any):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type="string", wait=wait)

        assert exc_info.value.field == "wait"

    @pytest.mark.parametrize(("wait", "timeout"), [(0, None), (-5, None), (math.inf, None), (12.5, 12.5)])
    def test_timeout_property(self, types: kotoba.TypeRegistry, wait: float, timeout: typing.Optional[float]):
        argument = kotoba.Argument(types, "name", "What?", type="string", wait=wait)

        assert argument.wait == wait
        assert argument.timeout == timeout

    def test_when_min_not_number(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type="string", min="1")  # type: ignore

        assert exc_info.value.field == "min"

    def test_when_one_of_contains_non_string(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument(types, "name", "What?", type="integer", one_of=[1, 2])  # type: ignore

        assert exc_info.value.field == "one_of"

    def test_configuration_error_is_value_error(self, types: kotoba.TypeRegistry):
        with pytest.raises(ValueError):
            kotoba.Argument(types, "", "What?", type="string")

    def test_union_type_is_resolved_once(self, types: kotoba.TypeRegistry):
        first = kotoba.Argument(types, "target", "Who?", type="member|role")
        second = kotoba.Argument(types, "other", "Who else?", type="member|role")

        assert isinstance(first.type, kotoba.types.UnionType)
        assert first.type is second.type
        assert types.get("member|role") is first.type

    def test_default_when_callable(self, types: kotoba.TypeRegistry):
        def callback(ctx: kotoba.abc.Context, argument: kotoba.abc.Argument) -> str:
            raise NotImplementedError

        argument = kotoba.Argument(types, "name", "What?", type="string", default=callback)

        assert isinstance(argument.default, kotoba.ComputedDefault)
        assert argument.default.callback is callback

    def test_default_when_none(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "What?", type="string", default=None)

        assert isinstance(argument.default, kotoba.LiteralDefault)
        assert argument.default.value is None

    def test_default_when_literal_default_of_callable(self, types: kotoba.TypeRegistry):
        literal = kotoba.LiteralDefault(len)

        argument = kotoba.Argument(types, "name", "What?", type="string", default=literal)

        assert argument.default is literal


class TestArgumentFromMapping:
    def test(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument.from_mapping(
            types, {"key": "amount", "prompt": "How many?", "type": "integer", "min": 1, "max": 10, "wait": 60}
        )

        assert argument.key == "amount"
        assert argument.prompt == "How many?"
        assert argument.type is types.get("integer")
        assert argument.min == 1
        assert argument.max == 10
        assert argument.wait == 60

    def test_when_not_mapping(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError, match="Argument info must be a mapping"):
            kotoba.Argument.from_mapping(types, [("key", "amount")])  # type: ignore

    def test_when_unknown_field(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError, match="Unknown argument fields: colour"):
            kotoba.Argument.from_mapping(types, {"key": "a", "prompt": "b", "type": "string", "colour": "red"})

    def test_when_key_missing(self, types: kotoba.TypeRegistry):
        with pytest.raises(kotoba.ConfigurationError) as exc_info:
            kotoba.Argument.from_mapping(types, {"prompt": "b", "type": "string"})

        assert exc_info.value.field == "key"


class TestArgumentFacades:
    @pytest.mark.asyncio()
    async def test_validate_uses_type(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer")

        assert await argument.validate("12", make_context()) is True
        assert await argument.validate("twelve", make_context()) is False

    @pytest.mark.asyncio()
    async def test_validate_prefers_callback(self, types: kotoba.TypeRegistry):
        calls: list[tuple[typing.Any, ...]] = []

        def validate(value: str, ctx: kotoba.abc.Context, argument: kotoba.abc.Argument) -> bool:
            calls.append((value, ctx, argument))
            return value == "sure"

        argument = kotoba.Argument(types, "answer", "Yes?", type="boolean", validate=validate)
        ctx = make_context()

        assert await argument.validate("yes", ctx) is False
        assert await argument.validate("sure", ctx) is True
        assert calls == [("yes", ctx, argument), ("sure", ctx, argument)]

    @pytest.mark.asyncio()
    async def test_validate_replaces_failure_with_error(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer", max=3, error="Pick 1 to 3.")

        assert await argument.validate("nope", make_context()) == "Pick 1 to 3."
        assert await argument.validate("7", make_context()) == "Pick 1 to 3."
        assert await argument.validate("2", make_context()) is True

    @pytest.mark.asyncio()
    async def test_validate_returns_type_message(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "prefix", "Prefix?", type="string", max=15)

        result = await argument.validate("toolongprefixvalue", make_context())

        assert result == "Please keep the prefix below or exactly 15 characters."

    @pytest.mark.asyncio()
    async def test_parse_prefers_async_callback(self, types: kotoba.TypeRegistry):
        async def parse(value: str, ctx: kotoba.abc.Context, argument: kotoba.abc.Argument) -> str:
            return value.upper()

        argument = kotoba.Argument(types, "name", "Name?", type="string", parse=parse)

        assert await argument.parse("meow", make_context()) == "MEOW"

    @pytest.mark.asyncio()
    async def test_is_empty_prefers_callback(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(
            types, "name", "Name?", type="string", is_empty=lambda value, ctx, arg: value == "nothing"
        )

        assert await argument.is_empty("nothing", make_context()) is True
        assert await argument.is_empty("", make_context()) is False

    @pytest.mark.asyncio()
    async def test_is_empty_uses_type(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "Name?", type="string")

        assert await argument.is_empty("", make_context()) is True
        assert await argument.is_empty(None, make_context()) is True
        assert await argument.is_empty("a", make_context()) is False

    @pytest.mark.asyncio()
    async def test_is_empty_falls_back_to_structure(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(
            types, "name", "Name?", validate=lambda value, ctx, arg: True, parse=lambda value, ctx, arg: value
        )

        assert await argument.is_empty("", make_context()) is True
        assert await argument.is_empty("x", make_context()) is False


class TestArgumentObtain:
    @pytest.mark.asyncio()
    async def test_when_valid_value_provided(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer")
        ctx = make_context()

        result = await argument.obtain(ctx, "42")

        assert result.value == 42
        assert result.cancelled is None
        assert list(result.prompts) == []
        assert list(result.answers) == []
        ctx.respond.assert_not_called()
        ctx.wait_for_reply.assert_not_called()
        ctx.delete_message.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_empty_with_literal_default(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "prefix", "Prefix?", type="string", max=15, default="")
        ctx = make_context()

        result = await argument.obtain(ctx, None)

        assert result == arguments.ArgumentResult("", None)
        ctx.respond.assert_not_called()
        ctx.wait_for_reply.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_empty_with_none_default(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "user", "Who?", type="user", default=None)
        ctx = make_context()

        result = await argument.obtain(ctx, "")

        assert result.value is None
        assert result.cancelled is None
        ctx.respond.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_empty_with_computed_default(self, types: kotoba.TypeRegistry):
        calls: list[tuple[typing.Any, ...]] = []

        def default(ctx: kotoba.abc.Context, argument: kotoba.abc.Argument) -> str:
            calls.append((ctx, argument))
            return "computed"

        argument = kotoba.Argument(types, "name", "Name?", type="string", default=default)
        ctx = make_context()

        result = await argument.obtain(ctx)

        assert result.value == "computed"
        assert result.cancelled is None
        assert calls == [(ctx, argument)]

    @pytest.mark.asyncio()
    async def test_when_empty_prompts_until_answered(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "What's your name?", type="string")
        ctx = make_context("Reinhard")

        result = await argument.obtain(ctx)

        assert result.value == "Reinhard"
        assert result.cancelled is None
        assert list(result.prompts) == [ctx.respond.return_value]
        assert [answer.content for answer in result.answers] == ["Reinhard"]
        ctx.respond.assert_awaited_once_with(
            "**What's your name?**\n"
            "_Respond with `cancel` to cancel the command. "
            "The command will automatically be cancelled in 30 seconds._",
            reply=True,
        )
        ctx.wait_for_reply.assert_awaited_once_with(timeout=30)
        ctx.delete_message.assert_has_awaits([mock.call(result.answers[0]), mock.call(ctx.respond.return_value)])
        ctx.edit_message.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_invalid_value_shows_explanation(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "prefix", "What prefix?", type="string", max=15, default="")
        ctx = make_context("?")

        result = await argument.obtain(ctx, "toolongprefixvalue")

        assert result.value == "?"
        assert result.cancelled is None
        assert len(result.prompts) == 1
        assert len(result.answers) == 1
        prompt_text = ctx.respond.call_args.args[0]
        assert "**What prefix?**" in prompt_text
        assert "Please keep the prefix below or exactly 15 characters." in prompt_text

    @pytest.mark.asyncio()
    async def test_when_invalid_without_message_shows_invalid_label(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer", label="amount of cookies")
        ctx = make_context("3")

        await argument.obtain(ctx, "lots")

        prompt_text = ctx.respond.call_args.args[0]
        assert "You provided an invalid amount of cookies. Please try again." in prompt_text

    @pytest.mark.asyncio()
    async def test_when_empty_doesnt_show_invalid_label(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer")
        ctx = make_context("3")

        await argument.obtain(ctx, "")

        assert "invalid" not in ctx.respond.call_args.args[0]

    @pytest.mark.asyncio()
    async def test_edits_prompt_on_later_rounds(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer", min=1)
        ctx = make_context("zero", "0", "5")

        result = await argument.obtain(ctx)

        assert result.value == 5
        assert result.cancelled is None
        ctx.respond.assert_awaited_once()
        prompt = ctx.respond.return_value
        assert ctx.edit_message.await_count == 2
        assert ctx.edit_message.call_args_list[0].args[0] is prompt
        assert "Please enter a number above or exactly 1." in ctx.edit_message.call_args_list[1].args[1]
        assert list(result.prompts) == [prompt, prompt, prompt]
        assert [answer.content for answer in result.answers] == ["zero", "0", "5"]
        # Every answer then the prompt itself.
        assert ctx.delete_message.await_count == 4
        ctx.delete_message.assert_awaited_with(prompt)

    @pytest.mark.asyncio()
    async def test_parses_once_after_several_rounds(self, types: kotoba.TypeRegistry):
        calls: list[str] = []

        def parse(value: str, ctx: kotoba.abc.Context, argument: kotoba.abc.Argument) -> str:
            calls.append(value)
            return f"parsed {value}"

        argument = kotoba.Argument(
            types, "letter", "Which letter?", validate=lambda value, ctx, arg: value == "y", parse=parse
        )
        ctx = make_context("x", "y")

        result = await argument.obtain(ctx, "w")

        assert result.value == "parsed y"
        assert result.cancelled is None
        assert calls == ["y"]
        assert len(result.prompts) == 2

    @pytest.mark.asyncio()
    @pytest.mark.parametrize("reply", ["cancel", "  CANCEL ", "Cancel"])
    async def test_when_user_cancels(self, types: kotoba.TypeRegistry, reply: str):
        argument = kotoba.Argument(types, "name", "Name?", type="string")
        ctx = make_context(reply)

        result = await argument.obtain(ctx)

        assert result.value is None
        assert result.cancelled is kotoba.CancelReason.USER
        assert result.cancelled == "user"
        assert len(result.prompts) == 1
        assert [answer.content for answer in result.answers] == [reply]
        ctx.delete_message.assert_awaited_once_with(result.answers[0])

    @pytest.mark.asyncio()
    async def test_when_reply_invokes_command(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "Name?", type="string")
        ctx = make_context("!help")
        ctx.client.find_invocation.return_value = mock.Mock(kotoba.abc.Command)

        result = await argument.obtain(ctx)

        assert result.value is None
        assert result.cancelled is kotoba.CancelReason.USER
        ctx.client.find_invocation.assert_awaited_once_with(ctx, "!help")
        ctx.delete_message.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_no_reply_in_time(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "Name?", type="string", wait=10)
        ctx = make_context(None)

        result = await argument.obtain(ctx)

        assert result.value is None
        assert result.cancelled is kotoba.CancelReason.TIME
        assert len(result.prompts) == 1
        assert list(result.answers) == []
        ctx.wait_for_reply.assert_awaited_once_with(timeout=10)
        ctx.delete_message.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_waiting_forever(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "name", "Name?", type="string", wait=0)
        ctx = make_context("Emilia")

        result = await argument.obtain(ctx)

        assert result.value == "Emilia"
        ctx.wait_for_reply.assert_awaited_once_with(timeout=None)
        assert "automatically be cancelled" not in ctx.respond.call_args.args[0]

    @pytest.mark.asyncio()
    async def test_when_prompt_limit_reached(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer")
        ctx = make_context("nope", "still no")

        result = await argument.obtain(ctx, prompt_limit=2)

        assert result.value is None
        assert result.cancelled is kotoba.CancelReason.PROMPT_LIMIT
        assert len(result.prompts) == 2
        assert [answer.content for answer in result.answers] == ["nope", "still no"]

    @pytest.mark.asyncio()
    async def test_when_prompt_limit_is_zero(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer")
        ctx = make_context()

        result = await argument.obtain(ctx, "nope", prompt_limit=0)

        assert result.cancelled is kotoba.CancelReason.PROMPT_LIMIT
        assert list(result.prompts) == []
        ctx.respond.assert_not_called()

    @pytest.mark.asyncio()
    async def test_when_prompt_limit_is_infinite(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer")
        ctx = make_context("a", "b", "c", "4")

        result = await argument.obtain(ctx, prompt_limit=math.inf)

        assert result.value == 4
        assert len(result.prompts) == 4

    @pytest.mark.asyncio()
    async def test_when_validator_raises(self, types: kotoba.TypeRegistry):
        def validate(value: str, ctx: kotoba.abc.Context, argument: kotoba.abc.Argument) -> bool:
            raise RuntimeError("oh no")

        argument = kotoba.Argument(types, "name", "Name?", type="string", validate=validate)

        with pytest.raises(RuntimeError, match="oh no"):
            await argument.obtain(make_context(), "value")

    @pytest.mark.asyncio()
    async def test_prompt_uses_error_override(self, types: kotoba.TypeRegistry):
        argument = kotoba.Argument(types, "amount", "How many?", type="integer", error="Numbers only!")
        ctx = make_context("2")

        await argument.obtain(ctx, "two")

        assert "Numbers only!" in ctx.respond.call_args.args[0]

    @pytest.mark.asyncio()
    async def test_prompt_includes_localised_command_text(self, types: kotoba.TypeRegistry):
        localiser = kotoba.localisation.BasicLocaliser().set_variants(
            "commands.bot.prefix.args.prefix", {"en-US": "Which prefix, friend?"}
        )
        argument = kotoba.Argument(types, "prefix", "What prefix?", type="string")
        ctx = make_context("-")
        ctx.client.localiser = localiser
        ctx.command = mock.Mock(kotoba.abc.Command, group="bot", description="Shows or sets the command prefix.")
        ctx.command.name = "prefix"

        await argument.obtain(ctx)

        prompt_text = ctx.respond.call_args.args[0]
        assert prompt_text.startswith("__Shows or sets the command prefix.__\n")
        assert "**Which prefix, friend?**" in prompt_text
