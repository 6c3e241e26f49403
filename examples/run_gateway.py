# -*- coding: utf-8 -*-
# cython: language_level=3
# Kotoba Examples - A collection of examples for Kotoba.
# Written in 2022 by Faster Speeding
#
# To the extent possible under law, the author(s) have dedicated all copyright
# and related and neighboring rights to this software to the public domain worldwide.
# This software is distributed without any warranty.
#
# You should have received a copy of the CC0 Public Domain Dedication along with this software.
# If not, see <https://creativecommons.org/publicdomain/zero/1.0/>.
"""Example of running a gateway bot with Kotoba's interactive commands."""
import os
import random

import alluka
import hikari

import kotoba


@kotoba.with_argument("count", "How many dice would you like to roll?", type="integer", min=1, max=10)
@kotoba.with_argument("sides", "How many sides should the dice have?", type="integer", min=2, max=100, default=6)
@kotoba.as_command("roll", "dice", description="Rolls some dice.", group="fun", examples=["roll 2", "roll 3 20"])
async def roll_command(ctx: kotoba.abc.Context, count: int, sides: int) -> None:
    results = [random.randint(1, sides) for _ in range(count)]
    await ctx.respond(f"You rolled {', '.join(map(str, results))} (total {sum(results)}).")


# A role or member can be given as a mention, an ID or be asked for once the command's been sent.
@kotoba.with_argument("member", "Which member would you like to give a role to?", type="member")
@kotoba.with_argument("role", "Which role should they be given?", type="role")
@kotoba.as_command("giverole", description="Gives a member a role.", group="mod", guild_only=True, prompt_limit=3)
async def give_role_command(
    ctx: kotoba.abc.Context,
    member: hikari.Member,
    role: hikari.Role,
    client: kotoba.Client = alluka.inject(type=kotoba.Client),
) -> None:
    try:
        await member.add_role(role, reason=f"Given by {ctx.author.id}")

    except hikari.ForbiddenError:
        raise kotoba.CommandError("I'm not allowed to give that role out") from None

    assert ctx.guild_id is not None
    await client.log(ctx.guild_id, f"{ctx.author.mention} gave {member.mention} the {role.name} role.")
    await ctx.respond(f"Gave {member.mention} the {role.name} role.")


async def on_role_add(event: kotoba.events.MemberRoleAddEvent) -> None:
    print(f"{event.user_id} was given {event.role_id} in {event.guild_id}")  # noqa: T201


async def on_prefix_change(event: kotoba.events.PrefixChangeEvent) -> None:
    print(f"Prefix for {event.guild_id or 'global scope'} changed to {event.new_prefix!r}")  # noqa: T201


def run() -> None:
    # Members intent is needed for the role events and the message content intent for prefixed commands.
    bot = hikari.GatewayBot(os.environ["BOT_TOKEN"], intents=hikari.Intents.ALL)
    (
        kotoba.Client.from_gateway_bot(
            bot, owner_ids=[int(os.environ["OWNER_ID"])], settings=kotoba.InMemorySettingsProvider()
        )
        .add_command(roll_command)
        .add_command(give_role_command)
    )
    bot.subscribe(kotoba.events.MemberRoleAddEvent, on_role_add)
    bot.subscribe(kotoba.events.PrefixChangeEvent, on_prefix_change)
    bot.run()


if __name__ == "__main__":
    run()
