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
"""Internal utility functions used by Kotoba."""
from __future__ import annotations

__all__: list[str] = []

import re
import typing
from collections import abc as collections

_QUOTED_ARGUMENT = re.compile(r"""\s*(?:(["'])(.*?)\1|(\S+))\s*""", re.DOTALL)
_DOUBLE_QUOTED_ARGUMENT = re.compile(r"""\s*(?:(")(.*?)"|(\S+))\s*""", re.DOTALL)
_WRAPPING_QUOTES = re.compile(r"""^(["'])(.*)\1$""", re.DOTALL)
_WRAPPING_DOUBLE_QUOTES = re.compile(r"""^(")(.*)"$""", re.DOTALL)


def is_structurally_empty(value: typing.Any, /) -> bool:
    """Check whether a value is empty based on its structure alone.

    Empty sequences and falsy scalars are considered empty.
    """
    if isinstance(value, collections.Sequence) and not isinstance(value, str):
        return len(value) == 0

    return not value


def split_arguments(content: str, count: int, /, *, allow_single_quote: bool = True) -> list[str]:
    """Split raw message content into at most `count` argument values.

    Whitespace separates values unless they're wrapped in quotes and the last
    value takes whatever content remains (minus any wrapping quotes).

    Parameters
    ----------
    content
        The content to split.
    count
        The maximum amount of values to split into.
    allow_single_quote
        Whether single quotes may be used to wrap values alongside double quotes.

    Returns
    -------
    list[str]
        The split values.
    """
    pattern = _QUOTED_ARGUMENT if allow_single_quote else _DOUBLE_QUOTED_ARGUMENT
    results: list[str] = []
    position = 0
    while len(results) < count - 1:
        match = pattern.match(content, position)
        if not match or match.end() == position:
            break

        results.append(match.group(2) if match.group(1) else match.group(3))
        position = match.end()

    if remainder := content[position:].strip():
        quotes = _WRAPPING_QUOTES if allow_single_quote else _WRAPPING_DOUBLE_QUOTES
        results.append(quotes.sub(r"\2", remainder))

    return results
