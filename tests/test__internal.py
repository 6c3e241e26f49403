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

import typing

import pytest

from kotoba import _internal


class TestIsStructurallyEmpty:
    @pytest.mark.parametrize("value", ["", None, 0, False, [], ()])
    def test_when_empty(self, value: typing.Any):
        assert _internal.is_structurally_empty(value) is True

    @pytest.mark.parametrize("value", ["a", 1, True, [0], ("",), " "])
    def test_when_not_empty(self, value: typing.Any):
        assert _internal.is_structurally_empty(value) is False


class TestSplitArguments:
    def test(self):
        assert _internal.split_arguments("hello big world", 3) == ["hello", "big", "world"]

    def test_last_value_takes_remainder(self):
        assert _internal.split_arguments("hello big wide world", 2) == ["hello", "big wide world"]

    def test_quoted_values(self):
        result = _internal.split_arguments("\"big world\" 'small one' rest of it", 3)

        assert result == ["big world", "small one", "rest of it"]

    def test_quoted_remainder_is_unwrapped(self):
        assert _internal.split_arguments('meow "the remainder"', 2) == ["meow", "the remainder"]

    def test_when_fewer_values_than_count(self):
        assert _internal.split_arguments("  only  ", 3) == ["only"]

    def test_when_empty(self):
        assert _internal.split_arguments("   ", 2) == []

    def test_single_value(self):
        assert _internal.split_arguments(" 'wrapped value' ", 1) == ["wrapped value"]

    def test_when_single_quotes_disallowed(self):
        result = _internal.split_arguments("'not quoted' \"quoted\"", 3, allow_single_quote=False)

        assert result == ["'not", "quoted'", "quoted"]
