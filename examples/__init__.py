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
"""Example usage of Kotoba."""
