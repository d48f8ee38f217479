# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

import re
import typing


INT_RE = re.compile(r"[0-9]+")


def is_numeric(token: str) -> bool:
    """
    Only plain ASCII decimal digits, no sign. str.isdigit() would accept
    superscripts and other unicode digits.
    """
    return INT_RE.fullmatch(token) is not None


def leading_int(token: str) -> typing.Optional[int]:
    match = INT_RE.match(token)
    if match is None:
        return None
    return int(match.group(), 10)


def human_readable(value: float, order: int = 1000) -> str:
    units = ("K", "M", "G", "T", "P")
    i = 0
    unit = ""
    while value >= order and i < len(units):
        unit = units[i]
        value /= order
        i += 1
    if unit == "":
        return str(value)
    if order == 1024:
        unit += "i"
    if value < 100 and value % 1 > 0:
        return f"{value:.1f}{unit}"
    return f"{value:.0f}{unit}"
