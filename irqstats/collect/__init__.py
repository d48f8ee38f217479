# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

import pathlib
import typing


INTERRUPTS = pathlib.Path("/proc/interrupts")


class D(dict):

    def __getattr__(self, attr):
        try:
            return self[attr]
        except KeyError as e:
            raise AttributeError(attr) from e

    def __setattr__(self, attr, value):
        return self.__setitem__(attr, value)


class ParseError(ValueError):
    def __init__(self, line_num: int, msg: str):
        super().__init__(f"line {line_num}: {msg}")
        self.line_num = line_num


def parse_report(
    path: pathlib.Path = INTERRUPTS,
    arch: typing.Optional[str] = None,
    describe: bool = False,
) -> D:
    from . import interrupts, layout

    lay = layout.get_layout(arch)
    with open(path, encoding="utf-8", errors="replace") as f:
        irqs = interrupts.parse_interrupts(f, lay, describe=describe)
    return D(source=str(path), arch=lay.name, interrupts=irqs)
