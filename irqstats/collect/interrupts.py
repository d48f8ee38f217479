# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

import re
import typing

from . import D, ParseError
from ..bits import is_numeric
from .layout import Layout


# Stop processing after this many IRQs have been seen
MAX_IRQS = 256
# Sufficient even on a system with 256 threads
MAX_LINE = 4096
MAX_TOKENS = 32

TOKEN_RE = re.compile(r"\S+")


def parse_interrupts(
    lines: typing.Iterable[str], layout: Layout, describe: bool = False
) -> typing.List[D]:
    """
    Parse the contents of /proc/interrupts.

    The first line has one column per CPU, each following line holds an
    interrupt name, one counter per CPU and an optional description. The
    description is only parsed when describe is True.
    """
    lines = iter(lines)
    header = next(lines, None)
    if header is None:
        raise ParseError(0, "missing CPU header")
    columns = parse_header(strip_eol(0, header))

    irqs = []
    names = set()
    for line_num, line in enumerate(lines, 1):
        if len(irqs) == MAX_IRQS:
            break
        irq = parse_line(line_num, strip_eol(line_num, line), columns, layout, describe)
        if irq is None:
            continue
        if irq.name in names:
            raise ParseError(line_num, f"duplicate interrupt '{irq.name}'")
        names.add(irq.name)
        irqs.append(irq)

    return irqs


def strip_eol(line_num: int, line: str) -> str:
    line = line.rstrip("\n")
    if len(line) > MAX_LINE - 2:
        raise ParseError(line_num, f"line too long ({len(line)} characters)")
    return line


def parse_header(line: str) -> int:
    cpus = line.split()
    if not cpus:
        raise ParseError(0, "empty CPU header")
    for cpu in cpus:
        if not cpu.startswith("CPU"):
            raise ParseError(0, f"expected CPU, got '{cpu}'")
    return len(cpus)


def parse_name(line_num: int, token: str) -> str:
    if not token.endswith(":"):
        raise ParseError(line_num, f"expected name '{token}' is missing ':'")
    name = token[:-1]
    if not name or ":" in name:
        raise ParseError(line_num, f"invalid interrupt name '{token}'")
    return name


def parse_line(
    line_num: int, line: str, columns: int, layout: Layout, describe: bool
) -> typing.Optional[D]:
    tokens = TOKEN_RE.finditer(line)
    match = next(tokens, None)
    if match is None:
        raise ParseError(line_num, "empty line")
    if layout.skip_line(match.group()):
        return None

    name = parse_name(line_num, match.group())
    count = 0
    end = match.end()

    # Some interrupts, such as ERR or MIS, only have a single counter
    # rather than one per CPU.
    for cpu in range(columns):
        match = next(tokens, None)
        if match is None or not is_numeric(match.group()):
            if cpu > 0:
                break
            if match is None:
                raise ParseError(line_num, f"'{name}' has no counters")
            raise ParseError(
                line_num, f"'{name}' has only garbage '{match.group()}'"
            )
        count += int(match.group(), 10)
        end = match.end()

    irq = D(name=name, count=count, description=None, hwirq=None)
    if describe:
        irq.description, irq.hwirq = parse_description(
            line_num, name, line[end:], layout
        )
    return irq


def parse_description(
    line_num: int, name: str, tail: str, layout: Layout
) -> typing.Tuple[typing.Optional[str], typing.Optional[int]]:
    tail = tail.strip()
    if not tail:
        return None, None

    # Not a numbered IRQ (NMI, LOC, etc.), the description is everything
    # that remains.
    if not is_numeric(name):
        return tail, None

    tokens = tail.split()
    if len(tokens) > MAX_TOKENS:
        raise ParseError(
            line_num, f"'{name}' has more than {MAX_TOKENS} description tokens"
        )
    if len(tokens) == 1:
        return tokens[0], None

    start, hwirq = layout.split(name, tokens)
    return " ".join(tokens[start:]) or None, hwirq
