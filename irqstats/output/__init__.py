# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

from . import json, munin, text


FORMATS = {"munin": munin, "json": json, "text": text}
DEFAULT_FORMAT = "munin"


def render(report, fmt: str = DEFAULT_FORMAT, **opts):
    if fmt not in FORMATS:
        raise ValueError(f"unknown format: {fmt}")
    if not report.interrupts:
        raise ValueError("no interrupts found")
    FORMATS[fmt].render(report, **opts)
