# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

from ..bits import human_readable


def render(report, **opts):
    rows = [("IRQ", "TOTAL", "HWIRQ", "DESCRIPTION")]
    for irq in report.interrupts:
        rows.append(
            (
                irq.name,
                human_readable(irq.count),
                "" if irq.hwirq is None else str(irq.hwirq),
                irq.description or "",
            )
        )
    widths = [max(len(row[i]) for row in rows) for i in range(3)]
    for name, total, hwirq, desc in rows:
        line = f"{name:>{widths[0]}}  {total:>{widths[1]}}  {hwirq:>{widths[2]}}"
        print(f"{line}  {desc}".rstrip())
