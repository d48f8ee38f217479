# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

"""
Architecture specific layouts of the description columns in /proc/interrupts.

After the per-CPU counters, numbered interrupts carry the interrupt chip
name, sometimes a hardware IRQ number, sometimes a type (Edge, Level, None)
and then the list of devices. Which columns are present depends on the
architecture the kernel runs on.
"""

import platform
import re
import typing

from ..bits import is_numeric, leading_int


TYPES = frozenset(("Edge", "Level", "None"))


class Layout:
    name = "generic"

    def skip_line(self, name_token: str) -> bool:
        return False

    def split(self, name: str, tokens: typing.List[str]):
        """
        Return the index of the first description token and the hardware
        IRQ number if it could be determined (None otherwise).

        tokens always holds at least two items.
        """
        irq = int(name, 10)
        if len(tokens) > 2 and is_numeric(tokens[1]):
            #                          [0]     [1][2]   [3-]
            # 38:  150262  0  0  0     OpenPIC 38 Level i2c-mpc, i2c-mpc
            #
            #                     [0]   [1] [2-]
            #  3:  247552271      MIPS   3  ehci_hcd:usb1
            #
            #                 [0]            [1][2]       [3-]
            # 33:     617373  f1010140.gpio  17 Edge      pps.-1
            hwirq = int(tokens[1], 10)
            start = 2
            # MIPS has been seen to not show the type
            if tokens[2] in TYPES:
                start = 3
            return start, (hwirq if hwirq != irq else None)
        return self.fallback(irq, tokens)

    def fallback(self, irq: int, tokens: typing.List[str]):
        return 1, None


class ArmLayout(Layout):
    name = "arm"

    def skip_line(self, name_token: str) -> bool:
        # only lists the devices wired to the FIQ, without any counters
        return name_token == "FIQ:"


class PowerPCLayout(Layout):
    name = "powerpc"


class MipsLayout(Layout):
    name = "mips"


class X86Layout(Layout):
    name = "x86"

    SUFFIXES = ("-fasteoi", "-edge")

    def fallback(self, irq: int, tokens: typing.List[str]):
        #               [0]     [1]        [2-]
        #  16:    0  0  IO-APIC 16-fasteoi i801_smbus
        hwirq = tokens[1]
        if is_numeric(hwirq[:1]) and hwirq.endswith(self.SUFFIXES):
            hwirq = leading_int(hwirq)
            return 2, (hwirq if hwirq != irq else None)
        return 1, None


class SparcLayout(Layout):
    name = "sparc"

    CONTROLLERS = ("SCHIZO_", "PSYCHO_")

    def split(self, name: str, tokens: typing.List[str]):
        start = 1
        if len(tokens) > 2 and tokens[1].startswith("-"):
            start = 2
        # There are many duplicate MSIQ interrupts (one per thread), and
        # PCI controller names are repeated as well. Show the IRQ number
        # to tell them apart.
        label = tokens[start]
        if label == "MSIQ" or label.startswith(self.CONTROLLERS):
            return start, int(name, 10)
        return start, None


LAYOUTS = {
    cls.name: cls
    for cls in (Layout, X86Layout, ArmLayout, PowerPCLayout, MipsLayout, SparcLayout)
}
ARCHES = tuple(LAYOUTS)

MACHINES = (
    (re.compile(r"^(i[3-6]86|x86_64|amd64)$", re.IGNORECASE), "x86"),
    (re.compile(r"^(arm|aarch64)"), "arm"),
    (re.compile(r"^(ppc|powerpc)"), "powerpc"),
    (re.compile(r"^mips"), "mips"),
    (re.compile(r"^sparc|^sun4"), "sparc"),
)


def detect_arch(machine: typing.Optional[str] = None) -> str:
    if machine is None:
        machine = platform.machine()
    for regex, arch in MACHINES:
        if regex.match(machine):
            return arch
    return Layout.name


def get_layout(arch: typing.Optional[str] = None) -> Layout:
    if arch is None:
        arch = detect_arch()
    if arch not in LAYOUTS:
        raise ValueError(f"unknown architecture: {arch}")
    return LAYOUTS[arch]()
