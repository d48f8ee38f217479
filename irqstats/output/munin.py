# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

"""
Munin plugin protocol. In config mode, the graph and its fields are
declared. Otherwise, only the current counter values are printed.
"""

PREAMBLE = """\
graph_title Individual interrupts
graph_args --base 1000 --logarithmic
graph_vlabel interrupts / ${graph_period}
graph_category system
graph_info Shows the number of different IRQs received by the kernel.  \
High disk or network traffic can cause a high number of interrupts (with good \
hardware and drivers this will be less so). Sudden high interrupt activity \
with no associated higher system activity is not normal.
"""

INFOS = {
    "NMI": "Non-maskable interrupt. Either 0 or quite high. If it's normally 0 "
    "then just one NMI will often mark some hardware failure.",
    "LOC": "Local (per CPU core) APIC timer interrupt. Until 2.6.21 normally "
    "250 or 1000 per second. On modern 'tickless' kernels it more or less "
    "reflects how busy the machine is.",
}


def render(report, config: bool = False, **opts):
    if config:
        render_config(report.interrupts)
    else:
        render_values(report.interrupts)


def field(irq) -> str:
    return f"i{irq.name}"


def hwirq_suffix(irq) -> str:
    if irq.hwirq is None:
        return ""
    return f" [{irq.hwirq}]"


def render_config(irqs):
    print(PREAMBLE)
    print("graph_order " + " ".join(field(irq) for irq in irqs))
    for irq in irqs:
        f = field(irq)
        # Some, like ERR and MIS, do not have a description
        print(f"{f}.label {irq.description or irq.name}{hwirq_suffix(irq)}")
        if irq.description:
            print(
                f"{f}.info Interrupt {irq.name}, for device(s): "
                f"{irq.description}{hwirq_suffix(irq)}"
            )
        elif irq.name in INFOS:
            print(f"{f}.info {INFOS[irq.name]}")
        print(f"{f}.type DERIVE")
        print(f"{f}.min 0")


def render_values(irqs):
    for irq in irqs:
        print(f"{field(irq)}.value {irq.count}")
