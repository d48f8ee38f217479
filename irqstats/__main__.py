# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

"""
Report the number of interrupts received by the kernel for each IRQ, as read
from /proc/interrupts. Meant to be used as a munin plugin.
"""

import argparse
from importlib import metadata
import pathlib
import sys

from . import collect, output
from .collect import layout


MODES = ("autoconf", "config", "fetch")


def main():
    parser = argparse.ArgumentParser(description=__doc__, prog="irqstats")
    parser.add_argument(
        "mode",
        metavar="MODE",
        nargs="?",
        choices=MODES,
        default="fetch",
        help="""
        Plugin mode, one of %(choices)s (default: %(default)s).
        """,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {metadata.version('irqstats')}",
        help="""
        Show version and exit.
        """,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="""
        Show debug info.
        """,
    )
    parser.add_argument(
        "-i",
        "--interrupts",
        metavar="PATH",
        type=pathlib.Path,
        default=collect.INTERRUPTS,
        help="""
        Path to the interrupts file (default: %(default)s).
        """,
    )
    parser.add_argument(
        "-a",
        "--arch",
        choices=layout.ARCHES,
        help="""
        Layout of the interrupts file descriptions (default: detected from
        the running machine).
        """,
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=output.FORMATS.keys(),
        default=output.DEFAULT_FORMAT,
        help="""
        Output format (default: %(default)s).
        """,
    )
    args = parser.parse_args()
    if args.mode == "autoconf":
        autoconf(args.interrupts)
        return
    try:
        config = args.mode == "config"
        report = collect.parse_report(
            args.interrupts,
            args.arch,
            describe=config or args.format != "munin",
        )
        output.render(report, args.format, config=config)
    except BrokenPipeError:
        pass
    except Exception as e:
        if args.debug or isinstance(e, NotImplementedError):
            raise
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def autoconf(path: pathlib.Path):
    try:
        with open(path, encoding="utf-8"):
            pass
    except OSError as e:
        print(f"no ({path} isn't readable: {e.strerror})")
    else:
        print("yes")


if __name__ == "__main__":
    main()
