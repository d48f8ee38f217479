# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

import json

from irqstats.output.munin import PREAMBLE


X86_VALUES = """\
i0.value 30
i1.value 9
i8.value 0
i9.value 4
i16.value 12
i120.value 0
i124.value 300
iNMI.value 3
iLOC.value 3000
iERR.value 0
iMIS.value 0
"""


def test_fetch(run, sample):
    code, out, err = run("-i", sample("x86"), "-a", "x86")
    assert code == 0
    assert out == X86_VALUES
    assert err == ""


def test_fetch_twice(run, sample):
    first = run("fetch", "-i", sample("x86"), "-a", "x86")
    second = run("fetch", "-i", sample("x86"), "-a", "x86")
    assert first == second


def test_config(run, sample):
    code, out, err = run("config", "-i", sample("x86"), "-a", "x86")
    assert code == 0
    assert out.startswith(PREAMBLE + "\n")
    assert "Sudden high interrupt activity" in out
    lines = out[len(PREAMBLE) + 1 :].splitlines()
    assert lines[0] == (
        "graph_order i0 i1 i8 i9 i16 i120 i124 iNMI iLOC iERR iMIS"
    )
    assert lines[1:5] == [
        "i0.label timer [2]",
        "i0.info Interrupt 0, for device(s): timer [2]",
        "i0.type DERIVE",
        "i0.min 0",
    ]
    assert "i1.label i8042" in lines
    assert "i16.info Interrupt 16, for device(s): i801_smbus, ehci_hcd:usb1" in lines
    assert "i124.label nvme0q0 [524288]" in lines
    assert "iNMI.info Interrupt NMI, for device(s): Non-maskable interrupts" in lines
    assert lines[-3:] == ["iMIS.label MIS", "iMIS.type DERIVE", "iMIS.min 0"]


def test_config_canned_info(run, interrupts_file):
    path = interrupts_file("CPU0 CPU1\nNMI:  0  0\nLOC:  5  6\nERR:  0\n")
    code, out, _ = run("config", "-i", path, "-a", "x86")
    assert code == 0
    lines = out.splitlines()
    assert "iNMI.label NMI" in lines
    assert (
        "iNMI.info Non-maskable interrupt. Either 0 or quite high. If it's "
        "normally 0 then just one NMI will often mark some hardware failure."
    ) in lines
    assert (
        "iLOC.info Local (per CPU core) APIC timer interrupt. Until 2.6.21 "
        "normally 250 or 1000 per second. On modern 'tickless' kernels it more "
        "or less reflects how busy the machine is."
    ) in lines
    assert not any(line.startswith("iERR.info") for line in lines)


def test_config_sparc(run, sample):
    code, out, _ = run("config", "-i", sample("sparc"), "-a", "sparc")
    assert code == 0
    lines = out.splitlines()
    assert "i17.label MSIQ [17]" in lines
    assert "i18.label MSIQ [18]" in lines
    assert "i22.label eth0" in lines


def test_header_only(run, interrupts_file):
    code, out, err = run("-i", interrupts_file("CPU0 CPU1\n"))
    assert code == 1
    assert out == ""
    assert err == "error: no interrupts found\n"


def test_empty_file(run, interrupts_file):
    code, out, err = run("config", "-i", interrupts_file(""))
    assert code == 1
    assert out == ""
    assert "missing CPU header" in err


def test_malformed_line(run, interrupts_file):
    path = interrupts_file("CPU0\n  0:  1  timer\n  1:  oops\n")
    code, out, err = run("fetch", "-i", path, "-a", "x86")
    assert code == 1
    assert out == ""
    assert err == "error: line 2: '1' has only garbage 'oops'\n"


def test_missing_file(run, tmp_path):
    code, out, err = run("-i", tmp_path / "nope")
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")


def test_invalid_mode(run, sample):
    code, out, _ = run("suggest", "-i", sample("x86"))
    assert code == 2
    assert out == ""


def test_autoconf(run, sample):
    code, out, _ = run("autoconf", "-i", sample("x86"))
    assert code == 0
    assert out == "yes\n"


def test_autoconf_missing(run, tmp_path):
    path = tmp_path / "nope"
    code, out, _ = run("autoconf", "-i", path)
    assert code == 0
    assert out == f"no ({path} isn't readable: No such file or directory)\n"


def test_json(run, sample):
    code, out, _ = run("-f", "json", "-i", sample("mips"), "-a", "mips")
    assert code == 0
    report = json.loads(out)
    assert report["arch"] == "mips"
    assert report["interrupts"][2] == {
        "name": "20",
        "count": 42,
        "description": "eth0",
        "hwirq": 12,
    }


def test_text(run, sample):
    code, out, _ = run("-f", "text", "-i", sample("x86"), "-a", "x86")
    assert code == 0
    lines = out.splitlines()
    assert lines[0].split() == ["IRQ", "TOTAL", "HWIRQ", "DESCRIPTION"]
    assert lines[7].split() == ["124", "300", "524288", "nvme0q0"]
    assert lines[9].split() == ["LOC", "3K", "Local", "timer", "interrupts"]
    assert lines[10].split() == ["ERR", "0"]
