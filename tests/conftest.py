# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024 Robin Jarry

import pathlib
import sys

import pytest

from irqstats.__main__ import main


DATA = pathlib.Path(__file__).parent / "data"


@pytest.fixture
def sample():
    def get(arch):
        return DATA / arch

    return get


@pytest.fixture
def interrupts_file(tmp_path):
    def write(content):
        path = tmp_path / "interrupts"
        path.write_text(content)
        return path

    return write


@pytest.fixture
def run(monkeypatch, capsys):
    def run(*args):
        monkeypatch.setattr(sys, "argv", ["irqstats", *(str(a) for a in args)])
        code = 0
        try:
            main()
        except SystemExit as e:
            code = e.code
        out, err = capsys.readouterr()
        return code, out, err

    return run
