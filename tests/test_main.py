"""
End-to-end test of the entry point.
"""

import re
import sys

from shapecanvas import __main__ as entry
from shapecanvas.settings import GenerationSettings


def test_main_prints_ten_random_shapes(monkeypatch, capsys):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(entry.GenerationSettings, "load",
                        classmethod(lambda cls, settings=None: cls()))
    levels = []
    monkeypatch.setattr(entry, "setup_logging", levels.append)

    assert entry.main() is None

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Canvas has the following random shapes:"
    assert len(lines) == 11
    pattern = re.compile(
        r"^Shape (\d+): (CIRCLE \d+|OVAL \d+x\d+|RECTANGLE \d+x\d+)$")
    ids = []
    for line in lines[1:]:
        match = pattern.match(line)
        assert match, line
        ids.append(int(match.group(1)))
    assert ids == list(range(1, 11))
    assert levels == [GenerationSettings().log_level]
