import json
import sys

import pytest

from scalelab import __version__
from scalelab.main import main


def run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["scalelab", *args])
    try:
        main()
    except SystemExit as e:
        return e.code or 0
    return 0


def write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_default_palette_to_stdout(monkeypatch, capsys):
    assert run(monkeypatch) == 0
    palette = json.loads(capsys.readouterr().out)
    assert list(palette) == ["gray", "blue", "green", "red", "yellow", "purple", "teal", "orange"]
    assert len(palette["gray"]) == 15
    assert palette["gray"]["0"] == "#ffffff"


def test_srgb_format(monkeypatch, capsys):
    assert run(monkeypatch, "--format", "srgb") == 0
    palette = json.loads(capsys.readouterr().out)
    assert palette["gray"]["0"] == [255, 255, 255]


def test_custom_config(monkeypatch, capsys, tmp_path):
    config = write_json(tmp_path / "config.json", {
        "steps": [0, 500, 1000],
        "colors": {"gray": {"hue": 0, "minChroma": 0, "maxChroma": 0}},
    })
    assert run(monkeypatch, "-c", config) == 0
    palette = json.loads(capsys.readouterr().out)
    assert list(palette) == ["gray"]
    assert list(palette["gray"]) == ["0", "500", "1000"]


def test_output_file(monkeypatch, capsys, tmp_path):
    out = tmp_path / "palette.json"
    assert run(monkeypatch, "-o", str(out)) == 0
    assert "palette saved to" in capsys.readouterr().out
    assert "gray" in json.loads(out.read_text())


def test_unwritable_output_exits_1(monkeypatch, capsys, tmp_path):
    assert run(monkeypatch, "-o", str(tmp_path / "missing" / "palette.json")) == 1
    assert "error writing output file" in capsys.readouterr().err


def test_invalid_format_exits_1(monkeypatch, capsys):
    assert run(monkeypatch, "--format", "cmyk") == 1
    assert "--format must be either" in capsys.readouterr().err


def test_missing_config_exits_1(monkeypatch, capsys, tmp_path):
    assert run(monkeypatch, "--config", str(tmp_path / "nope.json")) == 1
    assert "error reading config file" in capsys.readouterr().err


def test_non_utf8_config_exits_1(monkeypatch, capsys, tmp_path):
    config = tmp_path / "config.json"
    config.write_bytes(b'{"steps": [0], "colors": "\xff"}')
    assert run(monkeypatch, "-c", str(config)) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_compare_non_utf8_expected_exits_1(monkeypatch, capsys, tmp_path):
    expected = tmp_path / "expected.json"
    expected.write_bytes(b"\xff\xfe")
    assert run(monkeypatch, "compare", "-e", str(expected)) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_out_of_range_config_exits_1(monkeypatch, capsys, tmp_path):
    config = write_json(tmp_path / "config.json", {
        "steps": [0, 500],
        "colors": {"bad": {"hue": 400, "minChroma": 0, "maxChroma": 0}},
    })
    assert run(monkeypatch, "-c", config) == 1
    assert "baseHue" in capsys.readouterr().err


def test_missing_option_value_exits_1(monkeypatch):
    assert run(monkeypatch, "--config") == 1


def test_misplaced_subcommand_exits_1(monkeypatch, capsys):
    assert run(monkeypatch, "-f", "hex", "verify") == 1
    assert "must be the first argument" in capsys.readouterr().err


def test_version(monkeypatch, capsys):
    assert run(monkeypatch, "--version") == 0
    assert __version__ in capsys.readouterr().out


def test_help_full_lists_subcommands(monkeypatch, capsys):
    assert run(monkeypatch, "--help-full") == 0
    out = capsys.readouterr().out
    assert "scalelab verify" in out
    assert "scalelab compare" in out


def test_verify_gray_passes(monkeypatch, capsys):
    assert run(monkeypatch, "verify") == 0
    out = capsys.readouterr().out
    assert "all WCAG AA compliance checks passed" in out
    assert "all checks passed" in out


def test_verify_rejects_bad_step(monkeypatch, capsys):
    assert run(monkeypatch, "verify", "-S", "0", "500.5") == 1
    assert "invalid step" in capsys.readouterr().err


def test_compare_match_and_mismatch(monkeypatch, capsys, tmp_path):
    config = write_json(tmp_path / "config.json", {
        "steps": [0, 1000],
        "colors": {"gray": {"hue": 0, "minChroma": 0, "maxChroma": 0}},
    })

    good = write_json(tmp_path / "good.json", {"gray": {"0": "#FFF"}})
    assert run(monkeypatch, "compare", "-e", good, "-c", config) == 0
    assert "all 1 colors match" in capsys.readouterr().out

    bad = write_json(tmp_path / "bad.json", {"gray": {"0": "#000000", "1000": "#ffffff"}})
    assert run(monkeypatch, "compare", "-e", bad, "-c", config) == 1
    assert "2 of 2 colors differ" in capsys.readouterr().err


def test_compare_requires_expected(monkeypatch):
    assert run(monkeypatch, "compare") == 1
