import json

import pytest

from wilayah_api.engine import build_engine


def test_run_generation_clears_and_generates(data_dir, tmp_path, capsys):
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    (output_dir / "leftover.json").write_text("{}")

    count = build_engine.run_generation(str(data_dir), str(output_dir), progress=False)

    assert not (output_dir / "leftover.json").exists()
    assert json.loads((output_dir / "provinces.json").read_text(encoding="utf-8"))[0]["id"] == "11"
    out = capsys.readouterr().out
    assert "Clearing output directory..." in out
    assert f"API generation complete! ({count} artifacts)" in out


def test_main_exits_nonzero_on_missing_data(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_engine.main(["--data-dir", str(tmp_path / "nowhere"), "--output-dir", str(tmp_path / "out"), "--quiet"])
    assert exc_info.value.code == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_main_generates_tree(data_dir, tmp_path):
    output_dir = tmp_path / "out"
    build_engine.main(["--data-dir", str(data_dir), "--output-dir", str(output_dir), "--quiet"])
    assert (output_dir / "village" / "1201012001.json").exists()


def test_main_exits_nonzero_on_undecodable_table(data_dir, tmp_path, capsys):
    (data_dir / "regencies.csv").write_bytes(b"1101,11,Kab. \xe9\n")
    with pytest.raises(SystemExit) as exc_info:
        build_engine.main(["--data-dir", str(data_dir), "--output-dir", str(tmp_path / "out"), "--quiet"])
    assert exc_info.value.code == 1
    assert "[ERROR]" in capsys.readouterr().out
