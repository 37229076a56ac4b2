"""Tests for the wavefront-mtl command-line interface."""

import yaml

from wavefront_mtl import __version__
from wavefront_mtl.cli import create_cli_parser, main


class TestParser:
    """Argument parsing."""

    def test_lookup_arguments(self):
        args = create_cli_parser().parse_args(["lookup", "scene.mtl", "brick", "--encoding", "latin-1"])
        assert args.command == "lookup"
        assert args.file == "scene.mtl"
        assert args.name == "brick"
        assert args.encoding == "latin-1"

    def test_swatch_defaults(self):
        args = create_cli_parser().parse_args(["swatches", "scene.mtl"])
        assert args.channels == ["Ka", "Kd", "Ks"]
        assert args.output is None

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out


class TestCommands:
    """Each command run against a file on disk."""

    def test_trace(self, mtl_file, capsys):
        assert main(["trace", str(mtl_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("# header\n")
        assert "newmtl mat_1\n" in out
        assert "Ns 750.0\n" in out

    def test_lookup(self, mtl_file, capsys):
        assert main(["lookup", str(mtl_file), "mat_2"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "newmtl mat_2"
        assert "mat_1" not in out

    def test_lookup_missing_material(self, mtl_file, capsys):
        assert main(["lookup", str(mtl_file), "nothing"]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path):
        assert main(["trace", str(tmp_path / "absent.mtl")]) == 1

    def test_file_without_materials(self, tmp_path):
        path = tmp_path / "empty.mtl"
        path.write_text("# nothing here\n", encoding="utf-8")
        assert main(["trace", str(path)]) == 1

    def test_export(self, mtl_file, tmp_path):
        output = tmp_path / "out" / "scene.yaml"
        assert main(["export", str(mtl_file), str(output)]) == 0

        with open(output) as f:
            data = yaml.safe_load(f)

        assert data["information"] == ["header"]
        assert [m["name"] for m in data["materials"]] == ["mat_1", "mat_2"]
        assert data["materials"][0]["Ns"] == 750.0
        assert "Ks" not in data["materials"][0]

    def test_export_all_fields(self, mtl_file, tmp_path):
        output = tmp_path / "scene.yaml"
        assert main(["export", str(mtl_file), str(output), "--all-fields"]) == 0

        with open(output) as f:
            data = yaml.safe_load(f)

        assert data["materials"][0]["Ks"]["color"] == {"r": 0.0, "g": 0.0, "b": 0.0}

    def test_swatches(self, mtl_file, tmp_path, capsys):
        output = tmp_path / "swatches.png"
        assert main(["swatches", str(mtl_file), "--output", str(output), "--channels", "Kd"]) == 0
        assert output.exists()
        assert "Saved:" in capsys.readouterr().out

    def test_info(self, capsys):
        assert main(["info"]) == 0
        out = capsys.readouterr().out
        assert f"WAVEFRONT MTL DECODER {__version__}" in out
        assert "map_ORM" in out
        assert "decode_texture" in out
