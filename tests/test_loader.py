"""Tests for keyword dispatch and the document builder."""

import logging

import pytest
from numpy.testing import assert_allclose

from wavefront_mtl.config.loader_config import LoaderConfig
from wavefront_mtl.core.material import Material
from wavefront_mtl.parsing.dispatch import KEYWORD_DECODERS, dispatch, split_keyword
from wavefront_mtl.parsing.loader import MaterialLoader

from .conftest import FULL_MATERIAL, TWO_MATERIALS


class TestDispatch:
    """Keyword -> decoder routing."""

    def test_every_keyword_is_a_material_attribute(self):
        material = Material()
        for keyword in KEYWORD_DECODERS:
            assert hasattr(material, keyword), keyword

    def test_split_keyword(self):
        assert split_keyword("map_Kd -bm 1 a.png") == ("map_Kd", " -bm 1 a.png")
        assert split_keyword("Kd") == ("Kd", "")

    def test_routes_to_named_field(self):
        material = Material()
        assert dispatch("Ka 0.1 0.2 0.3", material)
        assert material.Ka.color.as_tuple() == (0.1, 0.2, 0.3)
        assert not material.Kd.parsed

    def test_similar_keywords_do_not_collide(self):
        material = Material()
        dispatch("Pc 0.5", material)
        dispatch("Pcr 0.25", material)
        dispatch("map_d mask.png", material)
        dispatch("d 0.5", material)
        assert material.Pc.value == 0.5
        assert material.Pcr.value == 0.25
        assert material.map_d.file.value == "mask.png"
        assert material.d.d == 0.5

    def test_tab_separated_arguments(self):
        material = Material()
        assert dispatch("Ns\t10", material)
        assert material.Ns.value == 10.0

    @pytest.mark.parametrize("line", ["Kd", "Foo 1 2 3", "Kd red", "illum x"])
    def test_rejected_lines_leave_material_unchanged(self, line):
        material = Material()
        assert not dispatch(line, material)
        assert material == Material()


class TestEndToEnd:
    """Decoding the two-material sample."""

    def test_header_and_names(self, two_material_document):
        assert two_material_document.information == ["header"]
        assert two_material_document.list_materials() == ["mat_1", "mat_2"]

    def test_values(self, two_material_document):
        mat_1 = two_material_document.get_material("mat_1")
        assert_allclose(mat_1.Ka.color.as_array(), [0.328013] * 3)
        assert_allclose(mat_1.Kd.color.as_array(), [0.627451] * 3)
        assert mat_1.Ns.value == 750.0
        assert mat_1.Ns.parsed

        mat_2 = two_material_document.get_material("mat_2")
        assert_allclose(mat_2.Ks.color.as_array(), [0.977692, 0.968577, 0.945277])

    def test_unset_fields_keep_defaults(self, two_material_document):
        mat_1, mat_2 = two_material_document.materials
        assert not mat_1.Ks.parsed
        assert not mat_2.Ns.parsed
        assert mat_2.Ns.value == 0.0
        assert not mat_2.sharpness.parsed
        assert mat_2.sharpness.value == 60.0

    def test_finalize_returns_document(self, loader):
        assert loader.loads(TWO_MATERIALS)
        assert loader.finalize() is loader.document
        assert loader.materials is loader.document.materials
        assert loader.information == ["header"]


class TestFullGrammar:
    """Every statement kind in one file."""

    def test_header_lines(self, full_document):
        assert full_document.information == [
            "Exported by a modelling tool",
            "second header line",
        ]

    def test_colors(self, full_document):
        chrome = full_document.get_material("chrome")
        assert chrome.Kd.color_space.as_tuple() == (0.5, 0.6, 0.7)
        assert not chrome.Kd.color.parsed
        assert chrome.Ks.spectral.file == "metal.rfl"
        assert chrome.Ks.spectral.factor == 0.8
        assert chrome.Ke.color.as_tuple() == (0.1, 0.05, 0.1)
        assert chrome.Tf.color.as_tuple() == (0.9, 0.9, 0.9)

    def test_scalars(self, full_document):
        chrome = full_document.get_material("chrome")
        assert chrome.Ns.value == pytest.approx(96.078431)
        assert chrome.Ni.value == 1.45
        assert chrome.Tr.value == 0.25
        assert chrome.illum.value == 3
        assert chrome.sharpness.value == 120.0
        assert (chrome.Pr.value, chrome.Pm.value, chrome.Ps.value) == (0.3, 1.0, 0.1)
        assert (chrome.Pc.value, chrome.Pcr.value) == (0.2, 0.05)
        assert (chrome.aniso.value, chrome.anisor.value) == (0.4, 0.6)

    def test_opacity(self, full_document):
        chrome = full_document.get_material("chrome")
        assert chrome.d.halo is True
        assert chrome.d.d == 0.66

    def test_texture_options(self, full_document):
        tex = full_document.get_material("chrome").map_Kd
        assert tex.file.value == "chrome.png"
        assert tex.blendu.value is False
        assert tex.blendv.value is True
        assert tex.clamp.value is True
        assert tex.bm.value == 0.5
        assert tex.boost.value == 2.5
        assert tex.texres.value == 512.0
        assert (tex.mm.base, tex.mm.gain) == (0, 1)
        assert tex.o.as_tuple() == (0.1, 0.2, 0.3)
        assert tex.s.as_tuple() == (2.0, 2.0, 2.0)
        assert tex.t.as_tuple() == (0.5, 0.25, 0.5)
        assert tex.imfchan.value == "r"

    def test_other_maps(self, full_document):
        chrome = full_document.get_material("chrome")
        assert chrome.map_bump.bm.value == 1.5
        assert chrome.map_bump.file.value == "chrome_bump.png"
        assert chrome.map_Ke.file.value == "glow.png"
        assert chrome.norm.file.value == "normal.png"
        assert chrome.map_RMA.file.value == "rma.png"
        assert chrome.map_ORM.file.value == "orm.png"
        assert not chrome.map_Ka.parsed

    def test_reflection(self, full_document):
        refl = full_document.get_material("chrome").refl
        assert refl.sphere.file.value == "clouds.mpc"
        assert refl.cube_top.file.value == "sky_top.png"
        assert not refl.cube_bottom.parsed

    def test_comment_after_material_is_ignored(self, full_document):
        assert len(full_document.information) == 2
        assert full_document.get_material("plain").Kd.color.as_tuple() == (1.0, 0.0, 0.0)


class TestBestEffort:
    """Malformed lines never abort the load."""

    def test_malformed_values_are_skipped(self, loader):
        text = "\n".join([
            "newmtl a",
            "Kd 0.1 0.2 0.3",
            "Kd red green blue",
            "Ns lots",
            "illum 2",
            "refl -type dome sky.png",
            "unknown_statement 1 2 3",
            "Ni 1.5",
        ])
        assert loader.loads(text)
        material = loader.lookup("a")
        assert material.Kd.color.as_tuple() == (0.1, 0.2, 0.3)
        assert not material.Ns.parsed
        assert material.illum.value == 2
        assert not material.refl.parsed
        assert material.Ni.value == 1.5

    def test_decode_reports_consumption(self, loader):
        loader.begin()
        assert loader.decode("# comment")
        assert loader.decode("newmtl a")
        assert loader.decode("Kd 1 1 1")
        assert not loader.decode("Kd nope")
        assert not loader.decode("   ")
        assert not loader.decode("# late comment")
        assert not loader.decode("foo bar")
        assert loader.information == ["comment"]

    def test_skipped_lines_are_logged(self, loader, caplog):
        with caplog.at_level(logging.DEBUG, logger="wavefront_mtl.parsing.loader"):
            loader.loads("newmtl a\nKd nope\nfoo 1\n")
        assert "could not decode 'Kd nope'" in caplog.text
        assert "ignoring unknown statement 'foo'" in caplog.text


class TestLoadFailure:
    """A load succeeds only when a material is named."""

    def test_no_newmtl(self, loader):
        assert not loader.loads("# only a header\nKd 1 1 1\n")
        assert loader.finalize() is None
        # Partial state stays inspectable
        assert loader.materials[0].Kd.parsed
        assert loader.information == ["only a header"]

    def test_empty_input(self, loader):
        assert not loader.loads("")
        assert loader.finalize() is None

    def test_missing_file(self, loader, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert not loader.load(tmp_path / "missing.mtl")
        assert "Failed to read" in caplog.text

    def test_strict_decoding_error(self, tmp_path):
        path = tmp_path / "latin.mtl"
        path.write_bytes("newmtl caf\xe9\n".encode("latin-1"))
        loader = MaterialLoader(config=LoaderConfig(encoding="utf-8", errors="strict"))
        assert not loader.load(path)


class TestSources:
    """Files, bytes and in-memory text."""

    def test_load_file(self, loader, mtl_file):
        assert loader.load(mtl_file)
        assert loader.path == mtl_file
        assert loader.lookup("mat_2") is not None

    def test_load_lines_bytes(self, loader):
        lines = [b"newmtl caf\xc3\xa9\r\n", b"Kd 0 1 0\r\n"]
        assert loader.load_lines(lines)
        assert loader.lookup("café").Kd.color.as_tuple() == (0.0, 1.0, 0.0)

    def test_name_is_rest_of_line(self, loader):
        assert loader.loads("newmtl   my material  \n")
        assert loader.materials[0].name.value == "my material"

    def test_newmtl_without_name(self, loader):
        assert loader.loads("newmtl\nKd 1 1 1\n")
        assert loader.materials[0].name.value == ""
        assert loader.materials[0].name.parsed


class TestTemplate:
    """Default templates seed materials without provenance."""

    def test_template_values_without_provenance(self, red_template):
        loader = MaterialLoader(red_template)
        first = loader.materials[0]
        assert len(loader.materials) == 1
        assert first.Ka.color.as_tuple() == (1.0, 0.0, 0.0)
        assert not first.Ka.parsed
        assert not first.Ka.color.parsed
        assert not first.name.parsed
        assert loader.finalize() is None

    def test_line_by_line_decoding_with_template(self, red_template):
        loader = MaterialLoader(red_template)
        assert loader.decode("newmtl a")
        assert loader.decode("Kd 1 1 1")
        assert loader.decode("newmtl b")

        document = loader.finalize()
        assert document.list_materials() == ["a", "b"]

        a, b = document.materials
        for material in (a, b):
            assert material.Ka.color.as_tuple() == (1.0, 0.0, 0.0)
            assert not material.Ka.parsed
        assert a.Kd.parsed
        assert not b.Kd.parsed
        assert document.lookup("template") is None

    def test_every_new_material_uses_template(self, red_template):
        loader = MaterialLoader(red_template)
        assert loader.loads("newmtl a\nnewmtl b\nKa 0 0 1\n")
        a, b = loader.materials
        assert a.Ka.color.as_tuple() == (1.0, 0.0, 0.0)
        assert not a.Ka.parsed
        assert b.Ka.color.as_tuple() == (0.0, 0.0, 1.0)
        assert b.Ka.parsed

    def test_template_is_not_aliased(self, red_template):
        loader = MaterialLoader(red_template)
        loader.loads("newmtl a\nKa 0 1 0\n")
        assert red_template.Ka.color.as_tuple() == (1.0, 0.0, 0.0)
        assert red_template.Ka.parsed

    def test_previous_document_becomes_template(self, loader):
        assert loader.loads("newmtl first\nNs 500\n")
        previous = loader.finalize()

        assert loader.loads("newmtl second\nKd 1 1 1\n")
        second = loader.lookup("second")
        assert second.Ns.value == 500.0
        assert not second.Ns.parsed
        # Earlier document object is left intact
        assert previous.lookup("first").Ns.parsed

    def test_default_material_without_any_document(self, loader):
        assert loader.default_material() == Material()

    def test_reload_clears_previous_state(self, loader):
        loader.loads(FULL_MATERIAL)
        loader.loads(TWO_MATERIALS)
        assert loader.information == ["header"]
        assert loader.document.list_materials() == ["mat_1", "mat_2"]
