"""Pytest configuration and shared fixtures for wavefront_mtl tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from wavefront_mtl.core.material import Material
from wavefront_mtl.parsing.loader import MaterialLoader


TWO_MATERIALS = """\
# header
newmtl mat_1
Ka 0.328013 0.328013 0.328013
Kd 0.627451 0.627451 0.627451
Ns 750.000000
newmtl mat_2
Ka 0.031400 0.031400 0.031400
Kd 0.098039 0.098039 0.098039
Ks 0.977692 0.968577 0.945277
"""

FULL_MATERIAL = """\
# Exported by a modelling tool
#   second header line

newmtl chrome
Ka 0.2 0.2 0.2
Kd xyz 0.5 0.6 0.7
Ks spectral metal.rfl 0.8
Ke 0.1 0.05
Tf 0.9
Ns 96.078431
Ni 1.45
Tr 0.25
d -halo 0.66
illum 3
sharpness 120
map_Kd -blendu off -blendv on -clamp on -bm 0.5 -boost 2.5 -texres 512 -mm 0 1 -o 0.1 0.2 0.3 -s 2 -t 0.5 0.25 -imfchan r chrome.png
map_bump -bm 1.5 chrome_bump.png
refl -type sphere -mm 0 1 clouds.mpc
refl -type cube_top sky_top.png
Pr 0.3
Pm 1
Ps 0.1
Pc 0.2
Pcr 0.05
aniso 0.4
anisor 0.6
map_Ke glow.png
norm normal.png
map_RMA rma.png
map_ORM orm.png
# trailing comment is ignored
newmtl plain
Kd 1 0 0
"""


@pytest.fixture
def loader():
    """Fresh loader without a template."""
    return MaterialLoader()


@pytest.fixture
def two_material_document(loader):
    """Document decoded from the two-material sample."""
    assert loader.loads(TWO_MATERIALS)
    return loader.finalize()


@pytest.fixture
def full_document(loader):
    """Document exercising every statement kind."""
    assert loader.loads(FULL_MATERIAL)
    return loader.finalize()


@pytest.fixture
def mtl_file(tmp_path):
    """Two-material sample written to disk."""
    path = tmp_path / "scene.mtl"
    path.write_text(TWO_MATERIALS, encoding="utf-8")
    return path


@pytest.fixture
def red_template():
    """Template material with a parsed ambient color."""
    material = Material()
    material.Ka.color.assign(1.0, 0.0, 0.0)
    material.Ka.mark_parsed()
    material.name.assign("template")
    return material
