"""
Default Field Values for Wavefront MTL Materials

This module contains ALL default values used by the material data model.
It is the Single Source of Truth (SSOT) for field defaults.

IMPORTANT Import Policies:
    1. DO NOT use: from wavefront_mtl.config.defaults import *
       This causes namespace pollution and makes tracking difficult.

    2. DO use explicit imports:
       from wavefront_mtl.config.defaults import DEFAULT_NS, DEFAULT_SHARPNESS

    3. DO NOT define defaults elsewhere. All defaults must be in this file.
"""

# =============================================================================
# Material Scalar Defaults
# =============================================================================

# Specular exponent (shininess) [0..1000]
DEFAULT_NS = 0.0

# Sharpness of reflections [0..1000]
DEFAULT_SHARPNESS = 60.0

# Illumination model [0..10]
DEFAULT_ILLUM = 0

# Optical density (index of refraction)
DEFAULT_NI = 0.0

# Transparency
DEFAULT_TR = 1.0

# Physically based extension factors (roughness, metalness, sheen,
# clearcoat thickness, clearcoat roughness, anisotropy, anisotropy rotation)
DEFAULT_PBR_FACTOR = 0.0

# =============================================================================
# Opacity Defaults
# =============================================================================

# Dissolve factor (1.0 is fully opaque)
DEFAULT_DISSOLVE = 1.0

# Halo effect
DEFAULT_HALO = False

# =============================================================================
# Composite Defaults
# =============================================================================

# -mm base and gain
DEFAULT_MM_BASE = 0
DEFAULT_MM_GAIN = 1

# Spectral curve scaling factor
DEFAULT_SPECTRAL_FACTOR = 1.0

# =============================================================================
# Texture Option Defaults
# =============================================================================

DEFAULT_BLENDU = True
DEFAULT_BLENDV = True
DEFAULT_CLAMP = False
DEFAULT_CC = False

# Bump multiplier
DEFAULT_BM = 0.0

# Mip-map sharpness boost
DEFAULT_BOOST = 60.0

# Texture resolution multiplier
DEFAULT_TEXRES = 1.0

# Channel used by scalar or bump textures
DEFAULT_IMFCHAN = "m"

# =============================================================================
# I/O Defaults (overridable from defaults.yaml)
# =============================================================================

DEFAULT_ENCODING = "utf-8"
DEFAULT_ENCODING_ERRORS = "replace"
