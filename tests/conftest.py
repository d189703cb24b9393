"""
Shared fixtures: a small in-memory OpenColorIO config and synthetic images.
"""

import numpy as np
import pytest
import PyOpenColorIO as OCIO

from exray.color_ops import ColorTransformer, ColorspaceCatalog
from exray.models import ImageObject, ImageSpec

# ============================================================================
# TEST CONFIGURATION
# ============================================================================

# linear:   the reference space
# doubled:  reference * 2 (alpha untouched)
# display:  identity, no family -> "Uncategorized"
# broken:   points at a LUT that does not exist; processor creation fails
OCIO_PROFILE = """\
ocio_profile_version: 1

search_path: ""
strictparsing: true
luma: [0.2126, 0.7152, 0.0722]

roles:
  default: linear
  scene_linear: linear

displays:
  sRGB:
    - !<View> {name: Raw, colorspace: display}

active_displays: []
active_views: []

colorspaces:
  - !<ColorSpace>
    name: linear
    family: Linear
    bitdepth: 32f
    isdata: false
    allocation: uniform

  - !<ColorSpace>
    name: doubled
    family: Test
    bitdepth: 32f
    isdata: false
    allocation: uniform
    from_reference: !<MatrixTransform> {matrix: [2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1]}

  - !<ColorSpace>
    name: display
    bitdepth: 32f
    isdata: false
    allocation: uniform

  - !<ColorSpace>
    name: broken
    family: Test
    bitdepth: 32f
    isdata: false
    allocation: uniform
    from_reference: !<FileTransform> {src: does_not_exist.cube, interpolation: linear}
"""


@pytest.fixture
def ocio_config():
    return OCIO.Config.CreateFromStream(OCIO_PROFILE)


@pytest.fixture
def ocio_config_path(tmp_path):
    path = tmp_path / "config.ocio"
    path.write_text(OCIO_PROFILE, encoding="utf-8")
    return path


@pytest.fixture
def catalog(ocio_config):
    return ColorspaceCatalog.from_config(ocio_config)


@pytest.fixture
def transformer(catalog):
    return ColorTransformer(catalog)


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def make_image(channel_names, width=3, height=2):
    """
    Image whose sample for channel ``c`` at pixel ``p`` is ``c * 10 + p``,
    so every value identifies its channel and pixel.
    """
    n = len(channel_names)
    pix = np.arange(width * height, dtype=np.float32).reshape(height, width, 1)
    chan = np.arange(n, dtype=np.float32).reshape(1, 1, n) * 10.0
    pixels = pix + chan
    spec = ImageSpec(width=width, height=height, nchannels=n, channel_names=channel_names)
    return ImageObject(path=None, spec=spec, pixels=pixels)


def channel_plane(image, name):
    return image.pixels[:, :, image.spec.channel_names.index(name)]


@pytest.fixture
def multilayer_image():
    return make_image([
        "R", "G", "B", "A",
        "diffuse.r", "diffuse.g", "diffuse.b",
        "spec.r", "spec.g", "spec.b", "spec.a",
        "N.x", "N.y", "N.z",
        "Z",
    ])
