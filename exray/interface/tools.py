"""
High-level functions for loading images, building the colorspace catalog and
running the display pipeline. Used by the UI; no Qt imports here.
"""
from dataclasses import dataclass, field
import logging
from pathlib import Path

from .. import config
from ..color_ops import ColorTransformer, ColorspaceCatalog, extract, grade, to_bitmap
from ..models import CurrentContext, Failure, ImageObject, ViewSelection

logger = logging.getLogger(__name__)

#======Getting and setting app configs ========================================


def get_config():
    """
    Loads the config dictionary - a single mutable dictionary of settings
    used across the app
    """
    return config.get_all()


def modify_config(key, value):
    """
    Sets user selected values in the config dictionary
    """
    config.set_value(key, value)

#==== Loading helper functions ================================================


def load(path):
    """
    Open an image file through the decoder.
    Returns the created ImageObject or None for an empty/missing path.

    Raises ValueError if the decoder rejects the file.
    """
    if not path:
        return None
    p = Path(path)
    if not p.is_file():
        return None
    return ImageObject.from_path(p)


def load_catalog(path=None):
    """
    Build the ColorspaceCatalog from ``path`` or the configured location.
    """
    path = path or config.con_dict["ocio_config"]
    return ColorspaceCatalog.from_path(path)


def initial_selection(image: ImageObject | None, catalog=None) -> ViewSelection:
    """
    Selection shown when an image is first opened.

    Falls back to the first listed layer when the configured default family
    is absent, and to the config's default display colorspace when the
    configured display colorspace is unknown.
    """
    cfg = config.con_dict
    family = cfg["default_family"]
    component = cfg["default_component"]
    if image is not None:
        layers = image.layers()
        if layers and family not in layers:
            family = layers[0]
            component = "all"

    output_cs = cfg["display_colorspace"]
    if catalog is not None and catalog.is_usable and not catalog.contains(output_cs):
        output_cs = catalog.default_display_colorspace() or output_cs

    return ViewSelection(
        channel_family=family,
        component=component,
        input_colorspace=cfg["input_colorspace"],
        output_colorspace=output_cs,
    )

#==== Display pipeline =========================================================


@dataclass
class RenderResult:
    """
    Output of one pass through the display pipeline.

    Attributes
    ----------
    bitmap : np.ndarray | None
        (H, W, 4) uint8 RGBA, None when nothing could be displayed.
    extracted : ChannelData
        Extraction output before any color transform.
    failures : list[StageResult]
        Every stage that fell back to its degraded output, in order.
    """
    bitmap: object
    extracted: object
    failures: list = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def message(self) -> str:
        if self.ok:
            return ""
        return "; ".join(r.detail for r in self.failures)


def _log_outcome(stage: str, result):
    if result.ok:
        return
    if result.failure is Failure.NOT_FOUND:
        logger.warning(f"{stage}: {result.detail}")
    else:
        logger.error(f"{stage} [{result.failure.value}]: {result.detail}")


def render_selection(image: ImageObject, selection: ViewSelection, catalog, *,
                     working_space: str, exposure: float = 0.0, gamma: float = 1.0,
                     transformer: ColorTransformer | None = None) -> RenderResult:
    """
    Run extract -> input->working -> grade -> working->display -> bitmap.

    Each stage that fails keeps the pipeline going with its passthrough
    output; only a failed extraction stops it, since there is nothing to show.
    """
    transformer = transformer or ColorTransformer(catalog)
    failures = []

    res = extract(image.pixels, image.spec, selection.channel_family, selection.component)
    _log_outcome("extract", res)
    if not res.ok:
        return RenderResult(bitmap=None, extracted=res.data, failures=[res])
    extracted = res.data

    stages = (
        ("input transform",
         lambda d: transformer.transform(d, selection.input_colorspace, working_space)),
        ("grade", lambda d: grade(d, exposure=exposure, gamma=gamma)),
        ("display transform",
         lambda d: transformer.transform(d, working_space, selection.output_colorspace)),
    )
    data = extracted
    for stage, fn in stages:
        res = fn(data)
        _log_outcome(stage, res)
        if not res.ok:
            failures.append(res)
        data = res.data

    res = to_bitmap(data)
    _log_outcome("rasterize", res)
    if not res.ok:
        failures.append(res)
    return RenderResult(bitmap=res.data, extracted=extracted, failures=failures)


def render_context(cxt: CurrentContext, transformer: ColorTransformer | None = None) -> RenderResult | None:
    """
    Render the context's current image/selection with the configured
    working space and grade. Stores the extraction on the context.
    """
    if cxt.image is None or cxt.selection is None:
        return None
    cfg = config.con_dict
    out = render_selection(
        cxt.image, cxt.selection, cxt.catalog,
        working_space=cfg["working_space"],
        exposure=cfg["exposure"],
        gamma=cfg["gamma"],
        transformer=transformer,
    )
    cxt.extracted = out.extracted
    logger.info(f"Rendered {cxt.summary}")
    return out
