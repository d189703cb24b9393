"""
Viewer state container and click routing. Neither needs a running Qt app.
"""

import dataclasses

from exray.color_ops import ColorspaceCatalog
from exray.interface import ToolDispatcher
from exray.models import CurrentContext, ViewSelection

from conftest import make_image


class FakeViewport:
    on_single_click = None
    on_right_click = None


# ============================================================================
# CurrentContext / ViewSelection
# ============================================================================

def test_requires_image():
    cxt = CurrentContext()
    ok, msg = cxt.requires(cxt.IMAGE)
    assert not ok
    assert msg
    cxt.image = make_image(["R", "G", "B"])
    assert cxt.requires(cxt.IMAGE) == (True, "")


def test_requires_usable_catalog(catalog, tmp_path):
    cxt = CurrentContext(catalog=ColorspaceCatalog.from_path(tmp_path / "missing.ocio"))
    assert not cxt.requires(cxt.CATALOG)[0]
    cxt.catalog = catalog
    assert cxt.requires(cxt.CATALOG)[0]


def test_selection_replace_is_a_new_value():
    sel = ViewSelection("default", "all", "linear", "display")
    other = sel.replace(component="r")
    assert sel.component == "all"
    assert other.component == "r"
    assert other.label == "default:r | linear -> display"


def test_summary():
    assert CurrentContext().summary == "(no image)"
    cxt = CurrentContext(image=make_image(["R", "G", "B"]),
                         selection=ViewSelection("default", "all", "a", "b"))
    assert cxt.summary == "<memory> | default:all | a -> b"


# ============================================================================
# ToolDispatcher
# ============================================================================

def test_dispatcher_routes_to_latest_handler():
    vp = FakeViewport()
    disp = ToolDispatcher(vp)
    calls = []
    vp.on_right_click(0, 0)
    disp.set_right_click(lambda y, x: calls.append(("menu", y, x)))
    vp.on_right_click(1, 2)
    disp.set_right_click(lambda y, x: calls.append(("other", y, x)))
    vp.on_right_click(3, 4)
    vp.on_single_click(5, 6)
    assert calls == [("menu", 1, 2), ("other", 3, 4)]


def test_dispatcher_clear_disconnects_everything():
    vp = FakeViewport()
    disp = ToolDispatcher(vp)
    calls = []
    disp.set_single_click(lambda y, x: calls.append((y, x)))
    disp.clear()
    vp.on_single_click(0, 0)
    assert calls == []


def test_context_fields_name_their_types():
    types = {f.name: f.type for f in dataclasses.fields(CurrentContext)}
    assert types["catalog"] == "ColorspaceCatalog | None"
    assert types["extracted"] == "ChannelData | None"
