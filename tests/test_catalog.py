"""
Colorspace catalog queries against the in-memory test config.
"""

import pytest

from exray.color_ops import ColorspaceCatalog
from exray.color_ops.catalog import UNCATEGORIZED


def test_colorspaces_grouped_by_family(catalog):
    families = catalog.list_by_family()
    assert families == {
        "Linear": ["linear"],
        "Test": ["broken", "doubled"],
        UNCATEGORIZED: ["display"],
    }


def test_families_are_sorted(catalog):
    assert list(catalog.list_by_family()) == sorted(catalog.list_by_family())


def test_listing_returns_copies(catalog):
    listing = catalog.list_by_family()
    listing["Test"].append("bogus")
    listing.pop("Linear")
    assert catalog.list_by_family()["Test"] == ["broken", "doubled"]
    assert "Linear" in catalog.list_by_family()


def test_names_in_config_order(catalog):
    assert catalog.names() == ["linear", "doubled", "display", "broken"]


@pytest.mark.parametrize("name, known", [
    ("linear", True),
    ("doubled", True),
    ("not a colorspace", False),
    ("", False),
])
def test_resolve(catalog, name, known):
    assert catalog.contains(name) is known
    cs = catalog.resolve(name)
    if known:
        assert cs.getName() == name
    else:
        assert cs is None


def test_default_display_colorspace(catalog):
    assert catalog.default_display_colorspace() == "display"


def test_from_path_loads_file(ocio_config_path):
    cat = ColorspaceCatalog.from_path(ocio_config_path)
    assert cat.is_usable
    assert cat.source == str(ocio_config_path)
    assert cat.contains("doubled")


def test_from_path_missing_file_is_unusable(tmp_path):
    missing = tmp_path / "nope.ocio"
    cat = ColorspaceCatalog.from_path(missing)
    assert not cat.is_usable
    assert cat.error
    assert cat.list_by_family() == {}
    assert cat.names() == []
    assert cat.resolve("linear") is None
    assert cat.default_display_colorspace() is None


def test_from_path_malformed_file_is_unusable(tmp_path):
    bad = tmp_path / "bad.ocio"
    bad.write_text("this: is: not [ a config", encoding="utf-8")
    cat = ColorspaceCatalog.from_path(bad)
    assert not cat.is_usable
