"""
Colorspace catalog built from an OpenColorIO configuration.

The catalog is constructed once, explicitly, and handed to every component
that needs to resolve colorspace names. A catalog whose configuration failed
to load stays usable as an object: it lists nothing and resolves nothing, so
every dependent transform degrades to passthrough.
"""

import logging

import PyOpenColorIO as OCIO

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"


class ColorspaceCatalog:
    """
    Read-only view of a loaded color-management configuration.

    Parameters
    ----------
    config : PyOpenColorIO.Config | None
        Loaded configuration, or None when loading failed.
    source : str
        Where the configuration came from, for logging.
    error : str
        Load error message when ``config`` is None.
    """

    def __init__(self, config=None, source: str = "", error: str = ""):
        self._config = config
        self.source = source
        self.error = error
        self._families = self._build_families() if config is not None else {}

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def from_path(cls, path):
        """
        Load a configuration file (or an ``ocio://`` built-in URI).

        Never raises; a failed load yields an unusable catalog.
        """
        path = str(path)
        try:
            config = OCIO.Config.CreateFromFile(path)
        except Exception as e:
            logger.error(f"Could not load OCIO config from {path}: {e}")
            return cls(None, source=path, error=str(e))
        logger.info(f"OCIO config loaded from {path} "
                    f"(version {config.getMajorVersion()}.{config.getMinorVersion()})")
        return cls(config, source=path)

    @classmethod
    def from_config(cls, config, source: str = "<memory>"):
        return cls(config, source=source)

    def _build_families(self) -> dict[str, list[str]]:
        families: dict[str, list[str]] = {}
        for name in self._config.getColorSpaceNames():
            cs = self._config.getColorSpace(name)
            family = cs.getFamily() or UNCATEGORIZED
            families.setdefault(family, []).append(name)
        for names in families.values():
            names.sort()
        return families

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------
    @property
    def is_usable(self) -> bool:
        return self._config is not None

    @property
    def config(self):
        return self._config

    def list_by_family(self) -> dict[str, list[str]]:
        """Family -> alphabetically sorted colorspace names (copies)."""
        return {fam: list(names) for fam, names in sorted(self._families.items())}

    def names(self) -> list[str]:
        """All colorspace names in configuration order."""
        if self._config is None:
            return []
        return list(self._config.getColorSpaceNames())

    def contains(self, name: str) -> bool:
        return self.resolve(name) is not None

    def resolve(self, name: str):
        """
        Colorspace handle for ``name``, or None when unknown or when the
        catalog is unusable.
        """
        if self._config is None or not name:
            return None
        return self._config.getColorSpace(name)

    def default_display_colorspace(self) -> str | None:
        """
        Colorspace behind the config's default display/view, if it names one.
        """
        if self._config is None:
            return None
        display = self._config.getDefaultDisplay()
        if not display:
            return None
        view = self._config.getDefaultView(display)
        name = self._config.getDisplayViewColorSpaceName(display, view)
        return name if self.contains(name) else None
