"""
Apply a named colorspace conversion to a ChannelData buffer.

Conversions run through an OpenColorIO CPU processor, pixel by pixel with no
cross-pixel dependency. Every failure (empty buffer, too few channels,
unknown colorspace, unusable config, engine error) returns the input
unchanged with a tagged Failure; the viewer keeps showing something.
"""

import numpy as np

from ..models.results import Failure, StageResult


class ColorTransformer:
    """
    Colorspace converter bound to one ColorspaceCatalog.

    CPU processors are cached per (input, output) pair; a processor is
    immutable once built so the cache never changes results.
    """

    def __init__(self, catalog):
        self.catalog = catalog
        self._processors = {}

    def _cpu_processor(self, input_cs: str, output_cs: str):
        key = (input_cs, output_cs)
        if key not in self._processors:
            processor = self.catalog.config.getProcessor(input_cs, output_cs)
            self._processors[key] = processor.getDefaultCPUProcessor()
        return self._processors[key]

    def transform(self, data, input_colorspace: str, output_colorspace: str) -> StageResult:
        """
        Convert ``data`` from ``input_colorspace`` to ``output_colorspace``.

        Parameters
        ----------
        data : ChannelData
            Source buffer; never modified.
        input_colorspace, output_colorspace : str
            Colorspace names known to the catalog.

        Returns
        -------
        StageResult
            ``data`` is a new ChannelData on success, otherwise the input
            object itself.

        Notes
        -----
        Three channel buffers go through ``applyRGB``. Buffers with four or
        more channels go through ``applyRGBA`` on their first four samples;
        alpha is passed through by the processor and extra channels are
        copied unchanged.
        """
        if data is None or data.is_empty:
            return StageResult.degraded(data, Failure.INVALID_SHAPE,
                                        "empty input data for color transformation")
        nch = data.channel_count
        if nch < 3:
            return StageResult.degraded(
                data, Failure.INVALID_SHAPE,
                f"need at least 3 channels for color transformation, got {nch}")

        if not self.catalog.is_usable:
            return StageResult.degraded(
                data, Failure.CONFIGURATION,
                f"no color configuration loaded ({self.catalog.error or self.catalog.source})")
        for role, name in (("input", input_colorspace), ("output", output_colorspace)):
            if self.catalog.resolve(name) is None:
                return StageResult.degraded(
                    data, Failure.NOT_FOUND, f"{role} colorspace '{name}' not found in config")

        result = data.copy()
        samples = result.samples
        try:
            cpu = self._cpu_processor(input_colorspace, output_colorspace)
            if nch == 3:
                flat = samples.reshape(-1)
                cpu.applyRGB(flat)
            elif nch == 4:
                flat = samples.reshape(-1)
                cpu.applyRGBA(flat)
            else:
                rgba = np.ascontiguousarray(samples[:, :, :4])
                cpu.applyRGBA(rgba.reshape(-1))
                samples[:, :, :4] = rgba
        except Exception as e:
            return StageResult.degraded(
                data, Failure.ENGINE,
                f"OCIO error transforming '{input_colorspace}' -> '{output_colorspace}': {e}")

        return StageResult.success(result)
