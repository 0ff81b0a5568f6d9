"""Clipboard text to rendered output pipeline.

The converter snapshots the active `AppConfig` and runs the pure core on every
SVG document found in the input: split, optionally optimize, then render in the
configured output mode.
"""

from __future__ import annotations

import hashlib
import logging
import time
from dataclasses import dataclass, replace
from threading import Lock

from svgx.config import AppConfig
from svgx.convert.dispatch import output_extension, render_output
from svgx.convert.optimizer import OptimizationResult, SvgOptimizeError, optimize_svg
from svgx.convert.svg_detect import split_svg_documents


@dataclass(frozen=True)
class ConversionResult:
    """Result returned by the conversion worker."""

    svg_hash: str
    output: str
    mode: str
    document_count: int
    render_ms: float
    optimization: OptimizationResult | None = None

    @property
    def extension(self) -> str:
        return output_extension(self.mode)


class SvgConverter:
    """Thread-safe converter used by the clipboard worker."""

    def __init__(self, config: AppConfig) -> None:
        self._log = logging.getLogger("svgx.converter")
        self._cfg_lock = Lock()
        self._cfg = replace(config)

    def set_config(self, config: AppConfig) -> None:
        with self._cfg_lock:
            self._cfg = replace(config)

    def _optimize(self, svg: str, cfg: AppConfig) -> tuple[str, OptimizationResult | None]:
        if not cfg.optimize:
            return svg, None
        try:
            result = optimize_svg(svg, precision=int(cfg.optimize_precision))
        except SvgOptimizeError as e:
            self._log.warning("optimize_skipped error=%s", e)
            return svg, None
        return result.optimized, result

    def convert(self, text: str) -> ConversionResult:
        svg_hash = hashlib.sha256(text.encode("utf-8")).hexdigest()

        with self._cfg_lock:
            cfg = replace(self._cfg)

        docs = split_svg_documents(text)
        if not docs:
            raise ValueError("No valid SVG content found.")

        t0 = time.perf_counter()
        outputs: list[str] = []
        last_opt: OptimizationResult | None = None
        for doc in docs:
            svg, opt = self._optimize(doc, cfg)
            if opt is not None:
                last_opt = opt
            rendered = render_output(
                svg,
                cfg.output_mode,
                component_name=cfg.component_name or None,
                pretty=bool(cfg.format_output),
                indent_width=int(cfg.indent_width),
            )
            if rendered:
                outputs.append(rendered)

        if not outputs:
            raise ValueError(f"Could not render SVG as {cfg.output_mode}.")

        dt_ms = (time.perf_counter() - t0) * 1000.0
        self._log.info(
            "converted svg_hash=%s mode=%s docs=%d ms=%.1f optimize=%s",
            svg_hash[:10],
            cfg.output_mode,
            len(docs),
            dt_ms,
            bool(cfg.optimize),
        )
        return ConversionResult(
            svg_hash=svg_hash,
            output="\n\n".join(outputs),
            mode=cfg.output_mode,
            document_count=len(docs),
            render_ms=dt_ms,
            optimization=last_opt if len(docs) == 1 else None,
        )
