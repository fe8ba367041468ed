from __future__ import annotations

import logging
from typing import Optional

from ..composer.general import GeneralComposer
from ..design import PlotDesign
from ..process.sink import InstructionBuffer, InstructionSink

logger = logging.getLogger(__name__)


def compose_plot(design: PlotDesign, sink: Optional[InstructionSink] = None, *, strict_text: bool = False) -> InstructionSink:
    """Run every composer stage for ``design`` in render order and return the sink.

    Order: [python] -> imports -> color -> grid -> title -> ticks -> series -> show.
    A missing title or tick mode skips that stage.
    """
    if sink is None:
        sink = InstructionBuffer()
    composer: GeneralComposer = GeneralComposer(sink, strict_text=strict_text)
    if design.launch_interpreter:
        composer.write_python()
    composer.write_import_modules()
    composer.write_plot_color(design.color)
    composer.write_grid(design.grid)
    if design.title is not None:
        composer.write_title(design.title)
    if design.ticks is not None:
        composer.write_ticks(design.ticks)
    composer.write_xy_pair(design.series)
    composer.write_plot_show()
    logger.info("Composed plot with %d series", len(design.series))
    return sink
