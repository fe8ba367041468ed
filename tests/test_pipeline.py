from datetime import date

import pytest

from plotscript import (
    DerivedTicks,
    InstructionBuffer,
    PlotColor,
    PlotConfig,
    PlotDesign,
    Title,
    UnsafeTextError,
    XyPair,
    compose_plot,
)
from plotscript.cli import main


def test_compose_plot_stage_order():
    series = [XyPair(x=[date(2024, 1, 1)], y=[0.5], has_scatter=True)]
    design = PlotDesign(
        color=PlotColor(outer="white"),
        grid=True,
        title=Title("Load", 12),
        ticks=DerivedTicks(series),
        series=series,
        launch_interpreter=True,
    )
    lines = compose_plot(design).instructions
    assert lines[0] == "python"
    assert lines[1:4] == ("import matplotlib.pyplot as plt", "import pandas as pd", "import datetime")
    assert lines[4] == 'fig = plt.figure(facecolor="white")'
    assert lines[5] == "plt.grid(True)"
    assert lines[6] == 'plt.title("Load",fontsize=12)'
    assert lines[7] == 'plt.xticks([datetime.date(2024,1,1)],["01/01"])'
    assert lines[8].startswith("plt.yticks([0.0,")
    assert lines[9] == "x1 = [datetime.date(2024,1,1)]"
    assert lines[-2] == "plt.scatter(x1,y1)"
    assert lines[-1] == "plt.show()"


def test_compose_plot_minimal_design_uses_given_sink():
    sink = InstructionBuffer()
    out = compose_plot(PlotDesign(), sink)
    assert out is sink
    assert sink.instructions == (
        "import matplotlib.pyplot as plt",
        "import pandas as pd",
        "import datetime",
        "plt.grid(False)",
        "plt.show()",
    )


def test_compose_plot_strict_text():
    with pytest.raises(UnsafeTextError):
        compose_plot(PlotDesign(title=Title('a "quoted" title', 10)), strict_text=True)


def test_config_and_hand_built_design_match():
    cfg = PlotConfig.model_validate({
        "grid": True,
        "series": [{"x": ["2024-01-01"], "y": [3]}],
    })
    by_config = compose_plot(cfg.to_design()).instructions
    by_hand = compose_plot(PlotDesign(grid=True, series=[XyPair(x=[date(2024, 1, 1)], y=[3])])).instructions
    assert by_config == by_hand


def test_cli_writes_script_and_metadata(tmp_path, capsys):
    cfg = tmp_path / "plot.yaml"
    cfg.write_text("grid: true\ntitle: {text: T, font_size: 8}\n", encoding="utf-8")
    assert main([str(cfg)]) == 0
    printed = capsys.readouterr().out
    assert 'plt.title("T",fontsize=8)\n' in printed
    assert printed.endswith("plt.show()\n")

    out = tmp_path / "out" / "plot.py"
    assert main([str(cfg), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == printed
    assert (tmp_path / "out" / "plot.py.metadata.json").exists()


def test_cli_reports_bad_config(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("series:\n  - x: [2024-01-01]\n    y: [1, 2]\n", encoding="utf-8")
    assert main([str(cfg)]) == 1
    assert main([str(tmp_path / "missing.yaml")]) == 1
    quoted = tmp_path / "quoted.yaml"
    quoted.write_text("title: {text: 'say \"hi\"', font_size: 8}\n", encoding="utf-8")
    assert main([str(quoted), "--strict"]) == 1
