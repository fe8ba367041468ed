"""Command-line entry point: turn a plot YAML file into a matplotlib script."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .core.pipeline import compose_plot
from .errors import PlotScriptError
from .process.sink import InstructionBuffer
from .utils.config import default_config_path, hash_config, load_config, load_plot_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="plotscript", description="Compose a matplotlib script from a plot config.")
    ap.add_argument("config", nargs="?", default=None, help="Plot YAML file (default: $PLOTSCRIPT_CONFIG or plot.yaml)")
    ap.add_argument("-o", "--output", default=None, help="Write the script here instead of stdout")
    ap.add_argument("--strict", action="store_true", help="Reject text containing double quotes")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    path = Path(args.config) if args.config else default_config_path()
    try:
        plot_cfg = load_plot_config(path)
        design = plot_cfg.to_design(base_dir=path.parent)
        buffer = compose_plot(design, InstructionBuffer(), strict_text=args.strict)
    except (FileNotFoundError, KeyError, TypeError, ValueError, ValidationError, yaml.YAMLError, PlotScriptError) as e:
        logger.error("Could not compose %s: %s", path, e)
        return 1

    if args.output:
        meta = {"config": str(path), "config_hash": hash_config(load_config(path)), "n_instructions": len(buffer)}
        out = buffer.save(args.output, metadata=meta)
        logger.info("Wrote %d instructions to %s", len(buffer), out)
    else:
        sys.stdout.write(buffer.to_script())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
