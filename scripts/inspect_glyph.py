#!/usr/bin/env python3
"""
Inspect Glyph Script.

Decode glyphs from a bundled stroke font and print their segments, extents
and pen-down / pen-up distances. Optionally export the decoded paths as YAML.

Usage:
    python scripts/inspect_glyph.py A
    python scripts/inspect_glyph.py --code 33 --code 34
    python scripts/inspect_glyph.py --all --summary
    python scripts/inspect_glyph.py "Hi" --out outputs/glyphs.yaml
    python scripts/inspect_glyph.py A --config my_decoder.yaml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from hershey_strokes import geometry
from hershey_strokes.configs.loader import load_decoder_config, open_font
from hershey_strokes.errors import StrokeFontError
from hershey_strokes.glyph_ir.paths import StrokePath
from hershey_strokes.utils import fs, logging_config

logger = logging.getLogger(__name__)


def _describe(code: int, path: StrokePath, summary: bool) -> str:
    xmin, ymin, xmax, ymax = geometry.path_bbox(path)
    label = chr(code) if chr(code).isprintable() else "?"
    lines = [
        f"glyph {code} {label!r}: advance={path.advance_width} "
        f"extents=({path.left}, {path.right}) segments={len(path.segments)} "
        f"points={path.point_count} bbox=({xmin}, {ymin}, {xmax}, {ymax}) "
        f"ink={geometry.path_length(path):.1f} "
        f"travel={geometry.travel_length(path):.1f}"
    ]
    if not summary:
        for i, seg in enumerate(path.segments):
            pts = " ".join(f"{x},{y}" for x, y in seg.points)
            lines.append(f"  [{i}] {pts}")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Decode and print stroke-font glyphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "text",
        nargs="?",
        default="",
        help="Characters to decode",
    )
    parser.add_argument(
        "--code",
        type=int,
        action="append",
        default=[],
        help="Character code to decode (repeatable)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Decode every glyph in the font",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print one line per glyph without point lists",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Decoder configuration file path",
    )
    parser.add_argument(
        "--out",
        "-o",
        type=str,
        help="Write decoded paths to this YAML file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override configured log level",
    )
    args = parser.parse_args()

    try:
        cfg = load_decoder_config(args.config)
    except (FileNotFoundError, StrokeFontError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    log_kwargs = cfg.logging.setup_kwargs()
    if args.log_level:
        log_kwargs["log_level"] = args.log_level
    logging_config.setup_logging(**log_kwargs, context={"app": "inspect", "font": cfg.font})
    logging_config.install_excepthook()

    glyphs = open_font(cfg)
    font = glyphs.font

    codes = [ord(c) for c in args.text] + args.code
    if args.all:
        codes = list(range(font.first_code, font.last_code + 1))
    if not codes:
        parser.error("nothing to decode: give TEXT, --code or --all")

    exported = []
    failures = 0
    for code in codes:
        try:
            path = glyphs.get(code)
        except StrokeFontError as e:
            failures += 1
            logger.error("Glyph %d: %s", code, e)
            continue
        print(_describe(code, path, args.summary))
        exported.append({
            "code": code,
            "left": path.left,
            "right": path.right,
            "advance_width": path.advance_width,
            "segments": path.polylines(),
        })

    if args.out:
        fs.atomic_yaml_dump(
            {"font": font.name, "scale": font.scale, "glyphs": exported},
            args.out,
        )
        logger.info("Wrote %d glyphs to %s", len(exported), args.out)

    logging_config.shutdown()
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
