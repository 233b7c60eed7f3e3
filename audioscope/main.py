"""Command-line entry point: analyse audio files and print their descriptors."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .audio_processing import AnalysisError, AnalysisResult, analyze_file
from .config import Settings, load_settings
from .report import messages
from .utils import is_supported, pick_filename

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audioscope",
        description="Estimate tempo, key, band energy and dynamics of audio files.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="audio files to analyse")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    return parser


async def _analyze_one(
    path: Path, settings: Settings, semaphore: asyncio.Semaphore
) -> tuple[Path, Optional[AnalysisResult], Optional[str]]:
    name = pick_filename(path)
    if not is_supported(path):
        return path, None, messages.unsupported_file(name)

    try:
        async with semaphore:
            result = await asyncio.to_thread(analyze_file, path, settings=settings)
    except AnalysisError as exc:
        logger.warning("Analysis failed for %s: %s", path, exc)
        return path, None, messages.processing_error(name, str(exc))
    return path, result, None


async def _run(paths: Sequence[Path], settings: Settings, *, as_json: bool) -> int:
    semaphore = asyncio.Semaphore(settings.analysis_concurrency)
    outcomes = await asyncio.gather(
        *(_analyze_one(path, settings, semaphore) for path in paths)
    )

    failures = 0
    payload = []
    for _, result, error in outcomes:
        if error is not None:
            failures += 1
            print(error, file=sys.stderr)
            continue
        if as_json:
            payload.append(dataclasses.asdict(result))
        else:
            print(messages.format_analysis_result(result))
            print()

    if as_json:
        print(json.dumps(payload, indent=2))
    return 1 if failures else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Configure logging, load settings and analyse the requested files."""

    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = load_settings()
    return asyncio.run(_run(args.files, settings, as_json=args.json))


if __name__ == "__main__":
    sys.exit(main())
