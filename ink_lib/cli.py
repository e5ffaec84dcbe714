#!/usr/bin/env python3
"""Command-line interface for scoring recorded drawings.

Usage:
    ink-score templates
    ink-score score strokes.json --template pattern/loops.01 --width 400 --height 300
    ink-score score strokes.json --template pattern/loops.01 --breakdown --recommend

Or run via the module:
    python -m ink_lib.cli score strokes.json

The strokes file holds either a list of strokes or an object with a
``strokes`` key. Each stroke is a list of ``[x, y]`` or ``[x, y, t]``
rows in canvas coordinates, with ``t`` in seconds.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api.recommender import HeuristicRecommender
from .config import configure_logging
from .domain.geometry import CanvasSize, Stroke, flatten_strokes
from .scoring.completion import CompletionEstimator
from .scoring.engine import DefaultScoring
from .templates.repository import TemplateRepository

logger = logging.getLogger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description='Score freehand ink trajectories against reference templates'
    )
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Logging level (default: WARNING)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('templates', help='List built-in template ids')

    score = subparsers.add_parser('score', help='Score a strokes JSON file')
    score.add_argument('strokes', type=str,
                       help='Path to strokes JSON file')
    score.add_argument('--template', '-t', type=str, default='pattern/curves.arc.01',
                       help='Template id (default: pattern/curves.arc.01)')
    score.add_argument('--width', type=float, default=400.0,
                       help='Canvas width (default: 400)')
    score.add_argument('--height', type=float, default=300.0,
                       help='Canvas height (default: 300)')
    score.add_argument('--breakdown', action='store_true',
                       help='Include precision sub-scores')
    score.add_argument('--recommend', action='store_true',
                       help='Include a next-exercise recommendation')
    return parser


def load_strokes(path: str | Path) -> list[Stroke]:
    """Read strokes from a JSON file."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('strokes', [])
    return [Stroke.from_list(rows) for rows in data]


def _cmd_templates(repo: TemplateRepository) -> dict:
    return {'templates': repo.list_ids()}


def _cmd_score(args: argparse.Namespace, repo: TemplateRepository) -> dict:
    strokes = load_strokes(args.strokes)
    template = repo.by_id(args.template)
    canvas = CanvasSize(args.width, args.height)

    engine = DefaultScoring()
    metrics = engine.compute_metrics(strokes, template, canvas)
    points, _ = flatten_strokes(strokes)
    completion = CompletionEstimator().completion(points, template.polyline, canvas)

    result = {
        'template': template.id,
        'strokes': len(strokes),
        'points': len(points),
        'completion': completion,
        'metrics': metrics.to_dict(),
    }
    if args.breakdown:
        result['breakdown'] = engine.precision_scorer.breakdown(points, template.polyline, canvas)
    if args.recommend:
        result['recommendation'] = HeuristicRecommender().next_plan([], metrics).to_dict()
    return result


def main(argv: list[str] | None = None) -> int:
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    repo = TemplateRepository.with_defaults()
    try:
        if args.command == 'templates':
            result = _cmd_templates(repo)
        else:
            result = _cmd_score(args, repo)
    except (OSError, ValueError) as e:
        logger.error("Failed to score %s: %s", getattr(args, 'strokes', ''), e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
