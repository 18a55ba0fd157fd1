#!/usr/bin/env python3
"""
Namekit CLI
===========
Command-line interface for word generation.

Usage:
    namekit generate -p borderlands -n 10
    namekit generate --samples Bob,Gobob,Bobby --min 3 --max 7 --seed test
    namekit generate --corpus names.txt --depth 3 --random-seed
    namekit analyze -p coastal-towns
    namekit profiles
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from namekit import __version__
from namekit.errors import ConfigurationError, NamekitError
from namekit.generators import (
    BeginningCapitalsSpellingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
    MarkovWordGenerator,
)
from namekit.profiles import get_profile, load_profiles
from namekit.settings import load_app_settings

logger = logging.getLogger(__name__)

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, markup=False, **kwargs)

    def data(self, payload):
        """Print machine-readable JSON, regardless of quiet mode."""
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    def info(self, msg: str):
        """Print a side note on stderr, keeping stdout clean for data."""
        if not self.quiet:
            self.err_console.print(msg, markup=False)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(box=box.SIMPLE, title=title)
        for i, header in enumerate(headers):
            table.add_column(str(header), no_wrap=(i == 0))
        for row in rows:
            table.add_row(*(Text(str(c)) for c in row))
        self.console.print(table)


def configure_logging(verbose: bool = False):
    """Set up root logging from app.yaml; --verbose forces DEBUG."""
    settings = load_app_settings().logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.level_number,
        format=settings.format,
    )


def read_corpus(path: str) -> List[str]:
    """Read samples from a text file: one per line, blanks and # comments skipped."""
    samples = []
    for line in Path(path).read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            samples.append(line)
    return samples


def build_generator(args) -> MarkovWordGenerator:
    """Build a generator from a profile and/or command-line options."""
    defaults = load_app_settings().generate
    if args.profile:
        profile = get_profile(args.profile, args.file)
        kwargs = {
            'sample_set': profile.sample_set,
            'target_length_min': profile.target_length_min,
            'target_length_max': profile.target_length_max,
            'sequencing_strategy': profile.sequencing_strategy,
            'spelling_strategy': profile.spelling_strategy,
            'seed': profile.seed,
        }
    else:
        if args.corpus:
            samples = read_corpus(args.corpus)
        elif args.samples:
            samples = [s.strip() for s in args.samples.split(',') if s.strip()]
        else:
            raise ConfigurationError("Provide a sample set with --profile, --corpus or --samples")
        kwargs = {
            'sample_set': samples,
            'target_length_min': defaults.min_length,
            'target_length_max': defaults.max_length,
            'sequencing_strategy': None,
            'spelling_strategy': None,
            'seed': None,
        }
        if defaults.capitalize:
            kwargs['spelling_strategy'] = BeginningCapitalsSpellingStrategy()

    # Explicit options win over profile values and defaults
    strategy = kwargs['sequencing_strategy']
    if args.delimiter is not None:
        strategy = DelimiterSequencingStrategy(args.delimiter)
    elif args.depth is not None or strategy is None:
        strategy = CharDepthSequencingStrategy(
            args.depth if args.depth is not None else defaults.depth,
            preserve_case=getattr(strategy, 'preserve_case', False),
        )
    if args.preserve_case:
        if not isinstance(strategy, CharDepthSequencingStrategy):
            raise ConfigurationError(
                f"--preserve-case only applies to {CharDepthSequencingStrategy.kind} sequencing "
                f"(this generator uses {strategy.kind})"
            )
        strategy = CharDepthSequencingStrategy.from_settings(
            dict(strategy.get_settings(), preserve_case=True)
        )
    kwargs['sequencing_strategy'] = strategy

    if args.min_length is not None:
        kwargs['target_length_min'] = args.min_length
    if args.max_length is not None:
        kwargs['target_length_max'] = args.max_length
    if args.seed is not None:
        kwargs['seed'] = args.seed
    capitalize = getattr(args, 'capitalize', None)
    if capitalize is not None:
        kwargs['spelling_strategy'] = BeginningCapitalsSpellingStrategy() if capitalize else None

    if getattr(args, 'random_seed', False):
        return MarkovWordGenerator.with_random_seed(**kwargs)
    return MarkovWordGenerator(**kwargs)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words."""
    generator = build_generator(args)
    count = args.count if args.count is not None else load_app_settings().generate.count

    if args.json:
        if args.random_seed:
            out.info(f"Seed: {generator.seed}")
        out.data(generator.generate(count))
        return 0

    out.print(f"Generating {count} names (seed: {generator.seed})...")
    names = generator.generate(count)
    out.print()
    out.table(['#', 'Name'], [[i, name] for i, name in enumerate(names, 1)])
    return 0


def cmd_analyze(args, out: Output):
    """Show sequence statistics of a sample set."""
    generator = build_generator(args)
    probabilities = sorted(
        generator.analyze(),
        key=lambda p: (-p.sequence.frequency_total, p.sequence.chars),
    )

    if args.json:
        out.data([
            {
                'chars': p.sequence.chars,
                'frequency_beginning': p.sequence.frequency_beginning,
                'frequency_middle': p.sequence.frequency_middle,
                'frequency_ending': p.sequence.frequency_ending,
                'frequency_total': p.sequence.frequency_total,
                'probability_beginning': p.probability_beginning,
                'probability_middle': p.probability_middle,
                'probability_ending': p.probability_ending,
                'probability_overall': p.probability_overall,
            }
            for p in probabilities
        ])
        return 0

    rows = [
        [
            p.sequence.chars,
            p.sequence.frequency_beginning,
            p.sequence.frequency_middle,
            p.sequence.frequency_ending,
            f"{p.probability_beginning:.3f}",
            f"{p.probability_middle:.3f}",
            f"{p.probability_ending:.3f}",
            f"{p.probability_overall:.3f}",
        ]
        for p in probabilities
    ]
    out.table(
        ['Seq', 'Begin', 'Mid', 'End', 'P(begin)', 'P(mid)', 'P(end)', 'Overall'],
        rows,
        title=f"{len(generator.sample_set)} samples, {len(rows)} distinct sequences",
    )
    return 0


def cmd_profiles(args, out: Output):
    """List generator profiles."""
    profiles = load_profiles(args.file)

    if args.json:
        out.data([p.to_dict() for p in profiles.values()])
        return 0

    rows = []
    for p in profiles.values():
        settings = ', '.join(f"{k}={v}" for k, v in p.sequencing_strategy.get_settings().items())
        rows.append([
            p.id,
            p.name,
            len(p.sample_set),
            f"{p.target_length_min}-{p.target_length_max}",
            f"{p.sequencing_strategy.kind} ({settings})",
            p.spelling_strategy.kind if p.spelling_strategy else '-',
        ])
    out.table(['ID', 'Name', 'Samples', 'Length', 'Sequencing', 'Spelling'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def _add_source_options(p: argparse.ArgumentParser):
    p.add_argument('--profile', '-p', help='Profile id (see `namekit profiles`)')
    p.add_argument('--file', '-f', type=Path, help='Profiles YAML file (default: bundled profiles)')
    p.add_argument('--corpus', help='Text file with one sample per line')
    p.add_argument('--samples', help='Comma-separated samples (e.g., Bob,Gobob,Bobby)')
    p.add_argument('--depth', '-d', type=int, help='Char depth for sequencing')
    p.add_argument('--delimiter', help='Split samples on this delimiter instead of char depth')
    p.add_argument('--preserve-case', action='store_true', help='Keep sample casing in sequences')
    p.add_argument('--min', dest='min_length', type=int, help='Target minimum length')
    p.add_argument('--max', dest='max_length', type=int, help='Target maximum length')
    p.add_argument('--seed', '-s', help='Seed for reproducible output')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='Generate invented words that resemble a sample set',
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    _add_source_options(p)
    p.add_argument('-n', '--count', type=int, help='Number of words (default: from app.yaml)')
    p.add_argument('--capitalize', action=argparse.BooleanOptionalAction, default=None,
                   help='Capitalize the first letter of each word')
    p.add_argument('--random-seed', action='store_true',
                   help='Seed from system entropy (the seed used is reported)')

    # --- analyze ---
    p = subparsers.add_parser('analyze', aliases=['a'], help='Show sequence statistics')
    _add_source_options(p)

    # --- profiles ---
    p = subparsers.add_parser('profiles', help='List generator profiles')
    p.add_argument('--file', '-f', type=Path, help='Profiles YAML file (default: bundled profiles)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'a': 'analyze',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'analyze': cmd_analyze,
        'profiles': cmd_profiles,
    }

    handler = commands[command]
    try:
        configure_logging(args.verbose)
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (NamekitError, OSError, yaml.YAMLError) as e:
        out.error(str(e))
        logger.debug("Command failed", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
