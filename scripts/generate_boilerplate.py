#!/usr/bin/env python3
"""Generate arity boilerplate sources."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from tqdm import tqdm

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from boilergen.engine import ArityRange, BoilerplateError
from boilergen.generation import BoilerplateGenerator, GeneratorConfig, load_config
from boilergen.patterns import PATTERN_REGISTRY, get_templates


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load the YAML config (if any) and apply command line overrides."""
    if args.config is not None:
        config = load_config(args.config)
    else:
        config = GeneratorConfig()

    overrides = {}
    if args.output is not None:
        overrides["output_root"] = args.output
    if args.min_arity is not None:
        overrides["min_arity"] = args.min_arity
    if args.max_arity is not None:
        overrides["max_arity"] = args.max_arity
    if args.pattern:
        overrides["patterns"] = tuple(args.pattern)

    return replace(config, **overrides)


def list_patterns() -> None:
    print("Registered patterns:")
    for template_id, (template_cls, description) in PATTERN_REGISTRY.items():
        print(f"  {template_id:<15} {template_cls.__name__:<30} {description}")


def run(args: argparse.Namespace) -> int:
    config = build_config(args)
    arity_range = ArityRange(config.min_arity, config.max_arity)
    templates = get_templates(list(config.patterns) if config.patterns is not None else None)

    generator = BoilerplateGenerator(
        templates=templates,
        arity_range=arity_range,
        namespace=config.namespace,
    )

    print("=" * 70)
    print("Arity Boilerplate Generator")
    print("=" * 70)
    print(f"  Output: {config.output_root}")
    print(f"  Arity: {arity_range.min_arity}..{arity_range.max_arity}")
    print(f"  Patterns: {', '.join(t.template_id for t in templates)}")

    files = generator.compute(config.output_root)

    if args.dry_run:
        print("\nDry run, nothing written:")
        for generated in files:
            print(f"  {generated.path} ({len(generated.body)} chars)")
        return 0

    if args.progress:
        files = tqdm(files, desc="Writing", unit="file")
    paths = generator.write_all(files)

    generator.print_stats(paths)
    print("\n✓ Done!")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate one source file per pattern with a definition per arity"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (e.g. configs/boilerplate.yaml)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output root directory (overrides config)",
    )
    parser.add_argument("--min-arity", type=int, default=None, help="Lowest arity (default: 2)")
    parser.add_argument("--max-arity", type=int, default=None, help="Highest arity (default: 22)")
    parser.add_argument(
        "--pattern",
        action="append",
        default=[],
        help="Pattern id to generate; repeat for several (default: all)",
    )
    parser.add_argument("--list", action="store_true", help="List registered patterns and exit")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute bodies and print target paths without writing",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while writing")

    args = parser.parse_args(argv)

    if args.list:
        list_patterns()
        return 0

    try:
        return run(args)
    except BoilerplateError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
