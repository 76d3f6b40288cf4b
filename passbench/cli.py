"""CLI for PassBench — generate passwords, run timing benchmarks, or launch the console/GUI front end."""

import argparse
import logging
import sys

from rich import print
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .config import load_config
from .console import ConsoleUI
from .errors import ConfigError, EstimationError, GenerationError
from .estimator import TimeEstimator
from .generator import PasswordGenerator
from .password_config import PasswordConfig
from .tasks import validate_custom_range

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BENCH_FAILED = 1
EXIT_BAD_CONFIG = 2

# passwords are printed verbatim: no emoji codes, no folding at the terminal width
stdout = Console(emoji=False, soft_wrap=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_generate(args):
    try:
        config = PasswordConfig.build(
            args.length,
            latin=args.latin,
            cyrillic=args.cyrillic,
            digits=args.digits,
            special=args.special,
            required=args.required,
        )
        generator = PasswordGenerator()
        for i in range(args.copies):
            pw = generator.generate(config)
            stdout.print(Text.assemble((f"Password #{i+1}: ", "bold green"), pw))
    except (ConfigError, GenerationError) as e:
        print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        return EXIT_BAD_CONFIG
    return EXIT_OK


def cmd_bench(args):
    estimator = TimeEstimator()
    try:
        if args.mode == "quick":
            report = estimator.run_quick_test()
        elif args.mode == "detailed":
            report = estimator.run_detailed_test()
        else:
            validate_custom_range(args.min, args.max, args.step)
            report = estimator.run_custom_test(args.min, args.max, args.step)
    except ConfigError as e:
        print(f"[red]Invalid range: {escape(str(e))}[/red]")
        return EXIT_BAD_CONFIG
    except EstimationError as e:
        print(f"[red]Benchmark failed: {escape(str(e))}[/red]")
        return EXIT_BENCH_FAILED
    print(Text(report))
    return EXIT_OK


def launch_console():
    ConsoleUI().run()
    return EXIT_OK


def launch_gui_with_fallback():
    try:
        from .gui import main as gui_main
        return gui_main()
    except (ImportError, RuntimeError) as e:
        logger.warning("GUI unavailable (%s), falling back to console", e)
        print(f"[yellow]GUI unavailable ({escape(str(e))}); starting console menu.[/yellow]")
        return launch_console()


def build_parser(cfg) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passbench")
    parser.add_argument("--ui", choices=("console", "gui"), default=cfg.get("ui") or "console",
                        help="Front end to start when no sub-command is given")
    parser.add_argument("--log-level", default=cfg.get("log_level", "WARNING"),
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    sub = parser.add_subparsers(dest="cmd")

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=cfg["default_length"], help="Password length")
    gen.add_argument("--latin", action=argparse.BooleanOptionalAction, default=cfg["use_latin"],
                     help="Latin letters a-z, A-Z")
    gen.add_argument("--cyrillic", action=argparse.BooleanOptionalAction, default=cfg["use_cyrillic"],
                     help="Cyrillic letters а-я, А-Я")
    gen.add_argument("--digits", action=argparse.BooleanOptionalAction, default=cfg["use_digits"],
                     help="Digits 0-9")
    gen.add_argument("--special", action=argparse.BooleanOptionalAction, default=cfg["use_special"],
                     help="Special characters")
    gen.add_argument("--required", type=str, default="", help="Characters that must appear")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    bench = sub.add_parser("bench", help="Measure generation time across lengths")
    bench.add_argument("mode", choices=("quick", "detailed", "custom"),
                       help="quick: 10k/100k/1M, detailed: 10k-1M step 100k, custom: --min/--max/--step")
    bench.add_argument("--min", type=int, default=10_000, help="Custom range start (inclusive)")
    bench.add_argument("--max", type=int, default=100_000, help="Custom range end (inclusive)")
    bench.add_argument("--step", type=int, default=10_000, help="Custom range step")
    bench.set_defaults(func=cmd_bench)

    return parser


def main(argv=None):
    cfg = load_config()
    parser = build_parser(cfg)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger.debug("arguments: %s", args)

    if args.cmd is None:
        logger.info("starting %s front end", args.ui)
        if args.ui == "gui":
            return launch_gui_with_fallback()
        return launch_console()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
