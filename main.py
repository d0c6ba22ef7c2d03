"""
Main entry point for the GB2260 tree application.

This script provides the command-line interface for formatting the embedded
administrative division catalog as a tree. The formatted result is written
to stdout; log messages go to stderr.
"""

import argparse
import sys
from pathlib import Path

# Add the current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from gb2260_tree.config import FormatConfig
from gb2260_tree.data import DATA_VERSION
from gb2260_tree.exceptions import ConfigurationError, OutputGenerationError
from gb2260_tree.formatting_engine import FormattingEngine
from gb2260_tree.logging_config import setup_logging
from gb2260_tree.output.output_generator import flatten_tree, summarize_tree, tree_to_json


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="GB2260 Tree - format administrative division codes as a "
                    "province/prefecture/county tree"
    )

    parser.add_argument(
        "--format",
        choices=["standard", "well-formed"],
        default="standard",
        help="Tree shape: 'standard' may skip the prefecture level, "
             "'well-formed' fabricates placeholder prefectures (default: standard)"
    )

    parser.add_argument(
        "--output-format",
        choices=["json", "table", "summary"],
        default="json",
        help="How to print the tree (default: json)"
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation; 0 prints compact JSON (default: 2)"
    )

    parser.add_argument(
        "--fallback-name",
        help="Name for fabricated prefectures missing from the default name table"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--log-file",
        help="Also write log messages to this file"
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while attaching counties"
    )

    return parser.parse_args(argv)


def create_config_from_args(args) -> FormatConfig:
    """Create FormatConfig from command line arguments."""
    config_dict = {
        'tree_format': args.format,
        'show_progress': args.progress,
        'log_level': args.log_level,
        'log_file': args.log_file
    }
    if args.fallback_name is not None:
        config_dict['fallback_prefecture_name'] = args.fallback_name

    return FormatConfig.from_dict(config_dict)


def render_output(tree, output_format: str, indent: int) -> str:
    """Render the assembled tree in the requested output format."""
    if output_format == "table":
        return flatten_tree(tree).to_string(index=False)

    if output_format == "summary":
        summary = summarize_tree(tree)
        lines = [f"GB2260 catalog {DATA_VERSION}: {summary['total']:,} nodes"]
        for level, count in summary['by_level'].items():
            lines.append(f"  {level}: {count:,}")
        for depth, count in summary['by_depth'].items():
            lines.append(f"  depth {depth}: {count:,}")
        return "\n".join(lines)

    return tree_to_json(tree, indent=indent or None)


def main(argv=None):
    """Main application entry point."""
    try:
        args = parse_arguments(argv)
        config = create_config_from_args(args)

        logger = setup_logging(config)
        logger.info(f"Formatting GB2260 catalog {DATA_VERSION} as {config.tree_format} tree")
        logger.debug(f"Configuration: {config.to_dict()}")

        engine = FormattingEngine(config, logger)
        tree, _ = engine.run()

        print(render_output(tree, args.output_format, args.indent))
        return 0

    except ConfigurationError as e:
        print(f"\nConfiguration Error: {e}", file=sys.stderr)
        if e.valid_values:
            print(f"Valid values: {', '.join(e.valid_values)}", file=sys.stderr)
        return 2

    except OutputGenerationError as e:
        print(f"\nOutput Error: {e}", file=sys.stderr)
        return 3

    except KeyboardInterrupt:
        print("\nProcess interrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"\nUnexpected error: {e}", file=sys.stderr)
        print("Please check the log files for more details.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
