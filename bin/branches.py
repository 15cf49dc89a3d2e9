#!/usr/bin/env python3
"""Report git branches for the repositories in a folder.

Looks at each immediate subdirectory that contains a .git directory and
prints either its current branch or all of its local branches.
"""

import argparse
import sys

from branchlib import Config, collect_results, render_results
from branchlib.output import print_error, print_info, print_lines, set_color_enabled


# --------------------------------------------------------------------------- #
# Configuration
# --------------------------------------------------------------------------- #

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Show current or all branches of the git repositories in a folder",
    )
    parser.add_argument(
        "directory", nargs="?", default=None,
        help="folder containing the repositories (default: this tool's folder)",
    )
    parser.add_argument(
        "--all", "-all", dest="show_all", action="store_true",
        help="list all local branches instead of the current one",
    )
    parser.add_argument(
        "--branch-search", "-branchSearch", "-b", default="", metavar="TEXT",
        help="only show branches containing TEXT (case-insensitive)",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="disable colored warnings",
    )
    return parser.parse_args(argv)


# --------------------------------------------------------------------------- #
# Main
# --------------------------------------------------------------------------- #

def main(argv=None):
    """Collect branches and print the results table."""
    args = parse_args(argv)
    if args.no_color:
        set_color_enabled(False)

    config = Config(
        base_dir=args.directory,
        show_all=args.show_all,
        branch_search=args.branch_search,
    )

    try:
        results = collect_results(config)
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        sys.exit(130)
    except OSError as e:
        print_error(f"cannot read {config.base_dir}: {e.strerror or e}")
        sys.exit(1)

    print_lines(render_results(results, config))


if __name__ == "__main__":
    main()
