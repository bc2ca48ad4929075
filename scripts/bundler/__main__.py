"""CLI entry point for the bundler package.

Invoke as:  python scripts/bundler resources.h logo.png shader.vert
"""

# Bootstrap: when run as `python scripts/bundler` (directory path),
# re-execute through runpy so the package machinery resolves relative imports.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("bundler", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable, run_module already calls sys.exit()

import argparse
import sys

from ._common import BundleError, UsageError
from .writer import run

PROG = "bundler"

# Switches recognized anywhere on the command line; everything else is a path
OPTION_STRINGS = {"-h", "--help", "-v", "--verbose"}


class BundleArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage as UsageError instead of exiting 2."""

    def error(self, message):
        raise UsageError(self.prog)


def build_parser():
    parser = BundleArgumentParser(
        prog=PROG,
        description="Bundle files into C byte arrays inside one generated header.",
        epilog="Use -- before paths that look like options, e.g. -- -v.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Header file to write, then the files to embed in bundle index order",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show each bundled file"
    )
    return parser


def split_args(argv):
    """Separate known switches from paths, keeping path order.

    Any argument that is not a known switch is a path, even if it starts
    with '-'. Everything after a bare '--' is a path.
    """
    options = []
    paths = []
    only_paths = False
    for arg in argv:
        if only_paths:
            paths.append(arg)
        elif arg == "--":
            only_paths = True
        elif arg in OPTION_STRINGS:
            options.append(arg)
        else:
            paths.append(arg)
    return options, paths


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    options, paths = split_args(argv)

    try:
        args = parser.parse_args(options + ["--"] + paths)
        if not args.paths:
            raise UsageError(parser.prog)
        output, inputs = args.paths[0], args.paths[1:]
        run(output, inputs, verbose=args.verbose, prog=parser.prog)
    except BundleError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
