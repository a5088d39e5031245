"""fontinventory <subcommand> [options]

Every module in this package with a ``main(args)`` function is a
subcommand, named after the module with underscores turned into dashes.
"""
import argparse
import sys
from importlib import import_module
from pathlib import Path

from fontinventory._version import version as __version__


def _get_subcommands():
    subcommands = {}
    for module in Path(__file__).parent.glob("*.py"):
        if module.stem == "__init__":
            continue
        subcommands[module.stem.replace("_", "-")] = module.stem
    return subcommands


subcommands = _get_subcommands()

parser = argparse.ArgumentParser(
    prog="fontinventory",
    description="List the characters a font covers and check text against it.",
    epilog="Use 'fontinventory <subcommand> -h' for the options of a subcommand.",
)
parser.add_argument("subcommand", choices=sorted(subcommands))
parser.add_argument("--version", action="version", version="%(prog)s " + __version__)


def _run(subcommand, args):
    mod = import_module(f".{subcommands[subcommand]}", __name__)
    return mod.main(args)


def main(args=None):
    if args is None:
        args = sys.argv
    if len(args) >= 2 and args[1] in subcommands:
        return _run(args[1], args[2:])
    # Only reached for --version, -h or a bad subcommand, all of which exit
    options = parser.parse_args(args[1:2])
    return _run(options.subcommand, args[2:])


if __name__ == "__main__":
    sys.exit(main())
