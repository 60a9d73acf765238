#!/usr/bin/env python3
"""
cclevels command line tool.

Inspect, create and rewrite levelset files.
"""

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .config import CodecConfig, load_config
from .constants import MAGIC_NAMES, LevelsetMagic
from .levels import Levelset, LevelsetFormat, classify
from .utils import (
    close_logging,
    init_logging,
    is_initialized,
    log,
    logDebug,
    logError,
    logWarning,
    print_summary,
)


def _magic_name(magic: int) -> str:
    try:
        return LevelsetMagic(magic).name
    except ValueError:
        return f"0x{magic:08X}"


def cmd_info(args: argparse.Namespace, config: CodecConfig) -> int:
    """Print a summary of every level in a levelset."""
    levelset = Levelset.load(args.file)

    log(f"{args.file}: {levelset.level_count} levels, {_magic_name(levelset.magic)} ruleset")
    for level in levelset:
        log(f"  {level.level_num:3d}  {level.name:<36} "
            f"time={level.timer:<4d} chips={level.chips:<4d} password={level.password or '-':<4} "
            f"traps={len(level.traps)} cloners={len(level.clones)} movers={len(level.move_list)}")
        if args.hints and level.hint:
            log(f"       hint: {level.hint}")
    return 0


def cmd_sniff(args: argparse.Namespace, config: CodecConfig) -> int:
    """Report whether a file is a levelset container."""
    result = classify(args.file)
    log(f"{args.file}: {result.value}")
    return 1 if result == LevelsetFormat.ERROR else 0


def cmd_new(args: argparse.Namespace, config: CodecConfig) -> int:
    """Create a levelset of empty levels."""
    count = args.count if args.count is not None else config.default_level_count
    magic = MAGIC_NAMES[args.type] if args.type else config.default_magic

    levelset = Levelset(count, magic=magic)
    size = levelset.save(args.output)
    log(f"Wrote {count} levels to {args.output} ({size} bytes)")
    return 0


def cmd_resave(args: argparse.Namespace, config: CodecConfig) -> int:
    """Read a levelset and write it back out, renumbering its levels."""
    levelset = Levelset.load(args.input)
    if args.type:
        levelset.magic = MAGIC_NAMES[args.type]

    size = levelset.save(args.output)
    log(f"Wrote {levelset.level_count} levels to {args.output} ({size} bytes)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cclevels',
        description='Inspect, create and rewrite levelset files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    cclevels info CHIPS.DAT
    cclevels sniff unknown.dat
    cclevels new mylevels.dat --count 10 --type lynx
    cclevels resave CHIPS.DAT renumbered.dat
        """
    )
    parser.add_argument('--config', default=None,
                        help='Path to cclevels.ini configuration file')
    parser.add_argument('--log', default=None,
                        help='Path to log file (overrides the config file)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help='List the levels in a levelset')
    info.add_argument('file', help='Levelset file')
    info.add_argument('--hints', action='store_true', help='Also print level hints')
    info.set_defaults(func=cmd_info)

    sniff = subparsers.add_parser('sniff', help='Detect whether a file is a levelset')
    sniff.add_argument('file', help='File to inspect')
    sniff.set_defaults(func=cmd_sniff)

    new = subparsers.add_parser('new', help='Create a levelset of empty levels')
    new.add_argument('output', help='Output file')
    new.add_argument('--count', type=int, default=None, help='Number of levels')
    new.add_argument('--type', choices=sorted(MAGIC_NAMES), default=None, help='Ruleset')
    new.set_defaults(func=cmd_new)

    resave = subparsers.add_parser('resave', help='Rewrite a levelset with renumbered levels')
    resave.add_argument('input', help='Input levelset file')
    resave.add_argument('output', help='Output file')
    resave.add_argument('--type', choices=sorted(MAGIC_NAMES), default=None,
                        help='Change the ruleset')
    resave.set_defaults(func=cmd_resave)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log:
        init_logging(Path(args.log))

    try:
        config = load_config(args.config)
        if not is_initialized():
            init_logging(Path(config.log_path) if config.log_path else None)
        for warning in config.warnings:
            logWarning(warning)

        return args.func(args, config)

    except Exception as e:
        logError(f"{e}")
        logDebug(traceback.format_exc())
        return 1

    finally:
        print_summary()
        close_logging()


if __name__ == '__main__':
    sys.exit(main())
