import argparse
import logging
import sys

import mcl

logger = logging.getLogger(__name__)

try:
    import readline  # noqa: F401 -- line editing for input()
except ImportError:
    pass

BANNER = [
    "MCL - Miguel's Command Language",
    'Based on DCL (DIGITAL Command Language)',
    'Type HELP for available commands, EXIT to quit',
    '',
]


def _make_parser():
    p = argparse.ArgumentParser(prog='mcl', description='MCL command interpreter')
    p.add_argument('--config', help='JSON file overriding the built-in limits')
    p.add_argument('--verbose', action='store_true', help='log debug output to stderr')
    p.add_argument('--no-banner', action='store_true', help="don't print the banner")
    return p


def mcl_repl(machine, prompt, read=None, write=None):
    read = read or input
    write = write or print
    while True:
        cmd = read(prompt)
        result = machine.execute(mcl.normalize_case(cmd))
        if result.output:
            write(result.output)
        if result.status == mcl.EXIT:
            return 0


def main(argv=None):
    args = _make_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')

    try:
        config = mcl.load_config(args.config)
    except mcl.ConfigError as e:
        logger.error('%s', e)
        return 2

    if not args.no_banner:
        print('\n'.join(BANNER))

    try:
        return mcl_repl(mcl.Machine(config), config.prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0  # perfectly acceptable


if __name__ == '__main__':
    sys.exit(main())
