"""Command line entry point for publicsuffix.

Loads a rule list (the bundled one by default) and prints the registrable
domain, the full decomposition, or the public suffix of each name.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .core.config import ConfigError, ConfigManager
from .core.constants import APP_VERSION
from .core.domain import DomainError, domain_of, parse_domain, suffix_of
from .core.logging_config import log_list_loaded, setup_logging
from .core.models import DEFAULT_FIND_OPTIONS, DEFAULT_PARSER_OPTIONS, FindOptions, ParserOptions
from .core.psl_loader import load_default_list
from .core.rule_list import RuleList

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="publicsuffix",
        description="Split domain names using the Public Suffix List.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--list", dest="list_path", type=Path, help="rule list file (default: bundled list)")
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument("--no-private", action="store_true", help="stop parsing at the private domains section")
    parser.add_argument("--ignore-private", action="store_true", help="skip private rules during lookup")
    parser.add_argument("--log-dir", type=Path, help="write debug and audit logs to this directory")
    parser.add_argument("--debug", action="store_true", help="log debug output to the console")
    parser.add_argument("command", choices=("domain", "parse", "suffix"))
    parser.add_argument("names", nargs="+", metavar="NAME")
    return parser


def _resolve_options(args: argparse.Namespace) -> tuple[Optional[str], ParserOptions, FindOptions]:
    """Read options from the config file, then apply command line flags."""
    if args.config:
        config = ConfigManager(config_path=args.config)
        list_path = config.settings["list_path"]
        parser_options = config.parser_options()
        find_options = config.find_options()
    else:
        list_path = None
        parser_options = DEFAULT_PARSER_OPTIONS
        find_options = DEFAULT_FIND_OPTIONS

    if args.list_path:
        list_path = str(args.list_path)
    if args.no_private:
        parser_options = replace(parser_options, private_domains=False)
    if args.ignore_private:
        find_options = replace(find_options, ignore_private=True)
    return list_path, parser_options, find_options


def _load_rules(list_path: Optional[str], options: ParserOptions) -> RuleList:
    if not list_path:
        return load_default_list(private_domains=options.private_domains)

    rule_list = RuleList.from_file(list_path, options)
    log_list_loaded(list_path, len(rule_list), sum(1 for r in rule_list if r.private))
    return rule_list


def _run_command(command: str, rule_list: RuleList, name: str, options: FindOptions) -> str:
    if command == "domain":
        return domain_of(rule_list, name, options)
    if command == "parse":
        return json.dumps(parse_domain(rule_list, name, options).to_dict())
    return suffix_of(rule_list, name)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success, 1 if any name failed, 2 on setup errors)
    """
    args = _build_parser().parse_args(argv)

    # Initialize logging
    if args.debug or args.log_dir:
        setup_logging(debug_mode=args.debug, log_dir=args.log_dir)

    try:
        list_path, parser_options, find_options = _resolve_options(args)
        rule_list = _load_rules(list_path, parser_options)
    except (ConfigError, OSError, UnicodeDecodeError) as e:
        logger.error("Failed to load rules: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    failed = False
    for name in args.names:
        try:
            print(_run_command(args.command, rule_list, name, find_options))
        except DomainError as e:
            logger.debug("Lookup failed for %r: %s", name, e)
            print(f"error: {e}", file=sys.stderr)
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
