"""
cli.py

Responsibility: CLI entrypoint for cdktf-provider-project.

Commands:
- `resolve OPTIONS_FILE`: load options -> parse provider -> derive identities -> probe git -> print
- `identities PROVIDER_SPEC`: parse provider -> derive identities -> print (no git probe)

Output is YAML by default (`--format json` for JSON). The process never writes files.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from cdktf_provider_project.identity import derive_identities
from cdktf_provider_project.project import build_project_config, identities_to_dict
from cdktf_provider_project.spec_parser import SpecError, load_project_options, parse_provider_spec

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def _dump(data: dict[str, Any], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def resolve_cmd(args: argparse.Namespace) -> int:
    options = load_project_options(args.options_path)
    if args.outdir:
        options = replace(options, outdir=Path(args.outdir))
    logger.info("Resolving %s (repository root: %s)", options.terraform_provider, options.outdir)

    config = build_project_config(options)
    sys.stdout.write(_dump(config.to_dict(), args.format))
    return 0


def identities_cmd(args: argparse.Namespace) -> int:
    provider = parse_provider_spec(args.provider_spec)
    identities = derive_identities(provider.provider_name)
    data = {"providerName": provider.provider_name, "providerVersion": provider.provider_version}
    data.update(identities_to_dict(identities))
    sys.stdout.write(_dump(data, args.format))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cdktf-provider-project",
        description="Resolve package identifiers and major version for a prebuilt cdktf provider",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("resolve", help="Resolve the full project configuration from an options file")
    r.add_argument("options_path", help="Path to the YAML options file")
    r.add_argument("--outdir", default=None, help="Repository root to probe for tags (default: options file dir)")
    r.add_argument("--format", choices=["yaml", "json"], default="yaml", help="Output format (default: yaml)")
    r.set_defaults(func=resolve_cmd)

    i = sub.add_parser("identities", help="Print the package identifiers for a provider spec")
    i.add_argument("provider_spec", help="Provider spec, e.g. hashicorp/aws or hashicorp/null@3.2.1")
    i.add_argument("--format", choices=["yaml", "json"], default="yaml", help="Output format (default: yaml)")
    i.set_defaults(func=identities_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    try:
        return int(args.func(args))
    except SpecError as e:
        logger.debug("Invalid input", exc_info=True)
        sys.stderr.write(f"error: {e}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
