#!/usr/bin/env python3
"""
Cloudflare DNS Manager - Command Line Interface

Main entry point for the Cloudflare DNS Manager CLI.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table

from ..core.credentials import DEFAULT_TOKEN_ENV, resolve_default_credential
from ..core.dispatcher import RequestDispatcher
from ..core.exceptions import CloudflareAPIError, CredentialInvalid
from ..providers.cloudflare_provider import CloudflareProvider

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/config.yaml"


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config != DEFAULT_CONFIG_PATH and not Path(args.config).exists():
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)

    config = load_config(args.config)
    config_logger(config, verbose=args.verbose)

    api_config = config["api"]
    dispatcher = RequestDispatcher.from_config(api_config)

    try:
        resolve_default_credential(
            dispatcher, env_var=api_config.get("token_env", DEFAULT_TOKEN_ENV)
        )
    except CredentialInvalid as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if args.command == "verify":
        console.print("[green]Cloudflare API key is valid[/green]")
        sys.exit(0)

    provider = CloudflareProvider(dispatcher)

    try:
        run_command(args, provider)
    except (CloudflareAPIError, ValueError) as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        console.print(f"[red]Error: {e}[/red]")
        if args.verbose:
            console.print_exception()
        sys.exit(1)

    sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        description="Cloudflare DNS Manager - inspect Cloudflare zones and DNS records"
    )

    parser.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file path (default: {DEFAULT_CONFIG_PATH})",
    )

    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of tables"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("verify", help="Verify the API key and exit")
    subparsers.add_parser("zones", help="List zones")

    records = subparsers.add_parser("records", help="List DNS records of one zone")
    target = records.add_mutually_exclusive_group(required=True)
    target.add_argument("--zone-id", help="Cloudflare zone identifier")
    target.add_argument("--zone", "-z", help="Zone name, e.g. example.com")

    subparsers.add_parser("dump", help="List every zone together with its DNS records")

    return parser


def run_command(args: argparse.Namespace, provider: CloudflareProvider) -> None:
    """Run the selected subcommand and print its output."""
    if args.command == "zones":
        zones = provider.get_zones()
        if args.json:
            print_json(zones)
        else:
            display_zones(zones)

    elif args.command == "records":
        zone_id = args.zone_id
        if args.zone:
            zone = provider.find_zone(args.zone)
            if zone is None:
                raise ValueError(f"Zone '{args.zone}' not found")
            zone_id = zone["id"]

        records = provider.get_records(zone_id)
        if args.json:
            print_json(records)
        else:
            display_records(records, title=f"DNS Records ({args.zone or zone_id})")

    elif args.command == "dump":
        data = provider.get_zones_and_records()
        if args.json:
            print_json(data)
        else:
            for zone in data:
                display_records(zone["records"], title=f"DNS Records ({zone.get('name')})")


def display_zones(zones: List[Dict]):
    """Display zones as a table."""
    table = Table(title="Cloudflare Zones")
    table.add_column("Name", style="cyan")
    table.add_column("ID", style="magenta")
    table.add_column("Status", style="white")

    for zone in zones:
        table.add_row(str(zone.get("name", "")), str(zone.get("id", "")), str(zone.get("status", "")))

    console.print(table)
    console.print(f"\n[bold]Total zones: {len(zones)}[/bold]")


def display_records(records: List[Dict], title: str = "DNS Records"):
    """Display DNS records as a table."""
    table = Table(title=title)
    table.add_column("Type", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Content", style="white")
    table.add_column("TTL", style="white")
    table.add_column("Proxied", style="white")

    for record in records:
        table.add_row(
            str(record.get("type", "")),
            str(record.get("name", "")),
            str(record.get("content", "")),
            str(record.get("ttl", "")),
            "yes" if record.get("proxied") else "no",
        )

    console.print(table)


def print_json(data):
    """Print data as indented JSON on stdout."""
    print(json.dumps(data, indent=2, sort_keys=True))


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file, merged over the defaults."""
    config = get_default_config()
    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return config
    except yaml.YAMLError as e:
        print(f"Error parsing config file: {e}")
        sys.exit(1)

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "api": {
            "base_url": "https://api.cloudflare.com/client/v4",
            "timeout": 30,
            "max_attempts": 10,
            "cache_ttl": 300,
            "token_env": DEFAULT_TOKEN_ENV,
        },
        "logging": {"level": "INFO", "file": "cloudflare_dns_manager.log"},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
        log_file = logging_config.get("file")

        handlers = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.insert(0, logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=handlers,
        )
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


if __name__ == "__main__":
    main()
