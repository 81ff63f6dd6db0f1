"""
Command-line interface for the Nexus REST API client.

Provides argument parsing and main execution flow.
"""

import argparse
import getpass
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from nexus_api.config import DEFAULT_HOSTNAME, DEFAULT_PASSWORD, DEFAULT_USERNAME
from nexus_api.logging_setup import log, setup_logging
from nexus_api.network.client import NexusConnection
from nexus_api.utils.files import save_file


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Nexus Repository Manager REST API client.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Host and credentials can also be provided via the NEXUS_HOSTNAME,\n"
            "NEXUS_USERNAME and NEXUS_PASSWORD env vars.  If the password is\n"
            "still missing you will be prompted for it."
        ),
    )
    parser.add_argument(
        "--host", default=DEFAULT_HOSTNAME,
        help="Nexus hostname, e.g. nexus.example.com",
    )
    parser.add_argument(
        "--user", default=DEFAULT_USERNAME,
        help="Nexus username",
    )
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Nexus password (overrides NEXUS_PASSWORD env var)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="GET an endpoint and print its JSON")
    get.add_argument("endpoint", help='e.g. "assets?repository=maven-releases"')
    get.add_argument(
        "--all", action="store_true",
        help="Follow continuation tokens and print every page's items",
    )

    for verb in ("post", "put"):
        write = commands.add_parser(verb, help=f"{verb.upper()} to an endpoint")
        write.add_argument("endpoint")
        write.add_argument("--data", default="", help="JSON request body")

    delete = commands.add_parser("delete", help="DELETE an endpoint")
    delete.add_argument("endpoint")

    length = commands.add_parser(
        "content-length", help="Print the Content-Length of an absolute URL",
    )
    length.add_argument("url")

    download = commands.add_parser("download", help="Download an absolute URL")
    download.add_argument("url")
    download.add_argument("--output", required=True, help="Destination file")

    return parser.parse_args(argv)


def _print_json(value) -> None:
    if isinstance(value, str):
        print(value)
    else:
        print(json.dumps(value, indent=2))


def _fetch_all(connection: NexusConnection, endpoint: str) -> list:
    items: list = []
    with tqdm(desc="Pages", unit="page", file=sys.stderr) as bar:
        for page in connection.iter_pages(endpoint):
            items.extend(page.items)
            bar.update(1)
            bar.set_postfix(items=len(items))
    return items


def run(args: argparse.Namespace, connection: NexusConnection) -> int:
    """Execute the selected subcommand; returns the process exit code."""
    if args.command == "get":
        if args.all:
            _print_json(_fetch_all(connection, args.endpoint))
        else:
            _print_json(connection.get_response(args.endpoint))
            if connection.paginate:
                log.info("More results available – re-run with --all to fetch every page")
        return 0 if connection.last_failure is None else 1

    if args.command in ("post", "put", "delete"):
        if args.command == "delete":
            ok = connection.delete(args.endpoint)
        else:
            send = connection.post if args.command == "post" else connection.put
            ok = send(args.endpoint, parameters=args.data)
        print("OK" if ok else "FAILED")
        return 0 if ok else 1

    if args.command == "content-length":
        length = connection.content_length(args.url)
        print(length)
        return 0 if length >= 0 else 1

    if args.command == "download":
        response = connection.download(args.url)
        if response is None:
            return 1
        save_file(Path(args.output), response.content)
        log.info("Downloaded %s → %s", args.url, args.output)
        return 0

    log.error("Unknown command: %s", args.command)
    return 2


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for the CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.host:
        sys.exit("No Nexus host given. Use --host or set NEXUS_HOSTNAME.")

    if not args.password:
        args.password = getpass.getpass("Nexus password: ")

    connection = NexusConnection(
        username=args.user,
        password=args.password,
        hostname=args.host,
    )
    sys.exit(run(args, connection))


if __name__ == "__main__":
    main()
