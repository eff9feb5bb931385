"""Command-line access to ORCID records, works and OAuth helpers."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import sys
from typing import Any, Optional, Sequence

from orcidkit.client import OrcidClient
from orcidkit.environment import SANDBOX
from orcidkit.errors import OrcidError
from orcidkit.log_config import configure_logging
from orcidkit.models import OrcidRecord, WorksResponse
from orcidkit.settings import Settings


def _bool_flag(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="orcidkit",
        description="Query the public ORCID API and run the OAuth helpers",
    )
    parser.add_argument("--sandbox", action="store_true", help="Use the ORCID sandbox")
    parser.add_argument("--user-agent", help="Override the User-Agent header")
    parser.add_argument("--log-level", help="Log level (default from ORCIDKIT_LOG_LEVEL)")
    commands = parser.add_subparsers(dest="command", required=True)

    record = commands.add_parser("record", help="Fetch a public record")
    record.add_argument("orcid", help="ORCID iD or https://orcid.org/... URL")
    record.add_argument("--summary", action="store_true", help="Print the name only")

    works = commands.add_parser("works", help="Fetch the public works list")
    works.add_argument("orcid", help="ORCID iD or https://orcid.org/... URL")
    works.add_argument("--summary", action="store_true", help="Print one line per work")

    authorize = commands.add_parser("authorize-url", help="Print an OAuth authorize URL")
    authorize.add_argument(
        "--scope",
        action="append",
        dest="scopes",
        help="Scope to request (repeatable; default from ORCID_SCOPE)",
    )
    authorize.add_argument("--state", help="CSRF state value")
    authorize.add_argument("--show-login", type=_bool_flag, help="true or false")
    authorize.add_argument("--prompt", help="Prompt hint, e.g. login")

    exchange = commands.add_parser("exchange-code", help="Exchange an auth code for a token")
    exchange.add_argument("code", help="Authorization code from the redirect")

    return parser.parse_args(argv)


def _to_json(model: Any) -> str:
    return json.dumps(dataclasses.asdict(model), indent=2, ensure_ascii=False)


def _record_summary(record: OrcidRecord) -> str:
    return f"{record.orcid or '-'}\t{record.display_name or '(name not public)'}"


def _works_summary(works: WorksResponse) -> str:
    lines = []
    for summary in works.summaries:
        doi = summary.external_ids.find("doi") if summary.external_ids else None
        lines.append(
            f"{summary.put_code or '-'}\t{summary.year or '----'}\t"
            f"{summary.title_text or '(untitled)'}" + (f"\tdoi:{doi}" if doi else "")
        )
    return "\n".join(lines) if lines else "(no public works)"


async def run(args: argparse.Namespace, settings: Settings) -> str:
    config = settings.client_config()
    if args.sandbox:
        config = dataclasses.replace(config, environment=SANDBOX)
    if args.user_agent:
        config = dataclasses.replace(config, user_agent=args.user_agent)

    async with OrcidClient(config) as client:
        if args.command == "record":
            record = await client.fetch_record(args.orcid)
            return _record_summary(record) if args.summary else _to_json(record)

        if args.command == "works":
            works = await client.fetch_works(args.orcid)
            return _works_summary(works) if args.summary else _to_json(works)

        if args.command == "authorize-url":
            settings.require_oauth(secret=False)
            return client.authorize_url(
                client_id=settings.client_id or "",
                redirect_uri=settings.redirect_uri or "",
                scopes=args.scopes or settings.scopes,
                state=args.state,
                show_login=args.show_login,
                prompt=args.prompt,
            )

        settings.require_oauth()
        token = await client.exchange_code_for_token(
            client_id=settings.client_id or "",
            client_secret=settings.client_secret or "",
            code=args.code,
            redirect_uri=settings.redirect_uri or "",
        )
        return _to_json(token)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = Settings.from_env()
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    configure_logging(args.log_level or settings.log_level, settings.log_format)

    try:
        output = asyncio.run(run(args, settings))
    except OrcidError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
