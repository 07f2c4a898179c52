from __future__ import annotations

import argparse
import datetime
import getpass as _getpass
import json as _json
import logging
import sys
from typing import List, Optional

from sunhex.errors import SunhexError
from sunhex.protocol import Sunhex, create_client
from sunhex.record import FEMALE, MALE, OTHER, PersonalInfo


def _read_password(password: Optional[str], *, confirm: bool = False) -> str:
    """Return ``password`` or prompt for it on the terminal."""
    if password is not None:
        return password
    pw = _getpass.getpass("Password: ")
    if confirm and _getpass.getpass("Confirm password: ") != pw:
        raise ValueError("Passwords do not match")
    return pw


def _parse_birth(text: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {text!r}")


def cmd_crystallize(
    client: Sunhex,
    first: str,
    last: str,
    country: str,
    birth: datetime.date,
    gender: str,
    password: Optional[str] = None,
) -> str:
    """Encode a record and print the fragment.

    Args:
        client: Configured facade.
        first: Given name.
        last: Family name (may contain spaces).
        country: ISO 3166-1 alpha-2 code.
        birth: Birth date.
        gender: Male, Female or Other.
        password: Fragment password; prompted for when None.
    """
    info = PersonalInfo(
        first_name=first,
        last_name=last,
        country_code=country,
        birth_year=birth.year,
        birth_month=birth.month,
        birth_day=birth.day,
        gender=gender,
    )
    fragment = client.crystallize(info, _read_password(password, confirm=True))
    print(fragment)
    return fragment


def cmd_resolve(client: Sunhex, fragment: str, password: Optional[str] = None) -> PersonalInfo:
    """Decode a fragment and print the record as JSON."""
    info = client.resolve(fragment.strip(), _read_password(password))
    print(_json.dumps(info.to_dict(), ensure_ascii=False, indent=2))
    return info


def cmd_metadata(client: Sunhex, fragment: str) -> dict:
    body = client.fetch_metadata(fragment.strip())
    print(_json.dumps(body, ensure_ascii=False, indent=2))
    return body


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="sunhex",
        description="Encode personal records into password-protected hex fragments",
        epilog="Fragments are decoded locally; only the metadata command uses the network.",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_enc = sub.add_parser("crystallize", help="Encode a record into a fragment")
    ap_enc.add_argument("--first", required=True, help="First name")
    ap_enc.add_argument("--last", required=True, help="Last name")
    ap_enc.add_argument("--country", required=True, help="ISO 3166-1 alpha-2 country code")
    ap_enc.add_argument("--birth", required=True, type=_parse_birth, help="Birth date (YYYY-MM-DD)")
    ap_enc.add_argument("--gender", choices=[MALE, FEMALE, OTHER], default=OTHER, help="Gender (default: Other)")
    ap_enc.add_argument("--password", help="Fragment password (prompted if omitted)")
    ap_enc.add_argument(
        "--strict-country",
        action="store_true",
        help="Fail on unknown country codes instead of falling back to the first table entry",
    )

    ap_dec = sub.add_parser("resolve", help="Decode a fragment")
    ap_dec.add_argument("fragment", help="Hex fragment")
    ap_dec.add_argument("--password", help="Fragment password (prompted if omitted)")

    ap_meta = sub.add_parser("metadata", help="Fetch server-side metadata for a fragment")
    ap_meta.add_argument("fragment", help="Hex fragment")
    ap_meta.add_argument("--api-key", help="API key (default: SUNHEX_API_KEY)")
    ap_meta.add_argument("--base-url", help="Service URL (default: SUNHEX_BASE_URL)")

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.cmd == "crystallize":
            client = create_client(strict_country=args.strict_country)
            cmd_crystallize(
                client,
                args.first,
                args.last,
                args.country,
                args.birth,
                args.gender,
                password=args.password,
            )
        elif args.cmd == "resolve":
            cmd_resolve(create_client(), args.fragment, password=args.password)
        elif args.cmd == "metadata":
            cmd_metadata(create_client(api_key=args.api_key, base_url=args.base_url), args.fragment)
        else:
            raise RuntimeError("Unknown command")
    except (SunhexError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
