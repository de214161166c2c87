"""
Admin commands for the icon library.

Usage:
    python -m iconhub.manage init-library
    python -m iconhub.manage create-user <username> <password>
    python -m iconhub.manage issue-token <username>
"""
import argparse
import asyncio
from pathlib import Path

from iconhub.config import get_settings
from iconhub.core.security import TokenService
from iconhub.database.connections import create_mongo_client, get_database
from iconhub.database.databases import icons_db
from iconhub.logging_config import setup_logging
from iconhub.services.auth_service import AuthService
from iconhub.services.icon_store import IconStore


async def init_library(db, icons_dir: Path) -> None:
    store = IconStore(db[icons_db.Collections.ICONS], icons_dir)
    if await store.ensure_library():
        print("Created icons document")
    else:
        print("Icons document already exists")


async def create_user(db, token_service: TokenService, username: str, password: str) -> None:
    service = AuthService(db, token_service)
    try:
        user_id = await service.create_user(username, password)
    except ValueError as e:
        raise SystemExit(str(e))
    print(f"Created user: {username} ({user_id})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconhub-manage")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("init-library", help="Create the icons document if missing")

    c = sub.add_parser("create-user", help="Add a login credential")
    c.add_argument("username")
    c.add_argument("password")

    t = sub.add_parser("issue-token", help="Print a token for a username")
    t.add_argument("username")

    return parser


async def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    token_service = TokenService.from_settings(settings)

    if args.cmd == "issue-token":
        print(token_service.issue(args.username))
        return

    client = create_mongo_client(settings)
    try:
        db = get_database(client, settings)
        if args.cmd == "init-library":
            await init_library(db, Path(settings.icons_dir))
        elif args.cmd == "create-user":
            await create_user(db, token_service, args.username, args.password)
    finally:
        client.close()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(get_settings().log_level)
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
