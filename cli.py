#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os
import subprocess
import sys


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.call(cmd)


def cmd_serve(args: argparse.Namespace) -> int:
    cmd = [sys.executable, "-m", "uvicorn", "app.main:app", "--host", args.host, "--port", str(args.port)]
    if args.reload:
        cmd.append("--reload")
    return run(cmd)


async def _init_db() -> None:
    from app.db import sa as db_sa
    from app.main import prepare_database

    await db_sa.init_sa_engine()
    try:
        await prepare_database()
    finally:
        await db_sa.close_sa_engine()


def cmd_init_db(args: argparse.Namespace) -> int:
    asyncio.run(_init_db())
    print("Database ready")
    return 0


async def _stats():
    from app.db import sa as db_sa
    from app.db.articles_repo import ArticleRepository
    from app.services import articles as svc

    await db_sa.init_sa_engine()
    try:
        async with db_sa.session_scope() as session:
            return await svc.get_statistics(ArticleRepository(session))
    finally:
        await db_sa.close_sa_engine()


def cmd_stats(args: argparse.Namespace) -> int:
    stats = asyncio.run(_stats())
    print("=== ARTICLE STATISTICS ===")
    print(f"Total articles: {stats.total}")
    for status, count in stats.by_status.items():
        print(f"  {status}: {count}")
    print(f"Regions: {stats.regions}")
    print(f"Languages: {stats.languages}")
    return 0


def cmd_test(args: argparse.Namespace) -> int:
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    pytest_args = ["pytest"]
    if args.quiet:
        pytest_args.append("-q")
    if args.k:
        pytest_args += ["-k", args.k]
    return run(pytest_args)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="newsdesk-cli", description="Newsdesk CLI helper")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the articles API with uvicorn")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    p_init = sub.add_parser("init-db", help="Create the articles table and seed sample rows")
    p_init.set_defaults(func=cmd_init_db)

    p_stats = sub.add_parser("stats", help="Print article statistics")
    p_stats.set_defaults(func=cmd_stats)

    p_test = sub.add_parser("test", help="Run pytest")
    p_test.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (-q)")
    p_test.add_argument("-k", help="Only run tests matching expression")
    p_test.set_defaults(func=cmd_test)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
