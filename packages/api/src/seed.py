# This project was developed with assistance from AI tools.
"""Seed the demo catalog from the command line.

    python -m src.seed            # no-op if already seeded
    python -m src.seed --force    # wipe products and chat history, then seed
"""

import argparse
import asyncio
import json
import logging

from db.database import SessionLocal

from .services.seed.seeder import seed_demo_data


async def run(force: bool) -> dict:
    async with SessionLocal() as session:
        return await seed_demo_data(session, force=force)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the demo loan product catalog")
    parser.add_argument("--force", action="store_true", help="re-seed even if already seeded")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    result = asyncio.run(run(args.force))
    print(json.dumps(result, indent=2))
    if result["status"] == "already_seeded":
        print("Catalog already seeded; pass --force to replace it.")


if __name__ == "__main__":
    main()
