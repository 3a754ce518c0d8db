"""Process entry point: interactive menu by default, one scripted run with -auto.

Run:
  python main.py            # interactive
  python main.py -auto      # add AutoStore, print all stores, save, exit

Optional env vars (or .env):
  STORES_FILE=stores.dat
  LOG_LEVEL=INFO
"""

import argparse
from typing import List, Optional

from .config import (
    AUTO_FLAG,
    AUTO_STORE_ADDRESS,
    AUTO_STORE_NAME,
    AUTO_STORE_SPECIALIZATION,
    AUTO_STORE_WORKING_HOURS,
)
from .logging import configure_logging
from .models import Store
from .repository import Repo
from .shell import StoreShell
from .storage import get_stores_path, load_stores, save_stores


def run_auto(repo: Repo, path) -> int:
    repo.add(
        Store(
            AUTO_STORE_NAME,
            AUTO_STORE_ADDRESS,
            AUTO_STORE_SPECIALIZATION,
            AUTO_STORE_WORKING_HOURS,
        )
    )
    for store in repo:
        print(store.render())
    save_stores(repo, path)
    print("Program terminated.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Console registry of stores persisted to a local file.",
        allow_abbrev=False,
    )
    parser.add_argument(
        AUTO_FLAG,
        dest="auto",
        action="store_true",
        help="Add a predefined store, print all stores, save and exit without prompting.",
    )
    args = parser.parse_args(argv)

    configure_logging()
    path = get_stores_path()
    repo = load_stores(path)

    if args.auto:
        return run_auto(repo, path)
    shell = StoreShell(repo, save_callback=lambda: save_stores(repo, path))
    return shell.run()


if __name__ == "__main__":
    raise SystemExit(main())
