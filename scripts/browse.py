#!/usr/bin/env python3
"""Interactive console browser for the Dragon Ball API catalogs.

Usage
-----
::

    python scripts/browse.py
    python scripts/browse.py --base-url http://localhost:3000/api -v

Configuration is read from ``DRAGONBALL_*`` environment variables (see
:meth:`pydragonball.DragonBallConfig.from_env`); command-line options win.

Commands::

    tab characters|planets|transformations
    next / prev              change page
    search TEXT              search the current tab (empty TEXT clears)
    show TYPE ID             open a detail (character, planet, transformation)
    back                     leave the detail view
    forms NAME ID            show a character's transformation sequence
    fnext / fprev / play     step through / play the sequence
    quit
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import shlex
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pydragonball import (  # noqa: E402
    CatalogBrowser,
    ConsolePresenter,
    DragonBallClient,
    DragonBallConfig,
    DragonBallError,
)

_HELP = __doc__.split("Commands::", 1)[1] if __doc__ else ""


async def _ainput(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def _dispatch(browser: CatalogBrowser, words: list[str]) -> bool:
    """Run one command; returns ``False`` when the session should end."""
    command, args = words[0].lower(), words[1:]

    if command in ("quit", "exit", "q"):
        return False
    if command == "tab" and len(args) == 1:
        await browser.switch_tab(args[0])
    elif command == "next":
        if not await browser.change_page(1):
            print("Already on the last page.")
    elif command == "prev":
        if not await browser.change_page(-1):
            print("Already on the first page.")
    elif command == "search":
        await browser.set_search_term(" ".join(args))
    elif command == "show" and len(args) == 2:
        browser.navigate_to_detail(args[0], int(args[1]))
        await browser.join()
    elif command == "back":
        browser.go_back()
        await browser.load_data_if_needed()
    elif command == "forms" and len(args) >= 2:
        await browser.show_transformations(" ".join(args[:-1]), int(args[-1]))
    elif command == "fnext":
        browser.next_transformation()
    elif command == "fprev":
        browser.previous_transformation()
    elif command == "play":
        await browser.play_transformations()
    else:
        print(_HELP)
    return True


async def main() -> None:
    parser = argparse.ArgumentParser(description="Browse Dragon Ball characters, planets and transformations.")
    parser.add_argument("--base-url", help="API base URL (default: DRAGONBALL_BASE_URL or the public API)")
    parser.add_argument("--page-size", type=int, help="Items per page")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, object] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.page_size:
        overrides["page_size"] = args.page_size
    config = DragonBallConfig.from_env(**overrides)

    async with DragonBallClient(config) as client:
        browser = CatalogBrowser.from_client(client, presenter=ConsolePresenter())
        await browser.start()
        while True:
            try:
                line = (await _ainput("dragonball> ")).strip()
            except EOFError:
                break
            if not line:
                continue
            try:
                if not await _dispatch(browser, shlex.split(line)):
                    break
            except (ValueError, DragonBallError) as exc:
                print(f"error: {exc}")
        browser.close()


if __name__ == "__main__":
    asyncio.run(main())
