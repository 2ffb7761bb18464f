#!/usr/bin/env python3
"""Ad hoc image lookup for a recipe.

Runs the full provider cascade for one recipe name without any web server.

Usage:
    python query.py "Savory Tomato and Onion Cheese Toast"
    python query.py --cuisine American "Cheese Toast"
    python query.py --debug "Pad Thai"      # Show the full resolution as JSON
    python query.py --validate "Ramen"      # Also check the URL is a reachable image
"""

import asyncio
import sys
import time

from rich.console import Console

from src.image_tools.resolver import create_image_resolver
from src.image_tools.validation import validate_image_url
from src.utils.config import config
from src.utils.logger import logger

console = Console()

USAGE = 'Usage: python query.py [--cuisine CUISINE] [--debug] [--validate] "<recipe name>"'

SOURCE_LABELS = {
    "google": "[green]GOOGLE[/green]",
    "unsplash_collection": "[green]UNSPLASH (curated)[/green]",
    "unsplash_search": "[green]UNSPLASH[/green]",
    "fallback": "[yellow]FALLBACK[/yellow]",
}


async def run_lookup(recipe_name: str, cuisine: str = "", debug: bool = False, validate: bool = False) -> int:
    """Resolve and print an image for one recipe.

    Args:
        recipe_name: Recipe name to search for.
        cuisine: Optional cuisine.
        debug: Print the whole ImageResolution as JSON.
        validate: HEAD-check and sniff the resolved URL.

    Returns:
        Process exit code.
    """
    resolver = create_image_resolver(config)

    logger.info(f'Resolving image for "{recipe_name}" (cuisine: "{cuisine}")')
    started = time.perf_counter()
    resolution = await resolver.resolve_image_detailed(recipe_name, cuisine)
    elapsed_ms = (time.perf_counter() - started) * 1000

    console.print()
    console.print(f"Source: {SOURCE_LABELS.get(resolution.source, resolution.source)}")
    console.print(f"Time:   {elapsed_ms:.0f} ms")
    if resolution.score is not None:
        console.print(f"Score:  {resolution.score:.1f} (term: {resolution.matched_term})")
    console.print(f"URL:    {resolution.url}")

    if debug:
        console.print()
        console.print("[bold cyan]Debug Mode: Full Resolution[/bold cyan]")
        console.print_json(data=resolution.model_dump())

    if validate:
        ok = await validate_image_url(resolution.url, timeout=config.VALIDATION_TIMEOUT_SECONDS, sniff=True)
        console.print("[green]✓ URL is a reachable image[/green]" if ok else "[red]✗ URL did not validate[/red]")
        return 0 if ok else 2

    return 0


def parse_args(argv: list[str]) -> dict:
    """Parse flags and the recipe name from argv (without the program name)."""
    options = {"cuisine": "", "debug": False, "validate": False}
    index = 0
    while index < len(argv) and argv[index].startswith("--"):
        flag = argv[index]
        if flag == "--debug":
            options["debug"] = True
        elif flag == "--validate":
            options["validate"] = True
        elif flag == "--cuisine":
            index += 1
            if index >= len(argv):
                raise ValueError("--cuisine flag requires a value")
            options["cuisine"] = argv[index]
        else:
            raise ValueError(f"Unknown flag: {flag}")
        index += 1

    recipe_name = " ".join(argv[index:]).strip()
    if not recipe_name:
        raise ValueError("No recipe name provided")
    options["recipe_name"] = recipe_name
    return options


if __name__ == "__main__":
    try:
        options = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print(USAGE)
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run_lookup(**options)))
    except KeyboardInterrupt:
        logger.info("Lookup interrupted by user.")
        sys.exit(0)
