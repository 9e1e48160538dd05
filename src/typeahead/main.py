import os
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from typeahead.application import SuggestionEngine
from typeahead.infrastructure import TextBuffer
from typeahead.logger import get_logger, setup_logger
from typeahead.presentation.widgets import item_to_text

load_dotenv()

# Environment variable -> attribute-like override
ENV_ATTRIBUTES = {
    "TYPEAHEAD_MINCHARS": "data-minchars",
    "TYPEAHEAD_MAXITEMS": "data-maxitems",
    "TYPEAHEAD_AUTOFIRST": "data-autofirst",
    "TYPEAHEAD_FILTER": "data-filter",
    "TYPEAHEAD_LIST": "data-list",
}

console = Console()


def load_attributes() -> dict[str, str]:
    """Read attribute-like overrides from the environment (and .env)."""
    attributes = {}
    for env_name, attribute in ENV_ATTRIBUTES.items():
        value = os.getenv(env_name)
        if value is not None:
            attributes[attribute] = value
    return attributes


def build_options(
    min_chars: Optional[int],
    max_items: Optional[int],
    auto_first: Optional[bool],
) -> dict[str, object]:
    options: dict[str, object] = {}
    if min_chars is not None:
        options["min_chars"] = min_chars
    if max_items is not None:
        options["max_items"] = max_items
    if auto_first is not None:
        options["auto_first"] = auto_first
    return options


cli = typer.Typer(
    name="typeahead",
    help="Filter, rank and pick suggestions for a text input",
    epilog="""
    Examples:
    $ typeahead suggest ap --list "apple, banana, grape"
    $ typeahead demo --list "Ada, Java, JavaScript, Python, Ruby"
    """,
    add_completion=False,
)


@cli.command()
def suggest(
    query: str = typer.Argument(..., help="Text typed into the input"),
    source: str = typer.Option("", "--list", "-l", help="Comma-delimited candidate list"),
    min_chars: Optional[int] = typer.Option(None, "--min-chars", help="Minimum query length"),
    max_items: Optional[int] = typer.Option(None, "--max-items", help="Maximum number of suggestions"),
    auto_first: Optional[bool] = typer.Option(None, "--auto-first/--no-auto-first", help="Highlight the first suggestion"),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Print the suggestions the dropdown would show for QUERY."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")

    engine = SuggestionEngine(
        TextBuffer(query),
        source or None,
        options=build_options(min_chars, max_items, auto_first),
        attributes=load_attributes(),
    )
    engine.evaluate()
    logger.info(f"suggest {query!r}: {len(engine.items)} item(s), status={engine.status.value}")

    if not engine.is_open:
        console.print("No suggestions")
        return

    for index, item in enumerate(engine.items):
        marker = ">" if item.selected else " "
        line = item_to_text(item)
        if item.selected:
            line.stylize("reverse")
        console.print(f"{marker} {index + 1}.", line)


@cli.command()
def demo(
    source: str = typer.Option("", "--list", "-l", help="Comma-delimited candidate list"),
    datalist: Optional[list[str]] = typer.Option(None, "--datalist", help="Candidate read from a hidden option list (repeatable)"),
    min_chars: Optional[int] = typer.Option(None, "--min-chars", help="Minimum query length"),
    max_items: Optional[int] = typer.Option(None, "--max-items", help="Maximum number of suggestions"),
    auto_first: Optional[bool] = typer.Option(None, "--auto-first/--no-auto-first", help="Highlight the first suggestion"),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Run the interactive Textual demo."""
    from typeahead.presentation.tui import TypeaheadApp

    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")
    logger.info("Starting typeahead demo")

    app = TypeaheadApp(
        source or None,
        options=build_options(min_chars, max_items, auto_first),
        attributes=load_attributes(),
        datalist=datalist,
    )
    app.run()


if __name__ == "__main__":
    cli()
