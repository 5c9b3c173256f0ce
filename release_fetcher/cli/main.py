"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .fetch import previous, prs

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="release-fetcher",
    help="Pull requests and Jira tickets between consecutive releases",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="prs", context_settings={"help_option_names": ["-h", "--help"]})(
    prs
)
app.command(
    name="previous", context_settings={"help_option_names": ["-h", "--help"]}
)(previous)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from release_fetcher import __version__

    console.print(f"release-fetcher v{__version__}")


if __name__ == "__main__":
    app()
