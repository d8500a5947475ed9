from typing import Optional

import typer
from dotenv import load_dotenv

from typeahead.demo import UserDirectory, load_demo_config
from typeahead.logger import get_logger, setup_logger
from typeahead.presentation.tui import DemoApp

load_dotenv()

cli = typer.Typer(
    name="typeahead",
    help="Search-as-you-type autocomplete demo for the terminal",
    epilog="""
    Examples:
    $ typeahead --latency 0.8 --failure-rate 0.2
    """,
    add_completion=False,
)


@cli.command()
def main(
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Enable debug logging"),
    latency: Optional[float] = typer.Option(None, "--latency", min=0.0, help="Simulated lookup latency in seconds"),
    failure_rate: Optional[float] = typer.Option(
        None, "--failure-rate", min=0.0, max=1.0, help="Probability that a lookup fails"
    ),
):
    """Run the "Search users" demo."""
    config = load_demo_config()
    if debug is not None:
        config.debug = debug
    if latency is not None:
        config.latency = latency
    if failure_rate is not None:
        config.failure_rate = failure_rate

    setup_logger(log_level="DEBUG" if config.debug else "INFO")
    logger = get_logger("main")
    logger.info(f"Starting typeahead demo (latency={config.latency}, failure_rate={config.failure_rate})")

    directory = UserDirectory(latency=config.latency, failure_rate=config.failure_rate)
    DemoApp(directory).run()

    logger.info(f"Demo finished after {directory.search_count} lookup(s)")


def run():
    """Entry point for the typeahead demo."""
    cli()


if __name__ == "__main__":
    run()
