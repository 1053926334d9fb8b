"""Command-line host for Glosbe lookups.

Stands in for the popup host: the selected text comes from the command line
(or stdin) and the response string is written to stdout.
"""

import asyncio
import logging
import sys
from typing import Any, Callable, Optional

import click
import structlog

from . import rules
from .config import DEST_LANG, SOURCE_LANG
from .html_parser import ParserCapability
from .http_client import NetworkCapability
from .pipeline import LookupPipeline


def configure_logging(verbose: bool = False):
    """Route structlog through stdlib logging; console output when verbose."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    renderer = structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


log = structlog.get_logger()


async def serve_selection(
    selected_text: Any,
    send_response: Callable[[str], None],
    network: Optional[NetworkCapability] = None,
    html_parser: Optional[ParserCapability] = None,
    source_lang: str = SOURCE_LANG,
    dest_lang: str = DEST_LANG,
):
    """Look up the host's selected text and hand the definition back to the host."""
    try:
        pipeline = LookupPipeline(
            network=network,
            html_parser=html_parser,
            source_lang=source_lang,
            dest_lang=dest_lang,
        )
        definition = await pipeline.lookup(selected_text)
    except Exception as e:
        log.error("Host lookup failed", error=str(e), exc_info=True)
        definition = rules.HOST_ERROR_MESSAGE
    send_response(definition)


@click.command()
@click.argument("words", nargs=-1)
@click.option(
    "--source-lang",
    default=SOURCE_LANG,
    show_default=True,
    help="Source locale code"
)
@click.option(
    "--dest-lang",
    default=DEST_LANG,
    show_default=True,
    help="Destination locale code"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging"
)
def main(words: tuple, source_lang: str, dest_lang: str, verbose: bool):
    """Look up WORDS on Glosbe (reads stdin when no words are given)."""
    configure_logging(verbose)

    selected_text = " ".join(words) if words else sys.stdin.read()
    log.info("Starting lookup", query=selected_text, source_lang=source_lang, dest_lang=dest_lang)

    asyncio.run(serve_selection(
        selected_text,
        click.echo,
        source_lang=source_lang,
        dest_lang=dest_lang,
    ))


if __name__ == "__main__":
    main()
