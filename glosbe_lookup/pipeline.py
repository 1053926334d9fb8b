"""Lookup pipeline: Glosbe JSON API first, HTML scrape second, offline message last."""

from typing import Any, List, Optional

import structlog

from . import rules
from .config import (
    API_URL,
    DEST_LANG,
    MAX_API_EXAMPLES,
    MAX_BODY_TEXT_CHARS,
    MAX_SCRAPED_EXAMPLES,
    MAX_SCRAPED_MEANINGS,
    PAGE_URL,
    SOURCE_LANG,
)
from .html_parser import HtmlDocument, ParserCapability, SoupParser
from .http_client import AiohttpNetwork, NetworkCapability
from .models import Query, ScrapedResult, StageOutcome, StructuredResult
from .utils import collapse_whitespace, encode_component, unique_lines

log = structlog.get_logger()


def extract_structured_lines(result: StructuredResult) -> List[str]:
    """Turn an API response into display lines (may be empty)."""
    lines = []
    for unit in result.tuc or []:
        if unit.meanings:
            for meaning in unit.meanings:
                if meaning.text:
                    lines.append(rules.MEANING_PREFIX + meaning.text)
        elif unit.phrase and unit.phrase.text:
            lines.append(rules.MEANING_PREFIX + unit.phrase.text)

    if result.examples:
        lines.append(rules.EXAMPLES_HEADER)
        for example in result.examples[:MAX_API_EXAMPLES]:
            parts = []
            if example.first:
                parts.append(example.first)
            if example.second:
                parts.append(rules.EXAMPLE_SEPARATOR + example.second)
            lines.append(" ".join(parts))
    return lines


def scrape_document(document: HtmlDocument) -> ScrapedResult:
    """Collect meanings, examples and fallbacks from a parsed page.

    Every selector is applied and all matches are accumulated.
    """
    meanings = []
    for selector in rules.MEANING_SELECTORS:
        meanings.extend(document.select_texts(selector))

    examples = []
    for selector in rules.EXAMPLE_SELECTORS:
        examples.extend(document.select_texts(selector))

    description = None
    if not meanings:
        description = document.meta_content(rules.META_DESCRIPTION_SELECTOR)

    return ScrapedResult(
        meanings=meanings,
        examples=examples,
        description=description,
        body_text=collapse_whitespace(document.body_text()),
    )


def compose_scraped_lines(scraped: ScrapedResult) -> List[str]:
    meanings = scraped.meanings
    if not meanings and scraped.description is not None:
        meanings = [scraped.description]

    lines = []
    if meanings:
        lines.extend(meanings[:MAX_SCRAPED_MEANINGS])
    elif scraped.body_text:
        lines.append(scraped.body_text[:MAX_BODY_TEXT_CHARS])

    if scraped.examples:
        lines.append(rules.EXAMPLES_HEADER)
        lines.extend(scraped.examples[:MAX_SCRAPED_EXAMPLES])
    return unique_lines(lines)


class LookupPipeline:
    """Resolves one query through the structured, scrape and offline stages."""

    def __init__(
        self,
        network: Optional[NetworkCapability] = None,
        html_parser: Optional[ParserCapability] = None,
        source_lang: str = SOURCE_LANG,
        dest_lang: str = DEST_LANG,
    ):
        self.network = network or AiohttpNetwork()
        self.html_parser = html_parser or SoupParser()
        self.source_lang = source_lang
        self.dest_lang = dest_lang

    def api_url(self, query: Query) -> str:
        return (
            f"{API_URL}?from={encode_component(self.source_lang)}"
            f"&dest={encode_component(self.dest_lang)}"
            f"&format=json&phrase={query.encoded}&pretty=true"
        )

    def page_url(self, query: Query) -> str:
        return PAGE_URL.format(
            source=encode_component(self.source_lang),
            dest=encode_component(self.dest_lang),
            phrase=query.encoded,
        )

    async def find_word(self, raw: Any) -> List[str]:
        """Return display lines for ``raw``; never raises for network or parse failures."""
        query = Query.from_raw(raw)
        if query is None:
            log.info("Rejected empty or invalid query")
            return [rules.NO_WORD_MESSAGE]

        outcome = await self._run_structured_lookup(query)
        if outcome.succeeded:
            return outcome.lines

        outcome = await self._run_scrape_fallback(query)
        if outcome.succeeded:
            return outcome.lines

        return [rules.OFFLINE_MESSAGE]

    async def _run_structured_lookup(self, query: Query) -> StageOutcome:
        """Stage 1: JSON API. Any failure or empty extraction falls through."""
        url = self.api_url(query)
        try:
            response = await self.network.get(url)
            if not response.ok:
                log.info("Structured lookup returned error status", query=query.text, status=response.status)
                return StageOutcome.fallthrough()
            result = StructuredResult.model_validate_json(response.text)
        except Exception as e:
            log.info("Structured lookup failed", query=query.text, error=str(e))
            return StageOutcome.fallthrough()

        lines = extract_structured_lines(result)
        if not lines:
            log.info("Structured lookup empty, falling back to HTML", query=query.text)
            return StageOutcome.fallthrough()

        lines = unique_lines(lines)
        log.info("Structured lookup succeeded", query=query.text, lines=len(lines))
        return StageOutcome.success(lines)

    async def _run_scrape_fallback(self, query: Query) -> StageOutcome:
        """Stage 2: scrape the rendered page. Any failure falls through to the offline message."""
        url = self.page_url(query)
        try:
            response = await self.network.get(url)
            if not response.ok:
                log.warning("Page fetch failed", query=query.text, status=response.status)
                return StageOutcome.fallthrough()
            document = self.html_parser.parse(response.text)
            lines = compose_scraped_lines(scrape_document(document))
        except Exception as e:
            log.warning("Scrape fallback failed", query=query.text, error=str(e))
            return StageOutcome.fallthrough()

        log.info("Scrape fallback completed", query=query.text, lines=len(lines))
        return StageOutcome.success(lines)

    async def lookup(self, raw: Any) -> str:
        """Resolve ``raw`` into the single string shown by the host."""
        try:
            lines = await self.find_word(raw)
        except Exception as e:
            log.error("Lookup failed", error=str(e), exc_info=True)
            return rules.ERROR_MESSAGE

        if not lines:
            return rules.NO_RESULT_MESSAGE
        return rules.LINE_SEPARATOR.join(lines)


async def find_word(
    query: Any,
    network: Optional[NetworkCapability] = None,
    html_parser: Optional[ParserCapability] = None,
) -> List[str]:
    """Convenience function returning display lines for one query."""
    pipeline = LookupPipeline(network=network, html_parser=html_parser)
    return await pipeline.find_word(query)


async def lookup(
    query: Any,
    network: Optional[NetworkCapability] = None,
    html_parser: Optional[ParserCapability] = None,
) -> str:
    """Convenience function returning the joined definition string."""
    pipeline = LookupPipeline(network=network, html_parser=html_parser)
    return await pipeline.lookup(query)
