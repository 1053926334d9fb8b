"""Scraping rules and display strings for Glosbe lookups.

The selectors are tuned to glosbe.com's markup. Every selector in a list is
tried in order and all of their matches are kept, so a node matched by both
``.translation .text`` and ``.translation`` can contribute twice before the
final dedupe.
"""

# Meanings / translations
MEANING_SELECTORS = (
    ".meaning",
    ".translation .text",
    ".translation",
    ".phrase .translation",
    ".tu-meaning",
    ".translation-block .translation",
)

# Example sentences
EXAMPLE_SELECTORS = (
    ".example .text",
    ".examples .example",
    ".example",
    ".example-sentence",
)

META_DESCRIPTION_SELECTOR = 'meta[name="description"], meta[property="og:description"]'

# Display strings
MEANING_PREFIX = "→ "
EXAMPLE_SEPARATOR = "— "
EXAMPLES_HEADER = "\nExamples:"
LINE_SEPARATOR = "\n\n"

NO_WORD_MESSAGE = "No word provided"
NO_RESULT_MESSAGE = "No result found"
OFFLINE_MESSAGE = (
    "No definition found (offline fallback). "
    "Try Google Translate or check internet connection."
)
ERROR_MESSAGE = "Error getting definition"
HOST_ERROR_MESSAGE = "Error"
