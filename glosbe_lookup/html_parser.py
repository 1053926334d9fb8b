"""HTML parsing capability backed by BeautifulSoup."""

from typing import List, Optional, Protocol

from bs4 import BeautifulSoup


class HtmlDocument(Protocol):
    def select_texts(self, selector: str) -> List[str]:
        ...

    def meta_content(self, selector: str) -> Optional[str]:
        ...

    def body_text(self) -> str:
        ...


class ParserCapability(Protocol):
    def parse(self, markup: str) -> HtmlDocument:
        ...


class SoupDocument:
    """Read-only view over a parsed page."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def select_texts(self, selector: str) -> List[str]:
        """Trimmed, non-empty text of every node matching ``selector``."""
        texts = []
        for node in self.soup.select(selector):
            text = node.get_text().strip()
            if text:
                texts.append(text)
        return texts

    def meta_content(self, selector: str) -> Optional[str]:
        """Trimmed ``content`` of the first matching tag; None when absent or empty.

        Whitespace-only content trims to "" and still counts as present.
        """
        tag = self.soup.select_one(selector)
        if tag is None:
            return None
        content = tag.get("content")
        if not content:
            return None
        return content.strip()

    def body_text(self) -> str:
        # Fragments without a <body> are treated as all body
        root = self.soup.body if self.soup.body is not None else self.soup
        return root.get_text()


class SoupParser:
    def __init__(self, features: str = "html.parser"):
        self.features = features

    def parse(self, markup: str) -> SoupDocument:
        return SoupDocument(BeautifulSoup(markup, self.features))
