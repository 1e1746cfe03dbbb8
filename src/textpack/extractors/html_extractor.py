"""Main-content text extraction from HTML markup."""

import re
import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning


class HtmlTextExtractor:
    """Default extraction: strip noise, pick main content, normalize.

    The main-content choice is a heuristic, not a guarantee:
    - Drops non-content, hidden and framework-injected nodes
    - Tries CONTENT_SELECTORS in order and keeps the first whose text is
      longer than MIN_CONTENT_LENGTH once trimmed
    - Collapses whitespace and removes [...] and {...} fragments
    """

    PARSER = "lxml"

    NOISE_SELECTORS = (
        "script, style, noscript, iframe, svg, img, meta, link, "
        "header, footer, nav, aside"
    )
    HIDDEN_SELECTORS = '[aria-hidden="true"], [hidden]'
    HIDDEN_STYLES = ("display:none", "visibility:hidden")
    FRAMEWORK_SELECTORS = (
        'next-route-announcer, [data-nextjs-page], [role="navigation"], .skip-link'
    )

    CONTENT_SELECTORS = (
        "main",
        "article",
        '[role="main"]',
        ".main-content",
        ".content",
        ".prose",
        ".container",
        "body",
    )
    MIN_CONTENT_LENGTH = 50

    _WHITESPACE = re.compile(r"\s+")
    _BRACKETED = re.compile(r"\[.*?\]")
    _BRACED = re.compile(r"\{.*?\}")

    def extract(self, markup: str) -> str:
        """Return the normalized main-content text of an HTML document.

        Args:
            markup: Raw HTML; malformed input is parsed best-effort

        Returns:
            Plain text, or "" when there is nothing to extract
        """
        if not markup or not markup.strip():
            return ""

        with warnings.catch_warnings():
            # XHTML exports start with <?xml ...> but are still parsed as HTML
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            soup = BeautifulSoup(markup, self.PARSER)
        self._strip_noise(soup)
        return self.normalize(self._select_main_text(soup))

    def normalize(self, text: str) -> str:
        """Collapse whitespace and drop bracketed/braced fragments."""
        text = self._WHITESPACE.sub(" ", text)
        text = self._BRACKETED.sub("", text)
        text = self._BRACED.sub("", text)
        return text.strip()

    def _strip_noise(self, soup: BeautifulSoup) -> None:
        for selector in (self.NOISE_SELECTORS, self.HIDDEN_SELECTORS):
            self._remove(soup.select(selector))

        styled = [
            el
            for el in soup.select("[style]")
            if any(s in (el.get("style") or "").lower() for s in self.HIDDEN_STYLES)
        ]
        self._remove(styled)

        self._remove(soup.select(self.FRAMEWORK_SELECTORS))

    def _select_main_text(self, soup: BeautifulSoup) -> str:
        for selector in self.CONTENT_SELECTORS:
            # Multiple matches contribute their text in document order
            text = "".join(el.get_text() for el in soup.select(selector))
            if len(text.strip()) > self.MIN_CONTENT_LENGTH:
                return text

        body = soup.body
        return body.get_text() if body is not None else ""

    @staticmethod
    def _remove(elements) -> None:
        for el in elements:
            # Nested matches are already gone with their ancestor
            if not el.decomposed:
                el.decompose()
