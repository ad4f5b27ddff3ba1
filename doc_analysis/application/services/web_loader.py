from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import re

import httpx
import trafilatura
from bs4 import BeautifulSoup
from loguru import logger

from doc_analysis.application.errors import BodyNotFoundError, EmptyBodyError


@dataclass
class WebLoaderService:
    timeout_s: float = 25.0
    user_agent: str = "doc-analysis/0.1 (+tf-idf web analysis)"
    extraction_mode: str = "body"  # "body" or "main"
    # tests plug an httpx.MockTransport in here
    transport: Optional[httpx.BaseTransport] = None

    def fetch(self, url: str) -> str:
        """
        Fetch a URL and return the visible text of its page.

        Raises:
            httpx.HTTPError on network problems / timeouts / non-2xx status
            BodyNotFoundError if the page has no <body>
            EmptyBodyError if the extracted text is blank
        """
        html = self._download(url)

        text = ""
        if self.extraction_mode == "main":
            text = self._main_text(html, url)

        # "body" mode, or "main" extraction came back empty
        if not text:
            text = self._body_text(html, url)

        if not text.strip():
            raise EmptyBodyError(f"Body of '{url}' is empty.")

        logger.debug("Fetched '{}' ({} chars, mode={})", url, len(text), self.extraction_mode)
        return text

    # ---------------- helpers ----------------

    def _download(self, url: str) -> str:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
        with httpx.Client(
            timeout=self.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text

    def _main_text(self, html: str, url: str) -> str:
        extracted = trafilatura.extract(
            html,
            include_comments=False,
            include_tables=True,
            include_links=False,
            output_format="txt",
            url=url,
        )
        return (extracted or "").strip()

    def _body_text(self, html: str, url: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        body = soup.body
        if body is None:
            raise BodyNotFoundError(f"Can't load the body of '{url}'.")

        # Remove non-visible elements
        for tag in body(["script", "style", "noscript", "svg", "template"]):
            tag.decompose()

        raw = body.get_text(separator="\n")

        # Normalize whitespace
        raw = raw.replace("\r\n", "\n").replace("\r", "\n")
        raw = re.sub(r"[ \t]+\n", "\n", raw)      # trailing spaces
        raw = re.sub(r"\n{3,}", "\n\n", raw)      # collapse blank lines
        return raw.strip()
