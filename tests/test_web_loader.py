import httpx
import pytest

from doc_analysis.application.errors import BodyNotFoundError, EmptyBodyError
from doc_analysis.application.services.web_loader import WebLoaderService


def loader_for(html: str, status: int = 200, **kwargs) -> WebLoaderService:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=html, headers={"Content-Type": "text/html"})

    return WebLoaderService(transport=httpx.MockTransport(handler), **kwargs)


def test_body_text_without_scripts():
    html = """
    <html><head><title>Headline Zebra</title><style>.x{}</style></head>
    <body><h1>Treaty</h1><script>var hidden = 1;</script><p>Peace negotiation</p></body></html>
    """
    text = loader_for(html).fetch("https://example.test/page")
    assert "Treaty" in text
    assert "Peace negotiation" in text
    assert "hidden" not in text
    assert "Zebra" not in text


def test_missing_body():
    # html.parser does not invent a <body>
    with pytest.raises(BodyNotFoundError):
        loader_for("<head><title>only head</title></head>").fetch("https://example.test/")


def test_blank_body():
    with pytest.raises(EmptyBodyError):
        loader_for("<html><body>   <script>x()</script> </body></html>").fetch("https://example.test/")


def test_http_error_status():
    with pytest.raises(httpx.HTTPStatusError):
        loader_for("<html><body>gone</body></html>", status=404).fetch("https://example.test/")


def test_main_mode_falls_back_to_body():
    html = "<html><body><p>tiny</p></body></html>"
    text = loader_for(html, extraction_mode="main").fetch("https://example.test/")
    assert "tiny" in text

