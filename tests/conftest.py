import pytest

from doc_analysis.application.settings import Settings
from doc_analysis.application.services.analysis_service import AnalysisService


PAGES = {
    "https://example.test/a": "war war conflict soldiers war",
    "https://example.test/b": "war peace treaty negotiation",
}


def stub_fetch(url: str) -> str:
    try:
        return PAGES[url]
    except KeyError:
        raise ConnectionError(f"no route to {url}")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        sources=list(PAGES),
        target_word="war",
    )


@pytest.fixture
def service(settings) -> AnalysisService:
    return AnalysisService(settings=settings, fetch=stub_fetch)
