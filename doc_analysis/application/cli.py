# doc_analysis/application/cli.py
import sys
from typing import Optional, TextIO

from loguru import logger

from doc_analysis.application.errors import DocumentAnalysisError
from doc_analysis.application.log_setup import setup_logging
from doc_analysis.application.settings import Settings, get_settings
from doc_analysis.application.services.analysis_service import AnalysisReport, AnalysisService


def print_report(report: AnalysisReport, out: TextIO) -> None:
    print(f"Term Frequency (TF) of '{report.target_word}': {report.term_frequency}", file=out)
    print(
        f"Inverse Document Frequency (IDF) of '{report.target_word}': "
        f"{report.inverse_document_frequency}",
        file=out,
    )
    print(f"Cosine Similarity between documents: {report.cosine_similarity}", file=out)


def run(
    settings: Settings,
    service: Optional[AnalysisService] = None,
    out: TextIO = sys.stdout,
) -> int:
    service = service or AnalysisService.build(settings)
    try:
        corpus = service.load(settings.sources)
        if settings.show_word_occurrences and corpus.document_count:
            corpus[0].print_word_occurrences(out)
        report = service.analyze(corpus, settings.target_word)
    except DocumentAnalysisError as e:
        logger.error("Analysis aborted: {}", e)
        return 1
    except Exception:
        logger.exception("Analysis aborted with an unexpected error")
        return 1

    print_report(report, out)
    return 0


def main() -> int:
    setup_logging()
    return run(get_settings())


if __name__ == "__main__":
    sys.exit(main())
