from fastapi import FastAPI, Depends, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from loguru import logger

from doc_analysis.application.errors import DocumentAnalysisError
from doc_analysis.application.settings import get_settings, Settings
from doc_analysis.application.log_setup import setup_logging
from doc_analysis.application.services.analysis_service import AnalysisReport, AnalysisService

# Configure logging once
setup_logging()

app = FastAPI(title="Document Analysis (TF / IDF / Cosine similarity)")

# --- Dependencies ---
def settings_dep() -> Settings:
    return get_settings()

def analysis_service_dep(settings: Settings = Depends(settings_dep)) -> AnalysisService:
    return AnalysisService.build(settings)


@app.get("/", tags=["meta"])
def root(settings: Settings = Depends(settings_dep)):
    return {
        "ok": True,
        "app_name": settings.app_name,
        "environment": settings.app_env,
        "debug": settings.debug,
    }


class AnalyzeRequest(BaseModel):
    # both fall back to Settings when omitted
    sources: Optional[List[str]] = None
    target_word: Optional[str] = None


@app.post("/analyze", tags=["analysis"], response_model=AnalysisReport)
def analyze(body: AnalyzeRequest, svc: AnalysisService = Depends(analysis_service_dep)):
    try:
        return svc.run(sources=body.sources, target_word=body.target_word)
    except DocumentAnalysisError as e:
        logger.error("Analysis failed for sources={}: {}", body.sources, e)
        # Return readable error to client
        raise HTTPException(status_code=422, detail=f"Analysis failed: {type(e).__name__}: {e}")
