"""FastAPI layer that exposes corpus ingestion and plagiarism scoring."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Form, HTTPException, UploadFile, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from application.use_cases.check_plagiarism import check_plagiarism
from application.use_cases.ingest_documents import ingest_documents
from application.use_cases.score_against_corpus import score_against_corpus
from domain.errors import (
    CorpusCapacityError,
    InvalidInputError,
    SearchServiceError,
    UnsupportedDocumentError,
)
from infrastructure.config import Container, ContainerConfig, build_default_container
from infrastructure.text_extraction import select_extractor
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)


class IngestRequest(BaseModel):
    texts: list[str]


class IngestResponse(BaseModel):
    indices: list[int]


class CorpusResponse(BaseModel):
    size: int


class ScoreRequest(BaseModel):
    query: str
    comparisons: list[str] = []


class ScoredTextPayload(BaseModel):
    text: str
    score: float
    highlighted: str


class ScoreResponse(BaseModel):
    max_score: float
    results: list[ScoredTextPayload]


class PlagiarismMatchPayload(BaseModel):
    title: str
    snippet: str
    link: str | None = None
    title_similarity: float
    snippet_similarity: float
    highlighted_title: str
    highlighted_snippet: str | None = None


class PlagiarismResponse(BaseModel):
    plagiarism_percentage: float
    plagiarized_text: str
    results: list[PlagiarismMatchPayload]


def _extract_upload(upload: UploadFile) -> str:
    extractor = select_extractor(upload.filename, upload.content_type)
    raw = upload.file.read()
    try:
        return extractor.extract(raw)
    except Exception as exc:
        logger.exception("Failed to extract text from %s", upload.filename)
        raise UnsupportedDocumentError(f"Could not read {upload.filename}: {exc}") from exc


@asynccontextmanager
async def _lifespan(app: FastAPI):
    setup_logging()
    logger.info("PlagCheck API started with %d documents in the corpus", app.state.container.corpus_store.size())
    yield


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around a container that owns the process-wide corpus."""

    container = container or build_default_container(ContainerConfig.from_env())
    app = FastAPI(title="PlagCheck API", lifespan=_lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.container = container

    @app.post("/check-plagiarism", response_model=PlagiarismResponse)
    def check_plagiarism_endpoint(
        text: str | None = Form(None),
        file: UploadFile | None = File(None),
    ) -> PlagiarismResponse:
        try:
            content = _extract_upload(file) if file is not None and file.filename else (text or "")
            report = check_plagiarism(
                content,
                search_client=container.search_client,
                corpus_store=container.corpus_store,
                vectorizer=container.vectorizer,
                highlighter=container.highlighter,
            )
        except UnsupportedDocumentError as exc:
            raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(exc)) from exc
        except InvalidInputError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        except SearchServiceError as exc:
            logger.error("Error checking plagiarism: %s", exc)
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
        except CorpusCapacityError as exc:
            logger.error("Corpus capacity reached: %s", exc)
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE, detail=str(exc)) from exc

        return PlagiarismResponse(
            plagiarism_percentage=report.plagiarism_percentage,
            plagiarized_text=report.checked_text,
            results=[
                PlagiarismMatchPayload(
                    title=match.title,
                    snippet=match.snippet,
                    link=match.link,
                    title_similarity=match.title_similarity,
                    snippet_similarity=match.snippet_similarity,
                    highlighted_title=match.highlighted_title,
                    highlighted_snippet=match.highlighted_snippet,
                )
                for match in report.matches
            ],
        )

    @app.post("/documents", response_model=IngestResponse)
    def ingest_endpoint(payload: IngestRequest) -> IngestResponse:
        try:
            indices = ingest_documents(payload.texts, corpus_store=container.corpus_store)
        except CorpusCapacityError as exc:
            logger.error("Corpus capacity reached: %s", exc)
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE, detail=str(exc)) from exc
        return IngestResponse(indices=indices)

    @app.post("/score", response_model=ScoreResponse)
    def score_endpoint(payload: ScoreRequest) -> ScoreResponse:
        try:
            report = score_against_corpus(
                payload.query,
                payload.comparisons,
                corpus_store=container.corpus_store,
                vectorizer=container.vectorizer,
                highlighter=container.highlighter,
            )
        except InvalidInputError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        except CorpusCapacityError as exc:
            logger.error("Corpus capacity reached: %s", exc)
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE, detail=str(exc)) from exc
        return ScoreResponse(
            max_score=report.max_score,
            results=[
                ScoredTextPayload(text=item.text, score=item.score, highlighted=item.highlighted)
                for item in report.results
            ],
        )

    @app.get("/corpus", response_model=CorpusResponse)
    def corpus_endpoint() -> CorpusResponse:
        return CorpusResponse(size=container.corpus_store.size())

    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    import uvicorn

    uvicorn.run(app, host=os.getenv("PLAGCHECK_HOST", "0.0.0.0"), port=int(os.getenv("PLAGCHECK_PORT", "5000")))
