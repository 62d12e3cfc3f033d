from fastapi import FastAPI, HTTPException

from .config import SplitterServiceConfig
from .exceptions import ConfigurationError
from .models import SplitRequest, SplitResult
from .separators import Language
from .service import STRATEGY_REGISTRY, SplitterService


def create_app(config: SplitterServiceConfig | None = None) -> FastAPI:
    service = SplitterService(config or SplitterServiceConfig.from_env())
    app = FastAPI(
        title="Text Splitter Service",
        version="1.0.0",
        description="Size-bounded, overlapping text chunking.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/strategies")
    def strategies() -> dict:
        return {
            "strategies": sorted(STRATEGY_REGISTRY),
            "languages": [language.value for language in Language],
        }

    @app.post("/split", response_model=SplitResult)
    def split(request: SplitRequest) -> SplitResult:
        try:
            return service.split(request)
        except (ConfigurationError, ValueError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.get("/results/{document_id}", response_model=SplitResult)
    def latest_result(document_id: str) -> SplitResult:
        try:
            return service.load_latest(document_id)
        except FileNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    return app


app = create_app()
