import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ayurcare.api.routes.consultation_routes import router as consultation_routes
from ayurcare.api.routes.disease_routes import router as disease_routes
from ayurcare.api.routes.knowledge_base_routes import router as knowledge_base_routes
from ayurcare.api.routes.symptom_routes import router as symptom_routes
from ayurcare.api.routes.treatment_routes import router as treatment_routes
from ayurcare.core.config import Settings, settings as default_settings
from ayurcare.core.exceptions import NotFoundError, ValidationError
from ayurcare.core.logging import setup_logger
from ayurcare.repositories import seed
from ayurcare.repositories.consultations import ConsultationStore
from ayurcare.repositories.diseases import DiseaseCatalog
from ayurcare.repositories.knowledge_base import HerbCatalog, KnowledgeBase, RemedyCatalog
from ayurcare.repositories.symptoms import SymptomCatalog
from ayurcare.repositories.treatments import TreatmentCatalog
from ayurcare.services.consultation_service import ConsultationService
from ayurcare.services.scoring import ScoringEngine

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse({"error": str(exc)}, status_code=400)


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse({"detail": str(exc)}, status_code=404)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API with freshly seeded in-memory repositories.

    Every call gets its own stores, so tests can create isolated apps.
    """
    settings = settings or default_settings
    setup_logger(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Symptom-based Ayurvedic consultation with mock AI predictions and triage",
        version=settings.APP_VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.symptom_catalog = SymptomCatalog(seed.seed_symptoms())
    app.state.disease_catalog = DiseaseCatalog(seed.seed_diseases())
    app.state.treatment_catalog = TreatmentCatalog(seed.seed_treatments())
    app.state.knowledge_base = KnowledgeBase(
        HerbCatalog(seed.seed_herbs()),
        RemedyCatalog(seed.seed_remedies()),
    )
    app.state.consultation_service = ConsultationService(
        store=ConsultationStore(seed.seed_consultations()),
        scorer=ScoringEngine(
            rng=random.Random(settings.SCORING_SEED),
            max_jitter=settings.SCORING_MAX_JITTER,
        ),
        latency_seconds=settings.SIMULATED_LATENCY_SECONDS,
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": settings.APP_NAME}

    app.include_router(symptom_routes)
    app.include_router(disease_routes)
    app.include_router(treatment_routes)
    app.include_router(knowledge_base_routes)
    app.include_router(consultation_routes)

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ayurcare.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower()
    )
