import pytest
from fastapi.testclient import TestClient

from ayurcare.core.config import Settings
from ayurcare.main import create_app
from ayurcare.models import ConsultationInput, MentalCondition
from ayurcare.repositories import seed
from ayurcare.repositories.consultations import ConsultationStore
from ayurcare.services.consultation_service import ConsultationService
from ayurcare.services.scoring import ScoringEngine


@pytest.fixture
def engine():
    return ScoringEngine(max_jitter=0)


@pytest.fixture
def store():
    return ConsultationStore(seed.seed_consultations())


@pytest.fixture
def service(store, engine):
    return ConsultationService(store=store, scorer=engine)


@pytest.fixture
def make_input():
    def _make(symptoms, stress_level=3, user_id="42"):
        return ConsultationInput(
            user_id=user_id,
            symptoms=symptoms,
            mental_condition=MentalCondition(stress_level=stress_level, sleep_quality=6, mood="neutral"),
        )
    return _make


@pytest.fixture
def client():
    app = create_app(Settings(SCORING_MAX_JITTER=0, SIMULATED_LATENCY_SECONDS=0))
    with TestClient(app) as test_client:
        yield test_client
