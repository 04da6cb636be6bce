import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError as PydanticValidationError

from ayurcare.core.exceptions import InvalidStatusTransitionError, NotFoundError, ValidationError
from ayurcare.models import ConsultationInput, ConsultationStatus, ConsultationUpdate, TriageLevel
from ayurcare.services import consultation_service as consultation_module
from ayurcare.services.consultation_service import ConsultationService


def test_build_produces_completed_record(service, make_input):
    consultation = service.build(make_input(["Headache"], stress_level=2))

    assert consultation.status == ConsultationStatus.COMPLETED
    assert consultation.triage_level == TriageLevel.NORMAL
    assert [p.name for p in consultation.predicted_disease] == ["Vata Imbalance", "Pitta aggravation"]
    assert consultation.recommendations.herbs[0].name == "Ashwagandha"
    assert consultation.doctor_notes is None
    assert consultation.date.tzinfo is not None


def test_build_assigns_fresh_id_and_prepends(service, store, make_input):
    existing_ids = {c.id for c in store.list()}

    first = service.build(make_input(["Fatigue"]))
    second = service.build(make_input(["Anxiety"]))

    assert first.id not in existing_ids
    assert second.id not in existing_ids | {first.id}
    assert [c.id for c in store.list()[:2]] == [second.id, first.id]
    assert store.count() == len(existing_ids) + 2


def test_ids_continue_after_seed_data(service, make_input):
    assert service.build(make_input(["Headache"])).id == "3"


def test_run_consultation_rejects_empty_symptoms(service, make_input):
    with pytest.raises(ValidationError):
        asyncio.run(service.run_consultation(make_input([])))


def test_run_consultation_waits_for_simulated_latency(store, engine, make_input, monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(consultation_module.asyncio, "sleep", fake_sleep)
    service = ConsultationService(store=store, scorer=engine, latency_seconds=2.0)

    consultation = asyncio.run(service.run_consultation(make_input(["Chest Pain"])))

    assert delays == [2.0]
    assert consultation.triage_level == TriageLevel.URGENT


def test_input_symptoms_are_trimmed_and_deduplicated(make_input):
    data = make_input([" Headache", "Headache", "", "Fatigue "])
    assert data.symptoms == ["Headache", "Fatigue"]


def test_mental_condition_range_is_enforced():
    with pytest.raises(PydanticValidationError):
        ConsultationInput(
            user_id="1",
            symptoms=["Headache"],
            mental_condition={"stress_level": 11, "sleep_quality": 5, "mood": "neutral"},
        )


def test_get_unknown_consultation(service):
    with pytest.raises(NotFoundError):
        service.get_consultation("999")


def test_list_filters_by_user(service, make_input):
    service.build(make_input(["Headache"], user_id="7"))
    assert [c.user_id for c in service.list_consultations("7")] == ["7"]
    assert len(service.list_consultations("1")) == 2
    assert len(service.list_consultations()) == 3


def test_recent_consultations(service, make_input):
    latest = service.build(make_input(["Headache"]))
    recent = service.recent_consultations(2)
    assert [c.id for c in recent] == [latest.id, "1"]


def test_review_sets_notes_and_status(service):
    reviewed = service.review_consultation("1", "Continue Ashwagandha for four weeks")
    assert reviewed.status == ConsultationStatus.REVIEWED
    assert reviewed.doctor_notes == "Continue Ashwagandha for four weeks"
    assert service.get_consultation("1").status == ConsultationStatus.REVIEWED


def test_review_again_only_updates_notes(service):
    service.review_consultation("1", "first")
    again = service.review_consultation("1", "second")
    assert again.status == ConsultationStatus.REVIEWED
    assert again.doctor_notes == "second"


def test_reviewed_consultation_cannot_move_back(service):
    service.review_consultation("2", "ok")
    with pytest.raises(InvalidStatusTransitionError):
        service.update_consultation("2", ConsultationUpdate(status=ConsultationStatus.COMPLETED))


def test_reviewed_status_requires_notes(service):
    with pytest.raises(ValidationError):
        service.update_consultation("2", ConsultationUpdate(status=ConsultationStatus.REVIEWED))


def test_review_unknown_consultation(service):
    with pytest.raises(NotFoundError):
        service.review_consultation("404", "notes")


def test_stats(service, make_input):
    service.build(make_input(["Headache", "Fatigue", "Joint Pain", "Insomnia"]))
    service.review_consultation("1", "fine")

    stats = service.stats()

    assert stats.total == 3
    assert stats.pending == 0
    assert stats.completed == 2
    assert stats.reviewed == 1
    assert stats.needs_review == 1


def test_notes_cannot_be_set_without_review(service):
    with pytest.raises(ValidationError):
        service.update_consultation("2", ConsultationUpdate(doctor_notes="x"))
    with pytest.raises(ValidationError):
        service.update_consultation(
            "2", ConsultationUpdate(status=ConsultationStatus.COMPLETED, doctor_notes="x")
        )
    assert service.get_consultation("2").doctor_notes is None


def test_concurrent_builds_get_distinct_ids(service, store, make_input):
    n = 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        built = list(pool.map(lambda i: service.build(make_input(["Headache"], user_id=str(i))), range(n)))

    ids = [c.id for c in built]
    assert len(set(ids)) == n
    assert store.count() == 2 + n
    assert all(store.get(id_) is not None for id_ in ids)
