import pytest

from ayurcare.services.recommendations import (
    DEFAULT_BUNDLE,
    RecommendationComposer,
    StaticRecommendationComposer,
)


def test_bundle_ignores_symptoms():
    composer = StaticRecommendationComposer()
    first = composer.compose(["Headache"])
    second = composer.compose(["Fatigue", "Anxiety"])
    assert first.model_dump_json() == second.model_dump_json()
    assert first == DEFAULT_BUNDLE


def test_bundle_contents():
    bundle = StaticRecommendationComposer().compose(["Headache"])
    assert [h.name for h in bundle.herbs] == ["Ashwagandha", "Triphala", "Turmeric"]
    assert "Cold drinks" in bundle.foods.avoid
    assert len(bundle.lifestyle) == 4
    assert bundle.yoga_practices[0] == "Surya Namaskar (Sun Salutation)"


def test_returned_bundle_is_a_copy():
    composer = StaticRecommendationComposer()
    bundle = composer.compose(["Headache"])
    bundle.lifestyle.append("Run a marathon")
    assert "Run a marathon" not in composer.compose(["Headache"]).lifestyle


def test_composer_can_be_swapped():
    class EmptyComposer(RecommendationComposer):
        def compose(self, symptoms):
            return DEFAULT_BUNDLE.model_copy(update={"herbs": []})

    assert EmptyComposer().compose(["Headache"]).herbs == []


def test_composer_base_is_abstract():
    with pytest.raises(TypeError):
        RecommendationComposer()
