# backend/ayurcare/services/recommendations.py

from abc import ABC, abstractmethod
from typing import Sequence

from ayurcare.models.consultation import (
    FoodGuidance,
    HerbRecommendation,
    RecommendationBundle,
)

DEFAULT_BUNDLE = RecommendationBundle(
    herbs=[
        HerbRecommendation(name="Ashwagandha", dosage="500mg twice daily", benefits="Adaptogenic, reduces stress"),
        HerbRecommendation(name="Triphala", dosage="1 tsp before bed", benefits="Digestive support, detoxification"),
        HerbRecommendation(name="Turmeric", dosage="500mg with meals", benefits="Anti-inflammatory, immune support"),
    ],
    foods=FoodGuidance(
        consume=["Fresh fruits", "Warm soups", "Whole grains", "Green vegetables", "Herbal teas"],
        avoid=["Processed foods", "Excessive caffeine", "Cold drinks", "Heavy fried foods"],
    ),
    lifestyle=[
        "Follow a regular daily routine (Dinacharya)",
        "Practice meditation for 15-20 minutes daily",
        "Get adequate sleep (7-8 hours)",
        "Stay hydrated with warm water",
    ],
    yoga_practices=[
        "Surya Namaskar (Sun Salutation)",
        "Pranayama breathing exercises",
        "Shavasana for relaxation",
    ],
)


class RecommendationComposer(ABC):
    """Produces the herbs / foods / lifestyle / yoga bundle for a consultation."""

    @abstractmethod
    def compose(self, symptoms: Sequence[str]) -> RecommendationBundle:
        ...


class StaticRecommendationComposer(RecommendationComposer):
    """Returns the same template for every consultation, whatever the symptoms."""

    def __init__(self, template: RecommendationBundle = DEFAULT_BUNDLE):
        self.template = template

    def compose(self, symptoms: Sequence[str]) -> RecommendationBundle:
        # deep copy so callers can't mutate the shared template
        return self.template.model_copy(deep=True)
