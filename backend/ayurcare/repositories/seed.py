"""Sample records loaded into the in-memory repositories at startup."""

from datetime import datetime, timezone
from typing import List

from ayurcare.models import (
    Consultation,
    ConsultationStatus,
    Disease,
    DiseasePrediction,
    FoodGuidance,
    HealthInfo,
    Herb,
    HerbRecommendation,
    MentalCondition,
    Mood,
    RecommendationBundle,
    Remedy,
    Severity,
    Symptom,
    Treatment,
    TriageLevel,
)

_SYMPTOM_ROWS = [
    ("Headache", "Neurological", "Pain in the head or upper neck", Severity.MILD),
    ("Fatigue", "General", "Persistent tiredness or weakness", Severity.MILD),
    ("Joint Pain", "Musculoskeletal", "Pain or stiffness in joints", Severity.MODERATE),
    ("Digestive Issues", "Gastrointestinal", "Problems with digestion", Severity.MODERATE),
    ("Skin Rashes", "Dermatological", "Redness or irritation on skin", Severity.MILD),
    ("Insomnia", "Sleep", "Difficulty falling or staying asleep", Severity.MODERATE),
    ("Anxiety", "Mental", "Feelings of worry or unease", Severity.MODERATE),
    ("Back Pain", "Musculoskeletal", "Pain in the lower or upper back", Severity.MODERATE),
    ("Respiratory Issues", "Respiratory", "Breathing difficulties or cough", Severity.MODERATE),
    ("Fever", "General", "Elevated body temperature", Severity.MODERATE),
    ("Nausea", "Gastrointestinal", "Feeling of sickness with urge to vomit", Severity.MILD),
    ("Muscle Cramps", "Musculoskeletal", "Sudden involuntary muscle contractions", Severity.MILD),
    ("Dizziness", "Neurological", "Feeling of being unbalanced or lightheaded", Severity.MODERATE),
    ("Loss of Appetite", "General", "Reduced desire to eat", Severity.MILD),
    ("Constipation", "Gastrointestinal", "Difficulty passing stool", Severity.MILD),
]


def seed_symptoms() -> List[Symptom]:
    return [
        Symptom(id=str(index), name=name, category=category, description=description, severity=severity)
        for index, (name, category, description, severity) in enumerate(_SYMPTOM_ROWS, start=1)
    ]


def seed_diseases() -> List[Disease]:
    return [
        Disease(
            id="1",
            name="Vata Imbalance",
            ayurvedic_name="Vata Vyadhi",
            description="Condition caused by aggravated Vata dosha leading to dryness, anxiety, and irregular digestion",
            dosha_involvement=["Vata"],
            common_symptoms=["Anxiety", "Insomnia", "Constipation", "Joint Pain", "Dry Skin"],
        ),
        Disease(
            id="2",
            name="Pitta Imbalance",
            ayurvedic_name="Pitta Vyadhi",
            description="Condition caused by aggravated Pitta dosha leading to inflammation, acidity, and irritability",
            dosha_involvement=["Pitta"],
            common_symptoms=["Acidity", "Skin Rashes", "Anger", "Headache", "Excessive Heat"],
        ),
        Disease(
            id="3",
            name="Kapha Imbalance",
            ayurvedic_name="Kapha Vyadhi",
            description="Condition caused by aggravated Kapha dosha leading to heaviness, congestion, and lethargy",
            dosha_involvement=["Kapha"],
            common_symptoms=["Fatigue", "Weight Gain", "Congestion", "Slow Digestion", "Depression"],
        ),
        Disease(
            id="4",
            name="Amavata (Rheumatoid condition)",
            ayurvedic_name="Amavata",
            description="Accumulation of toxins in joints causing pain and stiffness",
            dosha_involvement=["Vata", "Kapha"],
            common_symptoms=["Joint Pain", "Stiffness", "Swelling", "Fatigue"],
        ),
    ]


def seed_treatments() -> List[Treatment]:
    return [
        Treatment(
            id="1",
            name="Vata Pacifying Protocol",
            disease_id="1",
            herbs=["Ashwagandha", "Brahmi", "Shatavari", "Bala"],
            therapies=["Abhyanga (Oil Massage)", "Basti (Enema therapy)", "Shirodhara"],
            dietary_guidelines="Warm, moist, grounding foods. Favor sweet, sour, salty tastes.",
            duration="4-8 weeks",
        ),
        Treatment(
            id="2",
            name="Pitta Cooling Protocol",
            disease_id="2",
            herbs=["Amalaki", "Shatavari", "Neem", "Guduchi"],
            therapies=["Virechana (Purgation)", "Cool oil massage", "Sheetali Pranayama"],
            dietary_guidelines="Cool, sweet, bitter foods. Avoid spicy, sour, fermented items.",
            duration="3-6 weeks",
        ),
        Treatment(
            id="3",
            name="Kapha Reducing Protocol",
            disease_id="3",
            herbs=["Triphala", "Guggulu", "Trikatu", "Punarnava"],
            therapies=["Udvartana (Dry massage)", "Vamana (Emesis)", "Nasya"],
            dietary_guidelines="Light, warm, dry foods. Favor pungent, bitter, astringent tastes.",
            duration="6-10 weeks",
        ),
    ]


_HERB_ROWS = [
    (
        "Ashwagandha", "Withania somnifera",
        "Known as Indian Ginseng, Ashwagandha is an adaptogenic herb that helps the body manage stress.",
        ["Reduces stress and anxiety", "Improves sleep quality", "Boosts immunity", "Enhances strength"],
        ["Stress management", "Sleep disorders", "General weakness", "Cognitive enhancement"],
        "Balances Vata and Kapha",
    ),
    (
        "Brahmi", "Bacopa monnieri",
        "A renowned brain tonic in Ayurveda, Brahmi enhances memory and cognitive function.",
        ["Improves memory", "Reduces anxiety", "Enhances concentration", "Neuroprotective"],
        ["Memory enhancement", "ADHD", "Anxiety", "Cognitive decline"],
        "Balances all three doshas",
    ),
    (
        "Triphala", "Three Fruits",
        "A combination of three fruits (Amalaki, Bibhitaki, Haritaki), Triphala is a powerful digestive and detoxifying formula.",
        ["Digestive support", "Detoxification", "Antioxidant", "Weight management"],
        ["Constipation", "Digestive issues", "Detox programs", "Eye health"],
        "Balances all three doshas",
    ),
    (
        "Turmeric", "Curcuma longa",
        "The golden spice of India, known for its powerful anti-inflammatory and antioxidant properties.",
        ["Anti-inflammatory", "Antioxidant", "Digestive aid", "Immune booster"],
        ["Joint pain", "Skin conditions", "Digestive disorders", "Immunity"],
        "Balances all doshas, reduces Kapha",
    ),
    (
        "Tulsi", "Ocimum sanctum",
        'Holy Basil, revered in India as the "Queen of Herbs" for its healing properties.',
        ["Respiratory support", "Stress relief", "Immune support", "Antioxidant"],
        ["Colds and flu", "Respiratory issues", "Stress", "Skin health"],
        "Balances Vata and Kapha",
    ),
    (
        "Neem", "Azadirachta indica",
        'Known as the "Village Pharmacy", Neem has powerful purifying and healing properties.',
        ["Blood purifier", "Skin health", "Antimicrobial", "Dental health"],
        ["Skin disorders", "Blood purification", "Infections", "Diabetes support"],
        "Reduces Pitta and Kapha",
    ),
    (
        "Shatavari", "Asparagus racemosus",
        'The "Queen of Herbs" for women\'s health, nourishing and rejuvenating.',
        ["Hormonal balance", "Digestive support", "Immune boost", "Rejuvenating"],
        ["Women's health", "Digestive issues", "Immunity", "Reproductive health"],
        "Balances Vata and Pitta",
    ),
    (
        "Guggulu", "Commiphora mukul",
        "A powerful resin used for purification, weight management, and joint health.",
        ["Joint support", "Weight management", "Cholesterol support", "Detoxification"],
        ["Arthritis", "Weight loss", "High cholesterol", "Skin conditions"],
        "Reduces Vata and Kapha",
    ),
]


def seed_herbs() -> List[Herb]:
    return [
        Herb(
            id=str(index),
            name=name,
            sanskrit_name=sanskrit_name,
            description=description,
            benefits=benefits,
            uses=uses,
            dosha_effect=dosha_effect,
        )
        for index, (name, sanskrit_name, description, benefits, uses, dosha_effect) in enumerate(_HERB_ROWS, start=1)
    ]


def seed_remedies() -> List[Remedy]:
    return [
        Remedy(
            id="1",
            name="Golden Milk",
            condition="Inflammation and Sleep",
            ingredients=["Turmeric", "Milk", "Black pepper", "Honey", "Ghee"],
            preparation="Heat milk with turmeric and black pepper. Add ghee and honey when warm.",
            dosage="One cup before bedtime",
            benefits="Reduces inflammation, promotes restful sleep, boosts immunity",
        ),
        Remedy(
            id="2",
            name="Triphala Churna",
            condition="Digestive Issues",
            ingredients=["Amalaki", "Bibhitaki", "Haritaki"],
            preparation="Mix equal parts of three dried fruit powders",
            dosage="1 teaspoon with warm water before bed",
            benefits="Cleanses digestive tract, promotes regular elimination, detoxifies",
        ),
        Remedy(
            id="3",
            name="Ashwagandha Milk",
            condition="Stress and Anxiety",
            ingredients=["Ashwagandha powder", "Milk", "Honey", "Cardamom"],
            preparation="Simmer ashwagandha in milk for 10 minutes, strain, add honey and cardamom",
            dosage="One cup in the evening",
            benefits="Reduces stress, improves sleep, builds strength",
        ),
        Remedy(
            id="4",
            name="Ginger-Lemon Tea",
            condition="Cold and Congestion",
            ingredients=["Fresh ginger", "Lemon", "Honey", "Hot water"],
            preparation="Steep grated ginger in hot water, add lemon juice and honey",
            dosage="2-3 cups daily when sick",
            benefits="Clears congestion, boosts immunity, soothes throat",
        ),
    ]


def seed_consultations() -> List[Consultation]:
    """Historical consultations, most recent first."""
    return [
        Consultation(
            id="1",
            user_id="1",
            date=datetime(2024, 12, 1, 10, 0, tzinfo=timezone.utc),
            symptoms=["Headache", "Fatigue", "Insomnia"],
            mental_condition=MentalCondition(stress_level=7, sleep_quality=4, mood=Mood.ANXIOUS),
            health_info=HealthInfo(weight="70kg", lifestyle="sedentary", dietary_habits="irregular meals"),
            disease_history="None significant",
            old_treatments="Paracetamol for headaches",
            predicted_disease=[
                DiseasePrediction(name="Vata Imbalance", confidence=85),
                DiseasePrediction(name="Stress-related disorder", confidence=72),
            ],
            recommendations=RecommendationBundle(
                herbs=[
                    HerbRecommendation(name="Ashwagandha", dosage="500mg twice daily", benefits="Reduces stress and improves sleep"),
                    HerbRecommendation(name="Brahmi", dosage="300mg daily", benefits="Enhances mental clarity"),
                ],
                foods=FoodGuidance(
                    consume=["Warm soups", "Ghee", "Sesame oil", "Sweet fruits", "Cooked vegetables"],
                    avoid=["Cold drinks", "Raw foods", "Caffeine", "Processed foods"],
                ),
                lifestyle=[
                    "Maintain regular sleep schedule",
                    "Practice oil massage (Abhyanga)",
                    "Take warm baths before bed",
                ],
                yoga_practices=["Shavasana", "Pranayama", "Gentle stretching"],
            ),
            triage_level=TriageLevel.NORMAL,
            status=ConsultationStatus.COMPLETED,
        ),
        Consultation(
            id="2",
            user_id="1",
            date=datetime(2024, 11, 15, 14, 30, tzinfo=timezone.utc),
            symptoms=["Joint Pain", "Digestive Issues"],
            mental_condition=MentalCondition(stress_level=5, sleep_quality=6, mood=Mood.NEUTRAL),
            health_info=HealthInfo(weight="72kg", lifestyle="moderately active", dietary_habits="regular meals"),
            disease_history="Mild arthritis",
            old_treatments="Turmeric supplements",
            predicted_disease=[
                DiseasePrediction(name="Ama accumulation", confidence=78),
                DiseasePrediction(name="Pitta-Vata imbalance", confidence=65),
            ],
            recommendations=RecommendationBundle(
                herbs=[
                    HerbRecommendation(name="Triphala", dosage="1 tsp before bed", benefits="Cleanses digestive system"),
                    HerbRecommendation(name="Guggulu", dosage="250mg twice daily", benefits="Supports joint health"),
                ],
                foods=FoodGuidance(
                    consume=["Ginger tea", "Leafy greens", "Turmeric milk", "Light grains"],
                    avoid=["Heavy foods", "Fried items", "Dairy excess", "Red meat"],
                ),
                lifestyle=[
                    "Light fasting once a week",
                    "Warm compress on joints",
                    "Regular walks after meals",
                ],
                yoga_practices=["Pawanmuktasana", "Trikonasana", "Cat-cow stretch"],
            ),
            triage_level=TriageLevel.NORMAL,
            status=ConsultationStatus.COMPLETED,
        ),
    ]
