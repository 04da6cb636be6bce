# backend/ayurcare/models/knowledge_base.py

from typing import List, Optional

from pydantic import BaseModel


class Herb(BaseModel):
    id: str
    name: str
    sanskrit_name: str
    description: str = ""
    benefits: List[str] = []
    uses: List[str] = []
    dosha_effect: str = ""
    image_url: Optional[str] = None


class Remedy(BaseModel):
    id: str
    name: str
    condition: str
    ingredients: List[str] = []
    preparation: str = ""
    dosage: str = ""
    benefits: str = ""


class KnowledgeBaseResults(BaseModel):
    herbs: List[Herb] = []
    remedies: List[Remedy] = []
