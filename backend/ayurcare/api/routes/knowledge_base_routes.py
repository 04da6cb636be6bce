# backend/ayurcare/api/routes/knowledge_base_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ayurcare.api.deps import get_knowledge_base
from ayurcare.models import Herb, KnowledgeBaseResults, Remedy
from ayurcare.repositories.knowledge_base import KnowledgeBase

router = APIRouter(prefix="/knowledge-base", tags=["knowledge-base"])


@router.get("/herbs", response_model=List[Herb])
async def list_herbs(q: Optional[str] = None, kb: KnowledgeBase = Depends(get_knowledge_base)):
    if q:
        return kb.herbs.search(q)
    return kb.herbs.list()


@router.get("/herbs/{herb_id}", response_model=Herb)
async def get_herb(herb_id: str, kb: KnowledgeBase = Depends(get_knowledge_base)):
    herb = kb.herbs.get(herb_id)
    if not herb:
        raise HTTPException(status_code=404, detail="Herb not found")
    return herb


@router.get("/remedies", response_model=List[Remedy])
async def list_remedies(q: Optional[str] = None, kb: KnowledgeBase = Depends(get_knowledge_base)):
    if q:
        return kb.remedies.search(q)
    return kb.remedies.list()


@router.get("/remedies/{remedy_id}", response_model=Remedy)
async def get_remedy(remedy_id: str, kb: KnowledgeBase = Depends(get_knowledge_base)):
    remedy = kb.remedies.get(remedy_id)
    if not remedy:
        raise HTTPException(status_code=404, detail="Remedy not found")
    return remedy


@router.get("/search", response_model=KnowledgeBaseResults)
async def search_knowledge_base(q: str = Query(..., min_length=1), kb: KnowledgeBase = Depends(get_knowledge_base)):
    """Search herbs and remedies in one call."""
    return kb.search_all(q)
