# backend/ayurcare/api/routes/symptom_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ayurcare.api.deps import get_symptom_catalog
from ayurcare.models import Symptom, SymptomCreate, SymptomUpdate
from ayurcare.repositories.symptoms import SymptomCatalog

router = APIRouter(prefix="/symptoms", tags=["symptoms"])


@router.get("", response_model=List[Symptom])
async def list_symptoms(
    category: Optional[str] = None,
    catalog: SymptomCatalog = Depends(get_symptom_catalog),
):
    if category:
        return catalog.by_category(category)
    return catalog.list()


@router.get("/categories", response_model=List[str])
async def list_categories(catalog: SymptomCatalog = Depends(get_symptom_catalog)):
    return catalog.categories()


@router.get("/{symptom_id}", response_model=Symptom)
async def get_symptom(symptom_id: str, catalog: SymptomCatalog = Depends(get_symptom_catalog)):
    symptom = catalog.get(symptom_id)
    if not symptom:
        raise HTTPException(status_code=404, detail="Symptom not found")
    return symptom


@router.post("", response_model=Symptom, status_code=status.HTTP_201_CREATED)
async def add_symptom(payload: SymptomCreate, catalog: SymptomCatalog = Depends(get_symptom_catalog)):
    return catalog.add(payload)


@router.patch("/{symptom_id}", response_model=Symptom)
async def update_symptom(
    symptom_id: str,
    payload: SymptomUpdate,
    catalog: SymptomCatalog = Depends(get_symptom_catalog),
):
    symptom = catalog.update(symptom_id, payload)
    if not symptom:
        raise HTTPException(status_code=404, detail="Symptom not found")
    return symptom


@router.delete("/{symptom_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_symptom(symptom_id: str, catalog: SymptomCatalog = Depends(get_symptom_catalog)):
    if not catalog.delete(symptom_id):
        raise HTTPException(status_code=404, detail="Symptom not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
