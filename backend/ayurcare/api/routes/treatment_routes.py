# backend/ayurcare/api/routes/treatment_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ayurcare.api.deps import get_disease_catalog, get_treatment_catalog
from ayurcare.models import Treatment, TreatmentCreate, TreatmentUpdate
from ayurcare.repositories.diseases import DiseaseCatalog
from ayurcare.repositories.treatments import TreatmentCatalog

router = APIRouter(prefix="/treatments", tags=["treatments"])


@router.get("", response_model=List[Treatment])
async def list_treatments(
    disease_id: Optional[str] = None,
    catalog: TreatmentCatalog = Depends(get_treatment_catalog),
):
    if disease_id:
        return catalog.for_disease(disease_id)
    return catalog.list()


@router.get("/{treatment_id}", response_model=Treatment)
async def get_treatment(treatment_id: str, catalog: TreatmentCatalog = Depends(get_treatment_catalog)):
    treatment = catalog.get(treatment_id)
    if not treatment:
        raise HTTPException(status_code=404, detail="Treatment not found")
    return treatment


@router.post("", response_model=Treatment, status_code=status.HTTP_201_CREATED)
async def add_treatment(
    payload: TreatmentCreate,
    catalog: TreatmentCatalog = Depends(get_treatment_catalog),
    diseases: DiseaseCatalog = Depends(get_disease_catalog),
):
    if not diseases.get(payload.disease_id):
        raise HTTPException(status_code=404, detail="Disease not found")
    return catalog.add(payload)


@router.patch("/{treatment_id}", response_model=Treatment)
async def update_treatment(
    treatment_id: str,
    payload: TreatmentUpdate,
    catalog: TreatmentCatalog = Depends(get_treatment_catalog),
    diseases: DiseaseCatalog = Depends(get_disease_catalog),
):
    if payload.disease_id is not None and not diseases.get(payload.disease_id):
        raise HTTPException(status_code=404, detail="Disease not found")
    treatment = catalog.update(treatment_id, payload)
    if not treatment:
        raise HTTPException(status_code=404, detail="Treatment not found")
    return treatment
