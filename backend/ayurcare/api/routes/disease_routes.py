# backend/ayurcare/api/routes/disease_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ayurcare.api.deps import get_disease_catalog
from ayurcare.models import Disease, DiseaseCreate, DiseaseUpdate
from ayurcare.repositories.diseases import DiseaseCatalog

router = APIRouter(prefix="/diseases", tags=["diseases"])


@router.get("", response_model=List[Disease])
async def list_diseases(catalog: DiseaseCatalog = Depends(get_disease_catalog)):
    return catalog.list()


@router.get("/{disease_id}", response_model=Disease)
async def get_disease(disease_id: str, catalog: DiseaseCatalog = Depends(get_disease_catalog)):
    disease = catalog.get(disease_id)
    if not disease:
        raise HTTPException(status_code=404, detail="Disease not found")
    return disease


@router.post("", response_model=Disease, status_code=status.HTTP_201_CREATED)
async def add_disease(payload: DiseaseCreate, catalog: DiseaseCatalog = Depends(get_disease_catalog)):
    return catalog.add(payload)


@router.patch("/{disease_id}", response_model=Disease)
async def update_disease(
    disease_id: str,
    payload: DiseaseUpdate,
    catalog: DiseaseCatalog = Depends(get_disease_catalog),
):
    disease = catalog.update(disease_id, payload)
    if not disease:
        raise HTTPException(status_code=404, detail="Disease not found")
    return disease


@router.delete("/{disease_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_disease(disease_id: str, catalog: DiseaseCatalog = Depends(get_disease_catalog)):
    if not catalog.delete(disease_id):
        raise HTTPException(status_code=404, detail="Disease not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
