"""
Solution API - services shown on the landing page, plus their features.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from landing_backend.app.core.dependencies import get_solution_service
from landing_backend.app.schemas.solution import (
    FeatureCreate,
    FeatureOut,
    FeatureUpdate,
    SolutionCreate,
    SolutionOut,
    SolutionUpdate,
)
from landing_backend.app.services.solution_service import SolutionService

router = APIRouter(prefix="/solutions", tags=["solutions"])


@router.get("", response_model=List[SolutionOut])
def list_solutions(service: SolutionService = Depends(get_solution_service)):
    """Active solutions only, by display order."""
    return service.find_all()


@router.get("/admin", response_model=List[SolutionOut])
def list_all_solutions(service: SolutionService = Depends(get_solution_service)):
    return service.find_all_admin()


@router.get("/{solution_id}", response_model=SolutionOut)
def get_solution(solution_id: str, service: SolutionService = Depends(get_solution_service)):
    return service.find_by_id(solution_id)


@router.post("", response_model=SolutionOut, status_code=status.HTTP_201_CREATED)
def create_solution(payload: SolutionCreate, service: SolutionService = Depends(get_solution_service)):
    return service.create(payload)


@router.put("/{solution_id}", response_model=SolutionOut)
def update_solution(
    solution_id: str,
    payload: SolutionUpdate,
    service: SolutionService = Depends(get_solution_service),
):
    """Features in the body are added to the existing ones."""
    return service.update(solution_id, payload)


@router.delete("/{solution_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_solution(solution_id: str, service: SolutionService = Depends(get_solution_service)):
    service.delete(solution_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{solution_id}/features", response_model=List[FeatureOut])
def list_features(solution_id: str, service: SolutionService = Depends(get_solution_service)):
    return service.get_features(solution_id)


@router.post("/{solution_id}/features", response_model=FeatureOut, status_code=status.HTTP_201_CREATED)
def create_feature(
    solution_id: str,
    payload: FeatureCreate,
    service: SolutionService = Depends(get_solution_service),
):
    return service.create_feature(solution_id, payload)


@router.put("/{solution_id}/features/{feature_id}", response_model=FeatureOut)
def update_feature(
    solution_id: str,
    feature_id: str,
    payload: FeatureUpdate,
    service: SolutionService = Depends(get_solution_service),
):
    return service.update_feature(solution_id, feature_id, payload)


@router.delete("/{solution_id}/features/{feature_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_feature(
    solution_id: str,
    feature_id: str,
    service: SolutionService = Depends(get_solution_service),
):
    service.delete_feature(solution_id, feature_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
