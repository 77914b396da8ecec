"""
Card configuration API - visual settings of a user's profile card.
"""
from fastapi import APIRouter, Depends, Response, status

from landing_backend.app.core.dependencies import get_card_configuration_service
from landing_backend.app.schemas.card_configuration import (
    CardConfigurationCreate,
    CardConfigurationOut,
    CardConfigurationUpdate,
)
from landing_backend.app.services.card_configuration_service import CardConfigurationService

router = APIRouter(prefix="/card-configurations", tags=["card-configurations"])


@router.get("/user/{user_id}", response_model=CardConfigurationOut)
def get_card_configuration_by_user(
    user_id: str,
    service: CardConfigurationService = Depends(get_card_configuration_service),
):
    return service.find_by_user_id(user_id)


@router.get("/{config_id}", response_model=CardConfigurationOut)
def get_card_configuration(
    config_id: str,
    service: CardConfigurationService = Depends(get_card_configuration_service),
):
    return service.find_by_id(config_id)


@router.post("", response_model=CardConfigurationOut, status_code=status.HTTP_201_CREATED)
def create_card_configuration(
    payload: CardConfigurationCreate,
    service: CardConfigurationService = Depends(get_card_configuration_service),
):
    return service.create(payload)


@router.put("/{config_id}", response_model=CardConfigurationOut)
def update_card_configuration(
    config_id: str,
    payload: CardConfigurationUpdate,
    service: CardConfigurationService = Depends(get_card_configuration_service),
):
    return service.update(config_id, payload)


@router.put("/{config_id}/reset", response_model=CardConfigurationOut)
def reset_card_configuration(
    config_id: str,
    service: CardConfigurationService = Depends(get_card_configuration_service),
):
    """Overwrite every visual field with the plain reset values."""
    return service.reset(config_id)


@router.delete("/{config_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card_configuration(
    config_id: str,
    service: CardConfigurationService = Depends(get_card_configuration_service),
):
    service.delete(config_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
