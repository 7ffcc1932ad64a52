from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.club import AdditionalService, SetupStatus, SetupStep, SportsType


class ClubBase(BaseModel):
    """Campos editables de la configuración de un club"""
    description: Optional[str] = Field(None, title="Descripción del club")
    type_of_club: Optional[str] = Field(None, title="Tipo de club", max_length=100)
    sports: Optional[List[SportsType]] = Field(None, title="Deportes ofrecidos")
    additional_services: Optional[List[AdditionalService]] = Field(None, title="Servicios adicionales")
    is_part_of_chain: Optional[bool] = None
    chain_id: Optional[str] = Field(None, max_length=100)

    logo: Optional[str] = Field(None, title="URL del logo", max_length=500)
    gallery_images: Optional[List[str]] = Field(None, title="URLs de la galería")

    enable_online_bookings: Optional[bool] = None
    enable_class_bookings: Optional[bool] = None
    enable_open_matches: Optional[bool] = None
    enable_academy_management: Optional[bool] = None
    enable_event_management: Optional[bool] = None
    enable_league_tournament_management: Optional[bool] = None

    currency: Optional[str] = Field(None, max_length=10)
    online_payment: Optional[bool] = None
    onsite_payment: Optional[bool] = None
    by_invoice: Optional[bool] = None


class ClubCreate(ClubBase):
    """Esquema para crear la configuración de un club"""
    title: str = Field(..., title="Nombre del club", min_length=1, max_length=255)


class ClubUpdate(ClubBase):
    """Esquema para actualizar un club; solo se aplican los campos enviados"""
    title: Optional[str] = Field(None, title="Nombre del club", min_length=1, max_length=255)


class ClubFilter(BaseModel):
    """Filtro declarativo de clubes (todas las claves son opcionales)"""
    id: Optional[str] = None
    club_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    type_of_club: Optional[str] = None
    chain_id: Optional[str] = None
    currency: Optional[str] = None
    setup_status: Optional[SetupStatus] = None
    current_step: Optional[SetupStep] = None
    sports: Optional[List[SportsType]] = None
    additional_services: Optional[List[AdditionalService]] = None
    completed_steps: Optional[List[SetupStep]] = None

    is_part_of_chain: Optional[bool] = None
    enable_online_bookings: Optional[bool] = None
    enable_class_bookings: Optional[bool] = None
    enable_open_matches: Optional[bool] = None
    enable_academy_management: Optional[bool] = None
    enable_event_management: Optional[bool] = None
    enable_league_tournament_management: Optional[bool] = None
    online_payment: Optional[bool] = None
    onsite_payment: Optional[bool] = None
    by_invoice: Optional[bool] = None

    # Filtros por relación
    amenity_id: Optional[str] = None
    location_contact_id: Optional[str] = None
    working_hours_calendar_id: Optional[str] = None
    coach_id: Optional[str] = None
    resource_ids: Optional[List[str]] = None


class ClubFieldFilter(BaseModel):
    """Condición campo/operador/valor para la búsqueda segura"""
    field: str
    value: str
    operator: str = "equals"


class CompleteClubSetup(BaseModel):
    club_id: str
    final_step: SetupStep
