"""
Eventos de progreso de la configuración de clubes.

Los servicios de entidades hijas publican `SetupStepCompleted` después de
confirmar su propia escritura; el servicio de clubes se suscribe y actualiza
el seguimiento (`setup_status`, `current_step`, `completed_steps`).

La entrega es síncrona y en el mismo proceso: si el suscriptor falla (por
ejemplo, el club no existe) la excepción llega al publicador, pero la
escritura de la entidad hija ya está confirmada.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Type

from sqlalchemy.orm import Session

from app.core.timezone_utils import utcnow

logger = logging.getLogger(__name__)


@dataclass
class SetupStepCompleted:
    """Una entidad hija ha completado un paso de la configuración del club."""
    club_id: str
    step: str
    # True cuando el paso cierra la configuración (miembros del equipo)
    final: bool = False
    source: str = ""
    timestamp: datetime = field(default_factory=utcnow)


Handler = Callable[[Session, object], None]


class SetupEventDispatcher:
    """Despachador síncrono de eventos de configuración."""

    def __init__(self):
        self._subscribers: Dict[Type, List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type, handler: Handler) -> None:
        if handler not in self._subscribers[event_type]:
            self._subscribers[event_type].append(handler)
            logger.debug(f"Suscriptor registrado para {event_type.__name__}: {handler}")

    def unsubscribe(self, event_type: Type, handler: Handler) -> None:
        if handler in self._subscribers[event_type]:
            self._subscribers[event_type].remove(handler)

    def publish(self, db: Session, event) -> None:
        """
        Entregar un evento a todos sus suscriptores.

        Args:
            db: Sesión de base de datos del publicador
            event: Evento a entregar

        Raises:
            Cualquier excepción lanzada por un suscriptor; no se reintenta.
        """
        handlers = list(self._subscribers.get(type(event), []))
        logger.info(
            f"Evento {type(event).__name__} publicado: club={getattr(event, 'club_id', None)} "
            f"paso={getattr(event, 'step', None)} ({len(handlers)} suscriptores)"
        )
        for handler in handlers:
            handler(db, event)


setup_events = SetupEventDispatcher()
