from typing import Any, Dict

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db


async def get_context(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Contexto de cada operación GraphQL: la sesión de base de datos de la petición."""
    return {"db": db}
