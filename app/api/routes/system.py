from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(prefix="/system", tags=["System"])


@router.get("/health")
def system_health(request: Request):
    database = request.app.state.database

    db_state = "disconnected"
    if database.is_connected:
        db = database.session()
        try:
            db.execute(text("SELECT 1"))
            db_state = "connected"
        except SQLAlchemyError:
            db_state = "error"
        finally:
            db.close()

    return {
        "status": "ok" if db_state == "connected" else "degraded",
        "database": db_state,
        "api_version": "1.0.0",
        "service": "Interview Desk API"
    }
