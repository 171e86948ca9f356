# communicator/api/health.py
from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    repository = request.app.state.sent_notification_repository
    return {"status": "ok", "table": repository.table_name}
