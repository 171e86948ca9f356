# communicator/api/messages.py
import logging

from botbuilder.schema import Activity
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["bot"])


@router.post("/messages")
async def messages(request: Request):
    """
    Bot Framework webhook. Teams posts every activity for the user bot here.
    The adapter validates the Authorization header before the bot runs.
    """
    if "application/json" not in request.headers.get("Content-Type", ""):
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    body = await request.json()
    activity = Activity().deserialize(body)
    auth_header = request.headers.get("Authorization", "")

    adapter = request.app.state.adapter
    bot = request.app.state.bot

    try:
        response = await adapter.process_activity(activity, auth_header, bot.on_turn)
    except PermissionError as e:
        logger.warning("Rejected activity %s: %s", activity.id, e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    if response:
        return JSONResponse(content=response.body, status_code=response.status)
    return Response(status_code=status.HTTP_201_CREATED)
