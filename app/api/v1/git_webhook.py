from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from app.models.git import GitPushPayload
from app.models.message import as_dict
from app.services.git_notifier import GitPushNotifier
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/git")

git_notifier = GitPushNotifier()


@router.post("")
async def receive_push(request: Request):
    """
    Recibe notificaciones de push y avisa por Messenger.
    Devuelve el payload recibido tal cual; solo un cuerpo que no es JSON da 400.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.warning(f"[GIT] Payload de push inválido: {e}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    try:
        await git_notifier.notify(GitPushPayload.model_validate(as_dict(body)))
    except Exception as e:
        logger.error(f"[GIT] Error enviando notificación de push: {e}", exc_info=True)

    return JSONResponse(content=body, status_code=status.HTTP_200_OK)
