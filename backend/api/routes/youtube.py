"""
/api/youtube: resumable upload proxy for the admin panel.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from shared.errors import YouTubeUploadError
from youtube.upload_proxy import init_upload, upload_video, watch_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/youtube", tags=["youtube"])


def _failure(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


@router.post("/upload")
async def youtube_upload(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        return _failure(400, "Invalid action")

    action = payload.get("action")

    try:
        if action == "init":
            upload_url = await run_in_threadpool(
                init_upload, payload.get("metadata") or {}, payload.get("accessToken")
            )
            return {"success": True, "uploadUrl": upload_url}

        if action == "upload":
            video_id = await run_in_threadpool(
                upload_video, payload.get("videoUrl"), payload.get("uploadUrl")
            )
            return {"success": True, "videoId": video_id, "videoUrl": watch_url(video_id)}
    except YouTubeUploadError as e:
        logger.error("YouTube upload error: %s", e)
        return _failure(500, str(e))
    except Exception as e:
        logger.exception("Unexpected YouTube upload failure")
        return _failure(500, str(e) or "YouTube upload failed")

    return _failure(400, "Invalid action")
