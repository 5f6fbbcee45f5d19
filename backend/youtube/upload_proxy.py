"""
Server-side proxy for YouTube resumable uploads.

Browsers cannot call the YouTube upload endpoint directly because of CORS,
so the admin panel initializes the upload and streams the video through here.
"""

import logging
from typing import Any, Dict

import requests

from shared.errors import YouTubeUploadError

logger = logging.getLogger(__name__)

YOUTUBE_UPLOAD_URL = "https://www.googleapis.com/upload/youtube/v3/videos"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

INIT_TIMEOUT = 30
# (connect, read) for large video transfers
TRANSFER_TIMEOUT = (30, 600)


def _error_message(e: requests.RequestException) -> str:
    """Prefer the Google API error message over the generic HTTP error."""
    response = getattr(e, "response", None)
    if response is not None:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            pass
    return str(e)


def init_upload(metadata: Dict[str, Any], access_token: str) -> str:
    """
    Start a resumable upload session.

    Returns:
        Session URL to PUT the video bytes to

    Raises:
        YouTubeUploadError: If YouTube rejects the request or returns no session URL
    """
    try:
        response = requests.post(
            YOUTUBE_UPLOAD_URL,
            json=metadata,
            params={
                "uploadType": "resumable",
                "part": "snippet,status",
                "access_token": access_token,
            },
            headers={"X-Upload-Content-Type": "video/*"},
            timeout=INIT_TIMEOUT,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise YouTubeUploadError(_error_message(e)) from e

    upload_url = response.headers.get("Location")
    if not upload_url:
        raise YouTubeUploadError("YouTube did not return an upload URL")

    return upload_url


def upload_video(video_url: str, upload_url: str) -> str:
    """
    Download a video and upload it to an initialized session.

    Returns:
        YouTube video id

    Raises:
        YouTubeUploadError: If either transfer fails
    """
    try:
        logger.info("Fetching video from %s", video_url)
        video_response = requests.get(video_url, timeout=TRANSFER_TIMEOUT)
        video_response.raise_for_status()
        video_bytes = video_response.content

        logger.info("Uploading %.2f MB to YouTube", len(video_bytes) / 1024 / 1024)
        upload_response = requests.put(
            upload_url,
            data=video_bytes,
            headers={"Content-Type": "video/*"},
            timeout=TRANSFER_TIMEOUT,
        )
        upload_response.raise_for_status()
    except requests.RequestException as e:
        raise YouTubeUploadError(_error_message(e)) from e

    try:
        return upload_response.json()["id"]
    except (ValueError, KeyError, TypeError) as e:
        raise YouTubeUploadError("YouTube response did not include a video id") from e


def watch_url(video_id: str) -> str:
    return f"{YOUTUBE_WATCH_URL}{video_id}"
