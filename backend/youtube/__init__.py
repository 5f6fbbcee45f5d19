from .upload_proxy import init_upload, upload_video

__all__ = ["init_upload", "upload_video"]
