from .download_media import DownloadMediaUseCase

__all__ = ["DownloadMediaUseCase"]
