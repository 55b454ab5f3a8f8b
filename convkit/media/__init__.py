"""
Media helpers: asynchronous image loading.
"""

from .images import LoadedImage, detect_image_format, load_image, load_from_url_async

__all__ = [
    'LoadedImage', 'detect_image_format', 'load_image', 'load_from_url_async',
]
