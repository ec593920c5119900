"""Imaging package - pixel buffer conversion and PNG / APNG output."""

from imaging.io import buffer_to_image, build_save_kwargs, save_animation, save_png

__all__ = [
    'buffer_to_image',
    'build_save_kwargs',
    'save_animation',
    'save_png',
]
