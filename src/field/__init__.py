"""Scalar fields: grid sampling and the animated metaball field."""

from field.blobs import Blob, default_blobs, energy, step_blobs
from field.sampler import sample_grid

__all__ = [
    'Blob',
    'default_blobs',
    'energy',
    'sample_grid',
    'step_blobs',
]
