"""
Ostomachion: an algebra of homogeneous coordinates and projective transformations of 3D space,
meant as the numeric foundation of paper folding and cutting tools.
"""

import logging

__version__ = version = "0.1.0"

# exposing the public API of the package
from ostomachion.interfaces import (
    Vector,
    Transform,
    ProjectiveTransform,
    AffineTransform,
    LinearTransform,
    TranslationTransform,
    IdentityTransform,
)
from ostomachion.homogeneous_vector import HomogeneousVector4R3
from ostomachion.projective_transform import (
    ProjectiveTransform4R3,
    ProjectiveColumnTransform4R3,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector",
    "Transform",
    "ProjectiveTransform",
    "AffineTransform",
    "LinearTransform",
    "TranslationTransform",
    "IdentityTransform",
    "HomogeneousVector4R3",
    "ProjectiveTransform4R3",
    "ProjectiveColumnTransform4R3",
]
