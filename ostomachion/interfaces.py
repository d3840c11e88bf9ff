# interfaces.py

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

ScalarT = TypeVar("ScalarT")
InT = TypeVar("InT", bound="Vector")
OutT = TypeVar("OutT", bound="Vector")
VectorT = TypeVar("VectorT", bound="Vector")
TransformT = TypeVar("TransformT", bound="Transform")


class Vector(ABC, Generic[ScalarT]):
    """
    A value type that behaves as a vector over the scalar field ``ScalarT``.

    Implementations are immutable and every operator below is total: no
    combination of operands may raise.
    """
    __slots__ = ()

    @classmethod
    @abstractmethod
    def additive_identity(cls: type[VectorT]) -> VectorT:
        """The zero vector."""

    @classmethod
    @abstractmethod
    def multiplicative_identity(cls) -> ScalarT:
        """The unit scalar."""

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...

    @abstractmethod
    def __add__(self: VectorT, other: VectorT) -> VectorT: ...

    @abstractmethod
    def __sub__(self: VectorT, other: VectorT) -> VectorT: ...

    @abstractmethod
    def __neg__(self: VectorT) -> VectorT: ...

    @abstractmethod
    def __pos__(self: VectorT) -> VectorT: ...

    @abstractmethod
    def __mul__(self: VectorT, scalar: ScalarT) -> VectorT: ...

    @abstractmethod
    def __truediv__(self: VectorT, scalar: ScalarT) -> VectorT: ...


class Transform(ABC, Generic[InT, OutT, ScalarT]):
    """
    A value type that maps vectors of type ``InT`` onto vectors of type ``OutT``.

    ``a * b`` composes two transforms (apply ``a``, then ``b``) and
    ``v * t`` applies ``t`` to the vector ``v``.
    """
    __slots__ = ()

    @abstractmethod
    def __mul__(self: TransformT, other: TransformT) -> TransformT:
        """Computes the composition of two transforms."""

    @abstractmethod
    def __rmul__(self, vector: InT) -> OutT:
        """Applies this transform to ``vector``."""

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...


###########
# Taxonomy markers. None of these add behaviour; they only narrow which
# transforms a caller will accept.
#

class ProjectiveTransform(Transform[InT, OutT, ScalarT]):
    """A transformation that preserves straight lines."""
    __slots__ = ()


class AffineTransform(ProjectiveTransform[InT, OutT, ScalarT]):
    """A transformation that preserves parallelism and ratios of distances."""
    __slots__ = ()


class LinearTransform(AffineTransform[InT, OutT, ScalarT]):
    """A transformation that preserves vector addition and scalar multiplication."""
    __slots__ = ()


class TranslationTransform(AffineTransform[InT, OutT, ScalarT]):
    """A transformation that preserves shape, size, and orientation."""
    __slots__ = ()


class IdentityTransform(LinearTransform[InT, OutT, ScalarT], TranslationTransform[InT, OutT, ScalarT]):
    """The identity transformation."""
    __slots__ = ()
