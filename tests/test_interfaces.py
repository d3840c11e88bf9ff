import unittest
from ostomachion import (
    Vector,
    Transform,
    ProjectiveTransform,
    AffineTransform,
    LinearTransform,
    TranslationTransform,
    IdentityTransform,
    HomogeneousVector4R3,
    ProjectiveTransform4R3,
    ProjectiveColumnTransform4R3,
)


def require_affine(t):
    if not isinstance(t, AffineTransform):
        raise TypeError(f"expected an affine transform, got {type(t).__name__}")
    return t


def require_linear(t):
    if not isinstance(t, LinearTransform):
        raise TypeError(f"expected a linear transform, got {type(t).__name__}")
    return t


class _Identity(IdentityTransform[HomogeneousVector4R3, HomogeneousVector4R3, float]):
    """Minimal identity map, only here to populate the bottom of the lattice."""

    def __mul__(self, other):
        return other

    def __rmul__(self, vector):
        return vector

    def __eq__(self, other):
        return isinstance(other, _Identity)

    def __hash__(self):
        return 0


class _Shift(TranslationTransform[HomogeneousVector4R3, HomogeneousVector4R3, float]):
    def __init__(self, offset):
        self.offset = offset

    def __mul__(self, other):
        return _Shift(self.offset + other.offset)

    def __rmul__(self, vector):
        return vector + self.offset

    def __eq__(self, other):
        return isinstance(other, _Shift) and self.offset == other.offset

    def __hash__(self):
        return hash(self.offset)


class TestTaxonomy(unittest.TestCase):
    def test_lattice(self):
        self.assertTrue(issubclass(ProjectiveTransform, Transform))
        self.assertTrue(issubclass(AffineTransform, ProjectiveTransform))
        self.assertTrue(issubclass(LinearTransform, AffineTransform))
        self.assertTrue(issubclass(TranslationTransform, AffineTransform))
        self.assertTrue(issubclass(IdentityTransform, LinearTransform))
        self.assertTrue(issubclass(IdentityTransform, TranslationTransform))

    def test_siblings_do_not_subsume_each_other(self):
        self.assertFalse(issubclass(LinearTransform, TranslationTransform))
        self.assertFalse(issubclass(TranslationTransform, LinearTransform))
        self.assertFalse(issubclass(AffineTransform, LinearTransform))
        self.assertFalse(issubclass(ProjectiveTransform, AffineTransform))

    def test_markers_add_no_operations(self):
        base = set(Transform.__abstractmethods__)
        for marker in (ProjectiveTransform, AffineTransform, LinearTransform,
                       TranslationTransform, IdentityTransform):
            self.assertEqual(set(marker.__abstractmethods__), base)

    def test_affine_requirement_accepts_narrower_kinds(self):
        shift = _Shift(HomogeneousVector4R3(1, 0, 0))
        identity = _Identity()
        self.assertIs(require_affine(shift), shift)
        self.assertIs(require_affine(identity), identity)
        self.assertIs(require_linear(identity), identity)

    def test_linear_requirement_rejects_translation_and_projective(self):
        with self.assertRaises(TypeError):
            require_linear(_Shift(HomogeneousVector4R3(1, 0, 0)))
        with self.assertRaises(TypeError):
            require_linear(ProjectiveTransform4R3.identity())
        with self.assertRaises(TypeError):
            require_affine(ProjectiveColumnTransform4R3.identity())

    def test_concrete_transforms_are_projective(self):
        for cls in (ProjectiveTransform4R3, ProjectiveColumnTransform4R3):
            self.assertIsInstance(cls.identity(), ProjectiveTransform)
            self.assertNotIsInstance(cls.identity(), AffineTransform)

    def test_incomplete_transform_cannot_be_instantiated(self):
        class Partial(LinearTransform):
            def __mul__(self, other):
                return self

        with self.assertRaises(TypeError):
            Partial()


class TestVectorCapability(unittest.TestCase):
    def test_homogeneous_vector_is_a_vector(self):
        self.assertIsInstance(HomogeneousVector4R3(1, 2, 3), Vector)

    def test_vector_is_abstract(self):
        with self.assertRaises(TypeError):
            Vector()

    def test_generic_over_identities(self):
        def total(cls, vectors):
            out = cls.additive_identity()
            for v in vectors:
                out = out + v * cls.multiplicative_identity()
            return out

        vectors = [HomogeneousVector4R3(1, 2, 3), HomogeneousVector4R3(2, 0, 0, 2)]
        self.assertEqual(total(HomogeneousVector4R3, vectors), HomogeneousVector4R3(2, 2, 3))


if __name__ == "__main__":
    unittest.main()
