"""
Тесты для Generator Representation

Проверяет:
1. sqrt-pair: det ρ(a) = det ρ(b) = 1, форма матриц
2. Мемоизированные обратные: ρ(a)·ρ(A) ≈ I
3. DegenerateMatrix при z = ±1
4. Тривиальное представление и реестр
"""

import pytest

from src.core.domain.word import Letter
from src.core.errors import DegenerateMatrix
from src.core.math.matrix2 import Matrix2
from src.core.math.numerical_safeguards import (
    is_close_complex,
    matrices_close,
    precision_tolerance,
)
from src.core.math.precision import PrecisionContext
from src.representation.generators import (
    DEFAULT_REPRESENTATION,
    REPRESENTATIONS,
    GeneratorImages,
    SqrtPairRepresentation,
    TrivialRepresentation,
    get_representation,
)


@pytest.fixture
def ctx() -> PrecisionContext:
    return PrecisionContext(100)


class TestSqrtPair:
    """Тесты семейства sqrt-pair"""

    @pytest.mark.parametrize("z", [(1, 2), (0.3, 0.7), ("-2.5", "0"), (0, 1)])
    def test_unit_determinant(self, ctx: PrecisionContext, z) -> None:
        a, b = SqrtPairRepresentation().generators(ctx, ctx.complex(*z))
        tol = precision_tolerance(ctx)
        assert is_close_complex(a.determinant(), ctx.one, abs_tol=tol)
        assert is_close_complex(b.determinant(), ctx.one, abs_tol=tol)

    def test_matrix_shape(self, ctx: PrecisionContext) -> None:
        """ρ(a) симметрична с равной диагональю, у ρ(b) m10 = −m01"""
        a, b = SqrtPairRepresentation().generators(ctx, ctx.complex(1, 2))
        assert a.m00 == a.m11
        assert a.m01 == a.m10
        assert b.m00 == b.m11
        assert b.m10 == -b.m01

    def test_rho_a_entries(self, ctx: PrecisionContext) -> None:
        """c = 1/sqrt(z² − 1), ρ(a) = [[c·z, c], [c, c·z]]"""
        z = ctx.complex(1, 2)
        a, _ = SqrtPairRepresentation().generators(ctx, z)
        c = 1 / ctx.sqrt(z * z - 1)
        assert a.m01 == c
        assert a.m00 == c * z

    @pytest.mark.parametrize("z", [(1, 0), (-1, 0)])
    def test_undefined_at_plus_minus_one(self, ctx: PrecisionContext, z) -> None:
        with pytest.raises(DegenerateMatrix, match="undefined"):
            SqrtPairRepresentation().images(ctx, ctx.complex(*z))


class TestGeneratorImages:
    """Тесты GeneratorImages"""

    def test_inverses_are_memoized(self, ctx: PrecisionContext) -> None:
        images = SqrtPairRepresentation().images(ctx, ctx.complex(1, 2))
        identity = Matrix2.identity(ctx)
        tol = precision_tolerance(ctx)

        assert matrices_close(images.a.multiply(images.a_inv), identity, abs_tol=tol)
        assert matrices_close(images.b_inv.multiply(images.b), identity, abs_tol=tol)

    def test_image_by_letter(self, ctx: PrecisionContext) -> None:
        images = SqrtPairRepresentation().images(ctx, ctx.complex(1, 2))
        assert images.image(Letter.a) is images.a
        assert images.image("b") is images.b
        assert images.image("A") is images.a_inv
        assert images.image(Letter.B) is images.b_inv

    def test_image_rejects_unknown_letter(self, ctx: PrecisionContext) -> None:
        images = TrivialRepresentation().images(ctx, ctx.zero)
        with pytest.raises(ValueError):
            images.image("c")

    def test_singular_generator_raises(self, ctx: PrecisionContext) -> None:
        singular = Matrix2(ctx.one, ctx.one, ctx.one, ctx.one)
        with pytest.raises(DegenerateMatrix):
            GeneratorImages.from_generators(ctx, singular, Matrix2.identity(ctx))

    def test_inverse_images_are_det_times_adjugate(self, ctx: PrecisionContext) -> None:
        """Семейство обращает образы как det · adj"""
        images = SqrtPairRepresentation().images(ctx, ctx.complex(1, 2))
        assert images.a_inv == images.a.adjugate().scale(images.a.determinant())
        assert images.b_inv == images.b.adjugate().scale(images.b.determinant())

    def test_custom_inverse(self, ctx: PrecisionContext) -> None:
        a = Matrix2(ctx.complex(2), ctx.zero, ctx.zero, ctx.complex(4))
        images = GeneratorImages.from_generators(ctx, a, a, invert=Matrix2.inverse)
        assert images.a_inv == Matrix2(ctx.complex("0.5"), ctx.zero, ctx.zero, ctx.complex("0.25"))

    def test_inverse_image_hook(self, ctx: PrecisionContext) -> None:
        """Подкласс может заменить способ обращения"""

        class ScaledRepresentation(TrivialRepresentation):
            name = "scaled"

            def generators(self, ctx, z):
                m = Matrix2(ctx.complex(2), ctx.zero, ctx.zero, ctx.complex(2))
                return m, m

            def inverse_image(self, m):
                return m.inverse()

        images = ScaledRepresentation().images(ctx, ctx.zero)
        assert images.a_inv.m00 == ctx.complex("0.5")
        assert images.a.multiply(images.a_inv) == Matrix2.identity(ctx)

    def test_inverse_image_singular_raises(self, ctx: PrecisionContext) -> None:
        with pytest.raises(DegenerateMatrix):
            TrivialRepresentation().inverse_image(Matrix2(ctx.zero, ctx.zero, ctx.zero, ctx.zero))


class TestRegistry:
    """Тесты тривиального представления и реестра"""

    def test_trivial_maps_to_identity(self, ctx: PrecisionContext) -> None:
        images = TrivialRepresentation().images(ctx, ctx.complex(1, 0))
        identity = Matrix2.identity(ctx)
        assert images.a == identity
        assert images.b_inv == identity

    def test_default(self) -> None:
        assert DEFAULT_REPRESENTATION == "sqrt-pair"
        assert isinstance(get_representation(), SqrtPairRepresentation)

    def test_lookup_by_name(self) -> None:
        assert set(REPRESENTATIONS) == {"sqrt-pair", "trivial"}
        assert isinstance(get_representation("trivial"), TrivialRepresentation)

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown representation"):
            get_representation("hyperbolic")
