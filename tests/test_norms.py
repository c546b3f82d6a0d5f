import math

import pytest

from unfuzzy.norms import (
    BoundedProduct,
    BoundedSum,
    DrasticProduct,
    DrasticSum,
    FamilyAp,
    FamilyFp,
    FamilyHp,
    FamilySp,
    FamilyTp,
    FamilyYp,
    Maximum,
    Minimum,
    Norm,
    Product,
    SNorm,
    TNorm,
    norm_type_name,
)

T_NORMS = [
    Product(),
    Minimum(),
    BoundedProduct(),
    DrasticProduct(),
    FamilyTp(),
    FamilyHp(),
    FamilyFp(),
    FamilyYp(),
    FamilyAp(),
]
S_NORMS = [Maximum(), BoundedSum(), DrasticSum(), FamilySp()]
SAMPLES = [0.0, 0.2, 0.5, 0.8, 1.0]


@pytest.mark.parametrize("norm", T_NORMS, ids=lambda n: type(n).__name__)
@pytest.mark.parametrize("x", SAMPLES)
def test_t_norm_identity_element(norm, x):
    expected = Minimum().operate(x, 1.0)
    assert norm.operate(x, 1.0) == pytest.approx(expected)
    assert norm.operate(1.0, x) == pytest.approx(expected)
    assert expected == pytest.approx(x)


@pytest.mark.parametrize("norm", S_NORMS, ids=lambda n: type(n).__name__)
@pytest.mark.parametrize("x", SAMPLES)
def test_s_norm_identity_element(norm, x):
    expected = Maximum().operate(x, 0.0)
    assert norm.operate(x, 0.0) == pytest.approx(expected)
    assert norm.operate(0.0, x) == pytest.approx(expected)
    assert expected == pytest.approx(x)


@pytest.mark.parametrize("norm", T_NORMS + S_NORMS, ids=lambda n: type(n).__name__)
def test_commutative(norm):
    assert norm.type_name() == norm_type_name(norm.identifier)
    for x in (0.1, 0.3, 0.6, 0.9):
        for y in (0.2, 0.45, 0.7):
            assert norm.operate(x, y) == pytest.approx(norm.operate(y, x))


@pytest.mark.parametrize("norm", T_NORMS, ids=lambda n: type(n).__name__)
def test_t_norm_bounded_by_minimum(norm):
    minimum = Minimum()
    for x in (0.1, 0.3, 0.6, 0.9):
        for y in (0.2, 0.45, 0.7):
            assert norm.operate(x, y) <= minimum.operate(x, y) + 1e-12


@pytest.mark.parametrize("norm", S_NORMS, ids=lambda n: type(n).__name__)
def test_s_norm_bounded_below_by_maximum(norm):
    maximum = Maximum()
    for x in (0.1, 0.3, 0.6, 0.9):
        for y in (0.2, 0.45, 0.7):
            assert norm.operate(x, y) >= maximum.operate(x, y) - 1e-12


def test_minimum_and_maximum_pick_inputs():
    assert Minimum().operate(0.3, 0.7) == 0.3
    assert Maximum().operate(0.3, 0.7) == 0.7


def test_drastic_product_inside_is_zero():
    assert DrasticProduct().operate(0.5, 0.5) == 0


def test_drastic_sum_inside_is_one():
    assert DrasticSum().operate(0.5, 0.5) == 1


def test_bounded_sum_saturates():
    assert BoundedSum().operate(0.7, 0.6) == 1


@pytest.mark.parametrize("family", [FamilyTp(1.0), FamilyHp(1.0), FamilyAp(1.0)])
def test_families_reduce_to_product(family):
    product = Product()
    for x, y in [(0.2, 0.4), (0.5, 0.9), (0.7, 0.3)]:
        assert family.operate(x, y) == pytest.approx(product.operate(x, y))


def test_yager_one_is_bounded_product():
    yager = FamilyYp(1.0)
    bounded = BoundedProduct()
    for x, y in [(0.2, 0.4), (0.5, 0.9), (0.7, 0.8)]:
        assert yager.operate(x, y) == pytest.approx(bounded.operate(x, y))


def test_sugeno_zero_is_bounded_sum():
    sugeno = FamilySp(0.0)
    bounded = BoundedSum()
    for x, y in [(0.2, 0.4), (0.5, 0.9), (0.1, 0.3)]:
        assert sugeno.operate(x, y) == pytest.approx(bounded.operate(x, y))


def test_frank_one_divides_by_zero():
    with pytest.raises(ZeroDivisionError):
        FamilyFp(1.0).operate(0.5, 0.5)


def test_default_parameters():
    assert FamilyFp().parameter == 2.0
    assert FamilyTp().parameter == 1.0
    assert Product().parameter == 0.0


@pytest.mark.parametrize("norm", T_NORMS, ids=lambda n: type(n).__name__)
def test_t_norm_flag(norm):
    assert isinstance(norm, TNorm)
    assert norm.to_s_norm() == Product().to_s_norm() == 1.0


@pytest.mark.parametrize("norm", S_NORMS, ids=lambda n: type(n).__name__)
def test_s_norm_flag(norm):
    assert isinstance(norm, SNorm)
    assert norm.to_s_norm() == Maximum().to_s_norm() == 0.0


@pytest.mark.parametrize(
    "norm, name",
    [
        (Product(), "Product"),
        (Minimum(), "Minimum"),
        (BoundedProduct(), "Bounded Product"),
        (DrasticProduct(), "Drastic Product"),
        (FamilyTp(), "Tp Family"),
        (FamilyHp(), "Hamacher Family"),
        (FamilySp(), "Sugeno Family"),
        (FamilyFp(), "Frank Family"),
        (FamilyYp(), "Yager Family"),
        (FamilyAp(), "Dubois-Prade Family"),
        (Maximum(), "Maximum"),
        (BoundedSum(), "Bounded Sum"),
        (DrasticSum(), "Drastic Sum"),
    ],
)
def test_type_names(norm, name):
    assert norm.type_name() == name
    assert norm_type_name(norm.identifier) == name


def test_unknown_type_name_is_empty():
    assert norm_type_name(13) == ""
    assert norm_type_name(-1) == ""


def test_code_cpp_plain():
    assert Product().code_cpp() == "Producto();"
    assert Minimum().code_cpp() == "Minimo();"
    assert Maximum().code_cpp() == "Maximo();"
    assert BoundedSum().code_cpp() == "SumaAcotada();"
    assert DrasticSum().code_cpp() == "SumaDrastica();"


def test_code_cpp_with_parameter():
    assert FamilyTp(2.5).code_cpp() == "FamiliaTp(2.5);"
    assert FamilySp(2.5).code_cpp() == "FamiliaSp(2.5);"


def test_code_c_parameter_line():
    code = FamilyYp(2.5).code_c()
    assert code.splitlines()[0] == "    double p=2.5;"
    assert code.endswith("z=1-z;")


def test_code_c_product():
    assert Product().code_c() == "    z=x*y;"


def test_norm_is_abstract():
    with pytest.raises(TypeError):
        Norm()


def test_math_domain_error_for_negative_base():
    with pytest.raises(ValueError):
        FamilyTp(0.5).operate(2.0, 0.5)
    assert math.isfinite(FamilyTp(0.5).operate(0.5, 0.5))