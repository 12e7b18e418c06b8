"""
Tests for Linear Combinations
"""

from fractions import Fraction

import pytest

from brauer_diagrams.errors import InjectivityViolation
from brauer_diagrams.linear_combination import LinearCombination


def lc(**terms):
    return LinearCombination(terms)


class TestModuleLaws:
    def test_addition_commutes(self):
        a = lc(x=1, y=2)
        b = lc(y=5, z=-3)
        assert a + b == b + a

    def test_addition_associates(self):
        a = lc(x=1, y=2)
        b = lc(y=5, z=-3)
        c = lc(x=7, w=4)
        assert (a + b) + c == a + (b + c)

    def test_additive_inverse_simplifies_to_empty(self):
        a = lc(x=1, y=Fraction(2, 3))
        total = a + (-a)
        assert len(total) == 2
        total.simplify()
        assert len(total) == 0
        assert not total
        assert total == LinearCombination()

    def test_scaling_by_one(self):
        a = lc(x=3, y=-4)
        assert a * 1 == a
        assert 1 * a == a

    def test_scaling_distributes(self):
        a = lc(x=3, y=-4)
        b = lc(y=1)
        assert (a + b) * 2 == a * 2 + b * 2


class TestArithmetic:
    def test_singleton(self):
        s = LinearCombination.singleton("k")
        assert s.coefficient("k") == 1
        assert len(s) == 1
        assert LinearCombination.singleton("k", Fraction(1, 2)).coefficient("k") == Fraction(1, 2)

    def test_subtraction_of_missing_key_negates(self):
        diff = lc(x=1) - lc(y=4)
        assert diff.coefficient("x") == 1
        assert diff.coefficient("y") == -4

    def test_zero_entries_survive_until_simplify(self):
        a = lc(x=1, y=2)
        diff = a - lc(x=1)
        assert "x" in diff
        assert diff.coefficient("x") == 0
        assert diff != lc(y=2)
        diff.simplify()
        assert diff == lc(y=2)

    def test_absent_key_has_zero_coefficient(self):
        assert lc(x=1).coefficient("nope") == 0
        assert lc(x=1).coefficient("nope", default=Fraction(0)) == 0

    def test_binary_operators_do_not_alias(self):
        a = lc(x=1)
        b = a + lc(y=1)
        b += lc(x=10)
        assert a == lc(x=1)
        c = a * 3
        c *= 2
        assert a == lc(x=1)
        assert c == lc(x=6)

    def test_in_place_operators(self):
        a = lc(x=1)
        a += lc(x=2, y=1)
        a -= lc(y=1, z=5)
        a *= 2
        assert a == lc(x=6, y=0, z=-10)

    def test_exact_coefficients(self):
        a = lc(x=Fraction(1, 3)) + lc(x=Fraction(2, 3))
        assert a.coefficient("x") == 1

    def test_complex_coefficients(self):
        a = LinearCombination({"x": complex(1, 2)})
        a.change_coeffs(lambda z: z.conjugate())
        assert a.coefficient("x") == complex(1, -2)


class TestKeyMaps:
    def test_linearly_extend_sums_collisions(self):
        a = lc(x=1, y=2, zz=5)
        pushed = a.linearly_extend(len)
        assert pushed == LinearCombination({1: 3, 2: 5})

    def test_inj_linearly_extend_keeps_coefficients(self):
        a = lc(x=1, y=2)
        pushed = a.inj_linearly_extend(str.upper)
        assert pushed == lc(X=1, Y=2)

    def test_inj_linearly_extend_rejects_collisions(self):
        a = lc(x=1, y=2)
        with pytest.raises(InjectivityViolation):
            a.inj_linearly_extend(lambda key: "same")

    def test_injectivity_violation_is_value_error(self):
        with pytest.raises(ValueError):
            lc(x=1, y=1).inj_linearly_extend(lambda key: 0)


class TestBilinear:
    def test_linear_combine_multiplies_coefficients(self):
        a = lc(a=2, b=3)
        b = lc(c=5)
        assert a.linear_combine(b, lambda k1, k2: k1 + k2) == lc(ac=10, bc=15)

    def test_linear_combine_sums_collisions(self):
        a = lc(a=2, b=3)
        b = lc(c=5)
        assert a.linear_combine(b, lambda k1, k2: "z") == lc(z=25)

    def test_linear_combine_with_empty(self):
        assert lc(a=2).linear_combine(LinearCombination(), lambda k1, k2: k1) == LinearCombination()

    def test_product_uses_key_multiplication(self):
        a = LinearCombination({2: 1, 3: 1})
        assert a * a == LinearCombination({4: 1, 6: 2, 9: 1})

    def test_all_terms_satisfy(self):
        a = LinearCombination({2: 1, 4: 7})
        assert a.all_terms_satisfy(lambda k: k % 2 == 0)
        assert not (a + LinearCombination({3: 1})).all_terms_satisfy(lambda k: k % 2 == 0)
        assert LinearCombination().all_terms_satisfy(lambda k: False)


class TestContainer:
    def test_iteration_and_views(self):
        a = lc(x=1, y=2)
        assert set(a) == {"x", "y"}
        assert set(a.keys()) == {"x", "y"}
        assert sorted(a.values()) == [1, 2]
        assert dict(a.items()) == {"x": 1, "y": 2}

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(lc(x=1))

    def test_repr_truncates(self):
        big = LinearCombination({i: 1 for i in range(20)})
        assert "more" in repr(big)
        assert repr(LinearCombination()) == "LinearCombination(0)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
