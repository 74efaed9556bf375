"""Tests for the single-operand Gosper engine."""

import itertools

from cfrac.arithmetic import from_fraction, pred, succ
from cfrac.constants import PHI, E
from cfrac.homographic import Homographic, hom, quot
from cfrac.stream import CF, INFINITY


class TestQuot:

    def test_truncates_toward_zero(self):
        assert quot(7, 2) == 3
        assert quot(-7, 2) == -3
        assert quot(7, -2) == -3
        assert quot(-7, -2) == 3
        assert quot(0, 5) == 0
        assert quot(0, -5) == 0

    def test_differs_from_floor(self):
        assert quot(-7, 2) != -7 // 2


class TestShortcuts:

    def test_identity_returns_operand(self):
        assert hom(1, 0, 0, 1, PHI) is PHI
        x = CF([3, 7, 15, 1, 292])
        assert hom(1, 0, 0, 1, x).take(10) == [3, 7, 15, 1, 292]

    def test_zero_denominator_is_infinity(self):
        assert hom(1, 2, 0, 0, E) is INFINITY

    def test_identity_reached_mid_stream(self):
        # 1/x on [0; 2] absorbs the 0 and lands on (1, 0, 0, 1)
        assert hom(0, 1, 1, 0, CF([0, 2])).take(5) == [2]


class TestTransform:

    def test_successor_of_rational(self):
        # 3/7 + 1 = 10/7 = [1; 2, 3]
        assert succ(from_fraction(3, 7)).take(10) == [1, 2, 3]

    def test_predecessor_of_negative(self):
        # -1/2 - 1 = -3/2
        assert pred(from_fraction(-1, 2)).take(10) == [-1, -2]

    def test_negation_uses_truncation(self):
        # -[2; 2] = -5/2 -> [-2, -2], not the floored [-3; 2]
        assert hom(-1, 0, 0, 1, CF([2, 2])).take(10) == [-2, -2]

    def test_exhausted_operand(self):
        # x = inf: 2x -> inf, x/x -> 1
        assert hom(2, 0, 0, 1, INFINITY).take(5) == []
        assert hom(1, 0, 1, 0, INFINITY).take(5) == [1]

    def test_matches_rational_arithmetic(self, rationals):
        for r in rationals:
            x = from_fraction(r.numerator, r.denominator)
            assert hom(2, 1, 0, 3, x) == (2 * r + 1) / 3

    def test_matches_rational_arithmetic_nonnegative(self, rationals):
        # Corner bounds a/c, b/d assume the unread operand lies in [0, inf]
        for r in map(abs, rationals):
            x = from_fraction(r.numerator, r.denominator)
            assert hom(3, 1, 2, 5, x) == (3 * r + 1) / (2 * r + 5)

    def test_infinite_operand(self):
        assert succ(PHI).take(6) == [2, 1, 1, 1, 1, 1]

    def test_reads_only_what_it_needs(self):
        pulls = []

        def ones():
            for _ in itertools.count():
                pulls.append(1)
                yield 1

        z = CF(Homographic(1, 1, 0, 1, CF(ones())))
        assert z.term(0) == 2
        assert len(pulls) == 4
