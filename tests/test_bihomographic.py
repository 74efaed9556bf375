"""Tests for the two-operand Gosper engine."""

from itertools import islice

from cfrac.arithmetic import add, from_fraction, from_int, mul
from cfrac.bihomographic import Bihomographic, bihom
from cfrac.constants import E, PHI, SQRT2
from cfrac.convergents import convergents
from cfrac.homographic import hom
from cfrac.stream import CF, INFINITY


class TestShortcuts:

    def test_identity_x(self):
        assert bihom(0, 1, 0, 0, 0, 0, 0, 1, PHI, E) is PHI

    def test_identity_y(self):
        assert bihom(0, 0, 1, 0, 0, 0, 0, 1, PHI, E) is E

    def test_zero_denominator_is_infinity(self):
        assert bihom(1, 1, 1, 1, 0, 0, 0, 0, PHI, E) is INFINITY


class TestFallback:

    def test_x_infinite_projects_onto_y(self):
        # x -> inf: (a*y + b) / (e*y + f)
        y = from_fraction(7, 3)
        z = bihom(2, 1, 0, 3, 1, 0, 1, 1, INFINITY, y)
        assert z.take(20) == hom(2, 1, 1, 0, y).take(20)

    def test_y_infinite_projects_onto_x(self):
        # y -> inf: (a*x + c) / (e*x + g)
        x = from_fraction(7, 3)
        z = bihom(2, 1, 3, 0, 1, 0, 1, 1, x, INFINITY)
        assert z.take(20) == hom(2, 3, 1, 1, x).take(20)

    def test_finite_and_infinite_operand(self):
        # phi + 3 through both engines
        assert add(PHI, from_int(3)).take(12) == hom(1, 3, 0, 1, PHI).take(12)
        assert add(from_int(3), PHI).take(12) == hom(1, 3, 0, 1, PHI).take(12)


class TestTransform:

    def test_golden_ratio_squared(self):
        # phi^2 = phi + 1 = [2; 1, 1, ...]
        assert mul(PHI, PHI).take(8) == [2, 1, 1, 1, 1, 1, 1, 1]

    def test_golden_ratio_squared_convergents(self):
        squared = list(islice(convergents(mul(PHI, PHI)), 10))
        successor = list(islice(convergents(add(PHI, from_int(1))), 10))
        assert squared == successor

    def test_same_value_as_separate_streams(self):
        golden = CF(iter([1] * 40))
        assert mul(golden, PHI).take(8) == mul(PHI, PHI).take(8)

    def test_sqrt2_plus_one(self):
        # sqrt(2) + 1 = [2; 2, 2, ...]
        assert add(SQRT2, from_int(1)).take(8) == [2] * 8

    def test_general_coefficients(self, rationals):
        # (x*y + 2x + 1) / (x + y + 3) on non-negative rationals
        values = [abs(r) for r in rationals[:12]]
        for rx in values:
            for ry in values:
                x = from_fraction(rx.numerator, rx.denominator)
                y = from_fraction(ry.numerator, ry.denominator)
                z = bihom(1, 2, 0, 1, 0, 1, 1, 3, x, y)
                assert z == (rx * ry + 2 * rx + 1) / (rx + ry + 3)

    def test_iterator_protocol(self):
        engine = Bihomographic(0, 1, 1, 0, 0, 0, 0, 1, from_int(2), from_int(3))
        assert iter(engine) is engine
        assert list(engine) == [5]


class TestLaziness:

    @staticmethod
    def counted(first, rest, pulls):
        def terms():
            pulls.append(first)
            yield first
            while True:
                pulls.append(rest)
                yield rest
        return CF(terms())

    def test_reads_only_what_it_needs(self):
        x_pulls, y_pulls = [], []
        x = self.counted(1, 1, x_pulls)      # phi
        y = self.counted(1, 2, y_pulls)      # sqrt(2)
        z = add(x, y)

        assert x_pulls == [] and y_pulls == []
        assert z.term(0) == 3
        assert (len(x_pulls), len(y_pulls)) == (6, 4)

        assert z.take(5) == [3, 31, 98, 1, 17]
        assert (len(x_pulls), len(y_pulls)) == (30, 17)

    def test_cached_output_reads_nothing(self):
        x_pulls, y_pulls = [], []
        z = add(self.counted(1, 1, x_pulls), self.counted(1, 2, y_pulls))
        z.take(5)
        before = (len(x_pulls), len(y_pulls))
        assert z.take(5) == [3, 31, 98, 1, 17]
        assert (len(x_pulls), len(y_pulls)) == before
