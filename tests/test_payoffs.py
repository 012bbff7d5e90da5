"""Tests for payoff matrices."""

import numpy as np
import pytest

from pdsim.game.errors import InvalidConfig
from pdsim.game.payoffs import CLASSIC, PayoffMatrix


class TestConstruction:
    def test_values(self):
        payoffs = PayoffMatrix(3, 0, 5, 1)
        assert payoffs.values == (3.0, 0.0, 5.0, 1.0)

    def test_from_sequence(self):
        assert PayoffMatrix.from_sequence([3, 0, 5, 1]) == CLASSIC

    def test_from_sequence_wrong_length(self):
        with pytest.raises(InvalidConfig):
            PayoffMatrix.from_sequence([3, 0, 5])

    def test_from_sequence_not_iterable(self):
        with pytest.raises(InvalidConfig):
            PayoffMatrix.from_sequence(5)

    def test_non_numeric(self):
        with pytest.raises(InvalidConfig):
            PayoffMatrix('x', 0, 5, 1)

    def test_non_finite(self):
        with pytest.raises(InvalidConfig):
            PayoffMatrix(np.nan, 0, 5, 1)

    def test_matrix_is_read_only(self):
        with pytest.raises(ValueError):
            CLASSIC.mat[0, 0, 0] = 10


class TestDilemmaCondition:
    def test_satisfied(self, dilemma):
        assert dilemma.satisfies_dilemma()

    def test_not_enforced(self):
        payoffs = PayoffMatrix(5, 0, 3, 1)
        assert not payoffs.satisfies_dilemma()
        assert payoffs.values == (5.0, 0.0, 3.0, 1.0)


class TestPayoff:
    def test_both_cooperate(self):
        assert CLASSIC.payoff((False, False)) == (3, 3)

    def test_seat_zero_cooperates(self):
        assert CLASSIC.payoff((False, True)) == (0, 5)

    def test_seat_zero_competes(self):
        assert CLASSIC.payoff((True, False)) == (5, 0)

    def test_both_compete(self):
        assert CLASSIC.payoff((True, True)) == (1, 1)

    def test_scores_from_histogram(self):
        # common = 2*3 + 4*1 = 10
        assert CLASSIC.scores([2, 1, 3, 4]) == (10 + 0 + 15, 10 + 5 + 0)

    def test_scores_bad_histogram(self):
        with pytest.raises(ValueError):
            CLASSIC.scores([1, 2, 3])


class TestDisplay:
    def test_frame(self):
        df = CLASSIC.to_frame()
        assert df.loc['cooperation', 'competition'] == (0.0, 5.0)
        assert df.loc['competition', 'cooperation'] == (5.0, 0.0)

    def test_repr(self):
        assert "Prisoner's Dilemma" in repr(CLASSIC)
