from decimal import Decimal

from src.engine.lifestyle import score_lifestyle
from src.models.property import PropertyData


def _listing(**kwargs) -> PropertyData:
    return PropertyData(address="x", price=Decimal("1000000"), **kwargs)


class TestLifestyle:
    def test_neutral(self):
        assert score_lifestyle(_listing()) == Decimal("5")

    def test_quiet_and_pet_friendly(self):
        """5 + (5-1)*0.8 + 1 = 9.2."""
        assert score_lifestyle(_listing(noise_level=1, pet_friendly=True)) == Decimal("9.2")

    def test_noise_penalty_capped(self):
        # (5-10)*0.8 = -4, capped at -3
        assert score_lifestyle(_listing(noise_level=10)) == Decimal("2")

    def test_pets_not_allowed(self):
        assert score_lifestyle(_listing(noise_level=5, pet_friendly=False)) == Decimal("5")

    def test_non_increasing_in_noise(self):
        scores = [score_lifestyle(_listing(noise_level=n)) for n in range(1, 11)]
        assert all(a >= b for a, b in zip(scores, scores[1:]))
