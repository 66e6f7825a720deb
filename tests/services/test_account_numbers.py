import random

from db.index import AccountIndex
from services.account_numbers import AccountNumberGenerator, make_rng


class TestAccountNumberGenerator:
    """Tests for AccountNumberGenerator."""

    def test_generated_numbers_have_valid_shape(self, tmp_path):
        generator = AccountNumberGenerator(
            AccountIndex(tmp_path / "index.txt"), random.Random(7)
        )

        numbers = [generator.generate() for _ in range(300)]

        for acc_num in numbers:
            assert acc_num.isdigit()
            assert len(acc_num) in (7, 8, 9)
            assert acc_num[0] != "0"
        # All three lengths are drawn
        assert {len(n) for n in numbers} == {7, 8, 9}

    def test_skips_numbers_already_listed(self, tmp_path):
        index = AccountIndex(tmp_path / "index.txt")
        taken = AccountNumberGenerator(index, random.Random(42)).candidate()
        index.append(taken)

        generator = AccountNumberGenerator(index, random.Random(42))
        acc_num = generator.generate()

        assert acc_num != taken
        assert not index.exists(acc_num)

    def test_same_seed_same_sequence(self, tmp_path):
        index = AccountIndex(tmp_path / "index.txt")
        first = AccountNumberGenerator(index, random.Random(3))
        second = AccountNumberGenerator(index, random.Random(3))

        assert [first.generate() for _ in range(5)] == [
            second.generate() for _ in range(5)
        ]

    def test_make_rng(self):
        assert isinstance(make_rng(), random.Random)

    def test_services_share_one_rng(self, services):
        assert services.account_numbers.rng is services.rng
