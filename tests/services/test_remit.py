from decimal import Decimal

import pytest

from errors import (
    AuthenticationError,
    InsufficientFundsError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from tests.helpers import open_account


def balance_of(services, acc_num):
    return services.accounts.load(acc_num).balance


@pytest.fixture
def pair(services):
    """A funded savings sender and an empty current receiver."""
    sender = open_account(services, name="Jane Doe", pin="1111", balance="100.00")
    receiver = open_account(
        services, name="John Smith", account_type="current", pin="2222"
    )
    return sender, receiver


class TestRemit:
    """Tests for BankingService.remit."""

    def test_savings_to_current_charges_two_percent(self, services, pair):
        sender, receiver = pair

        receipt = services.banking.remit(
            "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("20.00")
        )

        assert receipt.fee == Decimal("0.40")
        assert receipt.balance == Decimal("79.60")
        assert receipt.counterparty == receiver.acc_num
        assert receipt.counterparty_balance == Decimal("20.00")
        assert balance_of(services, sender.acc_num) == Decimal("79.60")
        assert balance_of(services, receiver.acc_num) == Decimal("20.00")
        assert services.transaction_log.entries()[-1].endswith(
            f"REMIT RM20.00 from {sender.acc_num} to {receiver.acc_num} "
            "(Fee: RM0.40) SenderNewBal: RM79.60"
        )

    def test_current_to_savings_charges_three_percent(self, services):
        sender = open_account(services, account_type="current", balance="200.00")
        receiver = open_account(services, name="John Smith", pin="2222")

        receipt = services.banking.remit(
            "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("100.00")
        )

        assert receipt.fee == Decimal("3.00")
        assert balance_of(services, sender.acc_num) == Decimal("97.00")
        assert balance_of(services, receiver.acc_num) == Decimal("100.00")

    @pytest.mark.parametrize("account_type", ["savings", "current"])
    def test_same_type_is_free(self, services, account_type):
        sender = open_account(services, account_type=account_type, balance="50.00")
        receiver = open_account(services, name="John Smith", account_type=account_type)

        receipt = services.banking.remit(
            "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("50.00")
        )

        assert receipt.fee == Decimal("0.00")
        assert balance_of(services, sender.acc_num) == Decimal("0.00")
        assert balance_of(services, receiver.acc_num) == Decimal("50.00")

    def test_fee_is_not_credited_anywhere(self, services, pair):
        sender, receiver = pair
        total_before = sum(a.balance for a in services.accounts.find_all())

        services.banking.remit(
            "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("50.00")
        )

        total_after = sum(a.balance for a in services.accounts.find_all())
        assert total_before - total_after == Decimal("1.00")

    def test_amount_plus_fee_must_be_covered(self, services, pair):
        sender, receiver = pair

        # 99.00 + 1.98 fee exceeds 100.00
        with pytest.raises(InsufficientFundsError):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("99.00")
            )

        assert balance_of(services, sender.acc_num) == Decimal("100.00")
        assert balance_of(services, receiver.acc_num) == Decimal("0.00")

    def test_amount_plus_fee_equal_to_balance(self, services):
        sender = open_account(services, balance="102.00")
        receiver = open_account(services, name="John Smith", account_type="current")

        services.banking.remit(
            "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("100.00")
        )

        assert balance_of(services, sender.acc_num) == Decimal("0.00")

    def test_name_match_ignores_case(self, services, pair):
        sender, receiver = pair

        services.banking.remit(
            "jANE dOE", sender.acc_num, "1111", receiver.acc_num, Decimal("1.00")
        )

        assert balance_of(services, receiver.acc_num) == Decimal("1.00")

    @pytest.mark.parametrize("claimed", ["Jane", "Jane Doe Smith", "John Smith"])
    def test_name_must_match_in_full(self, services, pair, claimed):
        sender, receiver = pair

        with pytest.raises(AuthenticationError, match="name does not match"):
            services.banking.remit(
                claimed, sender.acc_num, "1111", receiver.acc_num, Decimal("1.00")
            )

    def test_empty_name(self, services, pair):
        sender, receiver = pair

        with pytest.raises(ValidationError):
            services.banking.remit("", sender.acc_num, "1111", receiver.acc_num, Decimal("1"))

    def test_wrong_sender_pin(self, services, pair):
        sender, receiver = pair

        with pytest.raises(AuthenticationError):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "2222", receiver.acc_num, Decimal("1.00")
            )

        assert balance_of(services, sender.acc_num) == Decimal("100.00")

    def test_huge_amount_is_insufficient_funds(self, services, pair):
        sender, receiver = pair

        with pytest.raises(InsufficientFundsError):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("9" * 30)
            )

        assert balance_of(services, sender.acc_num) == Decimal("100.00")
        assert balance_of(services, receiver.acc_num) == Decimal("0.00")

    def test_receiver_must_differ_from_sender(self, services, pair):
        sender, _ = pair

        with pytest.raises(ValidationError, match="different accounts"):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "1111", sender.acc_num, Decimal("1.00")
            )

    def test_unknown_receiver(self, services, pair):
        sender, _ = pair

        with pytest.raises(NotFoundError, match="not found"):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "1111", "1234567", Decimal("1.00")
            )

    def test_malformed_receiver(self, services, pair):
        sender, _ = pair

        with pytest.raises(ValidationError, match="receiver account format"):
            services.banking.remit("Jane Doe", sender.acc_num, "1111", "12345", Decimal("1"))

    def test_receiver_save_failure_leaves_sender_debited(self, services, pair, monkeypatch):
        sender, receiver = pair
        original_save = services.accounts.save

        def save_sender_only(account):
            if account.acc_num == receiver.acc_num:
                raise PersistenceError("receiver file locked")
            original_save(account)

        monkeypatch.setattr(services.accounts, "save", save_sender_only)

        with pytest.raises(PersistenceError, match="receiver file locked"):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("20.00")
            )

        # No rollback: the debit stays, the credit never happened
        assert balance_of(services, sender.acc_num) == Decimal("79.60")
        assert balance_of(services, receiver.acc_num) == Decimal("0.00")
        assert "REMIT FAILED" in services.transaction_log.entries()[-1]

    def test_sender_save_failure_changes_nothing(self, services, pair, monkeypatch):
        sender, receiver = pair
        saved = []

        def fail(account):
            saved.append(account.acc_num)
            raise PersistenceError("sender file locked")

        monkeypatch.setattr(services.accounts, "save", fail)

        with pytest.raises(PersistenceError):
            services.banking.remit(
                "Jane Doe", sender.acc_num, "1111", receiver.acc_num, Decimal("20.00")
            )

        assert saved == [sender.acc_num]
        monkeypatch.undo()
        assert balance_of(services, sender.acc_num) == Decimal("100.00")
        assert balance_of(services, receiver.acc_num) == Decimal("0.00")


class TestScenario:
    """End-to-end walk through create, deposit, withdraw and remit."""

    def test_full_scenario(self, services):
        banking = services.banking

        jane = banking.create_account("Jane Doe", "1234567", "savings", "1111")
        assert jane.balance == Decimal("0.00")
        assert 7 <= len(jane.acc_num) <= 9

        assert banking.deposit(jane.acc_num, "1111", Decimal("100.00")).balance == Decimal(
            "100.00"
        )

        with pytest.raises(InsufficientFundsError):
            banking.withdraw(jane.acc_num, "1111", Decimal("150.00"))
        assert balance_of(services, jane.acc_num) == Decimal("100.00")

        assert banking.withdraw(jane.acc_num, "1111", Decimal("50.00")).balance == Decimal(
            "50.00"
        )

        john = banking.create_account("John Smith", "7654321", "current", "2222")
        receipt = banking.remit(
            "Jane Doe", jane.acc_num, "1111", john.acc_num, Decimal("20.00")
        )

        assert receipt.fee == Decimal("0.40")
        assert balance_of(services, jane.acc_num) == Decimal("29.60")
        assert balance_of(services, john.acc_num) == Decimal("20.00")

        operations = [entry.split("] ", 1)[1].split()[0] for entry in services.transaction_log.entries()]
        assert operations == ["CREATE", "DEPOSIT", "WITHDRAW", "CREATE", "REMIT"]
