"""Tests for PIN hashing and the credential service."""

import pytest

from securebank.domain.credentials import CredentialService, compute_hash
from securebank.domain.errors import InputExhaustedError


class TestComputeHash:
    def test_known_values(self):
        assert compute_hash(5, 4321) == 5864395
        assert compute_hash(1, 1) == 5859943

    def test_deterministic(self):
        assert compute_hash(17, 2468) == compute_hash(17, 2468)

    def test_salted_by_account_number(self):
        for pin in (1, 1234, 4321, 9999):
            hashes = {compute_hash(account, pin) for account in range(1, 101)}
            assert len(hashes) == 100

    def test_truncated_to_32_bits(self):
        value = compute_hash(2**40, 2**40)
        assert 0 <= value <= 0xFFFFFFFF


class TestAuthenticate:
    def test_no_pin_set_grants_access(self, credential_service, prompter):
        assert credential_service.authenticate(3) is True
        assert prompter.prompts == []
        assert any("No PIN set" in notice for notice in prompter.notices)

    def test_correct_pin(self, temp_db, credential_service, prompter):
        temp_db.write_credential(5, compute_hash(5, 4321))
        prompter.feed("4321")

        assert credential_service.authenticate(5) is True
        assert ">> Identity Verified." in prompter.notices

    def test_succeeds_on_third_attempt(self, temp_db, credential_service, prompter):
        temp_db.write_credential(5, compute_hash(5, 4321))
        prompter.feed("1111", "2222", "4321")

        assert credential_service.authenticate(5) is True
        assert len(prompter.prompts) == 3

    def test_fails_after_exactly_three_attempts(self, temp_db, credential_service, prompter):
        temp_db.write_credential(5, compute_hash(5, 4321))
        prompter.feed("1111", "2222", "3333", "4321")

        assert credential_service.authenticate(5) is False
        assert len(prompter.prompts) == 3
        # The fourth (correct) answer is never read
        assert prompter.answers == ["4321"]
        assert ">> Incorrect PIN. (3/3 attempts)" in prompter.notices

    def test_malformed_input_uses_an_attempt(self, temp_db, credential_service, prompter):
        temp_db.write_credential(5, compute_hash(5, 4321))
        prompter.feed("abc", "", "12x")

        assert credential_service.authenticate(5) is False
        assert prompter.notices.count("Invalid input format.") == 3

    def test_pin_from_another_account_rejected(self, temp_db, credential_service, prompter):
        temp_db.write_credential(5, compute_hash(6, 4321))
        prompter.feed("4321", "4321", "4321")

        assert credential_service.authenticate(5) is False

    def test_end_of_input_aborts(self, temp_db, credential_service, prompter):
        temp_db.write_credential(5, compute_hash(5, 4321))
        prompter.feed("1111")

        with pytest.raises(InputExhaustedError):
            credential_service.authenticate(5)

    def test_custom_attempt_limit(self, temp_db, prompter):
        service = CredentialService(temp_db, prompter, max_attempts=1)
        temp_db.write_credential(5, compute_hash(5, 4321))
        prompter.feed("1111", "4321")

        assert service.authenticate(5) is False
        assert len(prompter.prompts) == 1


class TestSetNewCredential:
    def test_returns_hash_of_confirmed_pin(self, credential_service, prompter):
        prompter.feed("4321", "4321")

        assert credential_service.set_new_credential(5) == compute_hash(5, 4321)

    def test_does_not_write(self, temp_db, credential_service, prompter):
        prompter.feed("4321", "4321")
        credential_service.set_new_credential(5)

        assert temp_db.read_credential(5) == 0

    def test_rejects_pin_equal_to_account_number(self, credential_service, prompter):
        prompter.feed("5", "4321", "4321")

        assert credential_service.set_new_credential(5) == compute_hash(5, 4321)
        assert any("Security Policy" in notice for notice in prompter.notices)

    @pytest.mark.parametrize("bad_pin", ["0", "10000", "abc", "", "-5"])
    def test_rejects_pin_out_of_range(self, credential_service, prompter, bad_pin):
        prompter.feed(bad_pin, "1234", "1234")

        assert credential_service.set_new_credential(5) == compute_hash(5, 1234)
        assert "PIN must be between 1 and 9999." in prompter.notices

    def test_confirmation_mismatch_restarts(self, credential_service, prompter):
        prompter.feed("1234", "1235", "2468", "2468")

        assert credential_service.set_new_credential(5) == compute_hash(5, 2468)
        assert "PINs do not match. Try again." in prompter.notices

    def test_end_of_input_before_pin(self, credential_service, prompter):
        with pytest.raises(InputExhaustedError):
            credential_service.set_new_credential(5)

    def test_end_of_input_before_confirmation(self, credential_service, prompter):
        prompter.feed("1234")

        with pytest.raises(InputExhaustedError):
            credential_service.set_new_credential(5)

    def test_pin_equal_to_account_one_then_input_ends(self, credential_service, prompter):
        prompter.feed("1")

        with pytest.raises(InputExhaustedError):
            credential_service.set_new_credential(1)
