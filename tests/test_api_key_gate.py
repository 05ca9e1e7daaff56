import logging

import pytest

from access_tokens.adapters.outbound.security.api_key_gate import ApiKeyGate


@pytest.fixture
def gate() -> ApiKeyGate:
    return ApiKeyGate()


def test_matching_key_is_authorized(gate):
    assert gate.authorize("secret-key", "secret-key") is True


@pytest.mark.parametrize("presented", ["wrong-key", "", "secret-key ", "SECRET-KEY"])
def test_mismatched_key_is_rejected(gate, presented):
    assert gate.authorize(presented, "secret-key") is False


def test_missing_key_is_rejected(gate):
    assert gate.authorize(None, "secret-key") is False


def test_non_ascii_keys_are_compared(gate):
    assert gate.authorize("clé-secrète", "clé-secrète") is True
    assert gate.authorize("cle-secrete", "clé-secrète") is False


@pytest.mark.parametrize("configured", [None, ""])
def test_open_mode_authorizes_everything(gate, configured):
    assert gate.authorize(None, configured) is True
    assert gate.authorize("anything", configured) is True


def test_open_mode_warns_once(gate, caplog):
    with caplog.at_level(logging.WARNING):
        gate.authorize(None, None)
        gate.authorize("anything", None)
        gate.warn_open_mode()

    warnings = [r for r in caplog.records if r.getMessage() == ApiKeyGate.OPEN_MODE_WARNING]
    assert len(warnings) == 1


def test_configured_key_does_not_warn(gate, caplog):
    with caplog.at_level(logging.WARNING):
        gate.authorize("secret-key", "secret-key")
        gate.authorize(None, "secret-key")

    assert not caplog.records
