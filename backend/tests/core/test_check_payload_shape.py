"""Structural Check — tests for both payload-shape policies.

Tests cover:
    - EXACT_KEYS accepts exactly the four keys, rejects missing and extra keys
    - ALL_TRUTHY requires four truthy values, tolerates extra keys
    - Non-mapping payloads are rejected under both policies
"""

import pytest

from user_registry.core.check_payload_shape import check_payload_shape
from user_registry.core.domain_types import USER_FIELDS, PayloadShapePolicy

EXACT = PayloadShapePolicy.EXACT_KEYS
TRUTHY = PayloadShapePolicy.ALL_TRUTHY


# ─── EXACT_KEYS ─────────────────────────────────────────────────

def test_exact_keys_accepts_four_keys(valid_payload):
    assert check_payload_shape(valid_payload, EXACT)


def test_exact_keys_accepts_invalid_values_with_right_keys():
    payload = {"name": "", "login": None, "email": 1, "password": []}
    assert check_payload_shape(payload, EXACT)


@pytest.mark.parametrize("missing", USER_FIELDS)
def test_exact_keys_rejects_missing_key(valid_payload, missing):
    del valid_payload[missing]
    assert not check_payload_shape(valid_payload, EXACT)


def test_exact_keys_rejects_extra_key(valid_payload):
    valid_payload["role"] = "admin"
    assert not check_payload_shape(valid_payload, EXACT)


def test_exact_keys_rejects_swapped_key(valid_payload):
    del valid_payload["email"]
    valid_payload["mail"] = "a@x.com"
    assert not check_payload_shape(valid_payload, EXACT)


# ─── ALL_TRUTHY ─────────────────────────────────────────────────

def test_all_truthy_accepts_extra_keys(valid_payload):
    valid_payload["role"] = "admin"
    assert check_payload_shape(valid_payload, TRUTHY)


@pytest.mark.parametrize("missing", USER_FIELDS)
def test_all_truthy_rejects_missing_key(valid_payload, missing):
    del valid_payload[missing]
    assert not check_payload_shape(valid_payload, TRUTHY)


@pytest.mark.parametrize("falsy", ["", None, 0])
def test_all_truthy_rejects_falsy_value(valid_payload, falsy):
    valid_payload["login"] = falsy
    assert not check_payload_shape(valid_payload, TRUTHY)


# ─── Non-mapping payloads ───────────────────────────────────────

@pytest.mark.parametrize("policy", list(PayloadShapePolicy))
@pytest.mark.parametrize("payload", [None, [], "name", 42, ["name", "login", "email", "password"]])
def test_non_mapping_payload_rejected(policy, payload):
    assert not check_payload_shape(payload, policy)


@pytest.mark.parametrize("policy", list(PayloadShapePolicy))
def test_empty_mapping_rejected(policy):
    assert not check_payload_shape({}, policy)
