"""Unit tests for the Block entity.

Tests construction from a predecessor, hash recomputation, and
tamper evidence of sealed blocks.
"""

from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from bookchain.domain.events.hash_utils import GENESIS_PREV_HASH, compute_block_hash
from bookchain.domain.models.block import BLOCK_FIELDS, Block
from bookchain.domain.models.checkout import CheckoutEvent


@pytest.fixture
def genesis() -> Block:
    return Block.genesis()


class TestGenesisBlock:
    """Tests for Block.genesis()."""

    def test_position_zero(self, genesis: Block) -> None:
        assert genesis.position == 0

    def test_empty_prev_hash(self, genesis: Block) -> None:
        assert genesis.prev_hash == GENESIS_PREV_HASH == ""

    def test_genesis_payload(self, genesis: Block) -> None:
        assert genesis.payload.is_genesis is True
        assert genesis.is_genesis is True

    def test_hash_is_sealed(self, genesis: Block) -> None:
        assert genesis.verify_hash(genesis.hash) is True


class TestBlockCreate:
    """Tests for Block.create()."""

    def test_derives_linkage_from_predecessor(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)

        assert block.position == genesis.position + 1
        assert block.prev_hash == genesis.hash
        assert block.payload == alice_checkout

    def test_hash_covers_own_fields(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)

        expected = compute_block_hash(
            block.position, block.timestamp, alice_checkout.to_dict(), block.prev_hash
        )
        assert block.hash == expected

    def test_timestamp_is_utc_iso8601(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)

        parsed = datetime.fromisoformat(block.timestamp)
        assert parsed.utcoffset() is not None
        assert parsed.utcoffset().total_seconds() == 0

    def test_builds_on_any_predecessor_without_validation(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        """Construction never validates; a stale predecessor is accepted here."""
        first = Block.create(alice_checkout, genesis)
        stale = Block.create(alice_checkout, genesis)

        assert first.position == stale.position == 1
        assert not stale.is_genesis

    def test_sealed_block_is_frozen(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.hash = "0" * 64  # type: ignore[misc]


class TestVerifyHash:
    """Tests for Block.verify_hash() (recompute and compare)."""

    def test_true_for_untouched_block(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)
        assert block.verify_hash(block.hash) is True

    def test_false_for_other_hash(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)
        assert block.verify_hash(genesis.hash) is False

    @pytest.mark.parametrize(
        "changes",
        [
            {"payload": CheckoutEvent("b1", "mallory", "2024-01-01")},
            {"payload": CheckoutEvent("b2", "alice", "2024-01-01")},
            {"position": 7},
            {"timestamp": "1970-01-01T00:00:00+00:00"},
            {"prev_hash": "f" * 64},
        ],
    )
    def test_tampered_field_is_detected(
        self, genesis: Block, alice_checkout: CheckoutEvent, changes: dict
    ) -> None:
        """Changing any field while keeping the stored hash fails the check."""
        block = Block.create(alice_checkout, genesis)
        tampered = dataclasses.replace(block, **changes)

        assert tampered.hash == block.hash
        assert tampered.verify_hash(tampered.hash) is False

    def test_does_not_overwrite_stored_hash(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        """A corrupt block keeps failing; recomputation never masks it."""
        block = Block.create(alice_checkout, genesis)
        tampered = dataclasses.replace(
            block, payload=CheckoutEvent("b1", "mallory", "2024-01-01")
        )

        assert tampered.verify_hash(tampered.hash) is False
        assert tampered.hash == block.hash
        assert tampered.verify_hash(tampered.hash) is False


class TestBlockSerialization:
    """Tests for Block.to_dict() / Block.from_dict()."""

    def test_stable_field_order(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)
        assert tuple(block.to_dict()) == BLOCK_FIELDS

    def test_round_trip_keeps_stored_hash(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        block = Block.create(alice_checkout, genesis)
        assert Block.from_dict(block.to_dict()) == block

    def test_from_dict_does_not_reseal(
        self, genesis: Block, alice_checkout: CheckoutEvent
    ) -> None:
        data = Block.create(alice_checkout, genesis).to_dict()
        data["payload"]["user"] = "mallory"

        restored = Block.from_dict(data)

        assert restored.verify_hash(restored.hash) is False

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("position", 1.9),
            ("position", "1"),
            ("position", False),
            ("timestamp", 1700000000),
            ("hash", "xyz"),
            ("hash", "A" * 64),
            ("prev_hash", "g" * 64),
            ("payload", ["b1", "alice"]),
        ],
    )
    def test_from_dict_rejects_wrong_types(
        self, genesis: Block, alice_checkout: CheckoutEvent, field: str, value: object
    ) -> None:
        data = Block.create(alice_checkout, genesis).to_dict()
        data[field] = value

        with pytest.raises(ValueError):
            Block.from_dict(data)

    def test_from_dict_accepts_genesis_sentinel_prev_hash(self, genesis: Block) -> None:
        restored = Block.from_dict(genesis.to_dict())
        assert restored.prev_hash == GENESIS_PREV_HASH
