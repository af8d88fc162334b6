# tests/domain/test_params.py
"""Tests for query parameter validators and asset values."""
from decimal import Decimal

import pytest
from stellar_sdk import Keypair

from stellar_horizon.domain.assets import IssuedAsset, NativeAsset, join_assets, parse_asset, require_issued_asset
from stellar_horizon.domain.params import (
    Order,
    Pagination,
    require_account_id,
    require_amount,
    require_cursor,
    require_hash,
    require_limit,
    require_order,
    require_positive_int,
)
from stellar_horizon.errors import ConstructionError


class TestAccountId:
    def test_valid_key(self):
        key = Keypair.random().public_key
        assert require_account_id(key) == key

    def test_empty_rejected(self):
        with pytest.raises(ConstructionError, match="non-empty"):
            require_account_id("")

    def test_wrong_length_rejected(self):
        with pytest.raises(ConstructionError, match="56 characters"):
            require_account_id("GABC")

    def test_bad_checksum_rejected(self):
        key = Keypair.random().public_key
        broken = key[:-1] + ("A" if key[-1] != "A" else "B")
        with pytest.raises(ConstructionError, match="not a valid"):
            require_account_id(broken)

    def test_secret_seed_rejected(self):
        seed = Keypair.random().secret
        with pytest.raises(ConstructionError):
            require_account_id(seed)


class TestLimit:
    def test_bounds(self):
        assert require_limit(1) == 1
        assert require_limit(200) == 200

    @pytest.mark.parametrize("value", [0, -1, 201])
    def test_out_of_range(self, value):
        with pytest.raises(ConstructionError, match="between 1 and 200"):
            require_limit(value)

    def test_non_integer(self):
        with pytest.raises(ConstructionError):
            require_limit("10")
        with pytest.raises(ConstructionError):
            require_limit(True)


class TestScalars:
    def test_cursor_is_opaque(self):
        assert require_cursor("2314987376641-1") == "2314987376641-1"
        assert require_cursor("now") == "now"
        assert require_cursor(12345) == "12345"

    def test_empty_cursor_rejected(self):
        with pytest.raises(ConstructionError):
            require_cursor("")
        with pytest.raises(ConstructionError):
            require_cursor("   ")

    def test_order(self):
        assert require_order("desc") is Order.DESC
        assert require_order(Order.ASC) is Order.ASC
        assert Order.ASC.reversed() is Order.DESC
        with pytest.raises(ConstructionError, match="asc"):
            require_order("up")

    def test_hash_normalized_to_lower_case(self):
        value = "A" * 64
        assert require_hash(value, "transaction hash") == "a" * 64

    def test_hash_length(self):
        with pytest.raises(ConstructionError, match="transaction hash must be 64 characters long"):
            require_hash("abc", "transaction hash")

    def test_positive_int(self):
        assert require_positive_int("42", "offer ID") == 42
        with pytest.raises(ConstructionError, match="greater than or equal to 1"):
            require_positive_int(0, "offer ID")
        with pytest.raises(ConstructionError, match="invalid offer ID"):
            require_positive_int("12a", "offer ID")

    def test_amount(self):
        assert require_amount("10.5", "amount") == "10.5"
        assert require_amount(Decimal("0.0000001"), "amount") == "0.0000001"
        with pytest.raises(ConstructionError, match="7 decimal places"):
            require_amount("0.00000001", "amount")
        with pytest.raises(ConstructionError, match="positive"):
            require_amount("0", "amount")
        with pytest.raises(ConstructionError):
            require_amount(1.5, "amount")

    def test_pagination_query_skips_unset(self):
        assert Pagination().to_query() == []
        assert Pagination(cursor="5", order=Order.DESC).to_query() == [("cursor", "5"), ("order", "desc")]


class TestAssets:
    def test_issued_asset_type_by_code_length(self, issuer):
        assert IssuedAsset("USDC", issuer).asset_type == "credit_alphanum4"
        assert IssuedAsset("LONGERCODE", issuer).asset_type == "credit_alphanum12"

    def test_code_too_long(self, issuer):
        with pytest.raises(ConstructionError, match="12 characters or less"):
            IssuedAsset("THIRTEENCHARS", issuer)

    def test_invalid_issuer(self):
        with pytest.raises(ConstructionError):
            IssuedAsset("USDC", "GBAD")

    def test_triplet_query(self, issuer):
        assert IssuedAsset("EURMTL", issuer).to_query("selling") == [
            ("selling_asset_type", "credit_alphanum12"),
            ("selling_asset_code", "EURMTL"),
            ("selling_asset_issuer", issuer),
        ]
        assert NativeAsset().to_query("buying") == [("buying_asset_type", "native")]

    def test_parse_and_join(self, issuer):
        asset = parse_asset(f"USDC:{issuer}")
        assert asset == IssuedAsset("USDC", issuer)
        assert parse_asset("native") == NativeAsset()
        assert join_assets([NativeAsset(), asset]) == f"native,USDC:{issuer}"

    def test_parse_rejects_plain_code(self):
        with pytest.raises(ConstructionError, match="CODE:ISSUER"):
            parse_asset("USDC")

    def test_native_not_issued(self):
        with pytest.raises(ConstructionError, match="issued asset"):
            require_issued_asset(NativeAsset())
