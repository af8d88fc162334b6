# tests/builders/test_resource_builders.py
"""Paths and query parameters produced by each resource builder."""
import pytest
from stellar_sdk import Keypair

from stellar_horizon.builders import (
    AccountOffersRequest,
    AssetsRequest,
    ClaimableBalancesRequest,
    FeeStatsRequest,
    LiquidityPoolsRequest,
    OffersRequest,
    OperationsRequest,
    OrderBookRequest,
    PaymentPathsRequest,
    PaymentsRequest,
    SingleAccountRequest,
    SingleClaimableBalanceRequest,
    SingleLedgerRequest,
    SingleLiquidityPoolRequest,
    SingleOfferRequest,
    SingleOperationRequest,
    SingleTransactionRequest,
    StrictReceivePathsRequest,
    StrictSendPathsRequest,
    TradeAggregationsRequest,
    TradesRequest,
    TransactionsRequest,
)
from stellar_horizon.domain.assets import IssuedAsset, NativeAsset
from stellar_horizon.domain.params import TradeResolution
from stellar_horizon.errors import ConstructionError
from stellar_horizon.models import (
    Account,
    ClaimableBalance,
    FeeStats,
    Ledger,
    LiquidityPool,
    Offer,
    Operation,
    OrderBook,
    PaymentPath,
    TradeAggregation,
    Transaction,
)
from tests.samples import BALANCE_ID, POOL_ID, TX_HASH


@pytest.fixture
def usdc(issuer):
    return IssuedAsset("USDC", issuer)


class TestSingleResources:
    def test_account(self, account_id):
        request = SingleAccountRequest(account_id).build()
        assert request.path == f"accounts/{account_id}"
        assert request.query == ()
        assert request.shape is Account
        assert request.paged is False

    def test_ledger_accepts_numeric_string(self):
        request = SingleLedgerRequest("1234").build()
        assert request.path == "ledgers/1234"
        assert request.shape is Ledger

    def test_ledger_zero_rejected(self):
        with pytest.raises(ConstructionError, match="ledger sequence must be greater than or equal to 1"):
            SingleLedgerRequest(0)

    def test_transaction_hash_lowercased(self):
        request = SingleTransactionRequest(TX_HASH.upper()).build()
        assert request.path == f"transactions/{TX_HASH}"
        assert request.shape is Transaction

    def test_short_transaction_hash_rejected(self):
        with pytest.raises(ConstructionError, match="64 characters"):
            SingleTransactionRequest("abc")

    def test_operation(self):
        assert SingleOperationRequest(12884905985).build().path == "operations/12884905985"
        assert SingleOperationRequest("12884905985").build().shape is Operation

    def test_offer(self):
        assert SingleOfferRequest("42").build().path == "offers/42"
        with pytest.raises(ConstructionError, match="invalid offer ID"):
            SingleOfferRequest("forty-two")

    def test_liquidity_pool(self):
        request = SingleLiquidityPoolRequest(POOL_ID).build()
        assert request.path == f"liquidity_pools/{POOL_ID}"
        assert request.shape is LiquidityPool

    def test_claimable_balance(self):
        request = SingleClaimableBalanceRequest(BALANCE_ID).build()
        assert request.path == f"claimable_balances/{BALANCE_ID}"
        assert request.shape is ClaimableBalance
        with pytest.raises(ConstructionError):
            SingleClaimableBalanceRequest(BALANCE_ID[:-2])

    def test_fee_stats(self):
        request = FeeStatsRequest().build()
        assert request.path == "fee_stats"
        assert request.shape is FeeStats
        assert not request.paged


class TestListFilters:
    def test_assets(self, issuer):
        request = AssetsRequest().asset_code("USDC").asset_issuer(issuer).limit(20).build()
        assert request.path == "assets"
        assert request.query == (("asset_code", "USDC"), ("asset_issuer", issuer), ("limit", "20"))

    def test_assets_code_too_long(self):
        with pytest.raises(ConstructionError, match="12 characters or less"):
            AssetsRequest().asset_code("ABCDEFGHIJKLM")

    def test_claimable_balances_filters_combine(self, account_id, usdc):
        request = ClaimableBalancesRequest().claimant(account_id).asset(usdc).sponsor(account_id).build()
        assert request.query == (
            ("sponsor", account_id),
            ("asset", usdc.canonical()),
            ("claimant", account_id),
        )

    def test_offers_filters(self, account_id, usdc):
        request = OffersRequest().seller(account_id).selling("native").buying(usdc).build()
        assert request.path == "offers"
        assert request.query == (("seller", account_id), ("selling", "native"), ("buying", usdc.canonical()))

    def test_account_offers_is_paged(self, account_id):
        request = AccountOffersRequest(account_id).order("desc").build()
        assert request.path == f"accounts/{account_id}/offers"
        assert request.paged is True
        assert request.shape is Offer

    def test_liquidity_pools_account_filter(self, account_id):
        request = LiquidityPoolsRequest().account(account_id).build()
        assert request.query == (("account", account_id),)

    def test_reserves_must_be_distinct(self, usdc):
        with pytest.raises(ConstructionError, match="repeat"):
            LiquidityPoolsRequest().reserves(usdc, usdc)
        with pytest.raises(ConstructionError, match="at least one"):
            LiquidityPoolsRequest().reserves()

    def test_include_failed(self, account_id):
        assert PaymentsRequest().include_failed().build().query == (("include_failed", "true"),)
        request = TransactionsRequest().for_account(account_id).include_failed(False).build()
        assert request.query == (("include_failed", "false"),)
        assert OperationsRequest().build().query == ()

    def test_scoped_paths(self, account_id):
        assert OperationsRequest().for_ledger(7).build().path == "ledgers/7/operations"
        assert PaymentsRequest().for_transaction(TX_HASH).build().path == f"transactions/{TX_HASH}/payments"
        assert TransactionsRequest().for_claimable_balance(BALANCE_ID).build().path == (
            f"claimable_balances/{BALANCE_ID}/transactions"
        )
        assert TradesRequest().for_offer(9).build().path == "offers/9/trades"


class TestOrderBook:
    def test_triplet_query(self, usdc):
        request = OrderBookRequest(NativeAsset(), usdc).limit(20).build()
        assert request.path == "order_book"
        assert request.shape is OrderBook
        assert request.paged is False
        assert request.query == (
            ("selling_asset_type", "native"),
            ("buying_asset_type", "credit_alphanum4"),
            ("buying_asset_code", "USDC"),
            ("buying_asset_issuer", usdc.issuer),
            ("limit", "20"),
        )

    def test_same_asset_rejected(self, usdc):
        with pytest.raises(ConstructionError, match="different"):
            OrderBookRequest(usdc, usdc)


class TestTrades:
    def test_asset_pair(self, usdc):
        request = TradesRequest().for_asset_pair("native", usdc).limit(3).build()
        assert request.path == "trades"
        assert request.query[0] == ("base_asset_type", "native")
        assert ("counter_asset_code", "USDC") in request.query
        assert request.query[-1] == ("limit", "3")

    def test_asset_pair_must_differ(self, usdc):
        with pytest.raises(ConstructionError):
            TradesRequest().for_asset_pair(usdc, usdc)

    def test_aggregations(self, usdc):
        request = (
            TradeAggregationsRequest(NativeAsset(), usdc, TradeResolution.ONE_DAY)
            .start_time(1_600_000_000_000)
            .end_time(1_700_000_000_000)
            .offset(3_600_000)
            .order("desc")
            .build()
        )
        assert request.path == "trade_aggregations"
        assert request.shape is TradeAggregation
        assert request.get("resolution") == "86400000"
        assert request.get("start_time") == "1600000000000"
        assert request.get("end_time") == "1700000000000"
        assert request.get("offset") == "3600000"
        assert request.get("order") == "desc"

    def test_unknown_resolution(self, usdc):
        with pytest.raises(ConstructionError, match="resolution must be one of"):
            TradeAggregationsRequest(NativeAsset(), usdc, 1234)

    @pytest.mark.parametrize("offset,message", [
        (1_800_000, "whole number of hours"),
        (25 * 3_600_000, "24 hours"),
        (3_600_000, "smaller than the resolution"),
    ])
    def test_bad_offset(self, usdc, offset, message):
        builder = TradeAggregationsRequest(NativeAsset(), usdc, TradeResolution.ONE_HOUR)
        with pytest.raises(ConstructionError, match=message):
            builder.offset(offset)

    def test_time_window_order(self, usdc):
        builder = TradeAggregationsRequest(NativeAsset(), usdc, 60_000).end_time(1000)
        with pytest.raises(ConstructionError):
            builder.start_time(2000)


class TestPaths:
    def test_legacy_paths(self, account_id, usdc):
        request = PaymentPathsRequest(usdc, "25", account_id).build()
        assert request.path == "paths"
        assert request.shape is PaymentPath
        assert request.get("destination_amount") == "25"
        assert request.get("source_account") == account_id

    def test_strict_receive_assets(self, usdc):
        request = StrictReceivePathsRequest(usdc, "10.5").from_source_assets("native", usdc).build()
        assert request.path == "paths/strict-receive"
        assert request.get("destination_asset_code") == "USDC"
        assert request.get("destination_amount") == "10.5"
        assert request.get("source_assets") == f"native,{usdc.canonical()}"

    def test_strict_receive_destination_account_carried(self, account_id, usdc):
        other = Keypair.random().public_key
        request = (
            StrictReceivePathsRequest(usdc, "1")
            .destination_account(other)
            .from_source_account(account_id)
            .build()
        )
        assert request.get("destination_account") == other
        assert request.get("source_account") == account_id

    def test_strict_send(self, account_id, usdc):
        request = StrictSendPathsRequest(usdc, "3").to_destination_account(account_id).build()
        assert request.path == "paths/strict-send"
        assert request.query == (
            ("source_asset_type", "credit_alphanum4"),
            ("source_asset_code", "USDC"),
            ("source_asset_issuer", usdc.issuer),
            ("source_amount", "3"),
            ("destination_account", account_id),
        )

    def test_too_many_assets(self, usdc):
        with pytest.raises(ConstructionError, match="at most 15"):
            StrictSendPathsRequest(usdc, "3").to_destination_assets(*(["native"] * 16))

    def test_bad_amount(self, usdc):
        with pytest.raises(ConstructionError):
            StrictSendPathsRequest(usdc, "-3")
