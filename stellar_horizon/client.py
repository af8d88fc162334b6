# stellar_horizon/client.py
"""Client façade: one typed coroutine per Horizon resource."""

from typing import Any, Optional, Union

from stellar_horizon.config_reader import HorizonSettings, load_settings
from stellar_horizon.dispatcher import Dispatcher
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.endpoint import Endpoint
from stellar_horizon.interfaces.transport import IHttpTransport
from stellar_horizon.interfaces.xdr_codec import IXdrCodec
from stellar_horizon.models import (
    Account,
    AssetRecord,
    ClaimableBalance,
    Effect,
    FeeStats,
    Ledger,
    LiquidityPool,
    Offer,
    Operation,
    OrderBook,
    Page,
    Payment,
    PaymentPath,
    Trade,
    TradeAggregation,
    Transaction,
)
from stellar_horizon.web_tools import AiohttpTransport
from stellar_horizon.xdr_utils import StellarXdrCodec


class HorizonClient:
    """
    Binds an endpoint to a dispatcher.

    Holds no per-call state, so one client can serve concurrent requests.
    Each ``get_*`` method accepts the descriptor built for its resource and
    raises TypeError for any other.

    Example:
        async with HorizonClient.from_settings() as client:
            request = AccountsRequest().for_signer(key).limit(50).build()
            page = await client.get_accounts(request)
    """

    def __init__(
        self,
        endpoint: Union[Endpoint, str],
        transport: IHttpTransport,
        codec: Optional[IXdrCodec] = None,
    ):
        self._endpoint = endpoint if isinstance(endpoint, Endpoint) else Endpoint(endpoint)
        self._transport = transport
        self._dispatcher = Dispatcher(transport, codec or StellarXdrCodec())

    @classmethod
    def from_settings(cls, settings: Optional[HorizonSettings] = None) -> "HorizonClient":
        """Client over a new aiohttp transport configured from HORIZON_* settings."""
        settings = settings or load_settings()
        return cls(Endpoint.from_settings(settings), AiohttpTransport.from_settings(settings))

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    async def close(self):
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "HorizonClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def fetch(self, request: RequestDescriptor) -> Any:
        """Dispatch any descriptor, including ones taken from page links."""
        return await self._dispatcher.dispatch(self._endpoint, request)

    async def next_page(self, page: Page) -> Optional[Page]:
        request = page.next_request()
        return await self.fetch(request) if request is not None else None

    async def prev_page(self, page: Page) -> Optional[Page]:
        request = page.prev_request()
        return await self.fetch(request) if request is not None else None

    async def _get(self, request: RequestDescriptor, shape: type, paged: bool, path: Optional[str] = None) -> Any:
        if request.shape is not shape or request.paged != paged or (path is not None and request.path != path):
            kind = "list" if paged else "single"
            raise TypeError(f"expected a {kind} {shape.__name__} request, got {request.shape.__name__} /{request.path}")
        return await self.fetch(request)

    # accounts
    async def get_accounts(self, request: RequestDescriptor[Account]) -> Page[Account]:
        return await self._get(request, Account, paged=True)

    async def get_account(self, request: RequestDescriptor[Account]) -> Account:
        return await self._get(request, Account, paged=False)

    # assets
    async def get_assets(self, request: RequestDescriptor[AssetRecord]) -> Page[AssetRecord]:
        return await self._get(request, AssetRecord, paged=True)

    # claimable balances
    async def get_claimable_balances(self, request: RequestDescriptor[ClaimableBalance]) -> Page[ClaimableBalance]:
        return await self._get(request, ClaimableBalance, paged=True)

    async def get_claimable_balance(self, request: RequestDescriptor[ClaimableBalance]) -> ClaimableBalance:
        return await self._get(request, ClaimableBalance, paged=False)

    # effects
    async def get_effects(self, request: RequestDescriptor[Effect]) -> Page[Effect]:
        return await self._get(request, Effect, paged=True)

    # ledgers and fees
    async def get_ledgers(self, request: RequestDescriptor[Ledger]) -> Page[Ledger]:
        return await self._get(request, Ledger, paged=True)

    async def get_ledger(self, request: RequestDescriptor[Ledger]) -> Ledger:
        return await self._get(request, Ledger, paged=False)

    async def get_fee_stats(self, request: RequestDescriptor[FeeStats]) -> FeeStats:
        return await self._get(request, FeeStats, paged=False)

    # liquidity pools
    async def get_liquidity_pools(self, request: RequestDescriptor[LiquidityPool]) -> Page[LiquidityPool]:
        return await self._get(request, LiquidityPool, paged=True)

    async def get_liquidity_pool(self, request: RequestDescriptor[LiquidityPool]) -> LiquidityPool:
        return await self._get(request, LiquidityPool, paged=False)

    # offers and order book
    async def get_offers(self, request: RequestDescriptor[Offer]) -> Page[Offer]:
        return await self._get(request, Offer, paged=True)

    async def get_offer(self, request: RequestDescriptor[Offer]) -> Offer:
        return await self._get(request, Offer, paged=False)

    async def get_order_book(self, request: RequestDescriptor[OrderBook]) -> OrderBook:
        return await self._get(request, OrderBook, paged=False)

    # operations and payments
    async def get_operations(self, request: RequestDescriptor[Operation]) -> Page[Operation]:
        return await self._get(request, Operation, paged=True)

    async def get_operation(self, request: RequestDescriptor[Operation]) -> Operation:
        return await self._get(request, Operation, paged=False)

    async def get_payments(self, request: RequestDescriptor[Payment]) -> Page[Payment]:
        return await self._get(request, Payment, paged=True)

    # path finding
    async def get_payment_paths(self, request: RequestDescriptor[PaymentPath]) -> Page[PaymentPath]:
        return await self._get(request, PaymentPath, paged=True, path="paths")

    async def get_strict_receive_paths(self, request: RequestDescriptor[PaymentPath]) -> Page[PaymentPath]:
        return await self._get(request, PaymentPath, paged=True, path="paths/strict-receive")

    async def get_strict_send_paths(self, request: RequestDescriptor[PaymentPath]) -> Page[PaymentPath]:
        return await self._get(request, PaymentPath, paged=True, path="paths/strict-send")

    # trades
    async def get_trades(self, request: RequestDescriptor[Trade]) -> Page[Trade]:
        return await self._get(request, Trade, paged=True)

    async def get_trade_aggregations(self, request: RequestDescriptor[TradeAggregation]) -> Page[TradeAggregation]:
        return await self._get(request, TradeAggregation, paged=True)

    # transactions
    async def get_transactions(self, request: RequestDescriptor[Transaction]) -> Page[Transaction]:
        return await self._get(request, Transaction, paged=True)

    async def get_transaction(self, request: RequestDescriptor[Transaction]) -> Transaction:
        return await self._get(request, Transaction, paged=False)
