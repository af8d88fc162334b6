import socket

import pytest
from aiohttp import web
from stellar_sdk import Keypair

from tests.samples import account_json, fee_stats_json, ledger_json, not_found_problem

# --- Helpers ---

def get_free_port():
    """Finds a free port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("", 0))
        return s.getsockname()[1]


def random_address():
    """A valid Stellar public key."""
    return Keypair.random().public_key


@pytest.fixture
def account_id():
    return random_address()


@pytest.fixture
def issuer():
    return random_address()

# --- Fixtures: Config ---

@pytest.fixture(scope="function")
def horizon_server_config():
    port = get_free_port()
    return {"host": "localhost", "port": port, "url": f"http://localhost:{port}"}

# --- Mock Servers ---

@pytest.fixture
async def mock_horizon(horizon_server_config):
    """Starts a local mock Stellar Horizon server."""

    class HorizonMockState:
        def __init__(self):
            self.requests = []
            self.accounts = {}
            self.ledgers = {}
            self.fail_status = None

        def set_account(self, account_id, **extra):
            self.accounts[account_id] = account_json(account_id, **extra)

        def set_ledger(self, sequence, **extra):
            self.ledgers[sequence] = ledger_json(sequence, **extra)

        def get_requests(self, endpoint=None):
            if endpoint:
                return [r for r in self.requests if r["endpoint"] == endpoint]
            return self.requests

    state = HorizonMockState()
    base_url = horizon_server_config["url"]

    routes = web.RouteTableDef()

    @routes.get("/accounts/{account_id}")
    async def get_account(request):
        account_id = request.match_info['account_id']
        state.requests.append({"endpoint": "accounts", "account_id": account_id, "query": dict(request.query)})
        if state.fail_status:
            return web.json_response({"status": state.fail_status, "title": "Rate Limit Exceeded"}, status=state.fail_status)
        if account_id in state.accounts:
            return web.json_response(state.accounts[account_id])
        return web.json_response(not_found_problem(), status=404)

    @routes.get("/accounts")
    async def list_accounts(request):
        query = dict(request.query)
        state.requests.append({"endpoint": "accounts_list", "query": query})
        signer = query.get("signer")
        records = [a for key, a in sorted(state.accounts.items()) if signer in (None, key)]
        cursor = query.get("cursor", "")
        if cursor:
            records = [a for a in records if a["paging_token"] > cursor]
        limit = int(query.get("limit", 10))
        records = records[:limit]
        last = records[-1]["paging_token"] if records else cursor
        first = records[0]["paging_token"] if records else cursor
        order = query.get("order", "asc")
        reverse = "desc" if order == "asc" else "asc"
        filters = f"&signer={signer}" if signer else ""
        return web.json_response({
            "_links": {
                "self": {"href": f"{base_url}/accounts?cursor={cursor}&limit={limit}&order={order}{filters}"},
                "next": {"href": f"{base_url}/accounts?cursor={last}&limit={limit}&order={order}{filters}"},
                "prev": {"href": f"{base_url}/accounts?cursor={first}&limit={limit}&order={reverse}{filters}"},
            },
            "_embedded": {"records": records},
        })

    @routes.get("/ledgers/{sequence}")
    async def get_ledger(request):
        sequence = int(request.match_info['sequence'])
        state.requests.append({"endpoint": "ledgers", "sequence": sequence})
        if sequence in state.ledgers:
            return web.json_response(state.ledgers[sequence])
        return web.json_response(not_found_problem(), status=404)

    @routes.get("/fee_stats")
    async def fee_stats(request):
        state.requests.append({"endpoint": "fee_stats"})
        return web.json_response(fee_stats_json())

    @routes.get("/{path:.*}")
    async def catch_all(request):
        path = request.match_info['path']
        state.requests.append({"endpoint": path})
        return web.json_response(not_found_problem(), status=404)

    app = web.Application()
    app.add_routes(routes)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, horizon_server_config["host"], horizon_server_config["port"])
    await site.start()

    yield state

    await runner.cleanup()
