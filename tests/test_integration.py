"""
Integration tests for the Bittrex client against a local mock server.
"""

import hashlib
import hmac
import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qsl, urlsplit

import pytest

from bittrex_client import BittrexClient, HTTPError, NotAuthenticatedError, ResultError

API_KEY = "KEY123"
API_SECRET = "SECRET456"


class MockBittrexHandler(BaseHTTPRequestHandler):
    """Serves Bittrex-style envelopes and checks private request signatures."""

    def log_message(self, format, *args):
        pass

    def _send(self, status, body):
        payload = json.dumps(body).encode('utf-8')
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def do_GET(self):
        path = urlsplit(self.path).path
        query = dict(parse_qsl(urlsplit(self.path).query))

        if path == "/api/v1.1/public/getmarkets":
            self._send(200, {
                "success": True,
                "message": "",
                "result": [{"MarketName": "BTC-LTC", "IsActive": True}]
            })
        elif path == "/api/v1.1/public/getticker":
            if query.get("market") != "BTC-LTC":
                self._send(200, {"success": False, "message": "INVALID_MARKET", "result": None})
            else:
                self._send(200, {"success": True, "message": "", "result": {"Bid": 0.1, "Ask": 0.2}})
        elif path.startswith("/api/v1.1/account/"):
            url = f"http://{self.headers['Host']}{self.path}"
            expected = hmac.new(
                API_SECRET.encode('utf-8'),
                url.encode('utf-8'),
                hashlib.sha512
            ).hexdigest()
            if query.get("apikey") != API_KEY or "nonce" not in query:
                self._send(200, {"success": False, "message": "APIKEY_NOT_PROVIDED", "result": None})
            elif not hmac.compare_digest(expected, self.headers.get('apisign', '')):
                self._send(200, {"success": False, "message": "INVALID_SIGNATURE", "result": None})
            else:
                self._send(200, {
                    "success": True,
                    "message": "",
                    "result": [{"Currency": "BTC", "Balance": 1.5, "Nonce": int(query["nonce"])}]
                })
        else:
            self._send(404, {"success": False, "message": "NOT_FOUND", "result": None})


class TestIntegration:
    """Integration tests with a local Bittrex-style server."""

    @pytest.fixture(scope="class")
    def server_url(self):
        """Start the mock server for integration tests."""
        server = HTTPServer(("127.0.0.1", 0), MockBittrexHandler)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()

        yield f"http://127.0.0.1:{server.server_port}/api/v1.1/"

        server.shutdown()
        server.server_close()

    @pytest.fixture
    def client(self, server_url):
        """Create anonymous client pointed at the mock server."""
        with BittrexClient(base_url=server_url, timeout=5) as client:
            yield client

    def test_public_markets(self, client):
        """Test a public call without login."""
        markets = client.public_call("public/getmarkets")

        assert markets == [{"MarketName": "BTC-LTC", "IsActive": True}]

    def test_public_ticker_with_params(self, client):
        """Test public parameters reach the server."""
        ticker = client.public_call("public/getticker", {"market": "BTC-LTC"})

        assert ticker == {"Bid": 0.1, "Ask": 0.2}

    def test_public_result_error(self, client):
        """Test server-reported failures surface as ResultError."""
        with pytest.raises(ResultError) as exc_info:
            client.public_call("public/getticker", {"market": "NOPE"})

        assert exc_info.value.message == "INVALID_MARKET"

    def test_private_without_login(self, client):
        """Test private calls are refused before login."""
        with pytest.raises(NotAuthenticatedError):
            client.private_call("account/getbalances")

    def test_private_signed(self, client):
        """Test the server accepts the client's signature."""
        client.login(API_KEY, API_SECRET)

        balances = client.private_call("account/getbalances")

        assert balances[0]["Currency"] == "BTC"
        assert balances[0]["Balance"] == 1.5

    def test_private_signed_with_params(self, client):
        """Test signatures stay valid with public parameters present."""
        client.login(API_KEY, API_SECRET)

        balances = client.private_call("account/getbalance", {"currency": "BTC"})

        assert balances[0]["Currency"] == "BTC"

    def test_private_nonces_non_decreasing(self, client):
        """Test nonces seen by the server never decrease."""
        client.login(API_KEY, API_SECRET)

        first = client.private_call("account/getbalances")[0]["Nonce"]
        second = client.private_call("account/getbalances")[0]["Nonce"]

        assert second >= first

    def test_private_wrong_secret(self, client):
        """Test a wrong secret is rejected by the server."""
        client.login(API_KEY, "wrong-secret")

        with pytest.raises(ResultError) as exc_info:
            client.private_call("account/getbalances")

        assert exc_info.value.message == "INVALID_SIGNATURE"

    def test_unknown_endpoint(self, client):
        """Test error statuses surface as HTTPError."""
        with pytest.raises(HTTPError) as exc_info:
            client.public_call("public/nonexistent")

        assert exc_info.value.status_code == 404
