import asyncio

import httpx
import pytest

from app.crud.crud_currency import get_latest_rates
from app.services.parsers.parser_currency import CurrencyClient

FEED = {
	"result": "success",
	"base_code": "XOF",
	"time_last_update_unix": 1_780_000_000,
	"rates": {"XOF": 1, "EUR": 0.001524, "USD": 0.00165, "JPY": 0.26},
}


def client_for(payload, status_code=200, **kwargs):
	transport = httpx.MockTransport(lambda request: httpx.Response(status_code, json=payload))
	return CurrencyClient(url="https://fx.test/latest/XOF", transport=transport, **kwargs)


def test_update_rates_stores_feed(session):
	result = asyncio.run(client_for(FEED).update_rates(session))
	
	assert result == {"status": "success", "new_rates_added": 4}
	assert get_latest_rates(session)["USD"] == 0.00165


def test_same_day_is_stored_once(session):
	asyncio.run(client_for(FEED).update_rates(session))
	result = asyncio.run(client_for(FEED).update_rates(session))
	assert result["new_rates_added"] == 0


def test_currency_filter(session):
	asyncio.run(client_for(FEED, currencies=["eur", "usd"]).update_rates(session))
	assert set(get_latest_rates(session)) == {"EUR", "USD"}


def test_feed_error_result():
	with pytest.raises(ValueError, match="error"):
		asyncio.run(client_for({"result": "error", "base_code": "XOF", "rates": {}}).fetch_rates())


def test_http_error():
	with pytest.raises(httpx.HTTPStatusError):
		asyncio.run(client_for({}, status_code=503).fetch_rates())


def test_feed_in_another_base_is_rejected(session):
	feed = {**FEED, "base_code": "USD", "rates": {"USD": 1, "EUR": 0.92}}
	with pytest.raises(ValueError, match="USD-based"):
		asyncio.run(client_for(feed).update_rates(session))
	assert get_latest_rates(session) == {}


def test_feed_base_is_case_insensitive():
	payload = asyncio.run(client_for({**FEED, "base_code": "xof"}, base_currency="XOF").fetch_rates())
	assert payload.rates["EUR"] == 0.001524
