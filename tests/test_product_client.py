"""ProductClient tests with requests monkeypatched."""

from unittest.mock import MagicMock

import pytest
import requests

from product_service.services import product_client as module
from product_service.services.product_client import ProductClient


def make_response(status_code=200, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return resp


@pytest.fixture
def client():
    return ProductClient(base_url="http://products.test/", timeout=1)


def test_list_products(monkeypatch, client):
    get = MagicMock(return_value=make_response(payload=[{"id": 1, "name": "Keyboard"}]))
    monkeypatch.setattr(module.requests, "get", get)

    assert client.list_products() == [{"id": 1, "name": "Keyboard"}]
    get.assert_called_once_with("http://products.test/api/products", timeout=1)


def test_fetch_product_found(monkeypatch, client):
    monkeypatch.setattr(module.requests, "get", MagicMock(return_value=make_response(payload={"id": 2})))

    assert client.fetch_product(2) == {"id": 2}


def test_fetch_product_not_found_returns_none(monkeypatch, client):
    monkeypatch.setattr(module.requests, "get", MagicMock(return_value=make_response(404)))

    assert client.fetch_product(2) is None


def test_create_product_posts_json(monkeypatch, client):
    post = MagicMock(return_value=make_response(payload={"id": 1, "name": "Widget"}))
    monkeypatch.setattr(module.requests, "post", post)

    assert client.create_product({"name": "Widget"}) == {"id": 1, "name": "Widget"}
    post.assert_called_once_with("http://products.test/api/products", json={"name": "Widget"}, timeout=1)


def test_update_product_not_found_returns_none(monkeypatch, client):
    monkeypatch.setattr(module.requests, "put", MagicMock(return_value=make_response(404)))

    assert client.update_product(9, {"name": "Ghost"}) is None


def test_update_product(monkeypatch, client):
    put = MagicMock(return_value=make_response(payload={"id": 9, "name": "New"}))
    monkeypatch.setattr(module.requests, "put", put)

    assert client.update_product(9, {"name": "New"}) == {"id": 9, "name": "New"}
    put.assert_called_once_with("http://products.test/api/products/9", json={"name": "New"}, timeout=1)


def test_delete_product(monkeypatch, client):
    monkeypatch.setattr(module.requests, "delete", MagicMock(return_value=make_response(200)))

    assert client.delete_product(1) is True


def test_delete_product_not_found(monkeypatch, client):
    monkeypatch.setattr(module.requests, "delete", MagicMock(return_value=make_response(404)))

    assert client.delete_product(1) is False


def test_server_error_is_raised_without_retry(monkeypatch, client):
    get = MagicMock(return_value=make_response(500))
    monkeypatch.setattr(module.requests, "get", get)

    with pytest.raises(requests.HTTPError):
        client.fetch_product(1)
    assert get.call_count == 1


def test_connection_error_is_retried(monkeypatch, client):
    get = MagicMock(side_effect=[requests.ConnectionError("down"), make_response(payload={"id": 1})])
    monkeypatch.setattr(module.requests, "get", get)

    assert client.fetch_product(1) == {"id": 1}
    assert get.call_count == 2


def test_connection_error_gives_up_after_three_attempts(monkeypatch, client):
    get = MagicMock(side_effect=requests.Timeout("slow"))
    monkeypatch.setattr(module.requests, "get", get)

    with pytest.raises(requests.Timeout):
        client.list_products()
    assert get.call_count == 3
