# product_service/services/product_client.py
import requests

from product_service.utils.retry import http_retry
from product_service.utils.settings import PRODUCT_SERVICE_URL
from product_service.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """
    Klient HTTP dla /api/products.
    404 -> None / False, pozostale bledy HTTP -> requests.HTTPError.
    """

    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    def _url(self, product_id: int | None = None) -> str:
        if product_id is None:
            return f"{self.base_url}/api/products"
        return f"{self.base_url}/api/products/{product_id}"

    @http_retry()
    def list_products(self) -> list[dict]:
        url = self._url()
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def fetch_product(self, product_id: int) -> dict | None:
        url = self._url(product_id)
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def create_product(self, payload: dict) -> dict:
        url = self._url()
        logger.info(f"ProductClient POST {url}")

        resp = requests.post(url, json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def update_product(self, product_id: int, payload: dict) -> dict | None:
        url = self._url(product_id)
        logger.info(f"ProductClient PUT {url}")

        resp = requests.put(url, json=payload, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def delete_product(self, product_id: int) -> bool:
        url = self._url(product_id)
        logger.info(f"ProductClient DELETE {url}")

        resp = requests.delete(url, timeout=self.timeout)
        if resp.status_code == 404:
            return False
        resp.raise_for_status()
        return True
