# howmuch/tests/test_client.py
import unittest
from unittest import mock

import requests

from howmuch import config
from howmuch.errors import FetchError
from howmuch.gateway import client
from howmuch.tests.fixtures import RECEIPT, SOURCE_URL, TX_HASH, block, fake_response


class TestHttpGet(unittest.TestCase):

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_returns_body(self, mock_get):
        mock_get.return_value = fake_response("hello")
        self.assertEqual(client.http_get("https://x.example"), "hello")
        mock_get.assert_called_once_with("https://x.example", params=None, timeout=config.HTTP_TIMEOUT)

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_transport_error_is_fetch_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(FetchError) as cm:
            client.http_get("https://x.example")
        self.assertIn("connection refused", str(cm.exception))

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_error_status_is_fetch_error(self, mock_get):
        mock_get.return_value = fake_response({"code": "StarknetErrorCode.BLOCK_NOT_FOUND"}, 400)
        with self.assertRaises(FetchError) as cm:
            client.http_get("https://x.example")
        self.assertIn("400", str(cm.exception))
        self.assertIn("BLOCK_NOT_FOUND", str(cm.exception))

    def test_fetch_error_is_a_connection_error(self):
        self.assertTrue(issubclass(FetchError, ConnectionError))


class TestQueries(unittest.TestCase):

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_query_tx_receipt(self, mock_get):
        mock_get.return_value = fake_response(RECEIPT)
        receipt = client.query_tx_receipt(TX_HASH, SOURCE_URL)
        self.assertEqual(receipt.actual_fee(), 100)
        mock_get.assert_called_once_with(
            f"{SOURCE_URL}/get_transaction_receipt",
            params={"transactionHash": TX_HASH},
            timeout=config.HTTP_TIMEOUT,
        )

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_query_tx(self, mock_get):
        mock_get.return_value = fake_response({"status": "ACCEPTED_ON_L1", "transaction": {}})
        tx = client.query_tx(TX_HASH, SOURCE_URL + "/")
        self.assertTrue(tx.is_known)
        mock_get.assert_called_once_with(
            f"{SOURCE_URL}/get_transaction",
            params={"transactionHash": TX_HASH},
            timeout=config.HTTP_TIMEOUT,
        )

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_query_block(self, mock_get):
        mock_get.return_value = fake_response(block("0x5"))
        self.assertEqual(client.query_block(15925, SOURCE_URL).gas_price(), 5)
        mock_get.assert_called_once_with(
            f"{SOURCE_URL}/get_block",
            params={"blockNumber": "15925"},
            timeout=config.HTTP_TIMEOUT,
        )

    @mock.patch("howmuch.gateway.client.requests.get")
    def test_query_latest_block(self, mock_get):
        mock_get.return_value = fake_response(block("1"))
        client.query_block("latest", SOURCE_URL)
        self.assertEqual(mock_get.call_args.kwargs["params"], {"blockNumber": "latest"})


if __name__ == '__main__':
    unittest.main()
