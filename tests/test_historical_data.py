import unittest
from unittest.mock import patch, MagicMock
import os
import sys
import threading

import requests

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from birthday_explorer.clients.feed_client import get_feed_session
from birthday_explorer.config import USER_AGENT
from birthday_explorer.errors import FetchError
from birthday_explorer.models import BirthRecord
from birthday_explorer.services.historical_data import build_feed_url, fetch_births, parse_births


FEED_TEMPLATE = "https://api.wikimedia.org/feed/v1/wikipedia/en/onthisday/births/{month}/{day}"
DAYS_IN_MONTH = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


class TestBuildFeedUrl(unittest.TestCase):

    def test_url_matches_template_for_every_day(self):
        for month, last_day in enumerate(DAYS_IN_MONTH, start=1):
            for day in range(1, last_day + 1):
                self.assertEqual(
                    build_feed_url(month, day),
                    FEED_TEMPLATE.format(month=month, day=day),
                )

    def test_no_leading_zero(self):
        self.assertTrue(build_feed_url(2, 9).endswith("/births/2/9"))


class TestFetchBirths(unittest.TestCase):

    def _response(self, status_code=200, payload=None, json_error=None):
        mock_response = MagicMock()
        mock_response.status_code = status_code
        mock_response.ok = 200 <= status_code < 400
        mock_response.text = "body"
        if json_error is not None:
            mock_response.json.side_effect = json_error
        else:
            mock_response.json.return_value = payload
        return mock_response

    @patch('birthday_explorer.services.historical_data.get_feed_session')
    def test_fetch_births_success(self, mock_get_session):
        mock_session = MagicMock()
        mock_session.get.return_value = self._response(payload={
            "births": [
                {"text": "Abraham Lincoln, American president", "year": 1809, "pages": [{"title": "Abraham_Lincoln"}]},
                {"text": "Charles Darwin, English naturalist", "year": 1809},
            ]
        })
        mock_get_session.return_value = mock_session

        records = fetch_births(2, 12)

        mock_session.get.assert_called_once_with(FEED_TEMPLATE.format(month=2, day=12))
        self.assertEqual(len(records), 2)
        self.assertEqual(records[0].text, "Abraham Lincoln, American president")
        self.assertEqual(records[0].year, 1809)
        self.assertEqual(records[0].extra, {"pages": [{"title": "Abraham_Lincoln"}]})
        self.assertEqual(records[1].name, "Charles Darwin")

    @patch('birthday_explorer.services.historical_data.get_feed_session')
    def test_fetch_births_empty_list(self, mock_get_session):
        mock_session = MagicMock()
        mock_session.get.return_value = self._response(payload={"births": []})
        mock_get_session.return_value = mock_session

        self.assertEqual(fetch_births(1, 1), [])

    @patch('birthday_explorer.services.historical_data.get_feed_session')
    def test_fetch_births_http_error(self, mock_get_session):
        mock_session = MagicMock()
        mock_session.get.return_value = self._response(status_code=404)
        mock_get_session.return_value = mock_session

        with self.assertRaises(FetchError) as ctx:
            fetch_births(2, 30)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.url, FEED_TEMPLATE.format(month=2, day=30))

    @patch('birthday_explorer.services.historical_data.get_feed_session')
    def test_fetch_births_network_error(self, mock_get_session):
        mock_session = MagicMock()
        mock_session.get.side_effect = requests.ConnectionError("boom")
        mock_get_session.return_value = mock_session

        with self.assertRaises(FetchError) as ctx:
            fetch_births(3, 1)
        self.assertIsNone(ctx.exception.status_code)
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    @patch('birthday_explorer.services.historical_data.get_feed_session')
    def test_fetch_births_invalid_json(self, mock_get_session):
        mock_session = MagicMock()
        mock_session.get.return_value = self._response(json_error=ValueError("no json"))
        mock_get_session.return_value = mock_session

        with self.assertRaises(FetchError):
            fetch_births(3, 1)

    @patch('birthday_explorer.services.historical_data.get_feed_session')
    def test_fetch_births_missing_births_field(self, mock_get_session):
        mock_session = MagicMock()
        mock_session.get.return_value = self._response(payload={"events": []})
        mock_get_session.return_value = mock_session

        with self.assertRaises(FetchError):
            fetch_births(3, 1)


class TestFeedSession(unittest.TestCase):

    @patch('birthday_explorer.clients.feed_client._local', new_callable=threading.local)
    def test_session_is_reused_within_a_thread(self, _mock_local):
        session = get_feed_session()
        self.assertIs(get_feed_session(), session)
        self.assertEqual(session.headers["User-Agent"], USER_AGENT)
        self.assertEqual(session.headers["Accept"], "application/json")

    @patch('birthday_explorer.clients.feed_client._local', new_callable=threading.local)
    def test_each_thread_gets_its_own_session(self, _mock_local):
        main_session = get_feed_session()
        worker_sessions = []

        worker = threading.Thread(target=lambda: worker_sessions.append(get_feed_session()))
        worker.start()
        worker.join()

        self.assertEqual(len(worker_sessions), 1)
        self.assertIsNot(worker_sessions[0], main_session)
        self.assertEqual(worker_sessions[0].headers["User-Agent"], USER_AGENT)


class TestParseBirths(unittest.TestCase):

    def test_malformed_items_are_skipped(self):
        payload = {
            "births": [
                {"text": "Ada Lovelace", "year": 1815},
                {"text": "", "year": 1900},
                {"text": "No year"},
                {"text": "Bad year", "year": "unknown"},
                "not an object",
                {"text": "String year", "year": "1920"},
                {"text": 42, "year": 1900},
                {"text": "   ", "year": 1900},
            ]
        }
        records = parse_births(payload)
        self.assertEqual(
            records,
            [BirthRecord(text="Ada Lovelace", year=1815), BirthRecord(text="String year", year=1920)],
        )

    def test_text_is_kept_as_sent(self):
        records = parse_births({"births": [{"text": " Ada Lovelace, mathematician ", "year": 1815}]})
        self.assertEqual(records[0].text, " Ada Lovelace, mathematician ")
        self.assertEqual(records[0].name, "Ada Lovelace")

    def test_non_object_payload(self):
        with self.assertRaises(FetchError):
            parse_births(["births"])


if __name__ == '__main__':
    unittest.main()
