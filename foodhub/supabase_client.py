"""
Thin client for the hosted backend (Supabase).
Row access goes through the PostgREST API, sign-in through the GoTrue auth API.
"""
import logging

import requests
from requests.exceptions import RequestException

from foodhub import config

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Error returned by the hosted backend"""

    def __init__(self, message, status_code=None, code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def _raise_for_response(response):
    if response.status_code < 400:
        return
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    message = (
        body.get("message")
        or body.get("msg")
        or body.get("error_description")
        or body.get("error")
        or f"HTTP {response.status_code}"
    )
    raise BackendError(message, status_code=response.status_code, code=body.get("code"))


class TableQuery:
    """Fluent query against one table, executed with execute()"""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.method = "GET"
        self.columns = None
        self.payload = None
        self.filters = []
        self.ordering = []
        self.want_single = False

    def select(self, columns="*"):
        self.columns = columns
        return self

    def insert(self, rows):
        self.method = "POST"
        self.payload = rows
        return self

    def update(self, values):
        self.method = "PATCH"
        self.payload = values
        return self

    def delete(self):
        self.method = "DELETE"
        return self

    def eq(self, column, value):
        self.filters.append((column, f"eq.{value}"))
        return self

    def order(self, column, desc=False):
        self.ordering.append(f"{column}.{'desc' if desc else 'asc'}")
        return self

    def single(self):
        self.want_single = True
        return self

    def build_params(self):
        params = []
        if self.columns:
            params.append(("select", self.columns))
        params.extend(self.filters)
        if self.ordering:
            params.append(("order", ",".join(self.ordering)))
        return params

    def build_headers(self):
        headers = {}
        if self.method != "GET":
            headers["Prefer"] = "return=representation" if self.columns else "return=minimal"
        if self.want_single:
            headers["Accept"] = "application/vnd.pgrst.object+json"
        return headers

    def execute(self):
        if self.method in ("PATCH", "DELETE") and not self.filters:
            raise BackendError(f"Refusing unfiltered {self.method} on {self.table}")

        response = self.client.request(
            self.method,
            f"/rest/v1/{self.table}",
            params=self.build_params(),
            json=self.payload,
            headers=self.build_headers(),
        )
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


class SupabaseClient:
    def __init__(self, url=None, anon_key=None, access_token=None, session=None, timeout=None):
        self.url = (url if url is not None else config.SUPABASE_URL).rstrip("/")
        self.anon_key = anon_key if anon_key is not None else config.SUPABASE_ANON_KEY
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.BACKEND_TIMEOUT

    def with_token(self, access_token):
        """Client acting as a signed-in user, sharing the HTTP session"""
        return SupabaseClient(
            url=self.url,
            anon_key=self.anon_key,
            access_token=access_token,
            session=self.session,
            timeout=self.timeout,
        )

    def headers(self, access_token=None):
        token = access_token or self.access_token or self.anon_key
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def request(self, method, path, params=None, json=None, headers=None, access_token=None):
        if not self.url:
            raise BackendError("Backend URL is not configured")

        merged = self.headers(access_token)
        merged.update(headers or {})
        try:
            response = self.session.request(
                method,
                f"{self.url}{path}",
                params=params,
                json=json,
                headers=merged,
                timeout=self.timeout,
            )
        except RequestException as e:
            logger.error(f"[BACKEND] {method} {path} failed: {e}")
            raise BackendError(f"Request exception: {str(e)}") from e

        _raise_for_response(response)
        return response

    def table(self, name):
        return TableQuery(self, name)

    # Auth API

    def sign_up(self, email, password, data=None):
        response = self.request(
            "POST", "/auth/v1/signup",
            json={"email": email, "password": password, "data": data or {}},
        )
        return response.json()

    def sign_in_with_password(self, email, password):
        response = self.request(
            "POST", "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        return response.json()

    def refresh_session(self, refresh_token):
        response = self.request(
            "POST", "/auth/v1/token",
            params={"grant_type": "refresh_token"},
            json={"refresh_token": refresh_token},
        )
        return response.json()

    def sign_out(self, access_token):
        self.request("POST", "/auth/v1/logout", access_token=access_token)

    def get_user(self, access_token):
        response = self.request("GET", "/auth/v1/user", access_token=access_token)
        return response.json()


_client = None


def get_backend(access_token=None):
    """Shared backend client, bound to the user's token when given"""
    global _client
    if _client is None:
        _client = SupabaseClient()
    if access_token:
        return _client.with_token(access_token)
    return _client


def reset_backend():
    global _client
    _client = None
