"""
Shared fixtures: an in-memory stand-in for the hosted backend and a signed-in user.
"""
import uuid
from datetime import datetime, timezone

import pytest

from foodhub import restaurant_data, supabase_client
from foodhub.supabase_client import BackendError


class FakeQuery:
    def __init__(self, backend, table):
        self.backend = backend
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
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering.append((column, desc))
        return self

    def single(self):
        self.want_single = True
        return self

    def _matches(self, row):
        return all(str(row.get(c)) == str(v) for c, v in self.filters)

    def _embed(self, row):
        row = dict(row)
        if self.columns and "reservation_orders(" in self.columns:
            orders = [dict(o) for o in self.backend.rows("reservation_orders") if o["reservation_id"] == row["id"]]
            for order in orders:
                order["order_items"] = [i for i in self.backend.rows("order_items") if i["order_id"] == order["id"]]
            row["reservation_orders"] = orders
        return row

    def execute(self):
        self.backend.calls.append((self.method, self.table, self.payload, list(self.filters)))
        if self.table in self.backend.failing:
            raise BackendError(f"{self.table} unavailable", status_code=500)

        rows = self.backend.rows(self.table)
        if self.method == "POST":
            new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for row in new_rows:
                row = {"id": str(uuid.uuid4()), "created_at": datetime.now(timezone.utc).isoformat(), **row}
                rows.append(row)
                created.append(row)
            result = created
        elif self.method == "PATCH":
            result = [r for r in rows if self._matches(r)]
            for row in result:
                row.update(self.payload)
        elif self.method == "DELETE":
            result = [r for r in rows if self._matches(r)]
            self.backend.tables[self.table] = [r for r in rows if not self._matches(r)]
        else:
            result = [self._embed(r) for r in rows if self._matches(r)]
            for column, desc in reversed(self.ordering):
                result.sort(key=lambda r: r.get(column) or "", reverse=desc)

        if self.method != "GET" and not self.columns:
            return None
        if self.want_single:
            if len(result) != 1:
                raise BackendError("JSON object requested, multiple (or no) rows returned", status_code=406)
            return result[0]
        return result


class FakeBackend:
    """In-memory backend with the same query interface as SupabaseClient"""

    def __init__(self):
        self.tables = {}
        self.calls = []
        self.failing = set()
        self.tokens = []
        self.users = {}

    def rows(self, table):
        return self.tables.setdefault(table, [])

    def with_token(self, access_token):
        self.tokens.append(access_token)
        return self

    def table(self, name):
        return FakeQuery(self, name)

    def sign_up(self, email, password, data=None):
        if email in self.users:
            raise BackendError("User already registered", status_code=422)
        user = {"id": str(uuid.uuid4()), "email": email, "user_metadata": data or {}}
        self.users[email] = (password, user)
        return {"access_token": f"token-{user['id']}", "refresh_token": f"refresh-{user['id']}", "expires_in": 3600, "user": user}

    def sign_in_with_password(self, email, password):
        stored = self.users.get(email)
        if not stored or stored[0] != password:
            raise BackendError("Invalid login credentials", status_code=400, code="invalid_grant")
        user = stored[1]
        return {"access_token": f"token-{user['id']}", "refresh_token": f"refresh-{user['id']}", "expires_in": 3600, "user": user}

    def refresh_session(self, refresh_token):
        for _, user in self.users.values():
            if refresh_token == f"refresh-{user['id']}":
                return {"access_token": f"token-{user['id']}", "refresh_token": refresh_token, "expires_in": 3600, "user": user}
        raise BackendError("Invalid Refresh Token: Refresh Token Not Found", status_code=400)

    def sign_out(self, access_token):
        self.tokens.append(access_token)

    def get_user(self, access_token):
        for _, user in self.users.values():
            if access_token == f"token-{user['id']}":
                return user
        raise BackendError("invalid JWT", status_code=401)


@pytest.fixture(autouse=True)
def backend(monkeypatch):
    fake = FakeBackend()
    monkeypatch.setattr(supabase_client, "_client", fake)
    restaurant_data.CART_STORAGE.clear()
    restaurant_data.NEWSLETTER_SUBSCRIBERS.clear()
    restaurant_data.NOTIFICATION_READS.clear()
    restaurant_data.NOTIFICATION_SETTINGS.clear()
    return fake


@pytest.fixture
def user():
    return {"id": "user-1", "email": "amina@example.com", "access_token": "token-user-1"}
