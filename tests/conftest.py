import copy
import os
import re
from itertools import count

import jwt
import pytest

os.environ.setdefault("JWT_SECRET", "datifyy-test-secret-with-enough-length-for-hs256")
os.environ.setdefault("SUPABASE_URL", "http://supabase.test")
os.environ.setdefault("SUPABASE_KEY", "test-service-key")

from fastapi.testclient import TestClient  # noqa: E402

from datifyy import config  # noqa: E402
from supabase_client import get_supabase_client  # noqa: E402


class FakeResponse:
	def __init__(self, data):
		self.data = data
		self.count = len(data)


def _like(pattern: str, value) -> bool:
	if value is None:
		return False
	regex = "^" + ".*".join(re.escape(part) for part in pattern.split("%")) + "$"
	return re.match(regex, str(value), re.IGNORECASE) is not None


def split_or(expression: str):
	"""Split a PostgREST or= list on top-level commas, unquoting "..." values"""
	clauses, current, quoted, escaped = [], "", False, False
	for char in expression:
		if escaped:
			current += char
			escaped = False
		elif quoted and char == "\\":
			escaped = True
		elif char == '"':
			quoted = not quoted
		elif char == "," and not quoted:
			clauses.append(current)
			current = ""
		else:
			current += char
	clauses.append(current)
	return clauses


class FakeQuery:
	"""Just enough of the PostgREST query builder for the services under test"""

	def __init__(self, db, table):
		self.db = db
		self.table = table
		self.op = "select"
		self.payload = None
		self.filters = []
		self.order_by = None
		self.bounds = None

	def select(self, *columns, count=None):
		self.op = "select"
		return self

	def insert(self, row):
		self.op, self.payload = "insert", row
		return self

	def update(self, values):
		self.op, self.payload = "update", values
		return self

	def delete(self):
		self.op = "delete"
		return self

	def eq(self, column, value):
		self.filters.append(lambda row: row.get(column) == value)
		return self

	def neq(self, column, value):
		self.filters.append(lambda row: row.get(column) != value)
		return self

	def is_(self, column, value):
		expected = None if value in (None, "null") else value
		self.filters.append(lambda row: row.get(column) is expected)
		return self

	def ilike(self, column, pattern):
		self.filters.append(lambda row: _like(pattern, row.get(column)))
		return self

	def or_(self, expression):
		parsed = split_or(expression)
		self.db.or_clauses.append(parsed)
		clauses = []
		for clause in parsed:
			column, op, value = clause.split(".", 2)
			if op == "ilike":
				clauses.append(lambda row, c=column, v=value: _like(v, row.get(c)))
			else:
				clauses.append(lambda row, c=column, v=value: str(row.get(c)) == v)
		self.filters.append(lambda row: any(clause(row) for clause in clauses))
		return self

	def order(self, column, desc=False):
		self.order_by = (column, desc)
		return self

	def limit(self, n):
		self.bounds = (0, n)
		return self

	def range(self, start, end):
		self.bounds = (start, end - start + 1)
		return self

	def _matching(self):
		rows = self.db.tables.setdefault(self.table, [])
		return [row for row in rows if all(f(row) for f in self.filters)]

	def execute(self):
		if self.db.fail_with:
			raise self.db.fail_with
		rows = self.db.tables.setdefault(self.table, [])

		if self.op == "insert":
			new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
			inserted = []
			for row in new_rows:
				row = copy.deepcopy(row)
				row.setdefault("id", next(self.db.ids))
				rows.append(row)
				inserted.append(copy.deepcopy(row))
			return FakeResponse(inserted)

		matched = self._matching()

		if self.op == "update":
			for row in matched:
				row.update(copy.deepcopy(self.payload))
			return FakeResponse(copy.deepcopy(matched))

		if self.op == "delete":
			self.db.tables[self.table] = [row for row in rows if row not in matched]
			return FakeResponse(copy.deepcopy(matched))

		if self.order_by:
			column, desc = self.order_by
			matched = sorted(matched, key=lambda row: str(row.get(column)), reverse=desc)
		if self.bounds:
			start, size = self.bounds
			matched = matched[start:start + size]
		return FakeResponse(copy.deepcopy(matched))


class FakeSupabase:
	def __init__(self):
		self.tables = {}
		self.ids = count(100)
		self.fail_with = None
		self.or_clauses = []

	def table(self, name):
		return FakeQuery(self, name)

	def rows(self, name):
		return self.tables.setdefault(name, [])


def profile_row(user_login_id="user-1", **overrides):
	row = {
		"id": 1,
		"user_login_id": user_login_id,
		"first_name": "Jess",
		"last_name": "Lee",
		"official_email": "jess@example.com",
		"gender": "female",
		"dob": "1995-06-15",
		"current_city": "Mumbai",
		"looking_for": "Relationship",
		"bio": None,
		"images": None,
		"height": None,
		"is_official_email_verified": False,
		"is_phone_verified": False,
		"is_aadhar_verified": False,
		"is_admin": False,
		"is_deleted": False,
		"deleted_at": None,
		"updated_at": "2024-01-01T00:00:00",
	}
	row.update(overrides)
	return row


@pytest.fixture
def db():
	fake = FakeSupabase()
	fake.rows(config.PROFILE_TABLE).append(profile_row())
	fake.rows(config.PROFILE_TABLE).append(profile_row(
		"admin-1", id=2, first_name="Ada", last_name="Admin", official_email="ada@example.com", is_admin=True,
	))
	return fake


@pytest.fixture
def app(db):
	from main import app as fastapi_app

	fastapi_app.dependency_overrides[get_supabase_client] = lambda: db
	yield fastapi_app
	fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
	return TestClient(app)


def make_token(sub):
	return jwt.encode({"sub": sub}, config.JWT_SECRET, algorithm="HS256")


@pytest.fixture
def auth_headers():
	return {"Authorization": f"Bearer {make_token('user-1')}"}


@pytest.fixture
def admin_headers():
	return {"Authorization": f"Bearer {make_token('admin-1')}"}


@pytest.fixture
def token_for():
	return make_token
