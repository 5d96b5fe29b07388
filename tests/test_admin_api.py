from datifyy import config
from datifyy.services.admin_service import quote_filter_value


def add_profiles(db):
	people = [
		(3, "user-3", "Ravi", "Sharma", "male", "Pune", False, None),
		(4, "user-4", "Priya", "Sharma", "female", "Delhi", True, None),
		(5, "user-5", "Karan", "Sharma", "male", "Mumbai", False, "2024-03-01T00:00:00"),
	]
	for row_id, login, first, last, gender, city, verified, deleted_at in people:
		db.rows(config.PROFILE_TABLE).append({
			"id": row_id,
			"user_login_id": login,
			"first_name": first,
			"last_name": last,
			"official_email": f"{first.lower()}@example.com",
			"gender": gender,
			"dob": "1994-02-02",
			"current_city": city,
			"is_official_email_verified": verified,
			"is_deleted": deleted_at is not None,
			"deleted_at": deleted_at,
		})


def audit_actions(db):
	return [entry["action"] for entry in db.rows(config.AUDIT_LOG_TABLE)]


def test_non_admin_is_forbidden(client, auth_headers):
	resp = client.get("/admin/users", headers=auth_headers)
	assert resp.status_code == 403
	assert resp.json()["error"]["code"] == "FORBIDDEN"


def test_search_users(client, db, admin_headers):
	add_profiles(db)

	data = client.get("/admin/users", headers=admin_headers, params={"query": "sharma"}).json()["data"]

	assert data["total"] == 2
	assert {u["first_name"] for u in data["users"]} == {"Ravi", "Priya"}


def test_search_filters(client, db, admin_headers):
	add_profiles(db)

	by_city = client.get("/admin/users", headers=admin_headers, params={"city": "pune"}).json()["data"]
	assert [u["first_name"] for u in by_city["users"]] == ["Ravi"]

	by_gender = client.get("/admin/users", headers=admin_headers, params={"gender": "Female"}).json()["data"]
	assert {u["first_name"] for u in by_gender["users"]} == {"Jess", "Ada", "Priya"}

	verified = client.get("/admin/users", headers=admin_headers, params={"verified": "true"}).json()["data"]
	assert [u["first_name"] for u in verified["users"]] == ["Priya"]


def test_deleted_users_hidden_by_default(client, db, admin_headers):
	add_profiles(db)

	default = client.get("/admin/users", headers=admin_headers).json()["data"]
	everyone = client.get("/admin/users", headers=admin_headers, params={"include_deleted": "true"}).json()["data"]

	assert default["total"] == 4
	assert everyone["total"] == 5


def test_pagination(client, db, admin_headers):
	add_profiles(db)

	data = client.get("/admin/users", headers=admin_headers, params={"limit": 2, "offset": 1}).json()["data"]
	assert data["total"] == 4
	assert len(data["users"]) == 2
	assert data["limit"] == 2 and data["offset"] == 1


def test_limit_is_bounded(client, admin_headers):
	assert client.get("/admin/users", headers=admin_headers, params={"limit": 500}).status_code == 400


def test_update_verification(client, db, admin_headers):
	resp = client.patch(
		"/admin/users/user-1/verification",
		headers=admin_headers,
		json={"verification_type": "phone", "status": True, "reason": "Checked by call"},
	)

	assert resp.status_code == 200
	assert resp.json()["data"]["is_phone_verified"] is True
	assert audit_actions(db) == ["verification"]


def test_update_verification_rejects_unknown_type(client, admin_headers):
	resp = client.patch("/admin/users/user-1/verification", headers=admin_headers, json={"verification_type": "passport", "status": True})
	assert resp.status_code == 400


def test_suspend_and_unsuspend(client, db, admin_headers, auth_headers):
	assert client.post("/admin/users/user-1/suspend", headers=admin_headers).json()["data"] == {"status": "suspended"}
	assert client.get("/user-profile", headers=auth_headers).status_code == 404

	assert client.post("/admin/users/user-1/unsuspend", headers=admin_headers).json()["data"] == {"status": "unsuspended"}
	assert client.get("/user-profile", headers=auth_headers).status_code == 200
	assert audit_actions(db) == ["suspend", "unsuspend"]


def test_suspend_unknown_user(client, admin_headers):
	resp = client.post("/admin/users/ghost/suspend", headers=admin_headers)
	assert resp.status_code == 404


def test_search_term_with_comma_stays_one_filter(client, db, admin_headers):
	add_profiles(db)

	resp = client.get("/admin/users", headers=admin_headers, params={"query": "Sharma, Ravi"})

	assert resp.status_code == 200
	assert resp.json()["data"]["total"] == 0
	assert len(db.or_clauses[-1]) == 3


def test_search_term_cannot_add_filter_clauses(client, db, admin_headers):
	resp = client.get("/admin/users", headers=admin_headers, params={"query": "x%,is_admin.eq.true,first_name.ilike.%x"})

	assert resp.json()["data"]["users"] == []
	clauses = db.or_clauses[-1]
	assert len(clauses) == 3
	assert all(clause.split(".")[1] == "ilike" for clause in clauses)


def test_quote_filter_value_escapes_quotes():
	assert quote_filter_value('O"Brien\\') == '"O\\"Brien\\\\"'
