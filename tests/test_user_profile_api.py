from datifyy import config


def profile(db, user_login_id="user-1"):
	return next(row for row in db.rows(config.PROFILE_TABLE) if row["user_login_id"] == user_login_id)


def test_get_profile(client, auth_headers):
	resp = client.get("/user-profile", headers=auth_headers)
	body = resp.json()

	assert resp.status_code == 200
	assert body["success"] is True
	assert body["data"]["first_name"] == "Jess"
	assert body["data"]["email"] == "jess@example.com"
	assert body["data"]["last_updated"] == "2024-01-01T00:00:00"
	assert body["request_id"] == resp.headers["X-Request-ID"]


def test_request_id_is_echoed(client, auth_headers):
	resp = client.get("/user-profile", headers={**auth_headers, "X-Request-ID": "abc-123"})
	assert resp.headers["X-Request-ID"] == "abc-123"
	assert resp.json()["request_id"] == "abc-123"


def test_invalid_token_is_rejected(client):
	resp = client.get("/user-profile", headers={"Authorization": "Bearer not-a-jwt"})
	assert resp.status_code == 401
	assert resp.json()["error"]["code"] == "UNAUTHORIZED"


def test_unknown_user_gets_404(client, token_for):
	resp = client.get("/user-profile", headers={"Authorization": f"Bearer {token_for('ghost')}"})
	assert resp.status_code == 404
	assert resp.json()["error"]["code"] == "USER_NOT_FOUND"


def test_update_profile(client, db, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"bio": "  Loves long walks  ", "gender": "Female", "height": 165})
	data = resp.json()["data"]

	assert resp.status_code == 200
	assert data["bio"] == "Loves long walks"
	assert data["gender"] == "female"
	assert data["height"] == 165
	assert profile(db)["updated_at"] != "2024-01-01T00:00:00"


def test_update_rejects_unknown_fields(client, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"favourite_colour": "blue"})
	body = resp.json()

	assert resp.status_code == 400
	assert body["error"]["code"] == "VALIDATION_ERROR"
	assert body["error"]["details"][0]["field"] == "favourite_colour"


def test_update_rejects_out_of_range_height(client, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"height": 99})
	assert resp.status_code == 400
	assert resp.json()["error"]["details"][0]["field"] == "height"


def test_update_rejects_underage_dob(client, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"dob": "2015-01-01"})
	body = resp.json()

	assert resp.status_code == 400
	assert body["message"] == "User must be at least 18 years old"
	assert body["error"]["details"][0]["field"] == "dob"


def test_update_rejects_bad_image_urls(client, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"images": ["https://cdn.test/a.jpg", "not a url"]})
	assert resp.status_code == 400
	assert "Image 2: Invalid URL format" in resp.json()["message"]


def test_update_never_writes_official_email(client, db, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"official_email": "new@example.com", "hometown": "Goa"})

	assert resp.status_code == 200
	assert profile(db)["official_email"] == "jess@example.com"
	assert profile(db)["hometown"] == "Goa"


def test_update_with_current_version_succeeds(client, auth_headers):
	resp = client.put("/user-profile", headers={**auth_headers, "If-Match": "2024-01-01T00:00:00"}, json={"hometown": "Goa"})
	assert resp.status_code == 200


def test_update_with_stale_version_conflicts(client, db, auth_headers):
	resp = client.put("/user-profile", headers={**auth_headers, "If-Match": "2023-12-31T00:00:00"}, json={"hometown": "Goa"})

	assert resp.status_code == 409
	assert resp.json()["error"]["code"] == "STALE_WRITE"
	assert profile(db).get("hometown") is None


def test_delete_is_soft(client, db, auth_headers):
	resp = client.delete("/user-profile", headers=auth_headers)

	assert resp.status_code == 200
	assert profile(db)["is_deleted"] is True
	assert profile(db)["deleted_at"]
	assert client.get("/user-profile", headers=auth_headers).status_code == 404


def test_avatar_is_prepended_and_capped(client, db, auth_headers):
	profile(db)["images"] = [f"https://cdn.test/{i}.jpg" for i in range(6)]

	resp = client.patch("/user-profile/avatar", headers=auth_headers, json={"image_url": "https://cdn.test/new.png"})
	images = resp.json()["data"]["images"]

	assert resp.status_code == 200
	assert images[0] == "https://cdn.test/new.png"
	assert len(images) == 6
	assert "https://cdn.test/5.jpg" not in images


def test_avatar_requires_image_url(client, auth_headers):
	resp = client.patch("/user-profile/avatar", headers=auth_headers, json={"image_url": "https://cdn.test/file.txt"})
	assert resp.status_code == 400


def test_stats(client, auth_headers):
	resp = client.get("/user-profile/stats", headers=auth_headers)
	data = resp.json()["data"]

	assert resp.status_code == 200
	assert data["profile_strength"] == "weak"
	assert data["verification_status"] == {"email": False, "phone": False, "aadhar": False}
	assert 0 <= data["completion_percentage"] <= 100


def test_completeness(client, auth_headers):
	data = client.get("/user-profile/completeness", headers=auth_headers).json()["data"]
	assert data["is_complete"] is True
	assert "bio" in data["missing_fields"]


def test_exists(client, token_for, auth_headers):
	assert client.get("/user-profile/exists", headers=auth_headers).json()["data"] == {"exists": True}

	ghost = {"Authorization": f"Bearer {token_for('ghost')}"}
	assert client.get("/user-profile/exists", headers=ghost).json()["data"] == {"exists": False}


def test_database_failure_maps_to_500(client, db, auth_headers):
	db.fail_with = ConnectionError("connection refused")

	resp = client.get("/user-profile", headers=auth_headers)

	assert resp.status_code == 500
	assert resp.json()["error"]["code"] == "DATABASE_ERROR"


def test_health(client):
	assert client.get("/health").json() == {"status": "ok"}


def test_required_fields_update_makes_profile_complete(client, db, auth_headers):
	row = profile(db)
	for field in ("first_name", "last_name", "gender", "dob", "current_city", "looking_for"):
		row[field] = None

	resp = client.put("/user-profile", headers=auth_headers, json={
		"first_name": "Jess",
		"last_name": "Lee",
		"gender": "Female",
		"dob": "1995-05-05",
		"current_city": "Pune",
		"looking_for": "Relationship",
	})
	assert resp.status_code == 200

	data = client.get("/user-profile/completeness", headers=auth_headers).json()["data"]
	assert data["is_complete"] is True


def test_update_rejects_one_letter_name(client, db, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"first_name": "J"})
	body = resp.json()

	assert resp.status_code == 400
	assert body["error"]["code"] == "VALIDATION_ERROR"
	assert body["message"] == "First Name must be at least 2 characters"
	assert body["error"]["details"][0]["field"] == "first_name"
	assert profile(db)["first_name"] == "Jess"


def test_short_bio_is_saved_with_a_warning(client, db, auth_headers):
	resp = client.put("/user-profile", headers=auth_headers, json={"bio": "hi"})
	data = resp.json()["data"]

	assert resp.status_code == 200
	assert profile(db)["bio"] == "hi"
	assert [w["code"] for w in data["warnings"]] == ["BIO_TOO_SHORT"]


def test_validate_profile_is_a_dry_run(client, db, auth_headers):
	resp = client.post("/user-profile/validate", headers=auth_headers, json={"first_name": "J", "bio": "hi"})
	data = resp.json()["data"]

	assert resp.status_code == 200
	assert data["is_valid"] is False
	assert [e["code"] for e in data["errors"]] == ["NAME_TOO_SHORT"]
	assert [w["code"] for w in data["warnings"]] == ["BIO_TOO_SHORT"]
	assert profile(db)["first_name"] == "Jess"
