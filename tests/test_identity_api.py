class TestRegister:
    def test_register_returns_user_without_secrets(self, client):
        r = client.post("/identity/register", json={"username": "alice", "password": "s3cret-pass"})
        assert r.status_code == 201
        body = r.json()
        assert body["username"] == "alice"
        assert isinstance(body["id"], int)
        assert "hashed_password" not in body
        assert "security_stamp" not in body

    def test_duplicate_username_conflicts(self, client):
        payload = {"username": "alice", "password": "s3cret-pass"}
        assert client.post("/identity/register", json=payload).status_code == 201
        assert client.post("/identity/register", json=payload).status_code == 409

    def test_short_password_is_rejected(self, client):
        r = client.post("/identity/register", json={"username": "alice", "password": "short"})
        assert r.status_code == 422


class TestLogin:
    def test_login_returns_bearer_pair(self, register_and_login):
        tokens = register_and_login()
        assert tokens["token_type"] == "bearer"
        assert tokens["access_token"]
        assert tokens["refresh_token"]
        assert tokens["expires_in"] > 0

    def test_wrong_password_and_unknown_user_look_the_same(self, client, register_and_login):
        register_and_login()
        bad_pwd = client.post("/identity/login", json={"username": "alice", "password": "wrong-pass"})
        unknown = client.post("/identity/login", json={"username": "bob", "password": "whatever1"})
        assert bad_pwd.status_code == unknown.status_code == 401
        assert bad_pwd.json() == unknown.json() == {"detail": "Invalid credentials"}


class TestRequiresAuth:
    def test_without_token_is_401(self, client):
        r = client.get("/requires-auth")
        assert r.status_code == 401
        assert r.headers["www-authenticate"] == "Bearer"

    def test_with_garbage_token_is_401(self, client):
        r = client.get("/requires-auth", headers={"Authorization": "Bearer not-a-jwt"})
        assert r.status_code == 401

    def test_with_valid_token_greets_user(self, client, auth_headers):
        r = client.get("/requires-auth", headers=auth_headers)
        assert r.status_code == 200
        assert r.text == "Hello, alice!"

    def test_refresh_token_is_not_an_access_token(self, client, register_and_login):
        tokens = register_and_login()
        r = client.get("/requires-auth", headers={"Authorization": f"Bearer {tokens['refresh_token']}"})
        assert r.status_code == 401


class TestRefresh:
    def test_refresh_rotates_and_revokes_old_token(self, client, register_and_login):
        tokens = register_and_login()

        r = client.post("/identity/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert r.status_code == 200
        rotated = r.json()
        assert rotated["refresh_token"] != tokens["refresh_token"]

        headers = {"Authorization": f"Bearer {rotated['access_token']}"}
        assert client.get("/requires-auth", headers=headers).status_code == 200

        # réutilisation de l'ancien refresh : refusée
        r = client.post("/identity/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert r.status_code == 401

    def test_logout_revokes_refresh_token(self, client, register_and_login):
        tokens = register_and_login()
        assert client.post("/identity/logout", json={"refresh_token": tokens["refresh_token"]}).status_code == 204
        r = client.post("/identity/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert r.status_code == 401

    def test_logout_with_garbage_is_silent(self, client):
        assert client.post("/identity/logout", json={"refresh_token": "nope"}).status_code == 204


class TestManage:
    def test_info_returns_current_user(self, client, auth_headers):
        r = client.get("/identity/manage/info", headers=auth_headers)
        assert r.status_code == 200
        assert r.json()["username"] == "alice"

    def test_info_requires_token(self, client):
        assert client.get("/identity/manage/info").status_code == 401

    def test_change_password_invalidates_existing_tokens(self, client, register_and_login):
        tokens = register_and_login()
        headers = {"Authorization": f"Bearer {tokens['access_token']}"}

        r = client.post(
            "/identity/manage/password",
            json={"old_password": "s3cret-pass", "new_password": "n3w-secret-pass"},
            headers=headers,
        )
        assert r.status_code == 204

        assert client.get("/requires-auth", headers=headers).status_code == 401
        r = client.post("/identity/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert r.status_code == 401

        old = client.post("/identity/login", json={"username": "alice", "password": "s3cret-pass"})
        assert old.status_code == 401
        new = client.post("/identity/login", json={"username": "alice", "password": "n3w-secret-pass"})
        assert new.status_code == 200

    def test_change_password_with_wrong_old_password(self, client, auth_headers):
        r = client.post(
            "/identity/manage/password",
            json={"old_password": "not-it-at-all", "new_password": "n3w-secret-pass"},
            headers=auth_headers,
        )
        assert r.status_code == 401
        # le token reste valide
        assert client.get("/requires-auth", headers=auth_headers).status_code == 200
