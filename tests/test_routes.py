"""HTTP tests for the letter and auth routes."""

import os
from unittest.mock import Mock, patch
from urllib.parse import parse_qs, urlsplit

from fastapi.testclient import TestClient
from googleapiclient.errors import HttpError

from letter_relay.core.config import RelayConfig
from letter_relay.models import FolderReference, Letter, LetterSummary, TokenPair
from letter_relay.server import create_app
from letter_relay.server.dependencies import get_authorizer

CONFIG = RelayConfig(
    client_id="client-id.apps.googleusercontent.com",
    client_secret="secret",
    redirect_uri="http://localhost:5000/api/auth/google/callback",
    client_url="http://localhost:3000",
)


def _http_error(status):
    return HttpError(resp=Mock(status=status, reason="error"), content=b"{}")


class RouteTestBase:
    """Builds an app whose authorizer returns a mocked client."""

    def setup_method(self):
        self.google = Mock()
        self.authorizer = Mock(return_value=self.google)
        self.app = create_app(CONFIG)
        self.app.dependency_overrides[get_authorizer] = lambda: self.authorizer
        self.client = TestClient(self.app)


class TestCreateLetterRoute(RouteTestBase):
    """Tests for POST /api/letters."""

    def test_create_letter(self):
        self.google.ensure_folder.return_value = FolderReference("folder_1", "Letters")
        self.google.create_document.return_value = "doc_123"

        response = self.client.post(
            "/api/letters",
            json={"content": "Dear friend", "title": "Hello", "accessToken": "tok"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Letter saved successfully"
        assert body["documentId"] == "doc_123"
        assert body["documentUrl"] == "https://docs.google.com/document/d/doc_123/edit"
        self.authorizer.assert_called_once_with("tok")
        self.google.ensure_folder.assert_called_once_with("Letters")
        self.google.create_document.assert_called_once_with("Hello")
        self.google.insert_text.assert_called_once_with("doc_123", "Dear friend", 1)
        self.google.add_parent.assert_called_once_with("doc_123", "folder_1")

    def test_missing_field_is_400_without_downstream_calls(self):
        response = self.client.post(
            "/api/letters", json={"content": "Dear friend", "accessToken": "tok"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}
        self.authorizer.assert_not_called()

    def test_empty_field_is_400(self):
        response = self.client.post(
            "/api/letters", json={"content": "", "title": "Hello", "accessToken": "tok"}
        )

        assert response.status_code == 400
        self.authorizer.assert_not_called()

    def test_missing_body_is_400(self):
        response = self.client.post("/api/letters")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_downstream_failure_is_generic_500(self):
        self.google.ensure_folder.return_value = FolderReference("folder_1", "Letters")
        self.google.create_document.return_value = "doc_123"
        self.google.insert_text.side_effect = _http_error(403)

        response = self.client.post(
            "/api/letters",
            json={"content": "Dear friend", "title": "Hello", "accessToken": "tok"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save letter to Google Drive"}
        self.google.add_parent.assert_not_called()

    def test_downstream_failure_is_logged_once_as_error(self, caplog):
        self.google.ensure_folder.return_value = FolderReference("folder_1", "Letters")
        self.google.create_document.side_effect = _http_error(429)

        with caplog.at_level("INFO"):
            self.client.post(
                "/api/letters",
                json={"content": "Dear friend", "title": "Hello", "accessToken": "tok"},
            )

        errors = [record for record in caplog.records if record.levelname == "ERROR"]
        assert len(errors) == 1
        assert "Create document failed" in errors[0].getMessage()
        assert "Save letter answered 500 after step 'Create document' failed" in caplog.text

    def test_authorizer_failure_is_500(self):
        self.authorizer.side_effect = ValueError("bad token")

        response = self.client.post(
            "/api/letters",
            json={"content": "Dear friend", "title": "Hello", "accessToken": "tok"},
        )

        assert response.status_code == 500
        assert "bad token" not in response.text


class TestListLettersRoute(RouteTestBase):
    """Tests for GET /api/letters."""

    def test_missing_token_is_400_without_downstream_calls(self):
        response = self.client.get("/api/letters")

        assert response.status_code == 400
        assert response.json() == {"error": "Access token is required"}
        self.authorizer.assert_not_called()
        assert self.google.method_calls == []

    def test_no_folder_returns_empty_list(self):
        self.google.find_folder.return_value = None

        response = self.client.get("/api/letters", params={"accessToken": "tok"})

        assert response.status_code == 200
        assert response.json() == {"letters": []}
        self.google.ensure_folder.assert_not_called()
        self.google.list_documents.assert_not_called()

    def test_lists_letters(self):
        self.google.find_folder.return_value = FolderReference("folder_1", "Letters")
        self.google.list_documents.return_value = [
            LetterSummary(
                "doc_1",
                "First",
                "https://docs.google.com/document/d/doc_1/edit",
                "2024-05-01T10:00:00.000Z",
            )
        ]

        response = self.client.get("/api/letters", params={"accessToken": "tok"})

        assert response.status_code == 200
        assert response.json() == {
            "letters": [
                {
                    "id": "doc_1",
                    "name": "First",
                    "webViewLink": "https://docs.google.com/document/d/doc_1/edit",
                    "createdTime": "2024-05-01T10:00:00.000Z",
                }
            ]
        }
        self.google.list_documents.assert_called_once_with("folder_1")

    def test_absent_metadata_is_omitted(self):
        self.google.find_folder.return_value = FolderReference("folder_1", "Letters")
        self.google.list_documents.return_value = [LetterSummary("doc_1", "First")]

        response = self.client.get("/api/letters", params={"accessToken": "tok"})

        assert response.status_code == 200
        assert response.json() == {"letters": [{"id": "doc_1", "name": "First"}]}

    def test_failure_is_500(self):
        self.google.find_folder.side_effect = _http_error(401)

        response = self.client.get("/api/letters", params={"accessToken": "tok"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch letters from Google Drive"}


class TestReadLetterRoute(RouteTestBase):
    """Tests for GET /api/letters/{id}."""

    def test_missing_token_is_400_without_downstream_calls(self):
        response = self.client.get("/api/letters/doc_1")

        assert response.status_code == 400
        assert response.json() == {"error": "Access token is required"}
        self.authorizer.assert_not_called()

    def test_read_letter(self):
        self.google.read_document.return_value = Letter("doc_1", "Hello", "Hello, world!")

        response = self.client.get("/api/letters/doc_1", params={"accessToken": "tok"})

        assert response.status_code == 200
        assert response.json() == {"id": "doc_1", "title": "Hello", "content": "Hello, world!"}
        self.google.read_document.assert_called_once_with("doc_1")

    def test_not_found_is_generic_500(self):
        self.google.read_document.side_effect = _http_error(404)

        response = self.client.get("/api/letters/missing", params={"accessToken": "tok"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch letter from Google Drive"}


class TestAuthRoutes:
    """Tests for the OAuth routes."""

    def setup_method(self):
        self.client = TestClient(create_app(CONFIG))

    def test_app_relaxes_token_scope_check(self, monkeypatch):
        monkeypatch.delenv("OAUTHLIB_RELAX_TOKEN_SCOPE", raising=False)

        create_app(CONFIG)

        assert os.environ["OAUTHLIB_RELAX_TOKEN_SCOPE"] == "1"

    def test_auth_url(self):
        response = self.client.get("/api/auth/google/url")

        assert response.status_code == 200
        params = parse_qs(urlsplit(response.json()["url"]).query)
        assert params["access_type"] == ["offline"]
        assert params["prompt"] == ["consent"]
        assert params["client_id"] == [CONFIG.client_id]
        assert set(params["scope"][0].split(" ")) == {
            "https://www.googleapis.com/auth/userinfo.profile",
            "https://www.googleapis.com/auth/userinfo.email",
            "https://www.googleapis.com/auth/drive.file",
        }

    def test_auth_url_without_client_config_is_500(self):
        client = TestClient(create_app(RelayConfig()))

        response = client.get("/api/auth/google/url")

        assert response.status_code == 500
        assert response.json() == {"error": "Authentication failed"}

    def test_callback_redirects_with_tokens(self):
        with patch("letter_relay.server.auth_routes.exchange_code") as mock_exchange:
            mock_exchange.return_value = TokenPair("access-1", "refresh-1")

            response = self.client.get(
                "/api/auth/google/callback",
                params={"code": "auth-code"},
                follow_redirects=False,
            )

        assert response.status_code == 302
        location = urlsplit(response.headers["location"])
        assert f"{location.scheme}://{location.netloc}" == "http://localhost:3000"
        assert parse_qs(location.query) == {
            "access_token": ["access-1"],
            "refresh_token": ["refresh-1"],
        }
        mock_exchange.assert_called_once_with(CONFIG, "auth-code")

    def test_callback_failure_is_500(self):
        with patch("letter_relay.server.auth_routes.exchange_code") as mock_exchange:
            mock_exchange.side_effect = ValueError("invalid_grant")

            response = self.client.get(
                "/api/auth/google/callback",
                params={"code": "bad"},
                follow_redirects=False,
            )

        assert response.status_code == 500
        assert response.json() == {"error": "Authentication failed"}


class TestMiddleware(RouteTestBase):
    """Tests for CORS, security headers and access logging."""

    def test_security_headers(self):
        response = self.client.get("/api/letters")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert response.headers["Referrer-Policy"] == "no-referrer"
        assert response.headers["Cache-Control"] == "no-store"

    def test_cors_allows_client_url(self):
        response = self.client.options(
            "/api/letters",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_access_log_omits_query(self, caplog):
        self.google.find_folder.return_value = None

        with caplog.at_level("INFO"):
            response = self.client.get("/api/letters", params={"accessToken": "secret-token"})

        assert response.status_code == 200
        self.authorizer.assert_called_once_with("secret-token")
        assert "GET /api/letters 200" in caplog.text
        assert "secret-token" not in caplog.text

    def test_access_log_on_rejected_request(self, caplog):
        with caplog.at_level("INFO", logger="letter_relay.access"):
            self.client.get("/api/letters", params={"page": "secret-value"})

        assert "GET /api/letters 400" in caplog.text
        assert "secret-value" not in caplog.text
