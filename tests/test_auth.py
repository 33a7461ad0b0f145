"""Tests for HTTP Basic Auth on the expense routes."""

import base64

import pytest


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/expenses"),
        ("get", "/expenses/1"),
        ("post", "/expenses"),
        ("put", "/expenses/1"),
    ],
)
def test_routes_require_credentials(anonymous_client, method, path):
    response = getattr(anonymous_client, method)(path)

    assert response.status_code == 401
    assert "message" in response.json()


def test_wrong_password_is_rejected(anonymous_client):
    response = anonymous_client.get("/expenses", auth=("tester", "wrong"))

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}
    assert response.headers["WWW-Authenticate"] == "Basic"


def test_valid_credentials_are_accepted(anonymous_client):
    response = anonymous_client.get("/expenses", auth=("tester", "s3cret"))

    assert response.status_code == 200


def test_precomputed_basic_header_works_as_token(anonymous_client):
    token = "Basic " + base64.b64encode(b"tester:s3cret").decode("ascii")

    response = anonymous_client.get("/expenses", headers={"Authorization": token})

    assert response.status_code == 200


def test_bearer_token_is_rejected(anonymous_client):
    response = anonymous_client.get("/expenses", headers={"Authorization": "Bearer abc"})

    assert response.status_code == 401
