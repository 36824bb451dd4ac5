"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from cyrcipher.core.config import get_settings
from cyrcipher.main import create_app

PREFIX = get_settings().api_v1_prefix


@pytest.fixture
def client():
    with TestClient(create_app()) as client:
        yield client


class TestEncryptEndpoint:

    def test_route_encrypt(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "pROceSsIng", "cipher_type": "route", "key": 5},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "pSRsOIcneg"
        assert body["key_used"] == 5
        assert body["cipher_type"] == "route"
        assert "5 columns" in body["explanation"]

    def test_route_key_as_string(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "pROceSsIng", "cipher_type": "route", "key": "7"},
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "pIRnOgc e S s "

    def test_polyalphabetic_encrypt(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "привет", "cipher_type": "polyalphabetic", "key": "ключ"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "ЪЬЖЩПЮ"
        assert body["key_used"] == "КЛЮЧ"

    def test_decomposed_yo_is_normalized(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "\u0415\u0308", "cipher_type": "polyalphabetic", "key": "А"},
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "\u0401"

    def test_random_key_when_missing(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "polyalphabetic"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["key_used"]
        assert len(body["ciphertext"]) == 6

    def test_invalid_key(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "route", "key": 0},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid_key"
        assert body["details"]["kind"] == "invalid_key"

    def test_invalid_text(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "HELLO", "cipher_type": "polyalphabetic", "key": "ключ"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_text"

    def test_empty_text(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "", "cipher_type": "route", "key": 3},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_text"

    def test_text_too_long(self, client):
        too_long = "А" * (get_settings().max_text_length + 1)
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": too_long, "cipher_type": "route", "key": 3},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "TextTooLongError"

    def test_unknown_cipher_type(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "ПРИВЕТ", "cipher_type": "caesar", "key": 3},
        )

        assert response.status_code == 422

    def test_route_roundtrip_keeps_combining_marks(self, client):
        encrypted = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "q\u0301ea", "cipher_type": "route", "key": 2},
        )

        assert encrypted.status_code == 200
        ciphertext = encrypted.json()["ciphertext"]
        assert ciphertext == "qe\u0301a"

        decrypted = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": ciphertext, "cipher_type": "route", "key": 2},
        )

        assert decrypted.status_code == 200
        assert decrypted.json()["plaintext"] == "q\u0301ea"

    def test_route_key_over_limit(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "ТЕКСТ", "cipher_type": "route", "key": 100_000_000},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid_key"
        assert body["details"]["max_key"] == get_settings().max_text_length


class TestDecryptEndpoint:

    def test_route_decrypt_keeps_padding(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "pIRnOgc e S s ", "cipher_type": "route", "key": 7},
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "pROceSsIng    "

    def test_route_decrypt_strip_padding(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={
                "ciphertext": "pIRnOgc e S s ",
                "cipher_type": "route",
                "key": 7,
                "strip_padding": True,
            },
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "pROceSsIng"

    def test_route_decrypt_bad_length(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "ABCDE", "cipher_type": "route", "key": 2},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_text"

    def test_polyalphabetic_decrypt(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "ЪЬЖЩПЮ", "cipher_type": "polyalphabetic", "key": "КЛЮЧ"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["plaintext"] == "ПРИВЕТ"
        assert "К=11" in body["explanation"]

    def test_key_required(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "ЪЬЖЩПЮ", "cipher_type": "polyalphabetic"},
        )

        assert response.status_code == 422

    def test_polyalphabetic_numeric_key_rejected(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "ЪЬЖЩПЮ", "cipher_type": "polyalphabetic", "key": 5},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_key"

    def test_route_decrypt_explanation(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "pSRsOIcneg", "cipher_type": "route", "key": 5},
        )

        assert response.status_code == 200
        assert "read row by row" in response.json()["explanation"]

    def test_route_key_over_limit(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "ТЕКСТ", "cipher_type": "route", "key": 100_000_000},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_key"


class TestCiphersEndpoint:

    def test_list_ciphers(self, client):
        response = client.get(f"{PREFIX}/ciphers")

        assert response.status_code == 200
        items = {item["cipher_type"]: item for item in response.json()}
        assert set(items) == {"route", "polyalphabetic"}
        assert items["route"]["cipher_family"] == "transposition"
        assert items["route"]["alphabet"] is None
        assert len(items["polyalphabetic"]["alphabet"]) == 33
