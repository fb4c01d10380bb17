"""Tests for image clients and response parsing."""

from io import BytesIO
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from PIL import Image

from conftest import make_response
from dino_sprites.config import MissingCredentialError, Settings
from dino_sprites.images.client import (
    GeminiImageClient,
    MockImageClient,
    extract_image,
    get_image_client,
    response_text,
)


class TestExtractImage:
    """Tests for inline image extraction."""

    def test_decodes_base64_string(self, png_bytes, png_base64):
        response = make_response(image=png_base64)
        assert extract_image(response) == png_bytes

    def test_passes_raw_bytes_through(self, png_bytes):
        response = make_response(image=png_bytes)
        assert extract_image(response) == png_bytes

    def test_skips_text_parts(self, png_bytes):
        response = make_response(image=png_bytes, text="Here is your sprite")
        assert extract_image(response) == png_bytes

    def test_no_image_returns_none(self):
        assert extract_image(make_response(text="Sorry")) is None

    def test_empty_response(self):
        assert extract_image(SimpleNamespace(candidates=None)) is None
        assert extract_image(SimpleNamespace(candidates=[SimpleNamespace(content=None)])) is None

    def test_scans_later_candidates(self, png_bytes):
        first = make_response(text="no image here").candidates[0]
        second = make_response(image=png_bytes).candidates[0]
        response = SimpleNamespace(candidates=[first, second])
        assert extract_image(response) == png_bytes

    def test_returns_first_image(self, png_bytes):
        response = make_response(image=png_bytes)
        response.candidates[0].content.parts.append(
            SimpleNamespace(text=None, inline_data=SimpleNamespace(data=b"second"))
        )
        assert extract_image(response) == png_bytes


class TestResponseText:
    def test_joins_text_parts(self, png_bytes):
        response = make_response(image=png_bytes, text="Hello")
        response.candidates[0].content.parts.append(SimpleNamespace(text=" world", inline_data=None))
        assert response_text(response) == "Hello world"

    def test_no_text(self, png_bytes):
        assert response_text(make_response(image=png_bytes)) == ""


class TestGeminiImageClient:
    """Tests for GeminiImageClient with the SDK patched out."""

    @pytest.fixture
    def sdk(self, monkeypatch):
        from google import genai

        client = MagicMock()
        factory = MagicMock(return_value=client)
        monkeypatch.setattr(genai, "Client", factory)
        return factory

    def test_requests_text_and_image(self, settings, sdk, png_bytes):
        sdk.return_value.models.generate_content.return_value = make_response(image=png_bytes)
        client = GeminiImageClient(settings)

        response = client.generate_content("Draw an egg")

        assert extract_image(response) == png_bytes
        sdk.assert_called_once_with(api_key="test-key")
        kwargs = sdk.return_value.models.generate_content.call_args.kwargs
        assert kwargs["model"] == settings.image_model
        assert kwargs["contents"] == "Draw an egg"
        assert kwargs["config"].response_modalities == ["TEXT", "IMAGE"]

    def test_usage_counts_images_only(self, settings, sdk, png_bytes):
        sdk.return_value.models.generate_content.side_effect = [
            make_response(image=png_bytes),
            make_response(text="nothing"),
        ]
        client = GeminiImageClient(settings)

        client.generate_content("one")
        client.generate_content("two")

        assert client.usage.images_generated == 1
        assert client.usage.total_cost == pytest.approx(0.039)

    def test_client_built_once(self, settings, sdk, png_bytes):
        sdk.return_value.models.generate_content.return_value = make_response(image=png_bytes)
        client = GeminiImageClient(settings)

        client.generate_content("one")
        client.generate_content("two")

        assert sdk.call_count == 1

    def test_missing_key_raises(self, settings, sdk):
        settings.gemini_api_key = None
        client = GeminiImageClient(settings)

        with pytest.raises(MissingCredentialError):
            client.generate_content("Draw an egg")
        sdk.assert_not_called()


class TestMockImageClient:
    """Tests for MockImageClient."""

    def test_returns_png_placeholder(self):
        client = MockImageClient()
        response = client.generate_content("test prompt")

        img = Image.open(BytesIO(extract_image(response)))
        assert img.format == "PNG"
        assert img.mode == "RGBA"
        assert img.size == (32, 32)

    def test_has_text_part(self):
        response = MockImageClient().generate_content("test prompt")
        assert response_text(response) == "Placeholder sprite"

    def test_is_free(self):
        client = MockImageClient()
        client.generate_content("a")
        client.generate_content("b")
        assert client.usage.images_generated == 2
        assert client.usage.total_cost == 0.0


class TestGetImageClient:
    """Tests for get_image_client factory."""

    def test_mock_flag(self, settings):
        assert isinstance(get_image_client(settings, mock=True), MockImageClient)

    def test_gemini_by_default(self, settings):
        client = get_image_client(settings)
        assert isinstance(client, GeminiImageClient)
        assert client.settings is settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("GEMINI_API_KEY", "IMAGE_MODEL", "ASSETS_DIR", "REQUEST_DELAY"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)

        assert settings.gemini_api_key is None
        assert settings.request_delay == 2.0
        assert settings.image_model == "gemini-2.0-flash-exp"
        assert settings.assets_dir.parts[-2:] == ("public", "assets")

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        monkeypatch.setenv("ASSETS_DIR", str(tmp_path))
        monkeypatch.setenv("REQUEST_DELAY", "0.5")
        settings = Settings(_env_file=None)

        assert settings.require_api_key() == "from-env"
        assert settings.assets_dir == tmp_path
        assert settings.request_delay == 0.5

    def test_require_api_key_missing(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(MissingCredentialError, match="GEMINI_API_KEY"):
            Settings(_env_file=None).require_api_key()
