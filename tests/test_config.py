"""Tests for configuration, credentials and the LLM factory."""

from unittest.mock import MagicMock, patch

from prd_generator.config import Settings


class TestSettings:
    """Test Settings defaults and helpers."""

    def test_defaults(self, mock_settings):
        """Output budgets and UI defaults."""
        assert mock_settings.idea_max_tokens == 256
        assert mock_settings.prd_max_tokens == 1024
        assert mock_settings.copy_ack_seconds == 1.5
        assert mock_settings.llm_model == "gemini-2.0-flash"

    def test_cors_origin_list(self):
        """Comma-separated origins are split and trimmed."""
        settings = Settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origin_list == ["http://a.test", "http://b.test"]

    def test_secret_manager_fills_missing_key(self):
        """Secret Manager supplies the key when it is not set."""
        with patch("prd_generator.config._get_secret_value", return_value='{"type": "x"}'):
            settings = Settings()

        assert settings.service_account_key == '{"type": "x"}'

    def test_explicit_key_wins_over_secret_manager(self):
        """Explicit values are not overwritten."""
        with patch("prd_generator.config._get_secret_value") as mock_secret:
            settings = Settings(service_account_key='{"type": "env"}')

        assert settings.service_account_key == '{"type": "env"}'
        mock_secret.assert_not_called()


class TestSecretManager:
    """Test secret id building and lookup fallbacks."""

    def test_build_secret_id(self):
        from prd_generator.secret_manager import build_secret_id

        assert build_secret_id("service-account-key", "prod") == (
            "prd-generator-service-account-key-prod"
        )

    def test_unknown_key_returns_default(self):
        from prd_generator.secret_manager import get_app_secret

        assert get_app_secret("not_a_secret", default="fallback") == "fallback"

    def test_get_secret_without_project(self):
        """No project means no lookup."""
        from prd_generator.secret_manager import get_secret

        with patch.dict("os.environ", {"GOOGLE_PROJECT_ID": ""}):
            assert get_secret("anything", default="d") == "d"

    def test_get_secret_reads_payload(self):
        """The latest version payload is decoded."""
        from prd_generator import secret_manager

        mock_client = MagicMock()
        mock_client.access_secret_version.return_value.payload.data = b"secret-value"

        with patch.object(secret_manager, "get_secret_manager_client", return_value=mock_client):
            value = secret_manager.get_secret("my-secret", project_id="test-project")

        assert value == "secret-value"
        mock_client.access_secret_version.assert_called_once_with(
            request={"name": "projects/test-project/secrets/my-secret/versions/latest"}
        )


class TestLLMFactory:
    """Test get_llm wiring."""

    def test_get_llm_passes_budget_and_project(self, mock_settings):
        """The output budget and project are passed to ChatVertexAI."""
        from prd_generator import llm

        with patch.object(llm, "ChatVertexAI") as mock_chat:
            llm.get_llm(max_output_tokens=256, settings=mock_settings)

        kwargs = mock_chat.call_args.kwargs
        assert kwargs["max_output_tokens"] == 256
        assert kwargs["project"] == "test-project"
        assert kwargs["model_name"] == "gemini-2.0-flash"
        assert kwargs["temperature"] == mock_settings.llm_temperature
        assert "credentials" not in kwargs

    def test_get_llm_temperature_override(self, mock_settings):
        from prd_generator import llm

        with patch.object(llm, "ChatVertexAI") as mock_chat:
            llm.get_llm(max_output_tokens=1024, temperature=0.1, settings=mock_settings)

        assert mock_chat.call_args.kwargs["temperature"] == 0.1

    def test_get_llm_injects_service_account(self, mock_settings):
        """Credentials built from settings are injected at construction."""
        from prd_generator import llm

        mock_settings.service_account_key = '{"type": "service_account"}'
        credentials = MagicMock()

        with (
            patch.object(
                llm.service_account.Credentials,
                "from_service_account_info",
                return_value=credentials,
            ) as mock_from_info,
            patch.object(llm, "ChatVertexAI") as mock_chat,
        ):
            llm.get_llm(max_output_tokens=256, settings=mock_settings)

        mock_from_info.assert_called_once_with({"type": "service_account"}, scopes=llm.SCOPES)
        assert mock_chat.call_args.kwargs["credentials"] is credentials
