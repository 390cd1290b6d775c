"""Tests for the `python -m webrag` entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

from webrag import __main__ as entrypoint
from webrag.core.exceptions import ConfigurationError
from webrag.models import RAGAnswer


class TestMain:
    """Test the end-to-end run with a mocked service."""

    def test_prints_answer(self, app_settings, capsys) -> None:
        """Should ingest configured sources, answer the configured question and print it."""
        service = MagicMock()
        service.settings = app_settings
        service.ingest = AsyncMock()
        service.aclose = AsyncMock()
        service.ask = AsyncMock(
            return_value=RAGAnswer(question=app_settings.question, answer="Paris")
        )

        with (
            patch.object(entrypoint, "load_dotenv"),
            patch.object(entrypoint, "configure_logging"),
            patch.object(entrypoint, "get_settings", return_value=app_settings),
            patch.object(entrypoint, "build_rag_service", return_value=service),
        ):
            exit_code = entrypoint.main()

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "Paris"
        service.ingest.assert_awaited_once_with()
        service.ask.assert_awaited_once_with("What is the capital of France?")
        service.aclose.assert_awaited_once_with()

    def test_configuration_error_exits_non_zero(self, app_settings) -> None:
        """Should return 1 when the service cannot be built."""
        with (
            patch.object(entrypoint, "load_dotenv"),
            patch.object(entrypoint, "configure_logging"),
            patch.object(entrypoint, "get_settings", return_value=app_settings),
            patch.object(
                entrypoint,
                "build_rag_service",
                side_effect=ConfigurationError("missing key", setting="google_api_key"),
            ),
        ):
            exit_code = entrypoint.main()

        assert exit_code == 1

    def test_service_closed_when_ingestion_fails(self, app_settings) -> None:
        """Should release the service even when a run step raises."""
        service = MagicMock()
        service.settings = app_settings
        service.ingest = AsyncMock(side_effect=ConfigurationError("bad store"))
        service.aclose = AsyncMock()

        with (
            patch.object(entrypoint, "load_dotenv"),
            patch.object(entrypoint, "configure_logging"),
            patch.object(entrypoint, "get_settings", return_value=app_settings),
            patch.object(entrypoint, "build_rag_service", return_value=service),
        ):
            exit_code = entrypoint.main()

        assert exit_code == 1
        service.aclose.assert_awaited_once_with()
