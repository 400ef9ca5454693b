"""Unit tests for tracing setup."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from ai_meals.observability.tracing import get_tracer, setup_tracing, shutdown_tracing


pytestmark = pytest.mark.unit

MODULE = "ai_meals.observability.tracing"


def _create_mock_settings(
    *,
    enabled: bool = True,
    endpoint: str | None = None,
    is_development: bool = False,
) -> MagicMock:
    mock_settings = MagicMock()
    mock_settings.observability.tracing.enabled = enabled
    mock_settings.observability.tracing.otlp_endpoint = endpoint
    mock_settings.is_development = is_development
    mock_settings.app.name = "AI Meals Service"
    mock_settings.app.version = "0.1.0"
    mock_settings.APP_ENV = "test"
    return mock_settings


class TestSetupTracing:
    """Tests for setup_tracing."""

    def test_disabled_skips_instrumentation(self) -> None:
        with patch(f"{MODULE}.FastAPIInstrumentor") as mock_instrumentor:
            setup_tracing(MagicMock(), _create_mock_settings(enabled=False))

        mock_instrumentor.instrument_app.assert_not_called()

    def test_otlp_exporter_when_endpoint_set(self) -> None:
        app = MagicMock()
        with (
            patch(f"{MODULE}.FastAPIInstrumentor") as mock_instrumentor,
            patch(f"{MODULE}.OTLPSpanExporter") as mock_exporter,
            patch(f"{MODULE}.BatchSpanProcessor"),
            patch(f"{MODULE}.TracerProvider") as mock_provider,
            patch(f"{MODULE}.trace") as mock_trace,
        ):
            setup_tracing(app, _create_mock_settings(endpoint="collector:4317"))

        mock_exporter.assert_called_once_with(endpoint="collector:4317", insecure=True)
        mock_provider.return_value.add_span_processor.assert_called_once()
        mock_trace.set_tracer_provider.assert_called_once()
        mock_instrumentor.instrument_app.assert_called_once()

    def test_no_exporter_outside_development(self) -> None:
        with (
            patch(f"{MODULE}.FastAPIInstrumentor"),
            patch(f"{MODULE}.TracerProvider") as mock_provider,
            patch(f"{MODULE}.trace"),
        ):
            setup_tracing(MagicMock(), _create_mock_settings())

        mock_provider.return_value.add_span_processor.assert_not_called()


class TestTracerHelpers:
    """Tests for get_tracer and shutdown_tracing."""

    def test_get_tracer(self) -> None:
        tracer = get_tracer("ai_meals.test")

        with tracer.start_as_current_span("span"):
            pass

    def test_shutdown_ignores_proxy_provider(self) -> None:
        with patch(f"{MODULE}.trace") as mock_trace:
            mock_trace.get_tracer_provider.return_value = MagicMock()

            shutdown_tracing()
