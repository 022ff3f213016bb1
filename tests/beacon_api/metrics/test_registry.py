"""Tests for the Prometheus metrics registry."""

from __future__ import annotations

from beacon_api.metrics import (
    REGISTRY,
    api_request_time,
    api_requests,
    generate_metrics,
    head_slot,
)


class TestMetricTypes:
    """Tests for metric type behavior."""

    def test_counter_increments_per_label(self) -> None:
        """Request counters are tracked per endpoint and status."""
        counter = api_requests.labels(endpoint="/test", status="200")
        initial = counter._value.get()
        counter.inc()
        assert counter._value.get() == initial + 1.0

    def test_gauge_sets_value_correctly(self) -> None:
        """Gauge metrics can be set to arbitrary values."""
        head_slot.set(42.0)
        assert head_slot._value.get() == 42.0

    def test_histogram_observes_values(self) -> None:
        """Histogram metrics record observations."""
        api_request_time.labels(endpoint="/test").observe(0.05)

        samples = list(api_request_time.collect())[0].samples
        count = next(
            s.value
            for s in samples
            if s.name.endswith("_count") and s.labels.get("endpoint") == "/test"
        )
        assert count >= 1


class TestMetricsOutput:
    """Tests for Prometheus text output."""

    def test_generate_metrics_uses_dedicated_registry(self) -> None:
        """Output contains our metrics and no default process metrics."""
        output = generate_metrics().decode()

        assert "beacon_api_head_slot" in output
        assert "process_cpu_seconds_total" not in output
        assert REGISTRY is not None
