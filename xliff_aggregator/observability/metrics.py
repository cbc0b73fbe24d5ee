"""
Prometheus metrics collection for the XLIFF aggregation plugin

Counts merged resources, persisted files and importer runs so a host
process can expose them next to its own metrics.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# AGGREGATION METRICS
# =======================

# Resources handed to the resource file, per category
resources_merged_total = Counter(
    name="xliff_resources_merged_total",
    documentation="Total number of resources added to the aggregate xliff file",
    labelnames=["project_id", "category"],  # category: new, pseudo
    registry=REGISTRY,
)

# Resource file persists
resource_file_writes_total = Counter(
    name="xliff_resource_file_writes_total",
    documentation="Total number of resource file persist attempts",
    labelnames=["project_id", "outcome"],  # outcome: changed, unchanged
    registry=REGISTRY,
)

# Write duration
write_duration_seconds = Histogram(
    name="xliff_write_duration_seconds",
    documentation="Time spent in the write pass (merge, persist, import) in seconds",
    labelnames=["project_id"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0, 120.0, 600.0],
    registry=REGISTRY,
)

# =======================
# IMPORTER METRICS
# =======================

importer_runs_total = Counter(
    name="xliff_importer_runs_total",
    documentation="Total number of external importer runs",
    labelnames=["project_id", "status"],  # status: success, failure
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(write_duration_seconds, project_id="feelgood"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def get_counter_value(counter: Counter, **labels) -> float:
    """Current value of a labelled counter (0.0 if never incremented)."""
    value = REGISTRY.get_sample_value(f"{counter._name}_total", labels)
    return value or 0.0
