"""
Helpers for validating metric value changes during tests.
"""

from contextlib import contextmanager


def counter_value(metric) -> float:
    """Current value of a counter or labelled counter child."""
    if not hasattr(metric, "_value"):
        raise ValueError(f"Metric {metric} doesn't have a _value attribute")
    return metric._value.get()


@contextmanager
def metric_delta(metric, expected_delta=1):
    """
    Context manager to validate metric value changes.

    Usage:
        with metric_delta(METRICS["extractions_total"].labels(outcome="success")):
            # Code that should increment counter by 1
            pass
    """
    initial_value = counter_value(metric)

    yield

    final_value = counter_value(metric)
    actual_delta = final_value - initial_value

    if actual_delta != expected_delta:
        raise AssertionError(
            f"Expected metric to change by {expected_delta}, "
            f"but it changed by {actual_delta} "
            f"(from {initial_value} to {final_value})"
        )


def get_histogram_count(histogram):
    """Get the current observation count for a histogram."""
    for metric_family in histogram.collect():
        for sample in metric_family.samples:
            if sample.name.endswith("_count"):
                return sample.value
    return 0.0
