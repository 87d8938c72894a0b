from __future__ import annotations

from prometheus_client import Counter, Histogram

catalog_query_latency_ms = Histogram(
    "catalog_query_latency_ms",
    "Catalog query latency in milliseconds",
    ["endpoint"],
    buckets=(1, 3, 5, 10, 20, 50, 100, 200, 500, 1000),
)
analytics_events_total = Counter(
    "analytics_events_total",
    "Analytics events received, by outcome",
    ["status"],
)
success_rate_refresh_total = Counter(
    "success_rate_refresh_total",
    "Success-rate refresh runs, by outcome",
    ["status"],
)
testimonial_helpful_votes_total = Counter(
    "testimonial_helpful_votes_total",
    "Helpful votes recorded on testimonials",
)
