"""Custom Prometheus metrics for the Mail Categorizer.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- provider_failures_total (sustained failures mean every email is on rules)
- parser_corrections_total (high rate indicates the model ignores the prompt)
"""

from prometheus_client import Counter, Histogram

# === Outcome Metrics ===

categorizations_total = Counter(
    "categorizations_total",
    "Total categorizations by result source and category",
    ["source", "category"],
)
"""
Categorization outcome counter.

Labels:
- source: ai (provider response parsed), rules (keyword classifier)
- category: Interested, MeetingBooked, NotInterested, Spam, OutOfOffice
"""

# === Provider Metrics ===

provider_failures_total = Counter(
    "provider_failures_total",
    "Total failed AI attempts that fell back to rule-based categorization",
    ["provider"],
)

provider_latency_seconds = Histogram(
    "provider_latency_seconds",
    "Provider request latency in seconds",
    ["provider", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)
"""
Provider request latency histogram.

Labels:
- provider: deepseek, groq, ollama, mistral, anthropic, openai
- success: true (text extracted), false (ProviderError raised)
"""

# === Parser Metrics ===

parser_corrections_total = Counter(
    "parser_corrections_total",
    "Fields defaulted by the response parser",
    ["field"],
)
"""
Parser default-substitution counter.

Labels:
- field: category, reasoning, replies, response (whole response unparseable)

Alert thresholds:
- WARN: response corrections > 10% of AI categorizations
"""
