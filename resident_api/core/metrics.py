"""
Prometheus metrics for the resident registry (scraped at /metrics).
Metrics live in the process-wide prometheus_client REGISTRY. Counters add up
across every ResidentRegistry in the process; residents_stored is set by
whichever registry changed last, which is the single app's registry outside tests.
"""

from prometheus_client import Counter, Gauge

RESIDENTS_CREATED = Counter("residents_created", "Residents created since process start")
RESIDENTS_DELETED = Counter("residents_deleted", "Residents deleted since process start")
RESIDENTS_STORED = Gauge("residents_stored", "Residents held by the most recently modified registry")
