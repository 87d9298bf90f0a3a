import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

from src.platform.exception.exceptions import CustomBaseError


class BookingMetrics:
    """
    Hotel booking request metrics

    result label: 'success', the domain error class name (e.g. 'ForbiddenError'),
    or 'error' for anything unexpected
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        self.booking_requests = Counter(
            'hotel_booking_requests_total',
            'Total booking requests',
            ['operation', 'result'],  # operation: get/create/update
            registry=registry,
        )

        self.booking_duration = Histogram(
            'hotel_booking_duration_seconds',
            'Booking request processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
            registry=registry,
        )

    def record_booking_request(self, *, operation: str, result: str, duration: float):
        self.booking_requests.labels(operation=operation, result=result).inc()
        self.booking_duration.labels(operation=operation).observe(duration)

    @contextmanager
    def track(self, *, operation: str) -> Iterator[None]:
        start = time.perf_counter()
        result = 'success'
        try:
            yield
        except CustomBaseError as e:
            result = type(e).__name__
            raise
        except Exception:
            result = 'error'
            raise
        finally:
            self.record_booking_request(
                operation=operation, result=result, duration=time.perf_counter() - start
            )


# Global metrics instance
booking_metrics = BookingMetrics()
