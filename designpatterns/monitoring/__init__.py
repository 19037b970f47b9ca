"""
Monitoring Package - Performance monitoring proxy

Wraps a Service and logs calls that exceed a time threshold.
"""

from designpatterns.monitoring.proxy import PerformanceMonitoringProxy, create
from designpatterns.monitoring.service import Service, SlowService
from designpatterns.monitoring.timer import InterceptedCall

__all__ = [
    "InterceptedCall",
    "PerformanceMonitoringProxy",
    "Service",
    "SlowService",
    "create",
]
