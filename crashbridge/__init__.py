"""crashbridge: analytics event routing for crash reporting.

Routes analytics connector callbacks to either the crash-origin receiver
or the breadcrumb receiver, and provides a deferred proxy that falls back
to inert defaults until the analytics connector becomes available.
"""

__version__ = "0.1.0"
__description__ = "Analytics event routing and deferred connector proxy for crash reporting"

from crashbridge.analytics.listener import CrashlyticsAnalyticsListener
from crashbridge.analytics.proxy import AnalyticsDeferredProxy
from crashbridge.deferred import OptionalProvider

__all__ = [
    "AnalyticsDeferredProxy",
    "CrashlyticsAnalyticsListener",
    "OptionalProvider",
    "__version__",
]
