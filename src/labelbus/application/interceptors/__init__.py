"""Application interceptors – reusable transform-or-drop stages."""
from labelbus.application.interceptors.enrich import LabelEnricher, drop_below
from labelbus.application.interceptors.redaction import RedactionInterceptor

__all__ = ["LabelEnricher", "RedactionInterceptor", "drop_below"]
