"""Data models for the PowerScale provider."""

from powerscale_models.diagnostics import Diagnostic, Diagnostics
from powerscale_models.enums import (
    DiagnosticKind,
    PlanAction,
    Severity,
    SyncIQRuleDay,
    SyncIQRuleType,
    ValueState,
)
from powerscale_models.plan import (
    AttributePlan,
    ResourcePlan,
    plan_attribute,
    plan_resource,
)
from powerscale_models.types import (
    CaseInsensitiveStringType,
    CaseInsensitiveStringValue,
    StringValue,
)

__all__ = [
    # diagnostics
    "Diagnostic",
    "Diagnostics",
    # enums
    "DiagnosticKind",
    "PlanAction",
    "Severity",
    "SyncIQRuleDay",
    "SyncIQRuleType",
    "ValueState",
    # plan
    "AttributePlan",
    "ResourcePlan",
    "plan_attribute",
    "plan_resource",
    # types
    "CaseInsensitiveStringType",
    "CaseInsensitiveStringValue",
    "StringValue",
]
