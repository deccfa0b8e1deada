"""Attribute-level plan computation driven by semantic equality.

The engine compares a prior model (state or refreshed remote read) with a
proposed model (configuration) field by field. Values implementing
``SemanticEquals`` decide themselves whether a difference is a change; when
they report equality the prior value is kept, so the remote casing wins over
a differently-cased configuration.
"""

import logging
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from powerscale_models.diagnostics import Diagnostics
from powerscale_models.enums import PlanAction
from powerscale_models.types import SemanticEquals, StringValue

logger = logging.getLogger(__name__)


class AttributePlan(BaseModel):
    """Planned outcome for one attribute."""

    name: str
    prior: Any = None
    planned: Any = None
    action: PlanAction
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)


class ResourcePlan(BaseModel):
    """Planned outcome for a whole resource."""

    resource_type: str
    attributes: list[AttributePlan] = Field(default_factory=list)
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)

    @property
    def changes(self) -> list[AttributePlan]:
        return [a for a in self.attributes if a.action != PlanAction.NO_CHANGE]

    @property
    def has_changes(self) -> bool:
        return bool(self.changes)

    def planned_values(self) -> dict[str, Any]:
        return {a.name: a.planned for a in self.attributes}

    def summary(self) -> str:
        changes = self.changes
        lines = [f"{self.resource_type}: {len(changes)} to change"]
        for attr in changes:
            if attr.action == PlanAction.KNOWN_AFTER_APPLY:
                after = "(known after apply)"
            else:
                after = _display(attr.planned)
            lines.append(f"  ~ {attr.name}: {_display(attr.prior)} -> {after}")
        for diag in self.diagnostics:
            lines.append(f"  ! {diag.severity}: {diag.summary} {diag.detail}".rstrip())
        return "\n".join(lines)


def _display(value: Any) -> str:
    if isinstance(value, StringValue):
        if value.is_null():
            return "null"
        if value.is_unknown():
            return "(unknown)"
        return repr(value.value_string())
    if isinstance(value, BaseModel):
        return repr(value.model_dump(exclude_none=True))
    return "null" if value is None else repr(value)


def _is_null(value: Any) -> bool:
    if isinstance(value, StringValue):
        return value.is_null()
    return value is None


def plan_attribute(
    name: str, prior: Any, proposed: Any, computed: bool = False
) -> AttributePlan:
    """Decide the planned value of one attribute.

    Args:
        name: Attribute name, used for logging and reporting
        prior: Value from state or the remote read
        proposed: Value from configuration
        computed: True if the server assigns the value when it is not configured

    Returns:
        AttributePlan with the planned value, the action and any diagnostics.
        A type mismatch during semantic comparison is reported as a change.
    """
    if isinstance(proposed, StringValue) and proposed.is_unknown():
        return AttributePlan(
            name=name,
            prior=prior,
            planned=proposed,
            action=PlanAction.KNOWN_AFTER_APPLY,
        )

    if computed and _is_null(proposed) and not _is_null(prior):
        return AttributePlan(
            name=name, prior=prior, planned=prior, action=PlanAction.NO_CHANGE
        )

    diags = Diagnostics()
    if isinstance(proposed, SemanticEquals):
        equal, diags = proposed.semantic_equals(prior)
        if diags.has_error():
            logger.warning(
                "Semantic comparison of %s failed, planning an update", name
            )
    else:
        equal = proposed == prior

    if equal:
        return AttributePlan(
            name=name,
            prior=prior,
            planned=prior,
            action=PlanAction.NO_CHANGE,
            diagnostics=diags,
        )

    logger.debug("Attribute %s changes: %r -> %r", name, prior, proposed)
    return AttributePlan(
        name=name,
        prior=prior,
        planned=proposed,
        action=PlanAction.UPDATE,
        diagnostics=diags,
    )


def plan_resource(
    prior: BaseModel,
    proposed: BaseModel,
    computed: Optional[Iterable[str]] = None,
    ignore: Optional[Iterable[str]] = None,
    resource_type: Optional[str] = None,
) -> ResourcePlan:
    """Plan every field of ``proposed`` against ``prior``.

    Args:
        prior: Model built from state or the remote read
        proposed: Model built from configuration, of the same class as ``prior``
        computed: Server-assigned fields; defaults to the model's COMPUTED_ATTRIBUTES
        ignore: Fields that are not compared; defaults to WRITE_ONLY_ATTRIBUTES
        resource_type: Name used in the plan summary; defaults to the class name

    Returns:
        ResourcePlan aggregating per-attribute results and their diagnostics

    Raises:
        TypeError: If the two models are of different classes
    """
    model_cls = type(proposed)
    if type(prior) is not model_cls:
        error_msg = (
            f"Cannot plan {model_cls.__name__} against {type(prior).__name__}"
        )
        logger.error(error_msg)
        raise TypeError(error_msg)

    computed = set(
        computed if computed is not None else getattr(model_cls, "COMPUTED_ATTRIBUTES", ())
    )
    ignore = set(
        ignore if ignore is not None else getattr(model_cls, "WRITE_ONLY_ATTRIBUTES", ())
    )

    plan = ResourcePlan(resource_type=resource_type or model_cls.__name__)
    for name in model_cls.model_fields:
        if name in ignore:
            continue
        attr = plan_attribute(
            name,
            getattr(prior, name),
            getattr(proposed, name),
            computed=name in computed,
        )
        plan.attributes.append(attr)
        plan.diagnostics.extend(attr.diagnostics)

    logger.info(
        "Planned %s: %d change(s), %d diagnostic(s)",
        plan.resource_type,
        len(plan.changes),
        len(plan.diagnostics),
    )
    return plan
