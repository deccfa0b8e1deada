"""Error messages and SyncIQ rule constants."""

from typing import Union

from powerscale_models.enums import SyncIQRuleDay, SyncIQRuleType

# NFS exports
UPDATE_NFS_EXPORT_ERROR_MSG = "Error updating nfs export"
NFS_EXPORT_ZONE_CHANGE_DETAIL = "Do not change access zone once set"

SYNCIQ_RULE_ID_PREFIXES: dict[SyncIQRuleType, str] = {
    SyncIQRuleType.BANDWIDTH: "bw",
    SyncIQRuleType.FILE_COUNT: "fc",
    SyncIQRuleType.CPU: "cpu",
    SyncIQRuleType.WORKER: "wk",
}

SYNCIQ_RULE_DAYS: tuple[SyncIQRuleDay, ...] = tuple(SyncIQRuleDay)


def get_synciq_rule_id(index: int, rule_type: Union[SyncIQRuleType, str]) -> str:
    """Build the ID of the SyncIQ rule at ``index`` in the stack of ``rule_type``.

    Args:
        index: Position of the rule within its rule type
        rule_type: SyncIQ rule type, as enum or its string value

    Returns:
        Rule ID such as ``"bw-0"`` or ``"wk-3"``

    Raises:
        ValueError: If ``rule_type`` is not a known SyncIQ rule type
    """
    prefix = SYNCIQ_RULE_ID_PREFIXES[SyncIQRuleType(rule_type)]
    return f"{prefix}-{index}"
