"""NFS export resource and data source models."""

import logging
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from powerscale_models.constants import (
    NFS_EXPORT_ZONE_CHANGE_DETAIL,
    UPDATE_NFS_EXPORT_ERROR_MSG,
)
from powerscale_models.diagnostics import Diagnostics
from powerscale_models.enums import DiagnosticKind, NfsExportScope
from powerscale_models.types import CaseInsensitiveStringValue

logger = logging.getLogger(__name__)


class NfsExportPersona(BaseModel):
    """A persona: either a type and a name, or an ID such as 'UID:0' or 'GROUP:wheel'."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class NfsExportMapping(BaseModel):
    """Users and groups to which non-root and root clients are mapped."""

    enabled: Optional[bool] = None
    primary_group: Optional[NfsExportPersona] = None
    secondary_groups: Optional[list[NfsExportPersona]] = None
    user: Optional[NfsExportPersona] = None


class NfsExportResource(BaseModel):
    """Configuration values for an NFS export."""

    model_config = ConfigDict(extra="ignore")

    # zone defaults to the System zone on the server when not configured
    COMPUTED_ATTRIBUTES: ClassVar[tuple[str, ...]] = (
        "id",
        "conflicting_paths",
        "unresolved_clients",
        "zone",
    )
    WRITE_ONLY_ATTRIBUTES: ClassVar[tuple[str, ...]] = (
        "scope",
        "force",
        "ignore_unresolvable_hosts",
        "ignore_conflicts",
        "ignore_bad_paths",
        "ignore_bad_auth",
    )

    # query param
    scope: Optional[NfsExportScope] = None

    # create and modify params
    force: Optional[bool] = None
    ignore_unresolvable_hosts: Optional[bool] = None
    ignore_conflicts: Optional[bool] = None
    ignore_bad_paths: Optional[bool] = None
    ignore_bad_auth: Optional[bool] = None

    id: Optional[int] = Field(None, description="System-assigned ID of the export")
    paths: list[str] = Field(..., min_length=1, description="Paths under /ifs")
    description: Optional[str] = None
    all_dirs: Optional[bool] = None
    block_size: Optional[int] = Field(None, ge=0)
    can_set_time: Optional[bool] = None
    case_insensitive: Optional[bool] = None
    case_preserving: Optional[bool] = None
    chown_restricted: Optional[bool] = None
    clients: Optional[list[str]] = None
    commit_asynchronous: Optional[bool] = None
    conflicting_paths: Optional[list[str]] = None
    directory_transfer_size: Optional[int] = Field(None, ge=0)
    encoding: Optional[str] = None
    link_max: Optional[int] = Field(None, ge=0)
    map_all: Optional[NfsExportMapping] = None
    map_failure: Optional[NfsExportMapping] = None
    map_full: Optional[bool] = None
    map_lookup_uid: Optional[bool] = None
    map_non_root: Optional[NfsExportMapping] = None
    map_retry: Optional[bool] = None
    map_root: Optional[NfsExportMapping] = None
    max_file_size: Optional[int] = Field(None, ge=0)
    name_max_size: Optional[int] = Field(None, ge=0)
    no_truncate: Optional[bool] = None
    read_only: Optional[bool] = None
    read_only_clients: Optional[list[str]] = None
    read_write_clients: Optional[list[str]] = None
    readdirplus: Optional[bool] = None
    return_32bit_file_ids: Optional[bool] = None
    root_clients: Optional[list[str]] = None
    security_flavors: Optional[list[str]] = None
    setattr_asynchronous: Optional[bool] = None
    snapshot: Optional[str] = None
    symlinks: Optional[bool] = None
    unresolved_clients: Optional[list[str]] = None
    write_datasync_action: Optional[str] = None
    write_datasync_reply: Optional[str] = None
    write_filesync_action: Optional[str] = None
    write_filesync_reply: Optional[str] = None
    write_unstable_action: Optional[str] = None
    write_unstable_reply: Optional[str] = None
    zone: CaseInsensitiveStringValue = Field(
        default_factory=CaseInsensitiveStringValue.null,
        description="Access zone in which the export is valid. Cannot be changed once set",
    )

    def validate_update(self, state: "NfsExportResource") -> Diagnostics:
        """Check that a planned update keeps the access zone of the existing export."""
        diags = Diagnostics()
        if self.zone.is_unknown():
            return diags

        equal, zone_diags = state.zone.semantic_equals(self.zone)
        diags.extend(zone_diags)
        if not equal:
            logger.debug(
                "Rejecting zone change for export %s: %r -> %r",
                state.id,
                state.zone.value_string(),
                self.zone.value_string(),
            )
            diags.add_error(
                UPDATE_NFS_EXPORT_ERROR_MSG,
                NFS_EXPORT_ZONE_CHANGE_DETAIL,
                kind=DiagnosticKind.INVALID_PLAN,
            )
        return diags


class NfsExportDatasourceFilter(BaseModel):
    """Filter conditions of the NFS export data source."""

    # supported by the API
    sort: Optional[str] = None
    zone: Optional[str] = None
    resume: Optional[str] = None
    scope: Optional[NfsExportScope] = None
    limit: Optional[int] = Field(None, ge=1)
    offset: Optional[int] = Field(None, ge=0)
    path: Optional[str] = None
    check: Optional[bool] = None
    dir: Optional[str] = Field(None, pattern=r"^(ASC|DESC)$")

    # applied locally
    ids: Optional[list[int]] = None
    paths: Optional[list[str]] = None

    def matches(self, export: NfsExportResource) -> bool:
        """Apply the locally evaluated conditions: zone, ids and paths."""
        if self.zone is not None:
            wanted = CaseInsensitiveStringValue.new(self.zone)
            equal, _ = wanted.semantic_equals(export.zone)
            if not equal:
                return False
        if self.ids and export.id not in self.ids:
            return False
        if self.paths and not set(self.paths) & set(export.paths):
            return False
        return True


class NfsExportDatasource(BaseModel):
    """NFS export data source: the filter and the matching exports."""

    id: str = "nfs_exports_datasource"
    nfs_exports: list[NfsExportResource] = Field(default_factory=list)
    filter: Optional[NfsExportDatasourceFilter] = None

    @classmethod
    def from_exports(
        cls,
        exports: list[NfsExportResource],
        filter: Optional[NfsExportDatasourceFilter] = None,
    ) -> "NfsExportDatasource":
        selected = [e for e in exports if filter is None or filter.matches(e)]
        logger.debug("Selected %d of %d NFS exports", len(selected), len(exports))
        return cls(nfs_exports=selected, filter=filter)
