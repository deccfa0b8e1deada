from powerscale_models.models.nfs_export import (
    NfsExportDatasource,
    NfsExportDatasourceFilter,
    NfsExportMapping,
    NfsExportPersona,
    NfsExportResource,
)

__all__ = [
    "NfsExportDatasource",
    "NfsExportDatasourceFilter",
    "NfsExportMapping",
    "NfsExportPersona",
    "NfsExportResource",
]
