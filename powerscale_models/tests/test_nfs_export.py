import pytest
from pydantic import ValidationError

from powerscale_models.enums import DiagnosticKind
from powerscale_models.models import (
    NfsExportDatasource,
    NfsExportDatasourceFilter,
    NfsExportResource,
)
from powerscale_models.types import CaseInsensitiveStringValue


def make_export(**kwargs) -> NfsExportResource:
    data = {"paths": ["/ifs/data"]}
    data.update(kwargs)
    return NfsExportResource.model_validate(data)


class TestNfsExportResource:
    def test_zone_is_case_insensitive_value(self):
        export = make_export(zone="System")
        assert isinstance(export.zone, CaseInsensitiveStringValue)
        assert export.zone.value_string() == "System"

    def test_zone_defaults_to_null(self):
        assert make_export().zone.is_null()

    def test_dump_keeps_zone_casing(self):
        dumped = make_export(zone="System", id=3).model_dump(exclude_none=True)
        assert dumped["zone"] == "System"
        assert dumped["id"] == 3

    def test_map_root_persona(self):
        export = make_export(
            map_root={"enabled": True, "user": {"id": "UID:0"}}
        )
        assert export.map_root.user.id == "UID:0"

    def test_paths_required(self):
        with pytest.raises(ValidationError):
            NfsExportResource.model_validate({"paths": []})


class TestValidateUpdate:
    def test_same_zone_differing_case(self):
        diags = make_export(zone="system").validate_update(make_export(zone="System"))
        assert not diags.has_error()

    def test_zone_change_rejected(self):
        diags = make_export(zone="Zone2").validate_update(make_export(zone="Zone1"))
        [error] = diags.errors()
        assert error.summary == "Error updating nfs export"
        assert error.detail == "Do not change access zone once set"
        assert error.kind == DiagnosticKind.INVALID_PLAN

    def test_unknown_zone_skipped(self):
        planned = make_export(zone=CaseInsensitiveStringValue.unknown())
        assert len(planned.validate_update(make_export(zone="Zone1"))) == 0


class TestDatasource:
    def test_filter_zone_ignores_case(self):
        exports = [
            make_export(id=1, zone="System"),
            make_export(id=2, zone="Zone1", paths=["/ifs/zone1"]),
        ]
        ds = NfsExportDatasource.from_exports(
            exports, NfsExportDatasourceFilter(zone="SYSTEM")
        )
        assert [e.id for e in ds.nfs_exports] == [1]

    def test_filter_ids_and_paths(self):
        exports = [
            make_export(id=1),
            make_export(id=2, paths=["/ifs/other"]),
            make_export(id=3, paths=["/ifs/other"]),
        ]
        flt = NfsExportDatasourceFilter(ids=[2, 3], paths=["/ifs/other"])
        assert [e.id for e in NfsExportDatasource.from_exports(exports, flt).nfs_exports] == [2, 3]

    def test_no_filter_selects_all(self):
        exports = [make_export(id=1), make_export(id=2)]
        assert len(NfsExportDatasource.from_exports(exports).nfs_exports) == 2

    def test_dir_must_be_asc_or_desc(self):
        with pytest.raises(ValidationError):
            NfsExportDatasourceFilter(dir="UP")
