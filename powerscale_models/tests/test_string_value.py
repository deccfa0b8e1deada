from powerscale_models.enums import DiagnosticKind
from powerscale_models.types import CaseInsensitiveStringValue, StringValue


class TestStringValue:
    def test_exact_equality(self):
        assert StringValue.new("System").semantic_equals(StringValue.new("System"))[0]
        assert not StringValue.new("System").semantic_equals(StringValue.new("system"))[0]

    def test_null_and_unknown_identity(self):
        assert StringValue.null().semantic_equals(StringValue.null())[0]
        assert StringValue.unknown().semantic_equals(StringValue.unknown())[0]
        assert not StringValue.null().semantic_equals(StringValue.unknown())[0]

    def test_rejects_case_insensitive_value(self):
        equal, diags = StringValue.new("a").semantic_equals(
            CaseInsensitiveStringValue.new("a")
        )
        assert equal is False
        assert diags.errors()[0].kind == DiagnosticKind.TYPE_MISMATCH
