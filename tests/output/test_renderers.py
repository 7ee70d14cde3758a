"""Tests for operation-specific Rich renderers."""

from mercyctl.output.renderers import render_quiet, render_result
from mercyctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("hash", "UNSUPPORTED_PROTOCOL", "Unable to hash message"))
        assert output.startswith("ERROR")
        assert "hash" in output
        assert "Unable to hash message" in output
        assert "UNSUPPORTED_PROTOCOL" not in output

    def test_verbose_shows_code_and_detail(self) -> None:
        result = _err("hexdump", "RESOURCE_NOT_FOUND", "Unable to locate", protocol="hex_dump")
        output = render_result(result, verbose=True)
        assert "code: RESOURCE_NOT_FOUND" in output
        assert "protocol: hex_dump" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="decode"))


# ── Transform renderers ──────────────────────────────────────────────


class TestTextRenderer:
    def test_status_then_output(self) -> None:
        output = render_result(_ok("decode", protocol="base64", output="mercy"))
        assert output.splitlines() == ["OK  decode  base64", "mercy"]

    def test_brackets_are_not_markup(self) -> None:
        output = render_result(_ok("info", protocol="defang", output="a[.]b [bold]x[/bold]"))
        assert "a[.]b [bold]x[/bold]" in output

    def test_multiline_info(self) -> None:
        output = render_result(_ok("info", protocol="system_info", output="Hostname: h\nProc: 1"))
        assert output.splitlines()[1:] == ["Hostname: h", "Proc: 1"]


class TestHexdumpRenderer:
    def test_rows_preserved(self) -> None:
        dump = "00000000  48 69 21" + " " * 42 + "|Hi!|\n00000003"
        output = render_result(_ok("hexdump", protocol="hex_dump", output=dump))
        assert output.splitlines()[1:] == dump.splitlines()


class TestMutateRenderer:
    def test_table(self) -> None:
        result = _ok(
            "mutate",
            protocol="domain_gen",
            output="c.io\na.in",
            candidates=[
                {"domain": "c.io", "extension": ".io"},
                {"domain": "a.in", "extension": ".in"},
            ],
            count=2,
        )
        output = render_result(result)
        assert "Domain" in output
        assert "c.io" in output
        assert ".in" in output
        assert output.endswith("2 candidates")

    def test_empty(self) -> None:
        output = render_result(_ok("mutate", protocol="domain_gen", output="", candidates=[]))
        assert "no candidates" in output


class TestCatalogRenderer:
    def test_table(self) -> None:
        result = _ok(
            "catalog",
            methods=[
                {"method": "hexdump", "aliases": ["hex"], "protocols": ["hex_dump"]},
                {"method": "decode", "aliases": [], "protocols": ["base64", "rot13"]},
            ],
        )
        output = render_result(result)
        assert "mercyctl methods" in output
        for text in ("hexdump", "hex_dump", "rot13"):
            assert text in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", items=[1, 2], name="x"))
        assert "items: [1,2]" in output
        assert "name: x" in output


class TestMeta:
    def test_verbose_renders_spans(self) -> None:
        result = ServiceResult(
            ok=True,
            op="encode",
            data={"protocol": "base64", "output": "eA=="},
            meta={
                "telemetry": {
                    "name": "Dispatcher.run",
                    "duration_ms": 1.5,
                    "children": [
                        {"name": "transform", "duration_ms": 0.5, "annotations": {"ok": True}}
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "Dispatcher.run" in output
        assert "transform  (ok=True)" in output

    def test_meta_hidden_without_verbose(self) -> None:
        result = ServiceResult(ok=True, op="encode", meta={"telemetry": {"name": "x"}})
        assert "meta:" not in render_result(result)


class TestRenderQuiet:
    def test_success(self) -> None:
        assert render_quiet(_ok("hash", output="abc")) == "abc"

    def test_error(self) -> None:
        assert render_quiet(_err("hash", "X", "Unable to hash message")) == "Unable to hash message"
