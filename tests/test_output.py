from __future__ import annotations

import json

from shared.console import LexConsole
from decomposer.core.models import Decomposition, DecompositionReport
from decomposer.output.console import DecomposerConsoleOutput
from decomposer.output.report import DecomposerReportGenerator


def _report() -> DecompositionReport:
    return DecompositionReport(
        source="<inline & test>",
        results=[
            Decomposition(
                algorithm="SHA1withRSA",
                segments=["SHA1withRSA"],
                tokens=["RSA", "SHA-1", "SHA1"],
                digest_aliases=["SHA-1"],
            ),
            Decomposition(algorithm=""),
        ],
        duration=0.25,
    )


def test_to_json_contains_summary_and_results():
    data = json.loads(DecomposerReportGenerator().to_json(_report()))
    assert data["report_metadata"]["tool"] == "decomposer"
    assert data["summary"] == {
        "total_names": 2,
        "distinct_tokens": ["RSA", "SHA-1", "SHA1"],
    }
    assert data["results"][1]["tokens"] == []
    assert data["duration"] == 0.25


def test_generate_json_creates_parent_directories(tmp_path):
    path = DecomposerReportGenerator().generate_json(_report(), tmp_path / "a" / "b.json")
    assert path.exists()


def test_generate_html_escapes_text(tmp_path):
    path = DecomposerReportGenerator().generate_html(_report(), tmp_path / "r.html")
    html = path.read_text(encoding="utf-8")
    assert "&lt;inline &amp; test&gt;" in html
    assert "<inline & test>" not in html
    assert '<span class="token alias">SHA-1</span>' in html
    assert "(none)" in html


def test_generate_html_without_results(tmp_path):
    path = DecomposerReportGenerator().generate_html(
        DecompositionReport(), tmp_path / "empty.html"
    )
    assert "No algorithm names." in path.read_text(encoding="utf-8")


def test_console_output_renders_tokens_and_aliases():
    console = LexConsole(record=True)
    DecomposerConsoleOutput(console).display_report(_report())
    text = console.rich.export_text()
    assert "SHA1withRSA" in text
    assert "SHA-1" in text
    assert "(none)" in text
    assert "Distinct tokens: 3" in text
