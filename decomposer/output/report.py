"""
Decomposer Report Generator
============================

Generates HTML and JSON reports from decomposition results. The HTML
report uses inline CSS for portability; the JSON report is intended for
policy tooling and CI pipelines that consume the token sets.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from decomposer import __version__
from decomposer.core.models import DecompositionReport


# ===================================================================== #
#  HTML Template (inline CSS)
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>AlgoLex Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1200px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{
            padding: 0.75rem 1rem;
            text-align: left;
            border: 1px solid var(--border);
        }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .token {{
            display: inline-block;
            padding: 0.1rem 0.5rem;
            margin: 0.1rem;
            border-radius: 4px;
            background: rgba(88, 166, 255, 0.2);
            font-family: monospace;
        }}
        .alias {{ background: rgba(188, 140, 255, 0.2); }}
        .none {{ color: var(--text-secondary); }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>AlgoLex :: Decomposer</h1>
            <div class="subtitle">
                Algorithm Decomposition Report | {source}<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <table>
                <tr>
                    <th>Names</th><td>{name_count}</td>
                    <th>Distinct tokens</th><td>{token_count}</td>
                </tr>
                <tr>
                    <th>Source</th><td>{source}</td>
                    <th>Duration</th><td>{duration:.3f}s</td>
                </tr>
            </table>
        </div>

        <div class="section">
            <h2>Decompositions</h2>
            {results_html}
        </div>

        <div class="footer">
            AlgoLex Decomposer v{version}<br>
            Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""


class DecomposerReportGenerator:
    """Generates HTML and JSON reports from decomposition results.

    Usage::

        generator = DecomposerReportGenerator()
        generator.generate_html(report, Path("report.html"))
        generator.generate_json(report, Path("report.json"))
    """

    def generate_html(
        self,
        report: DecompositionReport,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write an HTML report and return its path."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        report_title = title or f"Decomposition of {report.source}"

        html_content = _HTML_TEMPLATE.format(
            title=self._escape_html(report_title),
            source=self._escape_html(report.source),
            timestamp=timestamp,
            name_count=report.total_names,
            token_count=len(report.all_tokens),
            duration=report.duration,
            results_html=self._build_results_html(report),
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def to_json(self, report: DecompositionReport) -> str:
        """Serialise *report* to an indented JSON document."""
        report_data: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "decomposer",
                "version": __version__,
            },
            "summary": {
                "total_names": report.total_names,
                "distinct_tokens": sorted(report.all_tokens),
            },
            **report.model_dump(mode="json"),
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def generate_json(
        self,
        report: DecompositionReport,
        output_path: Path,
    ) -> Path:
        """Write a JSON report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(report), encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    def _build_results_html(self, report: DecompositionReport) -> str:
        if not report.results:
            return '<p class="none">No algorithm names.</p>'

        rows: list[str] = [
            "<table>",
            "<tr><th>Algorithm</th><th>Segments</th><th>Tokens</th></tr>",
        ]
        for result in report.results:
            aliases = set(result.digest_aliases)
            tokens = " ".join(
                f'<span class="token{" alias" if token in aliases else ""}">'
                f"{self._escape_html(token)}</span>"
                for token in result.tokens
            ) or '<span class="none">(none)</span>'
            segments = " / ".join(
                self._escape_html(segment) for segment in result.segments
            )
            rows.append(
                f"<tr><td>{self._escape_html(result.algorithm)}</td>"
                f"<td>{segments}</td><td>{tokens}</td></tr>"
            )
        rows.append("</table>")
        return "\n".join(rows)

    @staticmethod
    def _escape_html(text: str) -> str:
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
