"""
SafePass Report Generator
==========================

Writes JSON and HTML reports for a password assessment
:class:`~shared.models.ScanResult`. The password itself never appears in
a report: the engine records only the masked target and derived values.

The HTML report is a single self-contained page with inline CSS. The
JSON report is meant for CI pipelines and password-policy audits.

References:
    - OWASP Authentication Cheat Sheet.
      https://cheatsheetseries.owasp.org/cheatsheets/Authentication_Cheat_Sheet.html
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult

_REPORT_FORMAT_VERSION = "1"


# ===================================================================== #
#  HTML Template
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>SafePass Report - {title}</title>
    <style>
        :root {{
            --bg: #0d1117;
            --panel: #161b22;
            --row: #21262d;
            --text: #c9d1d9;
            --muted: #8b949e;
            --cyan: #58a6ff;
            --green: #3fb950;
            --yellow: #d29922;
            --red: #f85149;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg);
            color: var(--text);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        .header, .section {{
            background: var(--panel);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .header {{ text-align: center; border-color: var(--cyan); }}
        .header h1 {{ color: var(--cyan); }}
        .muted {{ color: var(--muted); font-size: 0.9rem; }}
        .section h2 {{
            font-size: 1.3rem;
            margin-bottom: 1rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.6rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--row); color: var(--cyan); }}
        .badge {{
            display: inline-block;
            padding: 0.2rem 0.7rem;
            border-radius: 4px;
            font-weight: 700;
            font-size: 0.8rem;
        }}
        .severity-info {{ background: rgba(88, 166, 255, 0.2); color: var(--cyan); }}
        .severity-low {{ background: rgba(63, 185, 80, 0.2); color: var(--green); }}
        .severity-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--yellow); }}
        .severity-high {{ background: rgba(248, 81, 73, 0.2); color: var(--red); }}
        .severity-critical {{ background: rgba(248, 81, 73, 0.4); color: #ff7b72; }}
        .finding {{
            padding: 0.8rem 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--row);
        }}
        .meter {{ height: 18px; background: var(--row); border-radius: 9px; overflow: hidden; }}
        .meter-fill {{ height: 100%; }}
        .footer {{ text-align: center; color: var(--muted); font-size: 0.8rem; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>SafePass</h1>
            <div class="muted">Password Quality Report | Generated: {timestamp}</div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            <table>
                <tr><th>Risk</th><td>{risk}</td><th>Findings</th><td>{finding_count}</td></tr>
                <tr><th>Common Password</th><td>{common}</td><th>Duration</th><td>{duration}</td></tr>
            </table>
        </div>

        {assessment_html}

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        <div class="footer">SafePass v{version} | Report generated {timestamp}</div>
    </div>
</body>
</html>
"""


class SafePassReportGenerator:
    """Writes HTML and JSON reports for a password assessment.

    Usage::

        generator = SafePassReportGenerator()
        generator.generate_json(scan_result, Path("report.json"))
        generator.generate_html(scan_result, Path("report.html"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write *result* as indented JSON and return the path written."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path

    def to_json(self, result: ScanResult) -> str:
        return json.dumps(self.build_payload(result), indent=2, ensure_ascii=False, default=str)

    def build_payload(self, result: ScanResult) -> dict[str, Any]:
        """Structured report body shared by the JSON writer and stdout output."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "version": self.version,
                "format_version": _REPORT_FORMAT_VERSION,
            },
            "summary": {
                "description": result.summary,
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "risk": result.risk.model_dump(mode="json") if result.risk else None,
                "duration_seconds": result.duration_seconds,
            },
            "assessment": result.metadata.get("report"),
            "common_password": result.metadata.get("common_password"),
            "list_size": result.metadata.get("list_size"),
            "findings": [finding.model_dump(mode="json") for finding in result.findings],
        }

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write a self-contained HTML page for *result*.

        Args:
            result: Assessment produced by :meth:`SafePassEngine.analyze`.
            output_path: Destination file; parent directories are created.
            title: Page title override.

        Returns:
            The path written.
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        duration = result.duration_seconds
        common = result.metadata.get("common_password")

        page = _HTML_TEMPLATE.format(
            title=html.escape(title or "Password Assessment"),
            timestamp=timestamp,
            summary=html.escape(result.summary or "No summary."),
            risk=(
                f"{result.risk.level.value} ({result.risk.score:.0f}/100)"
                if result.risk and result.risk.level
                else "n/a"
            ),
            finding_count=result.finding_count,
            common="not checked" if common is None else ("yes" if common else "no"),
            duration="n/a" if duration is None else f"{duration:.3f}s",
            assessment_html=self._assessment_html(result.metadata.get("report")),
            findings_html=self._findings_html(result),
            version=html.escape(self.version),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  HTML fragments
    # ------------------------------------------------------------------ #

    @staticmethod
    def _assessment_html(report: Optional[dict[str, Any]]) -> str:
        if not report:
            return ""

        strength = report["strength"]
        entropy = report["entropy"]
        display = report["crack_time"]["display"]
        patterns = report["patterns"]

        score = int(patterns["risk_score"])
        if score >= 75:
            colour = "var(--red)"
        elif score >= 40:
            colour = "var(--yellow)"
        else:
            colour = "var(--green)"

        crack_rows = "".join(
            f"<tr><td>{html.escape(label)}</td>"
            f"<td>{html.escape(str(display[key]))}</td></tr>"
            for key, label in (
                ("online_throttled", "Online, throttled"),
                ("online_unthrottled", "Online, unthrottled"),
                ("offline_slow_hash", "Offline, slow hash"),
                ("offline_fast_hash", "Offline, fast hash"),
            )
        )
        pattern_items = "".join(
            f"<li>{html.escape(p)}</li>" for p in patterns["detected_patterns"]
        ) or "<li>None detected</li>"
        suggestion_items = "".join(
            f"<li>{html.escape(s)}</li>" for s in patterns["suggestions"]
        )

        return (
            '<div class="section">'
            "<h2>Assessment</h2>"
            "<table>"
            f"<tr><th>Strength</th><td>{html.escape(strength['value'])} "
            f"(tier {strength['id']})</td>"
            f"<th>Length</th><td>{strength['length']}</td></tr>"
            f"<tr><th>Entropy</th><td>{entropy['entropy']:.2f} bits</td>"
            f"<th>Pool Size</th><td>{entropy['pool_size']}</td></tr>"
            "</table>"
            "<h3>Crack Time</h3>"
            f"<table><tr><th>Scenario</th><th>Estimate</th></tr>{crack_rows}</table>"
            f"<h3>Pattern Risk: {score}/100</h3>"
            f'<div class="meter"><div class="meter-fill" '
            f'style="width: {score}%; background: {colour};"></div></div>'
            f"<ul>{pattern_items}</ul>"
            + (f"<h3>Suggestions</h3><ul>{suggestion_items}</ul>" if suggestion_items else "")
            + "</div>"
        )

    @staticmethod
    def _findings_html(result: ScanResult) -> str:
        if not result.findings:
            return '<p class="muted">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            css = finding.severity.css_class
            parts.append(
                f'<div class="finding">'
                f'<strong><span class="badge {css}">{finding.severity.value}</span> '
                f"{html.escape(finding.title)}</strong>"
                f'<p class="muted">{html.escape(finding.description)}</p>'
            )
            if finding.recommendation:
                parts.append(
                    f"<p><strong>Recommendation:</strong> "
                    f"{html.escape(finding.recommendation)}</p>"
                )
            if finding.references:
                refs = ", ".join(html.escape(r) for r in finding.references)
                parts.append(f'<p class="muted">References: {refs}</p>')
            parts.append("</div>")
        return "\n".join(parts)
