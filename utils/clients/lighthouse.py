"""
Lighthouse runner for SEO Analyzer.

Runs the Lighthouse CLI in a subprocess. Lighthouse launches and owns its own
Chrome instance, independent of the Playwright browser used for extraction;
the subprocess is always terminated before run() returns.
"""

import asyncio
import json
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple

from errors import AuditError
from models import AuditCategoryResult, AuditCheck, AuditReport, CheckRef

logger = logging.getLogger(__name__)

AUDIT_CATEGORIES = ["performance", "accessibility", "best-practices", "seo"]


def to_percentage(score: Optional[float]) -> int:
    """Lighthouse 0..1 score as an integer percentage, rounded half up."""
    if score is None:
        return 0
    percent = (Decimal(str(score)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(0, min(100, int(percent)))


def shape_report(report: Dict[str, Any]) -> Tuple[List[AuditCategoryResult], List[AuditCheck]]:
    """
    Flatten a Lighthouse JSON report.

    Returns:
        (per-category results in report order, every audit in report order)
    """
    categories = []
    for key, value in (report.get("categories") or {}).items():
        if value.get("score") is None:
            logger.warning(f"⚠️  Lighthouse returned no score for category '{key}'")
        categories.append(
            AuditCategoryResult(
                category=key,
                score=to_percentage(value.get("score")),
                title=value.get("title") or key,
                description=value.get("description") or "",
                manual_description=value.get("manualDescription"),
                check_refs=[
                    CheckRef(id=ref["id"], weight=ref.get("weight", 0), group=ref.get("group"))
                    for ref in value.get("auditRefs") or []
                ],
            )
        )

    audits = [
        AuditCheck(
            id=key,
            title=value.get("title") or key,
            description=value.get("description") or "",
            score=value.get("score"),
            score_display_mode=value.get("scoreDisplayMode"),
            display_value=value.get("displayValue"),
            numeric_value=value.get("numericValue"),
            numeric_unit=value.get("numericUnit"),
        )
        for key, value in (report.get("audits") or {}).items()
    ]
    return categories, audits


class LighthouseRunner:
    def __init__(
        self,
        binary: str = "lighthouse",
        timeout: int = 180,
        chrome_flags: str = "--headless --no-sandbox --disable-dev-shm-usage",
    ):
        self.binary = binary
        self.timeout = timeout
        self.chrome_flags = chrome_flags

    def build_command(self, url: str) -> List[str]:
        return [
            self.binary,
            url,
            "--output=json",
            "--output-path=stdout",
            "--quiet",
            f"--only-categories={','.join(AUDIT_CATEGORIES)}",
            f"--chrome-flags={self.chrome_flags}",
        ]

    async def _execute(self, url: str) -> bytes:
        try:
            process = await asyncio.create_subprocess_exec(
                *self.build_command(url),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise AuditError(f"Could not start Lighthouse ({self.binary}): {str(e)}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise AuditError(f"Lighthouse timed out after {self.timeout} seconds") from e
        finally:
            if process.returncode is None:
                process.kill()
                await process.wait()
                logger.info("🧹 Lighthouse process terminated")

        if process.returncode != 0:
            raise AuditError(
                f"Lighthouse exited with code {process.returncode}: "
                f"{stderr.decode('utf-8', errors='replace').strip()[:500]}"
            )
        return stdout

    async def run(self, url: str) -> AuditReport:
        """
        Audit url across performance, accessibility, best practices and SEO.

        Raises:
            AuditError: Lighthouse could not run or its report is unusable
        """
        logger.info(f"🔦 Running Lighthouse for {url}")
        output = await self._execute(url)

        try:
            report = json.loads(output)
        except ValueError as e:
            raise AuditError("Lighthouse produced an unreadable report") from e

        runtime_error = report.get("runtimeError")
        if runtime_error:
            raise AuditError(
                f"Lighthouse runtime error {runtime_error.get('code')}: {runtime_error.get('message')}"
            )

        categories, audits = shape_report(report)
        logger.info(
            "✓ Lighthouse scores: "
            + ", ".join(f"{c.category}={c.score}" for c in categories)
        )
        return AuditReport(categories=categories, audits=audits)
