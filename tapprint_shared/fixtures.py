"""Sample payload fixtures and corpus validation.

A fixture is a JSON file naming the contract its payload must satisfy::

    {"contract": "ApiResponse", "of": "Layout", "payload": {...}}

``"expect": "invalid"`` marks a payload the boundary must reject.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from tapprint_shared.contracts import ValidationError
from tapprint_shared.core.exceptions import ContractError, ContractValidationError, FixtureError
from tapprint_shared.core.logging import fixtures_logger as logger
from tapprint_shared.schemas import contract_label, validate_payload

EXPECT_VALID = "valid"
EXPECT_INVALID = "invalid"


@dataclass
class Fixture:
    """A sample payload and the contract it targets."""

    path: Path
    contract: str
    payload: Any
    of: Optional[str] = None
    expect: str = EXPECT_VALID

    @property
    def label(self) -> str:
        return contract_label(self.contract, self.of)


@dataclass
class FixtureResult:
    """Outcome of validating one fixture."""

    fixture: Fixture
    valid: bool
    errors: List[ValidationError] = field(default_factory=list)
    message: Optional[str] = None
    # Names an unknown contract
    broken: bool = False

    @property
    def ok(self) -> bool:
        if self.broken:
            return False
        return self.valid == (self.fixture.expect == EXPECT_VALID)


@dataclass
class CorpusReport:
    directory: Path
    results: List[FixtureResult] = field(default_factory=list)

    @property
    def passed(self) -> List[FixtureResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[FixtureResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def load_fixture(path: Path | str) -> Fixture:
    """Load a fixture file and check its envelope."""
    p = Path(path)
    try:
        raw = json.loads(p.read_text())
    except FileNotFoundError as e:
        raise FixtureError(f"Fixture not found at {p}") from e
    except json.JSONDecodeError as e:
        raise FixtureError(f"Fixture {p} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise FixtureError(f"Fixture {p} must be a JSON object")
    missing = [k for k in ("contract", "payload") if k not in raw]
    if missing:
        raise FixtureError(f"Fixture {p} is missing {', '.join(missing)}")
    expect = raw.get("expect", EXPECT_VALID)
    if expect not in (EXPECT_VALID, EXPECT_INVALID):
        raise FixtureError(f"Fixture {p} has unknown expectation {expect!r}")

    return Fixture(
        path=p,
        contract=raw["contract"],
        payload=raw["payload"],
        of=raw.get("of"),
        expect=expect,
    )


def validate_fixture(fixture: Fixture) -> FixtureResult:
    """Validate a fixture payload, conventions included."""
    try:
        validate_payload(fixture.contract, fixture.payload, of=fixture.of, conventions=True)
    except ContractValidationError as e:
        return FixtureResult(fixture=fixture, valid=False, errors=e.errors, message=e.message)
    except ContractError as e:
        return FixtureResult(fixture=fixture, valid=False, message=e.message, broken=True)
    return FixtureResult(fixture=fixture, valid=True)


def validate_corpus(directory: Path | str) -> CorpusReport:
    """Validate every ``*.json`` fixture below ``directory``."""
    root = Path(directory)
    if not root.is_dir():
        raise FixtureError(f"Fixture directory not found: {root}")

    report = CorpusReport(directory=root)
    for path in sorted(root.rglob("*.json")):
        result = validate_fixture(load_fixture(path))
        report.results.append(result)
        if result.ok:
            logger.debug("fixture_passed", fixture=str(path), contract=result.fixture.label)
        else:
            logger.warning("fixture_failed", fixture=str(path), contract=result.fixture.label)

    logger.info(
        "corpus_validated",
        directory=str(root),
        passed=len(report.passed),
        failed=len(report.failed),
    )
    return report
