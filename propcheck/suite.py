"""
Suite building: one independent validation case per ``*.properties`` file
under a root directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from .config import Settings
from .models import SuiteReport, ValidationResult
from .rules import PROPERTIES_EXTENSION
from .scanner import Resource, scan
from .validator import ResourceValidator

logger = logging.getLogger(__name__)


class PropertiesCase:
    """A single runnable check, bound to one resource."""

    def __init__(self, resource: Resource, check_encoding: bool):
        self.resource = resource
        self.check_encoding = check_encoding

    @property
    def name(self) -> str:
        return self.resource.name

    def run(self) -> Dict[str, str]:
        # a fresh validator per run keeps cases independent
        return ResourceValidator(self.check_encoding).validate(self.resource)

    def result(self) -> ValidationResult:
        return ResourceValidator(self.check_encoding).check(self.resource)

    def __repr__(self) -> str:
        return f"PropertiesCase({self.name!r})"


class PropertiesSuite:
    def __init__(self, root: Path, cases: List[PropertiesCase]):
        self.root = root
        self.cases = cases

    def __iter__(self) -> Iterator[PropertiesCase]:
        return iter(self.cases)

    def __len__(self) -> int:
        return len(self.cases)

    def run(self) -> SuiteReport:
        report = SuiteReport(root=str(self.root))
        for case in self.cases:
            result = case.result()
            report.results.append(result)
            report.total += 1
            if result.ok:
                report.passed += 1
            else:
                report.failed += 1
                logger.info("%s", result.message)
        return report

    def pytest_params(self) -> list:
        import pytest

        return [pytest.param(case, id=case.name) for case in self.cases]


def build_suite(root: Union[str, Path],
                check_encoding: Optional[bool] = None,
                extension: str = PROPERTIES_EXTENSION) -> PropertiesSuite:
    """
    Build a suite over every ``*.<extension>`` file below ``root``.

    ``check_encoding`` defaults to what Settings() resolves from the
    environment. Enumeration errors propagate; there is no partial suite.
    """
    if check_encoding is None:
        check_encoding = Settings().encoding_check_enabled()

    root = Path(root)
    cases = [
        PropertiesCase(Resource(locator, name), check_encoding)
        for locator, name in scan(root, extension).items()
    ]
    cases.sort(key=lambda case: case.name)
    logger.info("built %d case(s) under %s (encoding check %s)",
                len(cases), root, "on" if check_encoding else "off")
    return PropertiesSuite(root, cases)
