# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from .base import FrozenModel

if TYPE_CHECKING:  # pragma: no cover
    from .build_model import CIBuildModel


class TestType(str, Enum):
    __test__ = False

    quick = "quick"
    platform = "platform"
    quickFeedbackCrossVersion = "quickFeedbackCrossVersion"
    allVersionsCrossVersion = "allVersionsCrossVersion"
    parallel = "parallel"
    noDaemon = "noDaemon"
    daemon = "daemon"
    soak = "soak"

    @property
    def unit_tests(self) -> bool:
        return _TEST_TYPE_TRAITS[self][0]

    @property
    def functional_tests(self) -> bool:
        return _TEST_TYPE_TRAITS[self][1]

    @property
    def cross_version_tests(self) -> bool:
        return _TEST_TYPE_TRAITS[self][2]

    @property
    def timeout(self) -> int:
        """Build timeout in minutes."""
        return _TEST_TYPE_TRAITS[self][3]


# (unit, functional, cross-version, timeout minutes)
_TEST_TYPE_TRAITS = {
    TestType.quick: (True, True, False, 60),
    TestType.platform: (True, True, False, 180),
    TestType.quickFeedbackCrossVersion: (False, False, True, 180),
    TestType.allVersionsCrossVersion: (False, False, True, 240),
    TestType.parallel: (False, True, False, 180),
    TestType.noDaemon: (False, True, False, 240),
    TestType.daemon: (False, True, False, 180),
    TestType.soak: (False, False, False, 180),
}


class OS(str, Enum):
    linux = "linux"
    windows = "windows"
    macos = "macos"

    @property
    def agent_requirement(self) -> str:
        return {"linux": "Linux", "windows": "Windows", "macos": "Mac"}[self.value]


class JvmVersion(str, Enum):
    java7 = "java7"
    java8 = "java8"
    java9 = "java9"


def capitalized(name: str) -> str:
    # only the first letter; camelCase members keep their humps
    return name[:1].upper() + name[1:]


class TestCoverage(FrozenModel):
    """
    One slice of the functional test matrix: test type x OS x JVM version.
    """
    __test__ = False

    test_type: TestType = Field(alias="type")
    os: OS
    jvm_version: JvmVersion

    def as_id(self, model: "CIBuildModel") -> str:
        return (
            f"{model.project_prefix}{capitalized(self.test_type.value)}"
            f"_{capitalized(self.jvm_version.value)}_{capitalized(self.os.value)}"
        )

    def as_name(self) -> str:
        return (
            f"Test Coverage - {capitalized(self.test_type.value)} "
            f"{capitalized(self.jvm_version.value)} {capitalized(self.os.value)}"
        )
