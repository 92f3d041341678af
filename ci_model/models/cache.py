# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import re
import shlex
from typing import List

from pydantic import Field, field_validator

from .base import FrozenModel, not_blank
from .coverage import OS

# TeamCity parameter references look like %name%; %% is a literal percent.
PLACEHOLDER_RE = re.compile(r"%([A-Za-z_][A-Za-z0-9_.\-]*)%")
_UNTERMINATED_RE = re.compile(r"%[A-Za-z_][A-Za-z0-9_.\-]*$")


def placeholder_names(value: str) -> List[str]:
    return PLACEHOLDER_RE.findall(value.replace("%%", ""))


def check_placeholders(value: str, what: str) -> str:
    # only a reference left open at the end is an error; %20 and 50% are text
    rest = PLACEHOLDER_RE.sub("", value.replace("%%", ""))
    if _UNTERMINATED_RE.search(rest):
        raise ValueError(f"{what} has an unterminated %placeholder%: {value!r}")
    return value


class RemoteBuildCache(FrozenModel):
    """
    Remote build cache endpoint and its credentials.

    Values are usually TeamCity parameter references such as
    `%gradle.cache.parent.url%`; they are resolved by the server, never here.
    """
    url: str
    username: str = "%gradle.cache.remote.username%"
    password: str = Field(default="%gradle.cache.remote.password%", repr=False)

    @field_validator("url")
    @classmethod
    def _url_not_empty(cls, v: str) -> str:
        return check_placeholders(not_blank(v, "Build cache url"), "url")

    @field_validator("username", "password")
    @classmethod
    def _well_formed(cls, v: str, info) -> str:
        return check_placeholders(v, info.field_name)

    def gradle_parameters(self, os: OS) -> List[str]:
        return [
            "--build-cache",
            _escape_key_value_pair(os, "-Dgradle.cache.remote.url", self.url),
            _escape_key_value_pair(os, "-Dgradle.cache.remote.username", self.username),
            _escape_key_value_pair(os, "-Dgradle.cache.remote.password", self.password),
        ]


def _escape_key_value_pair(os: OS, key: str, value: str) -> str:
    if os == OS.windows:
        return f'"{key}={value}"'
    return shlex.quote(f"{key}={value}")
