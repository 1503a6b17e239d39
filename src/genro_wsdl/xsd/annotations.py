# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""``<annotation>`` blocks: documentation and application information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..documentation import Documentation


@dataclass(frozen=True)
class AppInfo:
    content: str
    source: str | None = None


class Annotation:
    """An annotation holding any number of documentation and appinfo entries."""

    def __init__(self, parent: Any) -> None:
        self._parent = parent
        self._documentations: list[Documentation] = []
        self._app_infos: list[AppInfo] = []

    def documentation(self, content: str, lang: str | None = None, source: str | None = None) -> Annotation:
        self._documentations.append(Documentation(content, lang, source))
        return self

    def app_info(self, content: str, source: str | None = None) -> Annotation:
        self._app_infos.append(AppInfo(content, source))
        return self

    def end(self) -> Any:
        return self._parent

    def get_documentations(self) -> tuple[Documentation, ...]:
        return tuple(self._documentations)

    def get_app_infos(self) -> tuple[AppInfo, ...]:
        return tuple(self._app_infos)
