from __future__ import annotations

from dataclasses import dataclass

from cssbuilder.render import RenderOptions


@dataclass(frozen=True)
class BuilderConfig:
    collapse_descendant: bool = False  # "tr td" instead of "tr   td"

    def render_options(self) -> RenderOptions:
        return RenderOptions(collapse_descendant=self.collapse_descendant)
