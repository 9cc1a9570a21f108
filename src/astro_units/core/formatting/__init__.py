"""
Template formatting для sexagesimal величин.

Токенизатор шаблонов и движок рендеринга, общие для Angle и Time.
"""

from astro_units.core.formatting.engine import (
    DEFAULT_RENDER_OPTIONS,
    FormatEngine,
    Renderable,
    RenderOptions,
)
from astro_units.core.formatting.tokens import (
    ComponentSlot,
    Segment,
    SegmentKind,
    TemplateGrammar,
    max_fraction_places,
    tokenize,
)

__all__ = [
    # Engine
    "FormatEngine",
    "RenderOptions",
    "DEFAULT_RENDER_OPTIONS",
    "Renderable",
    # Tokens
    "TemplateGrammar",
    "Segment",
    "SegmentKind",
    "ComponentSlot",
    "tokenize",
    "max_fraction_places",
]
