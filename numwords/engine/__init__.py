"""
Conversion engine: speller, agreement, assembler, fallback, format pipeline.
"""

from numwords.engine.agreement import ScaleWord, resolve_scale_word, resolve_unit_noun
from numwords.engine.assembler import assemble, render_cardinal
from numwords.engine.fallback import FallbackHandler
from numwords.engine.pipeline import ConversionResult, FormatPipeline, convert
from numwords.engine.speller import spell_small

__all__ = [
    # Low-Order Speller
    "spell_small",
    # Agreement Resolver
    "ScaleWord",
    "resolve_scale_word",
    "resolve_unit_noun",
    # Sequence Assembler
    "assemble",
    "render_cardinal",
    # Fallback Handler
    "FallbackHandler",
    # Format Pipeline
    "ConversionResult",
    "FormatPipeline",
    "convert",
]
