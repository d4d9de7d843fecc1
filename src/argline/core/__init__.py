"""Core layer: option model, registry, parser and usage formatting.

Rules
-----
* No ``print()`` calls; output goes through injected sinks.
* No imports from ``cli`` or ``infra``.
* The terminal width arrives through an injected probe.
"""

from argline.core.color import color_encode
from argline.core.models import Option, OptionType
from argline.core.parser import ArgumentParser
from argline.core.registry import OptionRegistry
from argline.core.text_wrap import wrap_text
from argline.core.usage import UsageFormatter

__all__: list[str] = [
    "ArgumentParser",
    "Option",
    "OptionRegistry",
    "OptionType",
    "UsageFormatter",
    "color_encode",
    "wrap_text",
]
