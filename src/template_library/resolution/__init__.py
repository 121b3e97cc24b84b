"""Ref resolution: selection, classification, exclusion and overlays."""

from template_library.resolution.classifier import classify, split_version
from template_library.resolution.effective import (
    EffectiveRepositoryConfig,
    resolve_effective_config,
)
from template_library.resolution.exclusion import IgnoreRules, build_ignore_rules, is_excluded
from template_library.resolution.overlay import OverlayResolver, applies_to
from template_library.resolution.selector import build_selection_pattern, select_refs, uses_tags

__all__ = [
    "classify",
    "split_version",
    "EffectiveRepositoryConfig",
    "resolve_effective_config",
    "IgnoreRules",
    "build_ignore_rules",
    "is_excluded",
    "OverlayResolver",
    "applies_to",
    "build_selection_pattern",
    "select_refs",
    "uses_tags",
]
