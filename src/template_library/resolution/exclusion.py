"""Exclusion filter: ignore rules applied to ref families and versions."""

import re
from collections.abc import Sequence

import structlog
from pydantic import BaseModel

from template_library.core.models.refs import ResolvedRef
from template_library.core.models.run import MOST_RECENT_VERSION, RunConfig

logger = structlog.get_logger(__name__)

OBSOLETE_RULE = r"\.obsolete$"
HEAD_RULE = r"^HEAD$"
LEGACY_RULE = r"legacy$"
SPMA_RULE = r"-spma$"
# OS families without the -spma suffix, replaced by their SPMA variant
NON_SPMA_OS_RULE = r"^el\d+\.x-x86_64$"
RC_RULE = r"-rc\d+$"


class IgnoreRules(BaseModel):
    """Ordered ignore rules for ref families and ref versions."""

    family: tuple[str, ...] = ()
    version: tuple[str, ...] = ()

    class Config:
        frozen = True


def build_ignore_rules(config: RunConfig) -> IgnoreRules:
    """Active ignore rules for a run, according to its toggles."""
    family = [OBSOLETE_RULE, HEAD_RULE]
    if not config.include_legacy:
        family.append(LEGACY_RULE)
    family.append(NON_SPMA_OS_RULE if config.use_spma else SPMA_RULE)

    version = []
    if not config.include_rc:
        version.append(RC_RULE)

    return IgnoreRules(family=tuple(family), version=tuple(version))


def _matching_rules(value: str, rules: Sequence[str]) -> list[str]:
    return [rule for rule in rules if re.search(rule, value)]


def is_excluded(ref: ResolvedRef, requested_version: str, rules: IgnoreRules) -> bool:
    """Whether ``ref`` must be skipped.

    A ref is excluded when its family matches a family rule or its
    version matches a version rule, unless the matched component is
    exactly the requested version. HEAD is not a ref version, so it
    never rescues a ref.
    """
    escape = None if requested_version == MOST_RECENT_VERSION else requested_version

    family_matches = _matching_rules(ref.family, rules.family)
    version_matches = _matching_rules(ref.version, rules.version)
    excluded_by_family = bool(family_matches) and ref.family != escape
    excluded_by_version = bool(version_matches) and ref.version != escape

    if family_matches or version_matches:
        logger.debug(
            "Ignore rules matched",
            ref=ref.name,
            family_rules=family_matches,
            version_rules=version_matches,
            excluded=excluded_by_family or excluded_by_version,
        )
    return excluded_by_family or excluded_by_version
