"""Application structure check: load paths must be indexable."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from packcheck.application.validators._base import BaseCheck
from packcheck.domain.model.enums import ErrorKind
from packcheck.domain.model.result import Result, fail, ok

if TYPE_CHECKING:
    from packcheck.application.validators.context import ValidationContext

logger = logging.getLogger(__name__)


class ApplicationStructureCheck(BaseCheck):
    """Build the resolver's file map eagerly and report any failure."""

    name = "application_structure"
    title = "Application structure"
    kinds = frozenset({ErrorKind.STRUCTURAL})

    def check(self, context: ValidationContext) -> Result:
        # Any resolver may be plugged in: whatever it raises is reported.
        try:
            file_map = context.build_resolver().file_map
        except Exception as e:
            return fail(str(e) or type(e).__name__)

        logger.debug(f"Resolver indexed {len(file_map)} constants")
        return ok()
