"""Process-wide application state.

The area code identifies the execution context (admin, frontend, cron) the
process is running in. It is set once; a second attempt raises
`AreaCodeAlreadySetError` so callers decide whether that is benign.
"""

from enum import Enum
from typing import Optional

import structlog

from admin_console.core.exceptions import AreaCodeAlreadySetError

logger = structlog.get_logger(__name__)


class Area(str, Enum):
    """Known execution contexts."""

    GLOBAL = "global"
    ADMINHTML = "adminhtml"
    FRONTEND = "frontend"
    CRONTAB = "crontab"


class ApplicationState:
    """Holds the area code for the lifetime of the process."""

    def __init__(self) -> None:
        self._area_code: Optional[Area] = None

    @property
    def area_code(self) -> Optional[Area]:
        return self._area_code

    def set_area_code(self, area: Area) -> None:
        """Set the area code and bind it into the logging context.

        Raises:
            AreaCodeAlreadySetError: If an area code was already set.
        """
        if self._area_code is not None:
            raise AreaCodeAlreadySetError(f"Area code is already set to '{self._area_code.value}'")

        self._area_code = Area(area)
        structlog.contextvars.bind_contextvars(area=self._area_code.value)
        logger.debug("area_code_set", area=self._area_code.value)


app_state = ApplicationState()
