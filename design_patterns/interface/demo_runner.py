"""Runs demonstration sections in order, one banner per section."""
import inspect
from typing import Iterable, List, Optional

from design_patterns.domain.base.ports import ConsolePort, ContainerPort
from design_patterns.domain.core.exceptions import UnknownSectionError
from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.interface.demo_sections import SECTIONS, Section

logger = get_logger(__name__)


def select_sections(keys: Optional[Iterable[str]] = None) -> List[Section]:
    """
    Pick sections by key, keeping canonical order.

    Args:
        keys: Section keys (case-insensitive); all sections when None or empty

    Raises:
        UnknownSectionError: If a key does not name a section
    """
    if not keys:
        return list(SECTIONS)

    available = [section.key for section in SECTIONS]
    wanted = set()
    for key in keys:
        normalized = key.strip().lower()
        if normalized not in available:
            raise UnknownSectionError(key, available)
        wanted.add(normalized)
    return [section for section in SECTIONS if section.key in wanted]


async def run_sections(container: ContainerPort, sections: Optional[List[Section]] = None) -> None:
    """Run the given sections, awaiting the asynchronous ones inline."""
    console = container.get(ConsolePort)
    for section in sections if sections is not None else SECTIONS:
        logger.debug("Running section", section=section.key)
        console.write_line(section.banner)
        result = section.run(container)
        if inspect.isawaitable(result):
            await result
