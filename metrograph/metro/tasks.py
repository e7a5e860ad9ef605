"""Metro tasks: load a scheme, ask the graph service, save the answer."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from metrograph.config.settings import MetroConfig
from metrograph.metro.errors import GraphServiceError
from metrograph.metro.loader import load_metro_xml, save_sequence
from metrograph.service.provider import GraphService

log = logging.getLogger(__name__)


class TaskCode(Enum):
    CLOSING_SEQUENCE = "ClosingSequence"

    @classmethod
    def parse(cls, value: str) -> "TaskCode":
        """Case-insensitive lookup by value or member name.

        Raises:
            ValueError: If value names no task.
        """
        wanted = value.strip().lower()
        for code in cls:
            if wanted in (code.value.lower(), code.name.lower()):
                return code
        valid = ", ".join(code.value for code in cls)
        raise ValueError(f"Unknown task name {value!r}; valid task names are: {valid}")


@dataclass(frozen=True)
class MetroTask:
    """One metro task bound to its input and output files."""

    task_code: TaskCode
    input_path: Path
    output_path: Path
    config: MetroConfig = field(default_factory=MetroConfig)

    def perform(self, service: GraphService | None = None) -> list[int]:
        """Run the task and return the 0-based vertex sequence it wrote."""
        if self.task_code is TaskCode.CLOSING_SEQUENCE:
            return self._perform_closing_sequence(service)
        raise NotImplementedError(f"The {self.task_code.value} task is not implemented")

    def _perform_closing_sequence(self, service: GraphService | None) -> list[int]:
        if service is None:
            service = GraphService(self.config.solver)

        input_xml = load_metro_xml(self.input_path, self.config.input)
        result = service.compute(input_xml)
        if not result.success:
            raise GraphServiceError(result.error_message)

        sequence = list(result.sequence)
        save_sequence(self.output_path, sequence, self.config.output)
        log.info("Closing sequence for %d stations complete", len(sequence))
        return sequence
