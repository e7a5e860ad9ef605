"""Run configuration dataclasses, all frozen and slotted."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class InputConfig:
    """Limits applied while reading a metro scheme file."""

    max_stations: int = 1000
    max_blank_lines_before_header: int = 100
    encoding: str = "utf-8-sig"  # plain UTF-8, with or without a BOM


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Deleting sequence computation parameters."""

    start_vertex: int = 0  # spanning tree root (0-based)
    verify_sequence: bool = False  # re-check the result with scipy


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Result file format."""

    station_base: int = 1  # numbering written to the output file
    encoding: str = "utf-8"


@dataclass(frozen=True, slots=True)
class MetroConfig:
    """Top-level configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    input: InputConfig = field(default_factory=InputConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    description: str = ""

    def __post_init__(self) -> None:
        if self.input.max_stations < 1:
            raise ValueError(
                f"max_stations must be >= 1, got {self.input.max_stations}"
            )
        if self.input.max_blank_lines_before_header < 0:
            raise ValueError(
                "max_blank_lines_before_header must be >= 0, got "
                f"{self.input.max_blank_lines_before_header}"
            )
        if self.solver.start_vertex < 0:
            raise ValueError(
                f"start_vertex must be >= 0, got {self.solver.start_vertex}"
            )
        if self.solver.start_vertex >= self.input.max_stations:
            raise ValueError(
                f"start_vertex ({self.solver.start_vertex}) must be "
                f"< max_stations ({self.input.max_stations})"
            )
        if self.output.station_base not in (0, 1):
            raise ValueError(
                f"station_base must be 0 or 1, got {self.output.station_base}"
            )
