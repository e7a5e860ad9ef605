"""Service result record."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SequenceResult:
    """Outcome of one deleting sequence request.

    Exactly one of ``sequence`` / ``error_message`` is set, matching
    ``success``.
    """

    success: bool
    sequence: tuple[int, ...] | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls, sequence: list[int]) -> "SequenceResult":
        return cls(success=True, sequence=tuple(sequence))

    @classmethod
    def failed(cls, error: BaseException) -> "SequenceResult":
        return cls(success=False, error_message=f"{error} ({type(error).__name__})")
